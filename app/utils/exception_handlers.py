# app/utils/exception_handlers.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.utils.exceptions import BookingServiceError
from app.utils.logger_config import logger

GENERIC_ERROR_MESSAGE = "Something went wrong"


async def booking_error_handler(request: Request, exc: BookingServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.opt(exception=exc).error(f"{request.url.path}: {exc.message}")
    else:
        logger.warning(f"{request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid request")
    if error.get("type") == "missing":
        return f"Some fields are missing: {location}"
    return f"{location}: {message}" if location else message


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.warning(f"{request.url.path}: validation failed {errors}")
    message = _describe(errors[0]) if errors else "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.opt(exception=exc).error(f"{request.url.path}: store error")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": GENERIC_ERROR_MESSAGE},
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(f"{request.url.path}: unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": GENERIC_ERROR_MESSAGE},
    )


EXCEPTION_HANDLERS = {
    BookingServiceError: booking_error_handler,
    RequestValidationError: validation_error_handler,
    PyMongoError: store_error_handler,
    Exception: general_500_exception_handler,
}


def register_exception_handlers(app: FastAPI):
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
