# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.database import MONGO_COLLECTION, MONGO_DB_NAME, close_client
from app.routes import movie
from app.utils.exception_handlers import register_exception_handlers
from app.utils.logger_config import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Serving movies from {MONGO_DB_NAME}.{MONGO_COLLECTION}")
    yield
    close_client()
    logger.info("Mongo client closed")


app = FastAPI(title="Movie Booking API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(movie.router, prefix="/movie", tags=["Movie"])


@app.get("/")
async def read_root():
    return {"message": "Movie Booking API ready"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
