# app/utils/exceptions.py


class BookingServiceError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(BookingServiceError):
    def __init__(self, message: str):
        super().__init__(message, 400)


class NotFoundError(BookingServiceError):
    def __init__(self, message: str):
        super().__init__(message, 404)


class ConflictError(BookingServiceError):
    def __init__(self, message: str):
        super().__init__(message, 409)


class SeatsUnavailableError(ConflictError):
    def __init__(self, message: str = "Not enough seats available"):
        super().__init__(message)


class BookingUpdateFailedError(BookingServiceError):
    """The conditional write matched nothing: a lost race or a reshaped document."""

    def __init__(self, message: str = "Failed to update"):
        super().__init__(message, 500)


class StoreError(BookingServiceError):
    def __init__(self, message: str = "Something went wrong"):
        super().__init__(message, 500)
