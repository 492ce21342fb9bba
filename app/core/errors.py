# app/core/errors.py


class AppError(Exception):
    """An operational error that maps directly onto an HTTP status code."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        super().__init__(message)


class UnauthorizedError(AppError):
    status_code = 401


class ServerConfigurationError(AppError):
    status_code = 500

    def __init__(self, message: str = "Server configuration error"):
        super().__init__(message)


class NotFoundError(AppError):
    status_code = 404
