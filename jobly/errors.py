from __future__ import annotations


class AppError(Exception):
    """Error the route layer turns into an HTTP response with `status_code`."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class BadRequestError(AppError):
    status_code = 400

    def __init__(self, message: str = "Bad Request"):
        super().__init__(message)


class NotFoundError(AppError):
    status_code = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)
