"""
Application errors.

Each error carries the HTTP status it maps to; the handlers registered in
main.py turn them into JSON responses of the form {"detail": message}.
"""

from typing import Any


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: Any = None):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class BadRequestError(AppError):
    """400: the caller sent data we cannot act on."""

    status_code = 400
    default_message = "Bad Request"


class UnauthorizedError(AppError):
    """401: no valid credentials were presented."""

    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    """403: credentials are valid but lack the required role."""

    status_code = 403
    default_message = "Forbidden"


class NotFoundError(AppError):
    """404: the requested record does not exist."""

    status_code = 404
    default_message = "Not Found"
