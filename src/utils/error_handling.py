"""Custom exceptions and helpers for consistent error responses."""

from typing import Any, Dict


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class BadRequestError(AppError):
    """Raised when request input is malformed."""

    def __init__(self, message: str = "Bad request"):
        super().__init__(message, status_code=400)


class UnauthorizedError(AppError):
    """Raised when the caller cannot be authenticated."""

    def __init__(self, message: str = "You must be signed in to continue"):
        super().__init__(message, status_code=401)


class PaymentRequiredError(AppError):
    """Raised when the ticket does not entitle the user to hotel access."""

    def __init__(self, message: str = "You must pay to access"):
        super().__init__(message, status_code=402)


class NotFoundError(AppError):
    """Raised when a requested resource is missing."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy response with no body."""
    return status_response(error.status_code)


def status_response(status_code: int) -> Dict[str, Any]:
    """Bare status response; clients only get the code on failures."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": "",
    }
