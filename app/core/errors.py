"""
Error taxonomy for the API.

Each error carries the HTTP status it maps to; main.py turns any AppError
into a `{"error": message}` response.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors surfaced to API clients."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(AppError):
    """Caller identity header missing or blank."""
    status_code = status.HTTP_401_UNAUTHORIZED


class ValidationError(AppError):
    """A required field is empty."""
    status_code = status.HTTP_400_BAD_REQUEST


class DecodeError(AppError):
    """Request body is not valid JSON for the target shape."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "invalid json"):
        super().__init__(message)


class NotFound(AppError):
    """No row matches the caller and id."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "not found"):
        super().__init__(message)


class StoreError(AppError):
    """Any other data-access failure. The message is always generic."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
