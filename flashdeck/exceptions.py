"""Custom exception hierarchy for the Flashdeck application."""

from fastapi import HTTPException
from starlette import status


class FlashdeckError(Exception):
    """Base exception for all Flashdeck errors."""

    kind = "Internal"

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(FlashdeckError):
    """Resource not found error."""

    kind = "NotFound"

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ForbiddenError(FlashdeckError):
    """Caller is authenticated but may not touch the resource."""

    kind = "Forbidden"

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message, status_code=403)


class ValidationError(FlashdeckError):
    """Validation error."""

    kind = "InvalidInput"

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=400)


class ConflictError(FlashdeckError):
    """A concurrent write changed the resource since it was loaded."""

    kind = "Conflict"

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=409)


class StoreTimeoutError(FlashdeckError):
    """The store did not answer within the allowed time. Safe to retry."""

    kind = "Timeout"

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=504)


class StoreUnavailableError(FlashdeckError):
    """The store could not be reached or refused the operation. Safe to retry."""

    kind = "StoreUnavailable"

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=503)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
