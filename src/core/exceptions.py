"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    DUPLICATE_USER = "DUPLICATE_USER"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    ENCRYPTION_ERROR = "ENCRYPTION_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, identifier: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {identifier}",
            status_code=404,
            details={"identifier": identifier},
        )


class DuplicateUserError(AppException):
    """A user with this login already exists."""

    def __init__(self, login: str) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_USER,
            message=f"User already exists: {login}",
            status_code=409,
            details={"login": login},
        )


class EncryptionError(AppException):
    """Encryption or decryption of a stored value failed."""

    def __init__(self, message: str = "Encryption failed") -> None:
        super().__init__(
            error_code=ErrorCode.ENCRYPTION_ERROR,
            message=message,
            status_code=500,
        )
