"""
Custom domain exceptions for consistent error handling.

These exceptions are mapped to the JSON error envelope by the exception
handlers in main.py.
"""
import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class DomainError(HTTPException):
    """Base class for all domain-specific errors."""
    code = "domain_error"

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST, details: dict | None = None):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.details = details or {}


class NotFoundError(DomainError):
    """Resource not found (404)."""
    code = "not_found"

    def __init__(self, resource_type: str, identifier: str | None = None, details: dict | None = None):
        message = f"{resource_type} not found"
        details = dict(details or {})
        if identifier is not None:
            details.setdefault("id", identifier)
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND, details=details)


class ValidationError(DomainError):
    """Validation error (400)."""
    code = "validation_error"

    def __init__(self, message: str, field: str | None = None, details: dict | None = None):
        details = dict(details or {})
        if field:
            details.setdefault("field", field)
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST, details=details)


class DuplicateError(DomainError):
    """Unique value already taken (400)."""
    code = "duplicate"

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST, details=details)


class UnauthorizedError(DomainError):
    """Unauthorized access (401)."""
    code = "unauthorized"

    def __init__(self, message: str = "Invalid credentials", details: dict | None = None):
        super().__init__(message, status_code=status.HTTP_401_UNAUTHORIZED, details=details)


class StorageError(DomainError):
    """Storage operation failed; status code depends on the endpoint."""
    code = "storage_error"

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR, details: dict | None = None):
        super().__init__(message, status_code=status_code, details=details)

    @classmethod
    def from_exception(
        cls,
        exc: Exception,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        message: str = "Storage operation failed",
    ) -> "StorageError":
        """
        Wrap a storage driver exception.

        The raw driver text is only returned when EXPOSE_ERROR_DETAILS is set;
        it is always logged.
        """
        from config import settings

        logger.error(f"Storage error: {exc}", exc_info=exc)
        if settings.expose_error_details:
            message = str(exc)
        return cls(message, status_code=status_code)
