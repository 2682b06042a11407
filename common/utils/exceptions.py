"""
Custom exceptions with error codes.

Every error raised by the registry carries a human-readable message and a
machine-readable code so the UI layer can map it to a user-visible message.

Example:
    from common.utils import NotFoundException

    def get_item(item_id: int):
        item = registry.get(item_id)
        if not item:
            raise NotFoundException("Item not found", code="ITEM_NOT_FOUND")
        return item
"""

from typing import Optional, Any, Dict

from common.utils.responses import error_response


class LostFoundError(Exception):
    """
    Base exception with error code support.

    Provides a consistent error payload across the registry.
    """

    default_message = "Error"
    default_code = "ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        """
        Create an error.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error details
        """
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Render the error in the standard error response format."""
        return error_response(self.message, code=self.code, details=self.details)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class UnauthorizedException(LostFoundError):
    """Missing session or invalid credentials."""

    default_message = "Unauthorized"
    default_code = "UNAUTHORIZED"


class ForbiddenException(LostFoundError):
    """Valid session but insufficient permissions."""

    default_message = "Forbidden"
    default_code = "FORBIDDEN"


class NotFoundException(LostFoundError):
    """Referenced record doesn't exist."""

    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictException(LostFoundError):
    """Record already exists or state conflict."""

    default_message = "Conflict"
    default_code = "CONFLICT"


class ValidationException(LostFoundError):
    """Missing, empty or malformed input."""

    default_message = "Validation error"
    default_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        errors: Optional[list] = None,
    ):
        detail_info = details
        if errors:
            detail_info = {"errors": errors, **(details or {})}
        super().__init__(message, code, detail_info)


class StorageException(LostFoundError):
    """Persisted snapshot could not be read or written."""

    default_message = "Storage error"
    default_code = "STORAGE_ERROR"


# Names used by the domain model
ValidationError = ValidationException
ConflictError = ConflictException
AuthenticationError = UnauthorizedException
AuthorizationError = ForbiddenException
NotFoundError = NotFoundException
