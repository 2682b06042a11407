"""
Utilities module - Common helpers for responses, exceptions, ids and validation.
"""

from common.utils.responses import success_response, error_response, list_response, to_payload
from common.utils.exceptions import (
    LostFoundError,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    ValidationException,
    StorageException,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
)
from common.utils.password import validate_password
from common.utils.ids import TimestampIdGenerator

__all__ = [
    "success_response",
    "error_response",
    "list_response",
    "to_payload",
    "LostFoundError",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "ValidationException",
    "StorageException",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "validate_password",
    "TimestampIdGenerator",
]
