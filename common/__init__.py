"""
Common library for reusable infrastructure components.

This package provides generic modules that carry no lost-and-found
knowledge:

- storage: Synchronous key-value stores (memory, JSON file)
- auth: bcrypt secret hashing
- utils: Standard responses, exceptions, id generation, password validation
- config: Base settings class
"""

from common.storage import KeyValueStore, MemoryKeyValueStore, JsonFileKeyValueStore
from common.auth import PasswordHasher
from common.utils import (
    success_response,
    error_response,
    LostFoundError,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    ValidationException,
    StorageException,
    TimestampIdGenerator,
    validate_password,
)
from common.config import BaseAppSettings

__all__ = [
    # Storage
    "KeyValueStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    # Auth
    "PasswordHasher",
    # Utils
    "success_response",
    "error_response",
    "LostFoundError",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "ValidationException",
    "StorageException",
    "TimestampIdGenerator",
    "validate_password",
    # Config
    "BaseAppSettings",
]
