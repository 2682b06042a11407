"""
Identity store for registered users.

Handles user registration, lookup and credential checks.
"""

import logging
from typing import Optional, List

from common.auth import PasswordHasher
from common.utils.exceptions import (
    ConflictException,
    UnauthorizedException,
    ValidationException,
)
from common.utils.password import validate_password
from lostfound.database import RegistryStore
from lostfound.schemas import User, UserRole, coerce_enum, require_text

logger = logging.getLogger(__name__)


class IdentityStore:
    """
    Manages registered users.

    Emails are stored lowercased; emails and ids are unique case-insensitively.
    Users are immutable once registered.
    """

    SAMPLE_USERS = [
        {"name": "Admin", "email": "admin@school.edu", "user_id": "A001", "role": "admin", "secret": "admin123"},
        {"name": "John Doe", "email": "john.doe@school.edu", "user_id": "S001", "role": "student", "secret": "student123"},
        {"name": "Jane Smith", "email": "jane.smith@school.edu", "user_id": "T001", "role": "staff", "secret": "staff123"},
    ]

    def __init__(
        self,
        store: RegistryStore,
        hasher: PasswordHasher,
        require_strong_secrets: bool = False,
    ):
        """
        Initialize IdentityStore.

        Args:
            store: Registry store holding the users collection
            hasher: Secret hashing
            require_strong_secrets: Apply password strength rules at registration
        """
        self._store = store
        self._hasher = hasher
        self._require_strong_secrets = require_strong_secrets

    def add_user(
        self,
        name: str,
        email: str,
        user_id: str,
        role: str,
        secret: str,
    ) -> User:
        """
        Register a new user.

        Args:
            name: Display name
            email: Email address (unique, case-insensitive)
            user_id: School id (unique, case-insensitive)
            role: admin | student | staff
            secret: Plain secret, stored hashed

        Returns:
            Created user

        Raises:
            ValidationException: Blank field, unknown role or weak secret
            ConflictException: Email or id already registered
        """
        name = require_text(name, "name")
        email = require_text(email, "email").lower()
        user_id = require_text(user_id, "id")
        role_value = coerce_enum(UserRole, require_text(role, "role"), "role")
        if secret is None or not str(secret).strip():
            raise ValidationException(
                message="secret is required",
                code="MISSING_FIELD",
                details={"field": "secret"},
            )

        if self._require_strong_secrets:
            is_valid, errors = validate_password(secret)
            if not is_valid:
                raise ValidationException(
                    message="Password does not meet requirements",
                    code="WEAK_PASSWORD",
                    errors=errors,
                )

        if self.get_by_email(email) or self.get_by_id(user_id):
            raise ConflictException(
                message="A user with this email or ID already exists",
                code="USER_ALREADY_EXISTS",
            )

        user = User(
            name=name,
            email=email,
            id=user_id,
            role=role_value,
            secret_hash=self._hasher.hash_password(secret),
        )
        self._store.commit_users([*self._store.users, user])

        logger.info(f"User registered: {user.id} ({user.role.value})")
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Load user by id, case-insensitive.

        Returns:
            User or None if not found
        """
        if not user_id:
            return None
        wanted = user_id.strip().lower()
        return next((u for u in self._store.users if u.id.lower() == wanted), None)

    def get_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None
        wanted = email.strip().lower()
        return next((u for u in self._store.users if u.email == wanted), None)

    def find_by_identifier(self, identifier: str) -> Optional[User]:
        """Resolve an email or an id, case-insensitive."""
        return self.get_by_email(identifier) or self.get_by_id(identifier)

    def authenticate(self, identifier: str, secret: str) -> User:
        """
        Verify identifier and secret.

        Args:
            identifier: Email or id
            secret: Plain secret

        Returns:
            The matching user

        Raises:
            UnauthorizedException: No user matches both identifier and secret
        """
        user = self.find_by_identifier(identifier)
        if user is not None and secret is not None:
            if self._hasher.verify_password(secret, user.secret_hash):
                return user

        logger.info("Login rejected: invalid credentials")
        raise UnauthorizedException(
            message="Invalid credentials",
            code="INVALID_CREDENTIALS",
        )

    def list_users(self) -> List[User]:
        return list(self._store.users)

    def ensure_sample_users(self) -> int:
        """
        Seed the demo accounts when no users exist yet.

        Returns:
            Number of users created
        """
        if self._store.users:
            return 0

        users = [
            User(
                name=sample["name"],
                email=sample["email"],
                id=sample["user_id"],
                role=UserRole(sample["role"]),
                secret_hash=self._hasher.hash_password(sample["secret"]),
            )
            for sample in self.SAMPLE_USERS
        ]
        self._store.commit_users(users)

        logger.info(f"Seeded {len(users)} sample users")
        return len(users)
