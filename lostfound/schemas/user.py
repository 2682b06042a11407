"""
Pydantic models for registered users.
"""

from enum import Enum

from lostfound.schemas.base import SnapshotModel


class UserRole(str, Enum):
    ADMIN = "admin"
    STUDENT = "student"
    STAFF = "staff"


class UserProfile(SnapshotModel):
    """Public view of a user; what the session slot carries."""

    name: str
    email: str
    id: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN

    def same_user(self, user_id: str) -> bool:
        """Ids compare case-insensitively."""
        return bool(user_id) and self.id.lower() == user_id.lower()


class User(UserProfile):
    """Registered user with the bcrypt hash of their secret."""

    secret_hash: str

    def profile(self) -> UserProfile:
        return UserProfile(name=self.name, email=self.email, id=self.id, role=self.role)
