"""
Session controller.

Owns the current user. Login and registration are delegated to the identity
store; the logged-in user's profile is persisted in the session slot so a
restart can restore it.
"""

import logging
from typing import Optional

from common.utils.exceptions import UnauthorizedException
from lostfound.database import RegistryStore
from lostfound.schemas import UserProfile
from lostfound.services.user.identity_store import IdentityStore

logger = logging.getLogger(__name__)


class SessionController:
    """
    Handles register/login/logout and the current-user context.
    """

    def __init__(self, store: RegistryStore, identity_store: IdentityStore):
        """
        Initialize SessionController.

        Args:
            store: Registry store holding the session slot
            identity_store: For registration and credential checks
        """
        self._store = store
        self._identity_store = identity_store
        self._current_user: Optional[UserProfile] = None

    @property
    def current_user(self) -> Optional[UserProfile]:
        return self._current_user

    def require_user(self) -> UserProfile:
        """
        Get the current user.

        Raises:
            UnauthorizedException: Nobody is logged in
        """
        if self._current_user is None:
            raise UnauthorizedException(
                message="Please login first",
                code="NOT_LOGGED_IN",
            )
        return self._current_user

    def register(
        self,
        name: str,
        email: str,
        user_id: str,
        role: str,
        secret: str,
    ) -> UserProfile:
        """
        Register a new account. Does not log it in.

        Raises:
            ValidationException: Blank field or unknown role
            ConflictException: Email or id already registered
        """
        user = self._identity_store.add_user(
            name=name,
            email=email,
            user_id=user_id,
            role=role,
            secret=secret,
        )
        return user.profile()

    def login(self, identifier: str, secret: str) -> UserProfile:
        """
        Authenticate and start a session.

        Args:
            identifier: Email or id, case-insensitive
            secret: Exact secret

        Returns:
            The logged-in user's profile

        Raises:
            UnauthorizedException: Bad credentials
        """
        user = self._identity_store.authenticate(identifier, secret)
        profile = user.profile()

        self._store.save_session(profile)
        self._current_user = profile

        logger.info(f"User {profile.id} logged in")
        return profile

    def logout(self) -> None:
        if self._current_user is not None:
            logger.info(f"User {self._current_user.id} logged out")
        self._current_user = None
        self._store.clear_session()

    def restore_session(self) -> Optional[UserProfile]:
        """
        Rehydrate the current user from the session slot.

        A session whose user is no longer registered is cleared.

        Returns:
            The restored profile, or None
        """
        saved = self._store.load_session()
        if saved is None:
            return None

        user = self._identity_store.get_by_id(saved.id)
        if user is None:
            logger.warning(f"Clearing stale session for unknown user {saved.id}")
            self._store.clear_session()
            return None

        self._current_user = user.profile()
        logger.info(f"Session restored for user {user.id}")
        return self._current_user
