"""
Account pipeline functions.
"""

import logging
from typing import Dict, Any

from common.utils import success_response
from lostfound.events import RenderEvent, RenderHooks
from lostfound.services.auth.session_controller import SessionController

logger = logging.getLogger(__name__)

# Every view depends on who is logged in
_SESSION_EVENTS = (
    RenderEvent.BROWSE_CHANGED,
    RenderEvent.MY_REPORTS_CHANGED,
    RenderEvent.NOTIFICATIONS_CHANGED,
    RenderEvent.BADGE_CHANGED,
)


def register_pipeline(
    session_controller: SessionController,
    name: str,
    email: str,
    user_id: str,
    role: str,
    secret: str,
) -> Dict[str, Any]:
    """
    Register a new account. The caller must log in afterwards.

    Raises:
        ValidationException: Blank field, unknown role or weak secret
        ConflictException: Email or id already registered
    """
    profile = session_controller.register(
        name=name,
        email=email,
        user_id=user_id,
        role=role,
        secret=secret,
    )
    return success_response(profile, message="Registered successfully - please login.")


def login_pipeline(
    session_controller: SessionController,
    render_hooks: RenderHooks,
    identifier: str,
    secret: str,
) -> Dict[str, Any]:
    """
    Log in with email or id.

    Raises:
        UnauthorizedException: Bad credentials
    """
    profile = session_controller.login(identifier, secret)

    render_hooks.fire(*_SESSION_EVENTS)
    return success_response(profile, message=f"Welcome, {profile.name}")


def logout_pipeline(
    session_controller: SessionController,
    render_hooks: RenderHooks,
) -> Dict[str, Any]:
    session_controller.logout()

    render_hooks.fire(*_SESSION_EVENTS)
    return success_response(message="Logged out")
