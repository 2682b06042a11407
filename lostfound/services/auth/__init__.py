"""Auth services."""

from lostfound.services.auth.session_controller import SessionController

__all__ = [
    "SessionController",
]
