"""User services."""

from lostfound.services.user.identity_store import IdentityStore

__all__ = [
    "IdentityStore",
]
