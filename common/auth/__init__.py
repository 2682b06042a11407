"""
Authentication module - Secret hashing for the identity store.
"""

from common.auth.password_hasher import PasswordHasher

__all__ = ["PasswordHasher"]
