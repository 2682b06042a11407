"""
bcrypt secret hashing.

Secrets are pre-hashed with SHA-256 before bcrypt, which sidesteps bcrypt's
72-byte input limit and keeps behaviour identical for every secret length.

Example:
    hasher = PasswordHasher(rounds=12)
    stored = hasher.hash_password("student123")
    assert hasher.verify_password("student123", stored)
"""

import base64
import hashlib

import bcrypt as bcrypt_lib


class PasswordHasher:
    """
    Hashes and verifies user secrets.
    """

    def __init__(self, rounds: int = 12):
        """
        Initialize the hasher.

        Args:
            rounds: bcrypt cost factor (4-31)
        """
        self._rounds = rounds

    @staticmethod
    def _prehash_password(password: str) -> bytes:
        sha256_hash = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(sha256_hash)

    def hash_password(self, password: str) -> str:
        """Hash a secret using bcrypt with SHA-256 pre-hashing."""
        salt = bcrypt_lib.gensalt(rounds=self._rounds)
        return bcrypt_lib.hashpw(self._prehash_password(password), salt).decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        """
        Check a secret against a stored hash.

        A malformed stored hash never matches.
        """
        if not hashed:
            return False
        try:
            return bcrypt_lib.checkpw(self._prehash_password(password), hashed.encode("utf-8"))
        except ValueError:
            return False
