"""Claim services."""

from lostfound.services.claims.claim_service import ClaimService

__all__ = [
    "ClaimService",
]
