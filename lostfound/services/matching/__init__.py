"""Matching services."""

from lostfound.services.matching.matcher import Matcher, names_match

__all__ = [
    "Matcher",
    "names_match",
]
