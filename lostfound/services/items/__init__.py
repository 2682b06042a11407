"""Item services."""

from lostfound.services.items.item_registry import ItemRegistry

__all__ = [
    "ItemRegistry",
]
