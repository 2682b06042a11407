"""Media services."""

from lostfound.services.media.image_reader import ImageReader, DEFAULT_ALLOWED_EXTENSIONS

__all__ = [
    "ImageReader",
    "DEFAULT_ALLOWED_EXTENSIONS",
]
