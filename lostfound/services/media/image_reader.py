"""
Image reader for report photos.

Turns an uploaded file into an embeddable `data:` URL. The read runs off the
event loop; any failure resolves to None so a report is never rejected
because of its photo.
"""

import asyncio
import base64
import logging
import mimetypes
import os
from pathlib import Path
from typing import BinaryIO, Iterable, Optional, Union

logger = logging.getLogger(__name__)

ImageSource = Union[str, os.PathLike, BinaryIO]

DEFAULT_ALLOWED_EXTENSIONS = ("png", "jpg", "jpeg", "gif", "webp")


class ImageReader:
    """
    Reads image files into data URLs.
    """

    def __init__(
        self,
        max_bytes: int = 5 * 1024 * 1024,
        allowed_extensions: Iterable[str] = DEFAULT_ALLOWED_EXTENSIONS,
    ):
        """
        Initialize ImageReader.

        Args:
            max_bytes: Largest accepted payload
            allowed_extensions: Accepted file extensions, without the dot
        """
        self._max_bytes = max_bytes
        self._allowed_extensions = {ext.lower().lstrip(".") for ext in allowed_extensions}

    def is_allowed(self, filename: str) -> bool:
        return "." in filename and filename.rsplit(".", 1)[1].lower() in self._allowed_extensions

    async def read_as_data_url(self, source: Optional[ImageSource]) -> Optional[str]:
        """
        Read an image into a data URL.

        Args:
            source: Path to the file, an open binary file, or None

        Returns:
            `data:<mime>;base64,<payload>`, or None when there is no image or
            it could not be read
        """
        if source is None:
            return None

        filename = self._filename_of(source)
        if not filename or not self.is_allowed(filename):
            logger.warning(f"Ignoring image with unsupported type: {filename or '<unnamed>'}")
            return None

        try:
            payload = await asyncio.to_thread(self._read_bytes, source)
        except (OSError, ValueError) as e:
            logger.warning(f"Image read failed for {filename}: {e}")
            return None

        if not payload:
            logger.warning(f"Ignoring empty image {filename}")
            return None

        if len(payload) > self._max_bytes:
            logger.warning(
                f"Ignoring image {filename}: {len(payload)} bytes exceeds limit of {self._max_bytes}"
            )
            return None

        mime_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        encoded = base64.b64encode(payload).decode("ascii")
        logger.debug(f"Read image {filename} ({len(payload)} bytes, {mime_type})")
        return f"data:{mime_type};base64,{encoded}"

    def _read_bytes(self, source: ImageSource) -> bytes:
        if hasattr(source, "read"):
            # One byte past the limit is enough to know it is too large
            return source.read(self._max_bytes + 1)
        with open(source, "rb") as f:
            return f.read(self._max_bytes + 1)

    @staticmethod
    def _filename_of(source: ImageSource) -> str:
        if hasattr(source, "read"):
            return Path(getattr(source, "name", "") or "").name
        return Path(os.fspath(source)).name
