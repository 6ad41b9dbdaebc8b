"""Mime type to file extension lookup."""

import mimetypes
from typing import ClassVar

from assetgnome.errors import UnsupportedMimeTypeError
from assetgnome.storage.base import MimeExtensionLookup


class MimeTypeLookup(MimeExtensionLookup):
    """Extension lookup with fixed choices for the types the server sends.

    ``mimetypes`` is consulted for anything not in the table; its answers vary
    by platform (``image/jpeg`` may map to ``.jpe``), hence the table.
    """

    extensions: ClassVar[dict[str, str]] = {
        "image/jpeg": ".jpg",
        "image/jpg": ".jpg",
        "image/png": ".png",
        "image/webp": ".webp",
        "image/gif": ".gif",
        "image/bmp": ".bmp",
        "application/x-subrip": ".srt",
        "text/vtt": ".vtt",
        "video/mp4": ".mp4",
        "video/x-matroska": ".mkv",
        "audio/mpeg": ".mp3",
        "audio/flac": ".flac",
    }

    def to_extension(self, mime_type: str) -> str:
        """Return the extension for *mime_type*.

        Parameters such as ``; charset=utf-8`` are ignored.

        Raises:
            UnsupportedMimeTypeError: If no extension is known.
        """
        base = mime_type.split(";", 1)[0].strip().lower()
        ext = self.extensions.get(base) or mimetypes.guess_extension(base)
        if not ext:
            raise UnsupportedMimeTypeError(mime_type)
        return ext
