"""Exception types raised by assetgnome.

Storage backends are not wrapped: ``OSError`` and ``sqlite3.Error`` raised by a
collaborator reach the caller unchanged so the sync orchestrator can decide
whether to retry.
"""


class AssetGnomeError(Exception):
    """Base class for errors raised by this package."""


class MediaNotFoundError(AssetGnomeError, LookupError):
    """Raised when an item has no local media file to anchor companion files."""

    def __init__(self, item_id: str) -> None:
        """Initialize the error with the id of the item lacking media."""
        super().__init__(f"Media not found for item {item_id!r}")
        self.item_id = item_id


class InvalidItemError(AssetGnomeError, ValueError):
    """Raised when caller-supplied item metadata is malformed."""


class UnsupportedMimeTypeError(InvalidItemError):
    """Raised when no file extension is known for a mime type."""

    def __init__(self, mime_type: str) -> None:
        """Initialize the error with the unrecognised mime type."""
        super().__init__(f"No file extension known for mime type {mime_type!r}")
        self.mime_type = mime_type
