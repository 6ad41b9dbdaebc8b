"""Collaborator interfaces used by the local asset manager.

The manager owns no durability concerns. Persistence of files, user actions and
item metadata is delegated to implementations of these interfaces, injected at
construction. Reference implementations live in this package; clients embed
their own where needed (e.g. a platform-specific document store).
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional, Sequence

from assetgnome.models.actions import UserActionRecord
from assetgnome.models.core import MediaItemRef
from assetgnome.models.files import FileSystemEntry


class ActionStorage(ABC):
    """Persistence for journaled user actions."""

    @abstractmethod
    async def create(self, record: UserActionRecord) -> None:
        """Store a new action record."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, record: UserActionRecord) -> None:
        """Remove an action record."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, server_id: str) -> list[UserActionRecord]:
        """Return all action records for *server_id*."""
        raise NotImplementedError


class ItemStorage(ABC):
    """Persistence for item metadata."""

    @abstractmethod
    async def add_or_update(self, item: MediaItemRef) -> None:
        """Insert *item* or replace the stored copy with the same id."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, item_id: str) -> Optional[MediaItemRef]:
        """Return the stored item or None."""
        raise NotImplementedError


class FileStorage(ABC):
    """A tree of files addressed by path segments relative to a library root."""

    @abstractmethod
    async def list_entries(self, path: Sequence[str]) -> list[FileSystemEntry]:
        """Return the files in the directory at *path*."""
        raise NotImplementedError

    @abstractmethod
    async def save_file(self, stream: BinaryIO, path: Sequence[str]) -> None:
        """Write the contents of *stream* to the file at *path*."""
        raise NotImplementedError

    @abstractmethod
    async def delete_file(self, path: Sequence[str]) -> None:
        """Delete the file at *path*."""
        raise NotImplementedError

    @abstractmethod
    def sanitize_segment(self, name: str) -> str:
        """Return *name* made valid as a single path segment.

        Must be idempotent and must never return a path separator.
        """
        raise NotImplementedError


class MimeExtensionLookup(ABC):
    """Maps mime types to file extensions."""

    @abstractmethod
    def to_extension(self, mime_type: str) -> str:
        """Return the extension, including the leading dot, for *mime_type*."""
        raise NotImplementedError
