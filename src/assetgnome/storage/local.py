"""Local filesystem implementation of FileStorage.

Files live under a single library root; every path handed in is a sequence of
segments relative to it. Blocking filesystem work runs in ``asyncio.to_thread``
so callers on the event loop are never stalled.

Writes go to a hidden ``.part`` sibling first and are moved into place with
``os.replace``, so a concurrent listing sees either the old file or the new one,
never a partial write. Those in-flight ``.part`` files are excluded from
listings; every other file, dot-prefixed ones included, is listed.
"""

import asyncio
import logging
import os
import re
import shutil
from pathlib import Path
from typing import BinaryIO, Sequence

from assetgnome.models.files import FileSystemEntry
from assetgnome.storage.base import FileStorage
from assetgnome.utils.filenames import sanitize_filename
from assetgnome.utils.ids import new_id

logger = logging.getLogger(__name__)

_SEPARATORS = {"/", "\\", os.sep}
_PARTIAL_WRITE = re.compile(r"^\..+\.[0-9a-f]{32}\.part$")


def is_partial_write(name: str) -> bool:
    """Check if an entry name is a temp file left by an in-flight save."""
    return _PARTIAL_WRITE.match(name) is not None


class LocalFileStorage(FileStorage):
    """FileStorage backed by a directory on the local disk."""

    def __init__(self, root: Path) -> None:
        """Initialize the storage.

        Args:
            root: Library root directory. Created lazily on first write.
        """
        self.root = Path(root).expanduser()

    def _resolve(self, path: Sequence[str]) -> Path:
        """Map *path* segments to an absolute path inside the root.

        Raises:
            ValueError: If *path* is empty or would escape the root.
        """
        if not path:
            raise ValueError("Path must contain at least one segment")
        for segment in path:
            if segment in {"", ".", ".."} or any(sep in segment for sep in _SEPARATORS):
                raise ValueError(f"Invalid path segment: {segment!r}")
        target = self.root.joinpath(*path)
        # Reason: symlinks inside the library could still point elsewhere.
        if not target.resolve().is_relative_to(self.root.resolve()):
            raise ValueError(f"Path escapes library root: {target}")
        return target

    async def list_entries(self, path: Sequence[str]) -> list[FileSystemEntry]:
        """Return the files directly inside the directory at *path*.

        A missing directory yields an empty list.
        """
        directory = self._resolve(path)

        def scan() -> list[FileSystemEntry]:
            if not directory.is_dir():
                return []
            return [
                FileSystemEntry(path=str(child), name=child.name)
                for child in sorted(directory.iterdir(), key=lambda p: p.name)
                if child.is_file() and not is_partial_write(child.name)
            ]

        entries = await asyncio.to_thread(scan)
        logger.debug("Listed %d entries in %s", len(entries), directory)
        return entries

    async def save_file(self, stream: BinaryIO, path: Sequence[str]) -> None:
        """Write *stream* to the file at *path*, replacing any existing file."""
        target = self._resolve(path)

        def write() -> None:
            target.parent.mkdir(parents=True, exist_ok=True)
            partial = target.with_name(f".{target.name}.{new_id()}.part")
            try:
                with partial.open("wb") as f:
                    shutil.copyfileobj(stream, f)
                os.replace(partial, target)
            except BaseException:
                partial.unlink(missing_ok=True)
                raise

        await asyncio.to_thread(write)
        logger.debug("Wrote %s", target)

    async def delete_file(self, path: Sequence[str]) -> None:
        """Delete the file at *path*.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        target = self._resolve(path)
        await asyncio.to_thread(target.unlink)
        logger.debug("Deleted %s", target)

    def sanitize_segment(self, name: str) -> str:
        """Return *name* as a valid, separator-free path segment."""
        return sanitize_filename(name)
