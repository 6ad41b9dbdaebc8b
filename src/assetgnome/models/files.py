"""Models describing files found in, or written to, the local library."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from assetgnome.models.core import ImageType


class ItemFileType(str, Enum):
    """Kind of a file stored next to an item."""

    MEDIA = "media"
    IMAGE = "image"
    SUBTITLES = "subtitles"


class FileSystemEntry(BaseModel):
    """A raw directory entry as reported by a file storage backend."""

    path: str
    name: str


class LocalFileEntry(BaseModel):
    """A classified file belonging to an item.

    Built fresh on every listing; never persisted.
    """

    path: str
    name: str
    item_id: str
    type: ItemFileType
    image_type: Optional[ImageType] = None
    """Image role, set only when type is IMAGE."""
