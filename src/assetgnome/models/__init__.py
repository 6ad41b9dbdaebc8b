"""Domain models for the assetgnome application."""

from assetgnome.models.actions import UserActionRecord, UserActionType
from assetgnome.models.core import (
    ImageInfo,
    ImageType,
    ItemCategory,
    MediaItemRef,
    ServerIdentity,
    SyncedItem,
)
from assetgnome.models.files import FileSystemEntry, ItemFileType, LocalFileEntry

__all__ = [
    "FileSystemEntry",
    "ImageInfo",
    "ImageType",
    "ItemCategory",
    "ItemFileType",
    "LocalFileEntry",
    "MediaItemRef",
    "ServerIdentity",
    "SyncedItem",
    "UserActionRecord",
    "UserActionType",
]
