"""Storage collaborators: interfaces and reference backends."""

from assetgnome.storage.base import (
    ActionStorage,
    FileStorage,
    ItemStorage,
    MimeExtensionLookup,
)
from assetgnome.storage.local import LocalFileStorage
from assetgnome.storage.mime import MimeTypeLookup
from assetgnome.storage.sqlite import SqliteActionStorage, SqliteItemStorage

__all__ = [
    "ActionStorage",
    "FileStorage",
    "ItemStorage",
    "LocalFileStorage",
    "MimeExtensionLookup",
    "MimeTypeLookup",
    "SqliteActionStorage",
    "SqliteItemStorage",
]
