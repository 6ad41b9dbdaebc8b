"""Shared fixtures for assetgnome tests."""

import pytest

from assetgnome.core.asset_manager import LocalAssetManager
from assetgnome.models.core import ItemCategory, MediaItemRef, ServerIdentity
from tests.helpers.fake_storage import (
    InMemoryActionStorage,
    InMemoryFileStorage,
    InMemoryItemStorage,
)


@pytest.fixture
def server() -> ServerIdentity:
    """The server items are synced from."""
    return ServerIdentity(id="srv-1", name="Main")


@pytest.fixture
def movie() -> MediaItemRef:
    """A movie item."""
    return MediaItemRef(id="m1", name="Blade Runner", category=ItemCategory.MOVIE)


@pytest.fixture
def file_storage() -> InMemoryFileStorage:
    return InMemoryFileStorage()


@pytest.fixture
def action_storage() -> InMemoryActionStorage:
    return InMemoryActionStorage()


@pytest.fixture
def item_storage() -> InMemoryItemStorage:
    return InMemoryItemStorage()


@pytest.fixture
def manager(
    action_storage: InMemoryActionStorage,
    item_storage: InMemoryItemStorage,
    file_storage: InMemoryFileStorage,
) -> LocalAssetManager:
    """A manager wired to in-memory collaborators."""
    return LocalAssetManager(action_storage, item_storage, file_storage)
