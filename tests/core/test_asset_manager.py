"""Tests for the local asset manager.

This test suite covers:
- Listing and classifying an item's local files
- Naming and placing downloaded media and companion images
- Error propagation from collaborators
- The user action journal and item passthroughs
"""

import io
import re
from unittest.mock import AsyncMock

import pytest

from assetgnome.core.asset_manager import LocalAssetManager
from assetgnome.errors import MediaNotFoundError, UnsupportedMimeTypeError
from assetgnome.models.actions import UserActionRecord
from assetgnome.models.core import (
    ImageInfo,
    ImageType,
    ItemCategory,
    MediaItemRef,
    ServerIdentity,
    SyncedItem,
)
from assetgnome.models.files import ItemFileType
from tests.helpers.fake_storage import (
    InMemoryActionStorage,
    InMemoryFileStorage,
    InMemoryItemStorage,
)

MOVIE_DIR = ("Main", "Movies", "Blade Runner")


class TestGetFiles:
    """Listing and classification of stored files."""

    @pytest.mark.asyncio
    async def test_empty_directory(
        self, manager: LocalAssetManager, movie: MediaItemRef, server: ServerIdentity
    ) -> None:
        assert await manager.get_files(movie, server) == []

    @pytest.mark.asyncio
    async def test_every_entry_is_returned_and_classified(
        self,
        manager: LocalAssetManager,
        file_storage: InMemoryFileStorage,
        movie: MediaItemRef,
        server: ServerIdentity,
    ) -> None:
        file_storage.add(*MOVIE_DIR, "Blade Runner.mkv")
        file_storage.add(*MOVIE_DIR, "Blade Runner.jpg")
        file_storage.add(*MOVIE_DIR, "Blade Runner.en.srt")
        file_storage.add("Main", "Movies", "Other", "Other.mkv")

        files = await manager.get_files(movie, server)

        by_name = {f.name: f for f in files}
        assert set(by_name) == {
            "Blade Runner.mkv",
            "Blade Runner.jpg",
            "Blade Runner.en.srt",
        }
        assert by_name["Blade Runner.mkv"].type == ItemFileType.MEDIA
        assert by_name["Blade Runner.mkv"].image_type is None
        assert by_name["Blade Runner.jpg"].type == ItemFileType.IMAGE
        assert by_name["Blade Runner.jpg"].image_type == ImageType.PRIMARY
        assert by_name["Blade Runner.en.srt"].type == ItemFileType.SUBTITLES
        assert all(f.item_id == "m1" for f in files)
        assert by_name["Blade Runner.mkv"].path == "Main/Movies/Blade Runner/Blade Runner.mkv"

    @pytest.mark.asyncio
    async def test_storage_failure_propagates(
        self, movie: MediaItemRef, server: ServerIdentity
    ) -> None:
        file_storage = InMemoryFileStorage()
        file_storage.list_entries = AsyncMock(side_effect=PermissionError("denied"))  # type: ignore[method-assign]
        manager = LocalAssetManager(
            InMemoryActionStorage(), InMemoryItemStorage(), file_storage
        )
        with pytest.raises(PermissionError):
            await manager.get_files(movie, server)


class TestDirectoryPath:
    """Path derivation through the manager."""

    def test_episode_scenario(
        self, manager: LocalAssetManager, server: ServerIdentity
    ) -> None:
        item = MediaItemRef(
            id="e1",
            name="Pilot",
            category=ItemCategory.EPISODE,
            series_name="Foo",
            season_name="Season 1",
        )
        assert manager.get_directory_path(item, server) == [
            "Main",
            "TV",
            "Foo",
            "Season 1",
        ]

    def test_uses_file_storage_sanitizer(
        self,
        manager: LocalAssetManager,
        file_storage: InMemoryFileStorage,
        server: ServerIdentity,
    ) -> None:
        item = MediaItemRef(id="m2", name="AC/DC: Live", category=ItemCategory.MOVIE)
        assert manager.get_directory_path(item, server) == [
            "Main",
            "Movies",
            "AC_DC_ Live",
        ]
        assert file_storage.sanitized == ["Main", "Movies", "AC/DC: Live"]


class TestSaveImage:
    """Companion images named after the anchor media file."""

    @pytest.mark.asyncio
    async def test_named_after_media_file(
        self,
        manager: LocalAssetManager,
        file_storage: InMemoryFileStorage,
        movie: MediaItemRef,
        server: ServerIdentity,
    ) -> None:
        file_storage.add(*MOVIE_DIR, "Blade Runner (1982).mkv")

        path = await manager.save_image(
            io.BytesIO(b"jpeg-bytes"), "image/jpeg", movie, ImageInfo(), server
        )

        assert path == [*MOVIE_DIR, "Blade Runner (1982).jpg"]
        assert file_storage.files[tuple(path)] == b"jpeg-bytes"

    @pytest.mark.asyncio
    async def test_first_media_file_is_the_anchor(
        self,
        manager: LocalAssetManager,
        file_storage: InMemoryFileStorage,
        movie: MediaItemRef,
        server: ServerIdentity,
    ) -> None:
        file_storage.add(*MOVIE_DIR, "a.srt")
        file_storage.add(*MOVIE_DIR, "b.jpg")
        file_storage.add(*MOVIE_DIR, "c.mp4")
        file_storage.add(*MOVIE_DIR, "d.mkv")

        path = await manager.save_image(
            io.BytesIO(b"png"), "image/png", movie, ImageInfo(), server
        )

        assert path[-1] == "c.png"

    @pytest.mark.asyncio
    async def test_no_media_file_raises_not_found(
        self,
        manager: LocalAssetManager,
        file_storage: InMemoryFileStorage,
        movie: MediaItemRef,
        server: ServerIdentity,
    ) -> None:
        file_storage.add(*MOVIE_DIR, "poster.jpg")
        file_storage.add(*MOVIE_DIR, "subs.srt")

        with pytest.raises(MediaNotFoundError) as exc_info:
            await manager.save_image(
                io.BytesIO(b"x"), "image/jpeg", movie, ImageInfo(), server
            )

        assert exc_info.value.item_id == "m1"
        assert len(file_storage.files) == 2

    @pytest.mark.asyncio
    async def test_unknown_mime_type(
        self,
        manager: LocalAssetManager,
        file_storage: InMemoryFileStorage,
        movie: MediaItemRef,
        server: ServerIdentity,
    ) -> None:
        file_storage.add(*MOVIE_DIR, "movie.mkv")
        with pytest.raises(UnsupportedMimeTypeError):
            await manager.save_image(
                io.BytesIO(b"x"), "application/x-nothing", movie, ImageInfo(), server
            )

    @pytest.mark.asyncio
    async def test_custom_mime_lookup(
        self,
        action_storage: InMemoryActionStorage,
        item_storage: InMemoryItemStorage,
        file_storage: InMemoryFileStorage,
        movie: MediaItemRef,
        server: ServerIdentity,
    ) -> None:
        class TiffLookup:
            def to_extension(self, mime_type: str) -> str:
                return ".tiff"

        manager = LocalAssetManager(
            action_storage, item_storage, file_storage, mime_lookup=TiffLookup()  # type: ignore[arg-type]
        )
        file_storage.add(*MOVIE_DIR, "movie.mkv")

        path = await manager.save_image(
            io.BytesIO(b"x"),
            "image/tiff",
            movie,
            ImageInfo(image_type=ImageType.PRIMARY),
            server,
        )

        assert path[-1] == "movie.tiff"


class TestSaveMedia:
    """Naming and placement of downloaded media."""

    @pytest.mark.asyncio
    async def test_keeps_original_file_name(
        self,
        manager: LocalAssetManager,
        file_storage: InMemoryFileStorage,
        movie: MediaItemRef,
        server: ServerIdentity,
    ) -> None:
        synced = SyncedItem(item=movie, original_file_name="Blade Runner.mkv")

        path = await manager.save_media(io.BytesIO(b"video"), synced, server)

        assert path == [*MOVIE_DIR, "Blade Runner.mkv"]
        assert file_storage.files[tuple(path)] == b"video"

    @pytest.mark.asyncio
    async def test_original_file_name_is_sanitized(
        self,
        manager: LocalAssetManager,
        movie: MediaItemRef,
        server: ServerIdentity,
    ) -> None:
        synced = SyncedItem(item=movie, original_file_name="Cut: Final?.mkv")
        path = await manager.save_media(io.BytesIO(b""), synced, server)
        assert path[-1] == "Cut_ Final_.mkv"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("original", [None, "", "   "])
    async def test_blank_name_gets_random_hex_name(
        self,
        manager: LocalAssetManager,
        movie: MediaItemRef,
        server: ServerIdentity,
        original: str | None,
    ) -> None:
        synced = SyncedItem(item=movie, original_file_name=original)

        first = await manager.save_media(io.BytesIO(b"1"), synced, server)
        second = await manager.save_media(io.BytesIO(b"2"), synced, server)

        assert re.fullmatch(r"[0-9a-f]{32}", first[-1])
        assert re.fullmatch(r"[0-9a-f]{32}", second[-1])
        assert first[-1] != second[-1]
        assert first[:-1] == list(MOVIE_DIR)

    @pytest.mark.asyncio
    async def test_saved_media_becomes_image_anchor(
        self,
        manager: LocalAssetManager,
        server: ServerIdentity,
    ) -> None:
        track = MediaItemRef(
            id="t1",
            name="Bohemian Rhapsody",
            category=ItemCategory.AUDIO,
            album_artist="Queen",
            album="A Night at the Opera",
        )
        await manager.save_media(
            io.BytesIO(b"flac"),
            SyncedItem(item=track, original_file_name="01 Bohemian Rhapsody.flac"),
            server,
        )

        path = await manager.save_image(
            io.BytesIO(b"art"), "image/jpeg", track, ImageInfo(), server
        )

        assert path == [
            "Main",
            "Music",
            "Queen",
            "A Night at the Opera",
            "01 Bohemian Rhapsody.jpg",
        ]

    @pytest.mark.asyncio
    async def test_nameless_item_saves_under_placeholder_directory(
        self,
        manager: LocalAssetManager,
        server: ServerIdentity,
    ) -> None:
        nameless = MediaItemRef.from_dto({"Id": "x", "Type": "Movie"})
        path = await manager.save_media(
            io.BytesIO(b"data"),
            SyncedItem(item=nameless, original_file_name="a.mkv"),
            server,
        )

        assert path == ["Main", "Movies", "_", "a.mkv"]
        files = await manager.get_files(nameless, server)
        assert [f.name for f in files] == ["a.mkv"]


class TestDeleteFile:
    @pytest.mark.asyncio
    async def test_deletes_through_storage(
        self, manager: LocalAssetManager, file_storage: InMemoryFileStorage
    ) -> None:
        file_storage.add(*MOVIE_DIR, "movie.mkv")
        await manager.delete_file([*MOVIE_DIR, "movie.mkv"])
        assert file_storage.files == {}

    @pytest.mark.asyncio
    async def test_missing_file_error_propagates(
        self, manager: LocalAssetManager
    ) -> None:
        with pytest.raises(FileNotFoundError):
            await manager.delete_file(["Main", "nope.mkv"])


class TestUserActions:
    """The user action journal."""

    @pytest.mark.asyncio
    async def test_record_assigns_fresh_id(
        self, manager: LocalAssetManager, action_storage: InMemoryActionStorage
    ) -> None:
        action = UserActionRecord(id="client-chosen", server_id="srv-1", item_id="m1")

        recorded = await manager.record_user_action(action)

        assert re.fullmatch(r"[0-9a-f]{32}", recorded.id or "")
        assert recorded.id != "client-chosen"
        assert action.id == "client-chosen"
        assert action_storage.records == [recorded]

    @pytest.mark.asyncio
    async def test_each_record_gets_a_distinct_id(
        self, manager: LocalAssetManager
    ) -> None:
        action = UserActionRecord(server_id="srv-1")
        first = await manager.record_user_action(action)
        second = await manager.record_user_action(action)
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_list_and_delete(self, manager: LocalAssetManager) -> None:
        kept = await manager.record_user_action(UserActionRecord(server_id="srv-1"))
        dropped = await manager.record_user_action(UserActionRecord(server_id="srv-1"))
        await manager.record_user_action(UserActionRecord(server_id="srv-2"))

        await manager.delete_user_action(dropped)

        assert await manager.get_user_actions("srv-1") == [kept]
        assert len(await manager.get_user_actions("srv-2")) == 1

    @pytest.mark.asyncio
    async def test_storage_failure_propagates(self) -> None:
        action_storage = AsyncMock()
        action_storage.create.side_effect = OSError("disk full")
        manager = LocalAssetManager(
            action_storage, InMemoryItemStorage(), InMemoryFileStorage()
        )
        with pytest.raises(OSError, match="disk full"):
            await manager.record_user_action(UserActionRecord(server_id="srv-1"))


class TestItems:
    @pytest.mark.asyncio
    async def test_add_or_update_item(
        self,
        manager: LocalAssetManager,
        item_storage: InMemoryItemStorage,
        movie: MediaItemRef,
    ) -> None:
        await manager.add_or_update_item(movie)
        renamed = movie.model_copy(update={"name": "Blade Runner 2049"})
        await manager.add_or_update_item(renamed)
        assert item_storage.items == {"m1": renamed}
