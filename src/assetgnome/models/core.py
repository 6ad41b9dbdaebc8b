"""Core domain models for assetgnome.

This module defines the inputs to path derivation and file saving: the media
item reference, the server identity, image descriptors and the synced item
produced by a sync job.

Design:
- ItemCategory is a closed set. Server DTOs carry loose type strings
  ("Movie", "Episode") and a media type ("Video", "Audio", "Photo"); these are
  collapsed into exactly one category by ItemCategory.from_dto, which applies
  the library priority order once. Everything downstream dispatches on the enum.
- MediaItemRef and ServerIdentity are frozen; they are caller-owned inputs.
"""

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict


def is_blank(value: Optional[str]) -> bool:
    """Return True when *value* is None, empty or whitespace only."""
    return value is None or not value.strip()


class ItemCategory(str, Enum):
    """Library category of a media item.

    Used by rule sets to choose the top-level library folder.
    """

    MOVIE = "movie"
    EPISODE = "episode"
    VIDEO = "video"
    AUDIO = "audio"
    PHOTO = "photo"
    OTHER = "other"

    @classmethod
    def from_dto(
        cls,
        type_name: Optional[str],
        media_type: Optional[str],
        is_video: Optional[bool] = None,
        is_audio: Optional[bool] = None,
    ) -> "ItemCategory":
        """Resolve a server item's type strings into a single category.

        The checks run in a fixed order and the first match wins: an item typed
        "Movie" whose media type is also "Video" is a movie, not a generic video.

        Args:
            type_name: The server item type, e.g. "Movie" or "Episode".
            media_type: The server media type, e.g. "Video", "Audio", "Photo".
            is_video: Explicit video flag; derived from *media_type* when None.
            is_audio: Explicit audio flag; derived from *media_type* when None.

        Returns:
            The resolved ItemCategory.
        """
        kind = (type_name or "").strip().casefold()
        media = (media_type or "").strip().casefold()
        if is_video is None:
            is_video = media == "video"
        if is_audio is None:
            is_audio = media == "audio"

        if kind == "movie":
            return cls.MOVIE
        if kind == "episode":
            return cls.EPISODE
        if is_video:
            return cls.VIDEO
        if is_audio:
            return cls.AUDIO
        if media == "photo":
            return cls.PHOTO
        return cls.OTHER


class MediaItemRef(BaseModel):
    """Metadata of a library item, as needed to place its files on disk."""

    model_config = ConfigDict(frozen=True)

    id: str
    """Server-assigned item identifier."""

    name: str = ""
    """Display name of the item (movie title, video name, track name)."""

    category: ItemCategory = ItemCategory.OTHER
    """Resolved library category."""

    series_name: Optional[str] = None
    """Series name for episodes."""

    season_name: Optional[str] = None
    """Season name for episodes, e.g. "Season 1"."""

    album_artist: Optional[str] = None
    """Album artist for audio items."""

    album: Optional[str] = None
    """Album name for audio and photo items."""

    @classmethod
    def from_dto(cls, data: Mapping[str, Any]) -> "MediaItemRef":
        """Build a reference from a server-style item DTO.

        Keys follow the server's PascalCase naming (``Id``, ``Name``, ``Type``,
        ``MediaType``, ``SeriesName``, ``SeasonName``, ``AlbumArtist``,
        ``Album``, ``IsVideo``, ``IsAudio``). Missing keys are treated as absent.
        """
        category = ItemCategory.from_dto(
            data.get("Type"),
            data.get("MediaType"),
            is_video=data.get("IsVideo"),
            is_audio=data.get("IsAudio"),
        )
        return cls(
            id=str(data.get("Id") or ""),
            name=data.get("Name") or "",
            category=category,
            series_name=data.get("SeriesName"),
            season_name=data.get("SeasonName"),
            album_artist=data.get("AlbumArtist"),
            album=data.get("Album"),
        )


class ServerIdentity(BaseModel):
    """A server the client syncs from. Its name is the root library folder."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str


class ImageType(str, Enum):
    """Role of an image attached to an item."""

    PRIMARY = "primary"
    ART = "art"
    BACKDROP = "backdrop"
    BANNER = "banner"
    LOGO = "logo"
    THUMB = "thumb"
    DISC = "disc"
    SCREENSHOT = "screenshot"
    CHAPTER = "chapter"


class ImageInfo(BaseModel):
    """Descriptor of an image being downloaded for an item."""

    image_type: ImageType = ImageType.PRIMARY
    index: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    tag: Optional[str] = None


class SyncedItem(BaseModel):
    """An item delivered by a sync job, ready to be written locally."""

    item: MediaItemRef
    """The library item the media belongs to."""

    server_id: str = ""
    """Identifier of the server the job ran against."""

    sync_job_id: Optional[str] = None
    sync_job_item_id: Optional[str] = None

    original_file_name: Optional[str] = None
    """Filename the server recorded for the source file, if any."""
