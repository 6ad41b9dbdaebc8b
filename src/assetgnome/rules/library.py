"""Browsable library layout for synced media.

Layout, relative to the library root:
    <Server>/Movies/<Movie Name>/
    <Server>/TV/<Series Name>/<Season Name>/
    <Server>/Videos/<Video Name>/
    <Server>/Music/<Album Artist>/<Album>/
    <Server>/Photos/<Album>/
    <Server>/                      (anything else)

Optional segments (season, album artist, album) are skipped when blank. Name
segments are always present; a blank one is left to the sanitizer, which maps
it to ``_``. Path derivation never raises.
"""

from typing import ClassVar, Optional, Self

from assetgnome.models.core import ItemCategory, MediaItemRef, ServerIdentity, is_blank
from assetgnome.rules.base import RuleSet, Sanitizer
from assetgnome.utils.filenames import sanitize_filename


class LibraryRuleSet(RuleSet):
    """Rule set producing the Movies/TV/Videos/Music/Photos layout."""

    folder_names: ClassVar[dict[ItemCategory, str]] = {
        ItemCategory.MOVIE: "Movies",
        ItemCategory.EPISODE: "TV",
        ItemCategory.VIDEO: "Videos",
        ItemCategory.AUDIO: "Music",
        ItemCategory.PHOTO: "Photos",
    }

    def __init__(self: Self) -> None:
        """Initialize the LibraryRuleSet."""
        super().__init__("library")

    def directory_path(
        self: Self,
        item: MediaItemRef,
        server: ServerIdentity,
        sanitize: Sanitizer = sanitize_filename,
    ) -> list[str]:
        """Return the sanitized directory segments for *item* on *server*."""
        parts = [server.name]
        category = item.category

        if category == ItemCategory.MOVIE:
            parts += [self.folder_names[category], item.name]
        elif category == ItemCategory.EPISODE:
            parts += [self.folder_names[category], item.series_name or ""]
            parts += _optional(item.season_name)
        elif category == ItemCategory.VIDEO:
            parts += [self.folder_names[category], item.name]
        elif category == ItemCategory.AUDIO:
            parts.append(self.folder_names[category])
            parts += _optional(item.album_artist)
            parts += _optional(item.album)
        elif category == ItemCategory.PHOTO:
            parts.append(self.folder_names[category])
            parts += _optional(item.album)
        # ItemCategory.OTHER: server root only

        return [sanitize(part) for part in parts]


def _optional(value: Optional[str]) -> list[str]:
    if value is None or is_blank(value):
        return []
    return [value]
