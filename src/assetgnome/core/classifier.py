"""Classification of files stored next to an item.

Files are classified by extension only. Anything that is not a known image or
subtitle extension is treated as the item's media file.
"""

import os
from dataclasses import dataclass
from typing import Optional

from assetgnome.models.core import ImageType
from assetgnome.models.files import ItemFileType

IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".webp"})
SUBTITLE_EXTENSIONS = frozenset({".srt", ".vtt"})


@dataclass(frozen=True)
class FileClassification:
    """Result of classifying a filename."""

    type: ItemFileType
    image_type: Optional[ImageType] = None


def _extension(filename: str) -> str:
    return os.path.splitext(filename)[1].lower()


def is_image_file(filename: str) -> bool:
    """Return True if *filename* has a supported image extension."""
    return _extension(filename) in IMAGE_EXTENSIONS


def is_subtitle_file(filename: str) -> bool:
    """Return True if *filename* has a supported subtitle extension."""
    return _extension(filename) in SUBTITLE_EXTENSIONS


def get_image_type(filename: str) -> ImageType:
    """Return the role of an image file.

    Only primary images are written locally, so every image is primary.
    """
    return ImageType.PRIMARY


def classify_file(filename: str) -> FileClassification:
    """Classify *filename* as an image, subtitle or media file.

    Args:
        filename: Name of the file; only the extension is inspected.

    Returns:
        The FileClassification, with an image role for images.
    """
    if is_image_file(filename):
        return FileClassification(ItemFileType.IMAGE, get_image_type(filename))
    if is_subtitle_file(filename):
        return FileClassification(ItemFileType.SUBTITLES)
    return FileClassification(ItemFileType.MEDIA)
