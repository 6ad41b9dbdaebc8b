"""Utility modules for assetgnome."""

from assetgnome.utils.filenames import file_stem, sanitize_filename
from assetgnome.utils.ids import new_id

__all__ = [
    "file_stem",
    "new_id",
    "sanitize_filename",
]
