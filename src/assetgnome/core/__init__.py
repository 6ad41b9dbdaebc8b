"""Core functionality for assetgnome.

- LocalAssetManager: places, lists and names the local files of synced items.
- classify_file: tags a filename as media, image or subtitles.
"""

from assetgnome.core.asset_manager import LocalAssetManager
from assetgnome.core.classifier import FileClassification, classify_file

__all__ = ["FileClassification", "LocalAssetManager", "classify_file"]
