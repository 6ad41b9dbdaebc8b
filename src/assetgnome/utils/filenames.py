"""Helpers for producing safe file and directory names.

sanitize_filename is idempotent: feeding its output back in returns the same
string. Path derivation relies on this so that already-clean names survive the
pipeline unchanged.
"""

import os
import re

# Characters rejected by at least one of NTFS, FAT or POSIX, plus controls.
_INVALID_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

# Reason: Windows refuses these as file stems regardless of extension, and
# synced libraries are often copied to removable drives.
WINDOWS_RESERVED_NAMES = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)

REPLACEMENT = "_"


def sanitize_filename(name: str) -> str:
    """Return *name* made safe for use as a single path segment.

    Args:
        name: Raw file or directory name.

    Returns:
        A non-empty name free of path separators and reserved characters.
    """
    cleaned = _INVALID_CHARS.sub(REPLACEMENT, name)
    cleaned = cleaned.strip().rstrip(". ")
    if not cleaned:
        return REPLACEMENT
    if cleaned.split(".", 1)[0].upper() in WINDOWS_RESERVED_NAMES:
        cleaned = REPLACEMENT + cleaned
    return cleaned


def file_stem(name: str) -> str:
    """Return *name* without its final extension (``a.b.mkv`` -> ``a.b``)."""
    return os.path.splitext(name)[0]
