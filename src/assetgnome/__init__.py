# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""AssetGnome - Local asset placement for offline media sync."""

from assetgnome.__about__ import __version__

__all__ = ["__version__"]
