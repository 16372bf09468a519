"""
constants
=========

Does: Hold the fixed numbers of hexadecimal colour notation: channel range,
      shorthand scale, supported digit counts and the raw fallback channels.
Used By: hex_parser, Color conversions, tests.
Returns: Plain immutable values only.
"""

from __future__ import annotations

import os
from typing import Final

# ── Channels ─────────────────────────────────────────────────────────────────
CHANNEL_MAX: Final[int] = 255
BYTE_MASK: Final[int] = 0xFF
NIBBLE_MASK: Final[int] = 0xF
SHORTHAND_SCALE: Final[int] = 17  # 0xF * 17 == 0xFF

# ── Supported notations (stripped digit count → name) ────────────────────────
HEX_FORMATS: Final[dict[int, str]] = {
    3: "rgb",        # 12-bit shorthand
    6: "rrggbb",     # 24-bit
    8: "aarrggbb",   # 32-bit, alpha first
}

# Raw (alpha, red, green, blue) produced for unsupported lengths, before /255.
INVALID_HEX_ARGB: Final[tuple[int, int, int, int]] = (1, 1, 1, 0)

# Saturation value of the hex scanner (unsigned 64-bit).
SCAN_MAX: Final[int] = (1 << 64) - 1

# ── Config (env-overridable) ─────────────────────────────────────────────────
HEX_STRICT_ENV: Final[str] = "CUSTOM_EXTENSIONS_HEX_STRICT"
HEX_STRICT: bool = os.getenv(HEX_STRICT_ENV, "").strip().lower() in {"1", "true", "yes", "on"}

__all__ = [
    "CHANNEL_MAX",
    "BYTE_MASK",
    "NIBBLE_MASK",
    "SHORTHAND_SCALE",
    "HEX_FORMATS",
    "INVALID_HEX_ARGB",
    "SCAN_MAX",
    "HEX_STRICT_ENV",
    "HEX_STRICT",
]
