"""
color.
=====

Does: Aggregate the colour extensions: the Color value type, hex string/integer
      parsers and the dark-mode capability.
Used By: UI code and the package root re-exports.
Returns: Pure functions and an immutable value type; no side effects beyond
         the import-time appearance provider selection.
"""

# ── Value type ───────────────────────────────────────────────────────────────
from .types import Color

# ── Hex parsing ──────────────────────────────────────────────────────────────
from .hex_parser import (
    InvalidHexFormat,
    parse_hex_int,
    parse_hex_string,
)

# ── Appearance ───────────────────────────────────────────────────────────────
from .appearance import (
    DARK_MODE_AVAILABLE,
    AppearanceProvider,
    CachedAppearanceProvider,
    is_dark_mode,
    set_appearance_provider,
)

__all__ = [
    # types
    "Color",
    # hex_parser
    "InvalidHexFormat",
    "parse_hex_string",
    "parse_hex_int",
    # appearance
    "AppearanceProvider",
    "CachedAppearanceProvider",
    "DARK_MODE_AVAILABLE",
    "is_dark_mode",
    "set_appearance_provider",
]
