"""
hex_parser.py
=============

Does: Build Color values from hexadecimal notation.
      - parse_hex_string("#F00" | "FF0000" | "80FFFF00") → Color
      - parse_hex_int(0xRRGGBB, alpha=1.0) → Color
Used By: UI code, Color.from_hex().
Returns: Color with channels divided by 255; unsupported string lengths fall
         back to the raw (a, r, g, b) = (1, 1, 1, 0) channels unless strict.
"""

from __future__ import annotations

import logging

from custom_extensions.extensions.general.utils.log import debug

from . import constants
from .constants import (
    BYTE_MASK,
    CHANNEL_MAX,
    HEX_FORMATS,
    INVALID_HEX_ARGB,
    NIBBLE_MASK,
    SCAN_MAX,
    SHORTHAND_SCALE,
)
from .types import Color

__all__ = [
    "InvalidHexFormat",
    "strip_non_alphanumerics",
    "scan_hex_int",
    "extract_argb",
    "parse_hex_string",
    "parse_hex_int",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

ARGB = tuple[int, int, int, int]


# ── Errors ───────────────────────────────────────────────────────────────────
class InvalidHexFormat(ValueError):
    """Raise (strict mode only) when the stripped digit count is not 3, 6 or 8."""

    def __init__(self, value: str, digits: int):
        super().__init__(
            f"Unsupported hex colour {value!r}: {digits} digits after stripping "
            f"(expected one of {sorted(HEX_FORMATS)})"
        )
        self.value = value
        self.digits = digits


# =============================================================================
# 1) INPUT CLEANUP & SCANNING
# =============================================================================

def strip_non_alphanumerics(text: str) -> str:
    """Does: Drop every character that is not a letter or digit ('#', spaces, punctuation)."""
    return "".join(ch for ch in text if ch.isalnum())


def scan_hex_int(text: str) -> int:
    """
    Read a base-16 unsigned integer from the start of `text`.

    An optional '0x'/'0X' prefix is consumed, then hex digits are read up to
    the first character that is not one. No digits gives 0, values saturate
    at 2**64 - 1. Never raises.

    Example:
        >>> scan_hex_int("ff00")
        65280
        >>> scan_hex_int("12zz")
        18
        >>> scan_hex_int("zz")
        0
    """
    start = 2 if text[:2] in ("0x", "0X") and text[2:3] in _HEX_DIGITS else 0
    value = 0
    for ch in text[start:]:
        if ch not in _HEX_DIGITS:
            break
        value = min((value << 4) | int(ch, 16), SCAN_MAX)
    return value


def extract_argb(value: int, digits: int) -> ARGB:
    """Does: Split a scanned integer into raw (alpha, red, green, blue) for a digit count."""
    if digits == 3:
        return (
            CHANNEL_MAX,
            (value >> 8) * SHORTHAND_SCALE,
            (value >> 4 & NIBBLE_MASK) * SHORTHAND_SCALE,
            (value & NIBBLE_MASK) * SHORTHAND_SCALE,
        )
    if digits == 6:
        return (CHANNEL_MAX, value >> 16, value >> 8 & BYTE_MASK, value & BYTE_MASK)
    if digits == 8:
        return (value >> 24, value >> 16 & BYTE_MASK, value >> 8 & BYTE_MASK, value & BYTE_MASK)
    return INVALID_HEX_ARGB


# =============================================================================
# 2) PUBLIC PARSERS
# =============================================================================

def parse_hex_string(hex_color: str, *, strict: bool | None = None) -> Color:
    """
    Create a Color from a hexadecimal string.

    Args:
        hex_color: "RGB", "RRGGBB" or "AARRGGBB", with or without '#' (any
            non-alphanumeric character is ignored, case does not matter).
        strict: Raise InvalidHexFormat for unsupported lengths instead of
            returning the fallback colour. None reads CUSTOM_EXTENSIONS_HEX_STRICT.

    Returns:
        Color with each channel byte divided by 255.

    Example:
        >>> parse_hex_string("#FF0000") == parse_hex_string("FF0000")
        True
        >>> parse_hex_string("80FFFF00").alpha == 128 / 255
        True
    """
    cleaned = strip_non_alphanumerics(hex_color)
    digits = len(cleaned)
    if digits not in HEX_FORMATS:
        if constants.HEX_STRICT if strict is None else strict:
            raise InvalidHexFormat(hex_color, digits)
        logger.debug("Unsupported hex length %d for %r; using fallback channels", digits, hex_color)
        debug(f"unsupported hex {hex_color!r} ({digits} digits) → fallback", topic="color")

    a, r, g, b = extract_argb(scan_hex_int(cleaned), digits)
    return Color(
        red=r / CHANNEL_MAX,
        green=g / CHANNEL_MAX,
        blue=b / CHANNEL_MAX,
        alpha=a / CHANNEL_MAX,
    )


def parse_hex_int(hex_value: int, alpha: float = 1.0) -> Color:
    """Does: Create a Color from 0xRRGGBB; alpha is used as-is, extra high bits are ignored."""
    return Color(
        red=((hex_value >> 16) & BYTE_MASK) / CHANNEL_MAX,
        green=((hex_value >> 8) & BYTE_MASK) / CHANNEL_MAX,
        blue=(hex_value & BYTE_MASK) / CHANNEL_MAX,
        alpha=alpha,
    )
