"""
types.py.

Does: Define the Color value produced by the hex parsers: four unit-interval
      channels (red, green, blue, alpha), immutable and compared by value.
Used by: hex_parser, UI callers, tests.
"""

from __future__ import annotations

from dataclasses import dataclass

import webcolors

from .constants import BYTE_MASK, CHANNEL_MAX

__all__ = ["Color"]
__docformat__ = "google"


def _to_byte(channel: float) -> int:
    return max(0, min(CHANNEL_MAX, round(channel * CHANNEL_MAX)))


@dataclass(frozen=True)
class Color:
    """
    sRGB colour with channels normalised to [0.0, 1.0].

    Field order is (red, green, blue, alpha); the hex notations store alpha
    first, the parsers take care of the mapping.

    Example:
        >>> Color.from_hex("#F00")
        Color(red=1.0, green=0.0, blue=0.0, alpha=1.0)
        >>> Color.from_hex(0x0000FF, alpha=0.5).to_hex()
        '#0000ff'
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    # ── Construction ─────────────────────────────────────────────────────────
    @classmethod
    def from_hex(cls, value: str | int, alpha: float | None = None) -> Color:
        """
        Does: Parse a hex string (alpha embedded) or a 0xRRGGBB integer (alpha given, default 1.0).
        Raises: TypeError when alpha is passed with a string; use 8 digits instead.
        """
        from .hex_parser import parse_hex_int, parse_hex_string

        if isinstance(value, str):
            if alpha is not None:
                raise TypeError("alpha applies to integer values only; encode it as AARRGGBB")
            return parse_hex_string(value)
        return parse_hex_int(value, 1.0 if alpha is None else alpha)

    # ── Views ────────────────────────────────────────────────────────────────
    def to_rgb(self) -> webcolors.IntegerRGB:
        """Does: Return the 0-255 integer triple (alpha dropped)."""
        return webcolors.IntegerRGB(_to_byte(self.red), _to_byte(self.green), _to_byte(self.blue))

    def to_hex(self, include_alpha: bool = False) -> str:
        """Does: Format as '#rrggbb', or '#aarrggbb' when include_alpha is set."""
        hex_rgb = webcolors.rgb_to_hex(self.to_rgb())
        if not include_alpha:
            return hex_rgb
        return f"#{_to_byte(self.alpha) & BYTE_MASK:02x}{hex_rgb[1:]}"

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Does: Return (red, green, blue, alpha)."""
        return (self.red, self.green, self.blue, self.alpha)
