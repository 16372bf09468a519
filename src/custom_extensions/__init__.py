"""
custom_extensions
=================

Does: Root package for UI value-type extensions: colours from hex notation,
      localized text from message catalogs, and dark-mode detection.
Returns: Convenience re-exports of the public API of `extensions.color` and
         `extensions.text`.
Used by: UI code; `from custom_extensions import Color, localized_ns`.
"""

__version__ = "0.1.0"

from custom_extensions.extensions.color import (
    DARK_MODE_AVAILABLE,
    Color,
    InvalidHexFormat,
    is_dark_mode,
    parse_hex_int,
    parse_hex_string,
)
from custom_extensions.extensions.text import (
    LocalizedKey,
    ResourceBundle,
    localized,
    localized_ns,
    resolve,
    to_localized_for_package,
    to_localized_string_for_package,
)

__all__ = [
    "__version__",
    # color
    "Color",
    "InvalidHexFormat",
    "parse_hex_string",
    "parse_hex_int",
    "DARK_MODE_AVAILABLE",
    "is_dark_mode",
    # text
    "LocalizedKey",
    "ResourceBundle",
    "localized",
    "localized_ns",
    "resolve",
    "to_localized_for_package",
    "to_localized_string_for_package",
]
__docformat__ = "google"
