"""
localized.py
============

Does: Turn plain strings into localized text.
      - localized("key") → LocalizedKey (key kept as a real field)
      - localized_ns("key", comment=...) → str from the process catalog
      - to_localized_for_package / to_localized_string_for_package → str from
        a resource bundle (this package's own bundle by default)
Returns: Resolved strings with every literal '\\n' turned into a line break;
         unknown keys come back unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import MessageCatalog, ResourceBundle, resolve

__all__ = [
    "ESCAPED_NEWLINE",
    "expand_escaped_newlines",
    "LocalizedKey",
    "localized",
    "localized_ns",
    "to_localized_for_package",
    "to_localized_string_for_package",
]
__docformat__ = "google"

ESCAPED_NEWLINE = "\\n"  # backslash + 'n', as written in translation tables


def expand_escaped_newlines(text: str) -> str:
    """
    Replace every two-character '\\n' sequence with a real line break.

    Example:
        >>> expand_escaped_newlines("First line\\\\nSecond line")
        'First line\\nSecond line'
    """
    return text.replace(ESCAPED_NEWLINE, "\n")


@dataclass(frozen=True)
class LocalizedKey:
    """
    A key destined for localized display.

    `key` is the original string; `bundle` scopes the lookup (None means the
    process catalog).
    """

    key: str
    bundle: MessageCatalog | None = None

    def __str__(self) -> str:
        return self.to_localized_string()

    def to_localized_string(self) -> str:
        """Does: Resolve the key and expand escaped newlines."""
        return expand_escaped_newlines(resolve(self.key, self.bundle))


def localized(text: str, bundle: MessageCatalog | None = None) -> LocalizedKey:
    """Does: Wrap `text` as a LocalizedKey (resolved later, at display time)."""
    return LocalizedKey(text, bundle)


def localized_ns(text: str, comment: str | None = None) -> str:
    """Does: Resolve `text` in the process catalog; `comment` is a translator note."""
    return expand_escaped_newlines(resolve(text, None, comment or ""))


def to_localized_for_package(text: str, bundle: MessageCatalog | None = None) -> str:
    """Does: Resolve `text` in `bundle`, defaulting to this package's own bundle."""
    if bundle is None:
        bundle = ResourceBundle.module()
    return expand_escaped_newlines(resolve(text, bundle))


def to_localized_string_for_package(text: str, bundle: MessageCatalog | None = None) -> str:
    """
    Resolve `text` in a resource bundle, formatted for display.

    Example:
        Given "multiline_text": "First line\\\\nSecond line" in the bundle,
        the result holds an actual line break between the two lines.
    """
    return to_localized_for_package(text, bundle)
