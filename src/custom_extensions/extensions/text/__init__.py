"""
text
====

Does: Expose string localization: message catalogs (process gettext scope or
      named resource bundles) and the localized-text helpers built on them.
Returns: Re-exports of stable symbols from `catalog` and `localized`.
Example:
    localized_ns("hello_world"); to_localized_string_for_package("multiline_text")
"""

from __future__ import annotations

# ── Catalogs ─────────────────────────────────────────────────────────────────
from .catalog import (
    GettextCatalog,
    MessageCatalog,
    ResourceBundle,
    get_process_catalog,
    install_gettext,
    resolve,
    set_process_catalog,
)

# ── Helpers ──────────────────────────────────────────────────────────────────
from .localized import (
    LocalizedKey,
    expand_escaped_newlines,
    localized,
    localized_ns,
    to_localized_for_package,
    to_localized_string_for_package,
)

__all__ = [
    "MessageCatalog",
    "GettextCatalog",
    "ResourceBundle",
    "get_process_catalog",
    "set_process_catalog",
    "install_gettext",
    "resolve",
    "LocalizedKey",
    "expand_escaped_newlines",
    "localized",
    "localized_ns",
    "to_localized_for_package",
    "to_localized_string_for_package",
]

__docformat__ = "google"
