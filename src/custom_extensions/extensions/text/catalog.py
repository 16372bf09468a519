"""
catalog.py
==========

Does: Look up translated strings in a message catalog, scoped either to the
      whole process (gettext) or to a named resource bundle (JSON tables
      under <bundle>/<locale>/<table>.json).
Used By: localized.py helpers, host applications installing their catalogs.
Returns: The translated value, or the key itself when no translation exists.
"""

from __future__ import annotations

import gettext
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from custom_extensions.extensions.general.utils.load_config import (
    ConfigFileNotFound,
    load_config,
)
from custom_extensions.extensions.general.utils.log import debug

__all__ = [
    "MessageCatalog",
    "GettextCatalog",
    "ResourceBundle",
    "MODULE_DATA_DIR",
    "LOCALE_ENV",
    "locale_candidates",
    "get_process_catalog",
    "set_process_catalog",
    "install_gettext",
    "resolve",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Config ───────────────────────────────────────────────────────────────────
LOCALE_ENV = "CUSTOM_EXTENSIONS_LOCALE"
_POSIX_LOCALE_ENVS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")
_NEUTRAL_LOCALES = frozenset({"c", "posix"})

# custom_extensions/data, shipped with the package
MODULE_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


# ── Catalog contract ─────────────────────────────────────────────────────────
@runtime_checkable
class MessageCatalog(Protocol):
    """Key → translated string table; lookup() returns None for unknown keys."""

    def lookup(self, key: str) -> str | None: ...


class GettextCatalog:
    """
    Catalog backed by gettext.

    Without explicit translations it reads the process-wide gettext domain
    (whatever `gettext.textdomain()` / `bindtextdomain()` configured).
    """

    def __init__(self, translations: gettext.NullTranslations | None = None):
        self.translations = translations

    def lookup(self, key: str) -> str | None:
        if self.translations is None:
            text = gettext.gettext(key)
        else:
            text = self.translations.gettext(key)
        return None if text == key else text


# ── Locale resolution ────────────────────────────────────────────────────────
def _expand_locale(raw: str) -> list[str]:
    """Does: 'fr_FR.UTF-8@euro' → ['fr_FR', 'fr']; neutral locales → []."""
    name = raw.split(".", 1)[0].split("@", 1)[0].strip().replace("-", "_")
    if not name or name.lower() in _NEUTRAL_LOCALES:
        return []
    lang = name.split("_", 1)[0]
    return [name] if lang == name else [name, lang]


def locale_candidates(preferred: str | None = None, default: str = "en") -> list[str]:
    """
    Ordered, de-duplicated locales to try for a bundle lookup.

    Order: `preferred`, CUSTOM_EXTENSIONS_LOCALE, LANGUAGE (colon list),
    LC_ALL, LC_MESSAGES, LANG, then `default`.

    Example:
        >>> locale_candidates("pt_BR", default="en")[:2]
        ['pt_BR', 'pt']
    """
    raw: list[str] = []
    if preferred:
        raw.append(preferred)
    if os.environ.get(LOCALE_ENV):
        raw.append(os.environ[LOCALE_ENV])
    for var in _POSIX_LOCALE_ENVS:
        value = os.environ.get(var)
        if value:
            raw.extend(value.split(":"))

    out: list[str] = []
    for item in raw:
        for loc in _expand_locale(item):
            if loc not in out:
                out.append(loc)
    if default not in out:
        out.append(default)
    return out


# ── Resource bundles ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ResourceBundle:
    """
    A named, externally managed set of localization tables.

    Layout: <base_dir>/<locale>/<table>.json, each a JSON object of string
    keys to string values. `base_dir=None` lets load_config pick the data
    directory (DATA_DIR / CUSTOM_EXTENSIONS_DATA_DIR env, then discovery).
    """

    name: str
    base_dir: Path | None = None
    table: str = "localizable"
    default_localization: str = "en"
    locale: str | None = None

    @classmethod
    def module(cls) -> ResourceBundle:
        """Does: Return the bundle shipped inside this package."""
        return cls(name="custom_extensions", base_dir=MODULE_DATA_DIR)

    def load_table(self) -> dict[str, str]:
        """Does: Load the first existing table among the locale candidates ({} if none)."""
        for loc in locale_candidates(self.locale, self.default_localization):
            try:
                return load_config(f"{loc}/{self.table}", "string_table", base_dir=self.base_dir)
            except ConfigFileNotFound:
                continue
        logger.debug("No %s table found for bundle %s", self.table, self.name)
        debug(f"bundle {self.name!r}: no {self.table!r} table", topic="l10n")
        return {}

    def lookup(self, key: str) -> str | None:
        return self.load_table().get(key)


# ── Process scope ────────────────────────────────────────────────────────────
_PROCESS_CATALOG: MessageCatalog = GettextCatalog()


def get_process_catalog() -> MessageCatalog:
    """Does: Return the catalog used for process-scope lookups."""
    return _PROCESS_CATALOG


def set_process_catalog(catalog: MessageCatalog) -> MessageCatalog:
    """Does: Install `catalog` for process-scope lookups. Returns: the previous one."""
    global _PROCESS_CATALOG
    if not isinstance(catalog, MessageCatalog):
        raise TypeError(f"{type(catalog).__name__} does not implement lookup()")
    previous, _PROCESS_CATALOG = _PROCESS_CATALOG, catalog
    return previous


def install_gettext(
    domain: str,
    localedir: str | os.PathLike[str] | None = None,
    languages: list[str] | None = None,
) -> GettextCatalog:
    """Does: Load a gettext domain (missing .mo files fall back to identity) as the process catalog."""
    translations = gettext.translation(domain, localedir, languages=languages, fallback=True)
    catalog = GettextCatalog(translations)
    set_process_catalog(catalog)
    return catalog


# ── Lookup ───────────────────────────────────────────────────────────────────
def resolve(key: str, bundle: MessageCatalog | None = None, comment: str | None = None) -> str:
    """
    Translate `key` in `bundle` (process scope when None).

    Args:
        key: Catalog key.
        bundle: Named catalog, usually a ResourceBundle.
        comment: Note for translators; never affects the lookup.

    Returns:
        The translated value, else `key` unchanged. An empty key gives ""
        (gettext would otherwise return the catalog header).
    """
    if not key:
        return ""
    catalog = get_process_catalog() if bundle is None else bundle
    value = catalog.lookup(key)
    if value is None:
        scope = "process" if bundle is None else getattr(bundle, "name", type(bundle).__name__)
        debug(f"missing key {key!r} in {scope} scope (comment={comment!r})", topic="l10n")
        return key
    return value
