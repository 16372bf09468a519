# custom_extensions/extensions/general/utils/__init__.py
"""

Does: Provide resource loading and lightweight debug logging utilities for the extensions.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Resource bundles, colour parsing, appearance providers, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_config_path,
)
from .log import (
    debug,
    is_topic_enabled,
    reload_topics,
)

__all__ = [
    # Resource loading
    "load_config",
    "clear_config_cache",
    "resolve_config_path",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "is_topic_enabled",
    "reload_topics",
]
