# custom_extensions/extensions/__init__.py

"""
extensions
==========

Does: Namespace for the extension groups: `color` (hex parsing, appearance),
      `text` (localization) and `general` (resource loading, debug logging).
"""
from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
