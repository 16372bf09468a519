"""
general
=======

Does: Group domain-agnostic helpers (resource loading, debug logging) shared by
      the color and text extensions.
"""

__all__: list[str] = []
__docformat__ = "google"
