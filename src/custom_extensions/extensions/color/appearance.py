"""
appearance.py
=============

Does: Answer "is the system appearance dark?" through a platform capability.
      macOS and Windows carry a real provider; every other platform gets a
      constant `False` bound once at import, with no runtime query.
Used By: UI code choosing light/dark palettes.
Returns: bool from is_dark_mode(); DARK_MODE_AVAILABLE tells which case applies.
"""

from __future__ import annotations

import logging
import subprocess
import sys
import time
from typing import Callable, Protocol, runtime_checkable

from custom_extensions.extensions.general.utils.log import debug

__all__ = [
    "AppearanceProvider",
    "MacAppearanceProvider",
    "WindowsAppearanceProvider",
    "CachedAppearanceProvider",
    "SUPPORTED_PLATFORMS",
    "DARK_MODE_AVAILABLE",
    "select_provider",
    "set_appearance_provider",
    "get_appearance_provider",
    "is_dark_mode",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# ── Capability contract ──────────────────────────────────────────────────────
@runtime_checkable
class AppearanceProvider(Protocol):
    """Structural contract for a host that can report its appearance."""

    def is_dark(self) -> bool: ...


# ── Platform providers ───────────────────────────────────────────────────────
class MacAppearanceProvider:
    """
    Read the global AppleInterfaceStyle default ('Dark' when dark mode is on).

    Every is_dark() call spawns `defaults` and blocks until it exits or
    `timeout` seconds pass. Wrap it in CachedAppearanceProvider when polling.
    """

    command = ("defaults", "read", "-g", "AppleInterfaceStyle")

    def __init__(self, timeout: float = 2.0):
        self.timeout = timeout

    def is_dark(self) -> bool:
        try:
            proc = subprocess.run(
                self.command, capture_output=True, text=True, timeout=self.timeout, check=False
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("AppleInterfaceStyle query failed: %s", e)
            debug(f"mac query failed: {e}", topic="appearance")
            return False
        # The key is absent (non-zero exit) in light mode.
        return proc.returncode == 0 and proc.stdout.strip().lower() == "dark"


class WindowsAppearanceProvider:
    """Does: Read HKCU Personalize\\AppsUseLightTheme (0 means dark)."""

    key_path = r"Software\Microsoft\Windows\CurrentVersion\Themes\Personalize"
    value_name = "AppsUseLightTheme"

    def is_dark(self) -> bool:
        try:
            import winreg

            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, self.key_path) as key:
                value, _ = winreg.QueryValueEx(key, self.value_name)
        except OSError as e:
            logger.debug("AppsUseLightTheme query failed: %s", e)
            debug(f"windows query failed: {e}", topic="appearance")
            return False
        return value == 0


class CachedAppearanceProvider:
    """Does: Reuse another provider's answer for `ttl` seconds before querying it again."""

    def __init__(
        self,
        provider: AppearanceProvider,
        ttl: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.provider = provider
        self.ttl = ttl
        self._clock = clock
        self._value: bool | None = None
        self._expires = 0.0

    def is_dark(self) -> bool:
        now = self._clock()
        if self._value is None or now >= self._expires:
            self._value = self.provider.is_dark()
            self._expires = now + self.ttl
        return self._value

    def invalidate(self) -> None:
        self._value = None


SUPPORTED_PLATFORMS: dict[str, type[AppearanceProvider]] = {
    "darwin": MacAppearanceProvider,
    "win32": WindowsAppearanceProvider,
}


def select_provider(platform: str) -> AppearanceProvider | None:
    """Does: Return the provider for a sys.platform value, or None when the capability is omitted."""
    provider_cls = SUPPORTED_PLATFORMS.get(platform)
    return provider_cls() if provider_cls is not None else None


# ── Import-time binding ──────────────────────────────────────────────────────
_PROVIDER: AppearanceProvider | None = select_provider(sys.platform)
DARK_MODE_AVAILABLE: bool = _PROVIDER is not None


def get_appearance_provider() -> AppearanceProvider | None:
    """Does: Return the active provider (None on platforms without the capability)."""
    return _PROVIDER


def set_appearance_provider(provider: AppearanceProvider) -> None:
    """
    Replace the provider used by is_dark_mode() on a supported platform.

    Hosts with their own notion of appearance (a GUI toolkit theme, a test
    double) register it here. Unsupported platforms keep their constant stub.
    """
    global _PROVIDER
    if not isinstance(provider, AppearanceProvider):
        raise TypeError(f"{type(provider).__name__} does not implement is_dark()")
    if not DARK_MODE_AVAILABLE:
        logger.debug("Ignoring appearance provider on %s (capability omitted)", sys.platform)
        return
    _PROVIDER = provider


if DARK_MODE_AVAILABLE:

    def is_dark_mode() -> bool:
        """
        Report whether the current system appearance is dark.

        Queries the host on each call (on macOS a `defaults` subprocess, up to
        its timeout). Install a CachedAppearanceProvider to bound that cost.
        """
        dark = _PROVIDER.is_dark() if _PROVIDER is not None else False
        debug(f"is_dark_mode → {dark}", topic="appearance")
        return dark

else:

    def is_dark_mode() -> bool:
        """Does: Always False; this platform has no appearance capability."""
        return False
