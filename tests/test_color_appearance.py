# tests/test_color_appearance.py

from __future__ import annotations

import importlib
import subprocess
import sys
import types

import pytest

"""
appearance tests
================

Does: Check import-time provider selection (supported vs omitted platforms),
      the macOS/Windows providers against faked host queries, and provider
      injection. Platform switches reload the module under a patched sys.platform.
"""

import custom_extensions.extensions.color.appearance as appearance


# ──────────────────────────────────────────────────────────────────────────────
# Fixtures
# ──────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def on_platform(monkeypatch):
    """Does: Reload `appearance` as if running on the given platform; restore afterwards."""

    def _reload(platform: str):
        monkeypatch.setattr(sys, "platform", platform)
        return importlib.reload(appearance)

    yield _reload
    monkeypatch.undo()
    importlib.reload(appearance)


class FakeProvider:
    def __init__(self, dark: bool):
        self.dark = dark
        self.calls = 0

    def is_dark(self) -> bool:
        self.calls += 1
        return self.dark


# ──────────────────────────────────────────────────────────────────────────────
# Capability selection
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("platform", ["linux", "freebsd14", "emscripten", "wasi"])
def test_omitted_platforms_return_constant_false(on_platform, platform):
    mod = on_platform(platform)
    assert mod.DARK_MODE_AVAILABLE is False
    assert mod.get_appearance_provider() is None
    assert mod.is_dark_mode() is False


def test_omitted_platform_ignores_injected_provider(on_platform):
    mod = on_platform("linux")
    fake = FakeProvider(dark=True)
    mod.set_appearance_provider(fake)
    assert mod.is_dark_mode() is False
    assert fake.calls == 0


@pytest.mark.parametrize(
    "platform,cls_name",
    [("darwin", "MacAppearanceProvider"), ("win32", "WindowsAppearanceProvider")],
)
def test_supported_platforms_bind_a_provider(on_platform, platform, cls_name):
    mod = on_platform(platform)
    assert mod.DARK_MODE_AVAILABLE is True
    assert type(mod.get_appearance_provider()).__name__ == cls_name


def test_injected_provider_drives_is_dark_mode(on_platform):
    mod = on_platform("darwin")
    fake = FakeProvider(dark=True)
    mod.set_appearance_provider(fake)
    assert mod.is_dark_mode() is True
    fake.dark = False
    assert mod.is_dark_mode() is False
    assert fake.calls == 2


def test_set_provider_rejects_non_providers(on_platform):
    mod = on_platform("darwin")
    with pytest.raises(TypeError):
        mod.set_appearance_provider(object())  # type: ignore[arg-type]


def test_select_provider_unknown_platform_is_none():
    assert appearance.select_provider("sunos5") is None


# ──────────────────────────────────────────────────────────────────────────────
# macOS provider
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "returncode,stdout,expect",
    [(0, "Dark\n", True), (1, "", False), (0, "Light\n", False)],
)
def test_mac_provider_reads_interface_style(monkeypatch, returncode, stdout, expect):
    seen = {}

    def fake_run(cmd, **kwargs):
        seen["cmd"] = cmd
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")

    monkeypatch.setattr(appearance.subprocess, "run", fake_run)
    assert appearance.MacAppearanceProvider().is_dark() is expect
    assert seen["cmd"] == ("defaults", "read", "-g", "AppleInterfaceStyle")


def test_mac_provider_missing_tool_is_light(monkeypatch):
    def boom(cmd, **kwargs):
        raise FileNotFoundError("defaults")

    monkeypatch.setattr(appearance.subprocess, "run", boom)
    assert appearance.MacAppearanceProvider().is_dark() is False


def test_mac_provider_timeout_is_light(monkeypatch):
    def slow(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs.get("timeout", 0))

    monkeypatch.setattr(appearance.subprocess, "run", slow)
    assert appearance.MacAppearanceProvider(timeout=0.1).is_dark() is False


# ──────────────────────────────────────────────────────────────────────────────
# Windows provider (fake winreg)
# ──────────────────────────────────────────────────────────────────────────────
def _fake_winreg(value=None, missing=False):
    class _Key:
        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

    def open_key(root, path):
        if missing:
            raise FileNotFoundError(path)
        return _Key()

    return types.SimpleNamespace(
        HKEY_CURRENT_USER=object(),
        OpenKey=open_key,
        QueryValueEx=lambda key, name: (value, 4),
    )


@pytest.mark.parametrize("value,expect", [(0, True), (1, False)])
def test_windows_provider_reads_light_theme_flag(monkeypatch, value, expect):
    monkeypatch.setitem(sys.modules, "winreg", _fake_winreg(value=value))
    assert appearance.WindowsAppearanceProvider().is_dark() is expect


def test_windows_provider_missing_key_is_light(monkeypatch):
    monkeypatch.setitem(sys.modules, "winreg", _fake_winreg(missing=True))
    assert appearance.WindowsAppearanceProvider().is_dark() is False


# ──────────────────────────────────────────────────────────────────────────────
# Cached provider
# ──────────────────────────────────────────────────────────────────────────────
def test_cached_provider_reuses_answer_within_ttl():
    now = [100.0]
    fake = FakeProvider(dark=True)
    cached = appearance.CachedAppearanceProvider(fake, ttl=5.0, clock=lambda: now[0])

    assert cached.is_dark() is True
    fake.dark = False
    now[0] = 104.9
    assert cached.is_dark() is True
    assert fake.calls == 1

    now[0] = 105.0
    assert cached.is_dark() is False
    assert fake.calls == 2


def test_cached_provider_invalidate_forces_query():
    fake = FakeProvider(dark=False)
    cached = appearance.CachedAppearanceProvider(fake, ttl=60.0, clock=lambda: 0.0)
    assert cached.is_dark() is False
    fake.dark = True
    cached.invalidate()
    assert cached.is_dark() is True
    assert fake.calls == 2


def test_cached_provider_bounds_mac_subprocess_calls(on_platform, monkeypatch):
    mod = on_platform("darwin")
    runs = []

    def fake_run(cmd, **kwargs):
        runs.append(cmd)
        return subprocess.CompletedProcess(cmd, 0, stdout="Dark\n", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    mod.set_appearance_provider(
        mod.CachedAppearanceProvider(mod.MacAppearanceProvider(), ttl=60.0, clock=lambda: 1.0)
    )
    assert [mod.is_dark_mode() for _ in range(3)] == [True, True, True]
    assert len(runs) == 1
