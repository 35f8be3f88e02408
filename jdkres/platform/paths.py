"""Per-user directories: config file location and manifest cache."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from .detection import Platform, detect_platform

__all__ = [
    "APP_NAME",
    "home",
    "user_config_dir",
    "user_cache_dir",
]

APP_NAME = "jdkres"


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value) if value else None


@lru_cache(maxsize=1)
def home() -> Path:
    """Home directory, honouring USERPROFILE (Windows) or HOME before Path.home()."""
    var = "USERPROFILE" if detect_platform() == Platform.WINDOWS else "HOME"
    return _env_path(var) or Path.home()


@lru_cache(maxsize=1)
def user_config_dir() -> Path:
    """%APPDATA%/jdkres on Windows, $XDG_CONFIG_HOME/jdkres or ~/.config/jdkres elsewhere."""
    if detect_platform() == Platform.WINDOWS:
        base = _env_path("APPDATA") or home() / "AppData" / "Roaming"
        return base / APP_NAME
    base = _env_path("XDG_CONFIG_HOME") or home() / ".config"
    return base / APP_NAME


@lru_cache(maxsize=1)
def user_cache_dir() -> Path:
    """%LOCALAPPDATA%/jdkres/cache on Windows, $XDG_CACHE_HOME/jdkres or ~/.cache/jdkres elsewhere."""
    if detect_platform() == Platform.WINDOWS:
        base = _env_path("LOCALAPPDATA") or home() / "AppData" / "Local"
        return base / APP_NAME / "cache"
    base = _env_path("XDG_CACHE_HOME") or home() / ".cache"
    return base / APP_NAME


def clear_caches() -> None:
    """Forget resolved paths.

    Test hook, kept out of ``__all__``: tests call this after changing the
    environment. Application code resolves each path once per process.
    """
    home.cache_clear()
    user_config_dir.cache_clear()
    user_cache_dir.cache_clear()
