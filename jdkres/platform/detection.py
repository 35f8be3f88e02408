"""Host platform and architecture detection.

Release manifests name platforms and CPUs their own way ("mac", "aarch64",
"alpine-linux"). This module detects the running host and maps it onto those
names so the CLI can default ``--platform`` and ``--arch``. Detection is done
lazily and cached.
"""

from __future__ import annotations

import os as _os
import platform as _platform
import sys as _sys
from enum import Enum
from functools import lru_cache
from pathlib import Path

__all__ = [
    "Platform",
    "Arch",
    "detect_platform",
    "detect_arch",
    "normalize_platform",
    "normalize_arch",
]


class Platform(Enum):
    """Operating system, valued with the manifest's platform name."""

    LINUX = "linux"
    ALPINE_LINUX = "alpine-linux"
    ANOLIS = "anolis"
    MAC = "mac"
    WINDOWS = "windows"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class Arch(Enum):
    """CPU architecture, valued with the manifest's architecture name."""

    X64 = "x64"
    X86 = "x86"
    AARCH64 = "aarch64"
    RISCV = "riscv"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


_PLATFORM_ALIASES: dict[str, Platform] = {
    "linux": Platform.LINUX,
    "alpine": Platform.ALPINE_LINUX,
    "alpine-linux": Platform.ALPINE_LINUX,
    "anolis": Platform.ANOLIS,
    "mac": Platform.MAC,
    "macos": Platform.MAC,
    "darwin": Platform.MAC,
    "osx": Platform.MAC,
    "windows": Platform.WINDOWS,
    "win32": Platform.WINDOWS,
    "win": Platform.WINDOWS,
}

_ARCH_ALIASES: dict[str, Arch] = {
    "x64": Arch.X64,
    "x86_64": Arch.X64,
    "amd64": Arch.X64,
    "x86": Arch.X86,
    "i386": Arch.X86,
    "i686": Arch.X86,
    "ia32": Arch.X86,
    "aarch64": Arch.AARCH64,
    "arm64": Arch.AARCH64,
    "riscv": Arch.RISCV,
    "riscv64": Arch.RISCV,
}


def normalize_platform(name: str) -> Platform:
    """Map a user or OS supplied platform name onto Platform.

    Unrecognized names map to Platform.UNKNOWN.
    """
    return _PLATFORM_ALIASES.get(name.strip().lower(), Platform.UNKNOWN)


def normalize_arch(name: str) -> Arch:
    """Map a user or OS supplied architecture name onto Arch."""
    return _ARCH_ALIASES.get(name.strip().lower(), Arch.UNKNOWN)


def _read_os_release() -> str | None:
    try:
        return Path("/etc/os-release").read_text(encoding="utf-8", errors="replace").lower()
    except OSError:
        return None


def _os_release_ids(content: str) -> set[str]:
    """Distribution ids from the ID and ID_LIKE fields of os-release."""
    ids: set[str] = set()
    for line in content.splitlines():
        key, sep, value = line.partition("=")
        if sep and key.strip() in ("id", "id_like"):
            ids.update(value.strip().strip("\"'").split())
    return ids


def _linux_flavour() -> Platform:
    content = _read_os_release()
    ids = _os_release_ids(content) if content is not None else set()
    if "alpine" in ids:
        return Platform.ALPINE_LINUX
    if "anolis" in ids:
        return Platform.ANOLIS
    return Platform.LINUX


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect the current operating system (cached)."""
    # NOTE: avoid platform.system() on Windows, it may query WMI.
    system = _sys.platform.lower()
    if system.startswith("linux"):
        return _linux_flavour()
    if system.startswith("darwin"):
        return Platform.MAC
    if system.startswith(("win32", "cygwin", "msys")):
        return Platform.WINDOWS
    return Platform.UNKNOWN


@lru_cache(maxsize=1)
def detect_arch() -> Arch:
    """Detect the current CPU architecture (cached)."""
    if detect_platform() == Platform.WINDOWS:
        machine = (
            _os.environ.get("PROCESSOR_ARCHITEW6432")
            or _os.environ.get("PROCESSOR_ARCHITECTURE")
            or ""
        )
    else:
        machine = _platform.machine()
    return normalize_arch(machine)
