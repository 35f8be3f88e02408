"""Support matrix: which (major, platform, architecture) triples are published.

The matrix is data, not logic. ``_OFFERED`` lists, per major version, the
platforms and architectures the distribution ships; everything else is a
known gap. Known gaps worth calling out when editing the table:

- 8 ships no anolis, mac or alpine-linux builds
- 17 ships no riscv build
- mac/aarch64 only exists from 17 on
"""

from __future__ import annotations

from collections.abc import Mapping

from .model import SupportEntry

__all__ = [
    "SUPPORT_MATRIX",
    "supported_majors",
    "is_major_supported",
    "is_combination_offered",
    "offered_entries",
]


_OFFERED: Mapping[int, Mapping[str, tuple[str, ...]]] = {
    8: {
        "linux": ("x64", "x86", "aarch64"),
        "windows": ("x64", "x86"),
    },
    11: {
        "linux": ("x64", "x86", "aarch64", "riscv"),
        "alpine-linux": ("x64",),
        "windows": ("x64", "x86"),
        "mac": ("x64",),
    },
    17: {
        "linux": ("x64", "x86", "aarch64"),
        "alpine-linux": ("x64",),
        "anolis": ("x64", "aarch64"),
        "windows": ("x64", "x86"),
        "mac": ("x64", "aarch64"),
    },
}

SUPPORT_MATRIX: frozenset[SupportEntry] = frozenset(
    SupportEntry(major, platform, arch)
    for major, platforms in _OFFERED.items()
    for platform, arches in platforms.items()
    for arch in arches
)

_SUPPORTED_MAJORS: frozenset[int] = frozenset(entry.major_version for entry in SUPPORT_MATRIX)


def supported_majors() -> frozenset[int]:
    """Major versions published at all: {8, 11, 17}."""
    return _SUPPORTED_MAJORS


def is_major_supported(major: int | None) -> bool:
    return major is not None and major in _SUPPORTED_MAJORS


def is_combination_offered(major: int, platform: str, architecture: str) -> bool:
    """True if the distribution publishes ``major`` for platform/architecture."""
    return SupportEntry(major, platform, architecture) in SUPPORT_MATRIX


def offered_entries(major: int | None = None) -> list[SupportEntry]:
    """Enumerate the matrix in sorted order, optionally for one major."""
    entries = (e for e in SUPPORT_MATRIX if major is None or e.major_version == major)
    return sorted(entries)
