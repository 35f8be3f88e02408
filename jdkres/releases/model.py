"""Release manifest data model.

- PackageType: jdk or jre
- ReleaseDescriptor: one manifest entry, never mutated
- VersionRequest: what the caller asked for
- SupportEntry: one offered (major, platform, architecture) triple
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "PackageType",
    "ReleaseDescriptor",
    "VersionRequest",
    "SupportEntry",
    "leading_major",
]

_LEADING_INT_RE = re.compile(r"^\s*([0-9]+)")


def leading_major(version: str) -> int | None:
    """Return the leading integer of a version string.

    >>> leading_major("11.0.17.13.8")
    11
    >>> leading_major("latest") is None
    True
    """
    m = _LEADING_INT_RE.match(version)
    if m is None:
        return None
    return int(m.group(1))


class PackageType(Enum):
    """Artifact flavour published in the manifest."""

    JDK = "jdk"
    JRE = "jre"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> PackageType | None:
        """Case-insensitive lookup; None for unknown names."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class ReleaseDescriptor:
    """One downloadable artifact from the manifest.

    Attributes:
        major_version: JDK feature release (8, 11, 17)
        version: Extended vendor version, verbatim (e.g. "17.0.5.0.5+8")
        platform: Manifest platform name (e.g. "linux", "alpine-linux")
        architecture: Manifest architecture name (e.g. "x64", "aarch64")
        package_type: jdk or jre
        url: Absolute download URL
    """

    major_version: int
    version: str
    platform: str
    architecture: str
    package_type: PackageType
    url: str

    def to_dict(self) -> dict[str, object]:
        """Serialize using the manifest's field names."""
        return {
            "majorVersion": self.major_version,
            "version": self.version,
            "platform": self.platform,
            "architecture": self.architecture,
            "packageType": str(self.package_type),
            "url": self.url,
        }


@dataclass(frozen=True, slots=True)
class VersionRequest:
    """A single resolution request.

    ``check_latest`` is carried for the manifest loader (skip the cache);
    matching ignores it.
    """

    version: str
    architecture: str
    platform: str
    package_type: PackageType = PackageType.JDK
    check_latest: bool = False

    @property
    def major(self) -> int | None:
        """Major component of the requested version, None if not numeric."""
        return leading_major(self.version)


@dataclass(frozen=True, slots=True, order=True)
class SupportEntry:
    """An offered (major, platform, architecture) combination."""

    major_version: int
    platform: str
    architecture: str

    def __str__(self) -> str:
        return f"{self.major_version} {self.platform}/{self.architecture}"
