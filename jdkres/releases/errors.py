"""Error types for release resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

__all__ = [
    "DISTRIBUTION_NAME",
    "UnsupportedMajorVersion",
    "NoSatisfyingVersion",
    "ManifestError",
    "ResolveError",
]

DISTRIBUTION_NAME = "dragonwell"


@dataclass(frozen=True, slots=True)
class UnsupportedMajorVersion:
    """The requested major version is never published.

    Attributes:
        requested: Version string as given by the caller
        supported: Majors that are published, ascending
    """

    requested: str
    supported: tuple[int, ...]

    @property
    def message(self) -> str:
        listed = ", ".join(str(m) for m in self.supported)
        return f"Support {DISTRIBUTION_NAME} versions: {listed}"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class NoSatisfyingVersion:
    """No filtered manifest entry satisfies the requested version."""

    requested: str

    @property
    def message(self) -> str:
        return f"Cannot find satisfied version for {self.requested}."

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class ManifestError:
    """The manifest payload could not be used."""

    url: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} ({self.url})"


ResolveError: TypeAlias = UnsupportedMajorVersion | NoSatisfyingVersion
