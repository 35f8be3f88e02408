"""Extended version parsing and matching.

Vendor versions carry more precision than semver: Dragonwell publishes
"8.13.14", "11.0.17.13.8" and "17.0.5.0.5+8". Everything here works on one
canonical form, a tuple of ints produced by ``parse_extended_version``:

    "17.0.5.0.5+8"       -> (17, 0, 5, 0, 5, 8)
    "8.13.14_jdk8u352"   -> (8, 13, 14)
    "dragonwell-nightly" -> None

Tuples compare left to right numerically and a longer tuple beats its own
prefix, so (8, 13, 14, 1) > (8, 13, 14).
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from jdkres.core.result import Err, Ok, Result

from .errors import NoSatisfyingVersion
from .model import ReleaseDescriptor

__all__ = [
    "VersionKey",
    "TieBreak",
    "VersionRange",
    "parse_extended_version",
    "select_best",
    "sort_descriptors",
]

VersionKey: TypeAlias = tuple[int, ...]

_NUMERIC_PREFIX_RE = re.compile(r"^[0-9]+(?:[.+][0-9]+)*")
_SEPARATOR_RE = re.compile(r"[.+]")
_WILDCARDS = frozenset({"x", "X", "*"})


class TieBreak(Enum):
    """Which entry wins when two releases parse to the same version."""

    FIRST = "first"
    LAST = "last"

    def __str__(self) -> str:
        return self.value


def parse_extended_version(text: str) -> VersionKey | None:
    """Parse the longest numeric prefix of a vendor version.

    Segments are separated by "." or "+". Anything after the numeric run
    (build tags, "-ga", "_jdk8u352") is ignored. Returns None when the string
    does not start with a number.
    """
    m = _NUMERIC_PREFIX_RE.match(text.strip().removeprefix("v"))
    if m is None:
        return None
    return tuple(int(part) for part in _SEPARATOR_RE.split(m.group(0)))


@dataclass(frozen=True, slots=True)
class VersionRange:
    """A prefix range over extended versions.

    "8" matches every 8.x release, "11.0.17" every release whose first three
    segments are 11, 0, 17. Trailing wildcards ("17.x", "11.0.*") are the
    same as leaving the segment out.

    Attributes:
        raw: The requested string, verbatim
        prefix: Segments a candidate must start with
    """

    raw: str
    prefix: VersionKey

    @classmethod
    def parse(cls, text: str) -> VersionRange | None:
        """Parse a version request; None if it is not a numeric prefix."""
        tokens = _SEPARATOR_RE.split(text.strip().removeprefix("v"))
        while tokens and tokens[-1] in _WILDCARDS:
            tokens.pop()
        if not tokens or not all(t.isascii() and t.isdigit() for t in tokens):
            return None
        return cls(raw=text, prefix=tuple(int(t) for t in tokens))

    def matches(self, version: VersionKey) -> bool:
        return version[: len(self.prefix)] == self.prefix

    def __str__(self) -> str:
        return self.raw


def select_best(
    candidates: Iterable[ReleaseDescriptor],
    requested: str,
    tie_break: TieBreak = TieBreak.FIRST,
) -> Result[ReleaseDescriptor, NoSatisfyingVersion]:
    """Pick the newest candidate satisfying ``requested``.

    Candidates whose version cannot be parsed are skipped. Equal versions are
    settled by ``tie_break`` against manifest order.
    """
    version_range = VersionRange.parse(requested)
    if version_range is None:
        return Err(NoSatisfyingVersion(requested))

    best: ReleaseDescriptor | None = None
    best_key: VersionKey = ()
    for candidate in candidates:
        key = parse_extended_version(candidate.version)
        if key is None or not version_range.matches(key):
            continue
        if best is None or key > best_key or (tie_break is TieBreak.LAST and key == best_key):
            best, best_key = candidate, key

    if best is None:
        return Err(NoSatisfyingVersion(requested))
    return Ok(best)


def sort_descriptors(descriptors: Sequence[ReleaseDescriptor]) -> list[ReleaseDescriptor]:
    """Newest first; unparseable versions last; stable for equal versions."""

    def key(release: ReleaseDescriptor) -> tuple[bool, VersionKey]:
        parsed = parse_extended_version(release.version)
        return (parsed is not None, parsed or ())

    return sorted(descriptors, key=key, reverse=True)
