"""Typed configuration loading and access.

The config file is optional. When present it is a TOML document:

    [manifest]
    url = "https://..."
    timeout = 30.0
    cache_dir = "~/.cache/jdkres"

    [resolver]
    tie_break = "first"
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "ManifestConfig",
    "ResolverConfig",
    "DEFAULT_MANIFEST_URL",
    "DEFAULT_TIMEOUT",
    "TIE_BREAK_POLICIES",
    "load_config",
    "load_config_or_default",
]

DEFAULT_MANIFEST_URL = (
    "https://raw.githubusercontent.com/dragonwell-releng/dragonwell-setup-java/main/releases.json"
)
DEFAULT_TIMEOUT = 30.0

TIE_BREAK_POLICIES = frozenset({"first", "last"})


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class ManifestConfig:
    """Where the release manifest comes from.

    Attributes:
        url: Manifest location (JSON array of release records)
        timeout: HTTP timeout in seconds
        cache_dir: Directory for the cached manifest, None for the user cache dir
    """

    url: str = DEFAULT_MANIFEST_URL
    timeout: float = DEFAULT_TIMEOUT
    cache_dir: str | None = None


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Matching policy.

    ``tie_break`` decides which manifest entry wins when two releases parse to
    the same numeric version: "first" keeps manifest order, "last" the reverse.
    """

    tie_break: str = "first"


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    manifest: ManifestConfig = field(default_factory=ManifestConfig)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: on an unknown tie-break policy or a non-positive timeout
        """
        manifest: StrDict = get_table(data, "manifest") or {}
        resolver: StrDict = get_table(data, "resolver") or {}

        timeout = get_float(manifest, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"manifest.timeout must be positive, got {timeout}")

        tie_break = (get_str(resolver, "tie_break") or "first").lower()
        if tie_break not in TIE_BREAK_POLICIES:
            allowed = ", ".join(sorted(TIE_BREAK_POLICIES))
            raise ValueError(f"resolver.tie_break must be one of: {allowed}")

        return cls(
            manifest=ManifestConfig(
                url=get_str(manifest, "url") or DEFAULT_MANIFEST_URL,
                timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
                cache_dir=get_str(manifest, "cache_dir"),
            ),
            resolver=ResolverConfig(tie_break=tie_break),
        )


def _read_toml(path: Path) -> Result[StrDict, ConfigError]:
    try:
        with path.open("rb") as handle:
            document = as_str_dict(tomllib.load(handle))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Cannot read config: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Config is not UTF-8: {e}", path=path))
    if document is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(document)


def _build(document: StrDict, path: Path) -> Result[Config, ConfigError]:
    try:
        return Ok(Config.from_dict(document))
    except ValueError as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Read ``path`` as TOML and build a Config; every failure is an Err."""
    return _read_toml(path).flat_map(lambda document: _build(document, path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but an absent file means defaults.

    A file that exists but is broken is still an error; silently ignoring it
    would resolve against the wrong manifest.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
