"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from jdkres.core.config import ConfigError
from jdkres.core.errors import ErrorCode
from jdkres.releases.errors import ManifestError, NoSatisfyingVersion, UnsupportedMajorVersion
from jdkres.releases.http import HttpError

if TYPE_CHECKING:
    from jdkres.output.console import ConsoleProtocol

__all__ = ["AppError", "print_error", "error_exit_code"]

AppError: TypeAlias = UnsupportedMajorVersion | NoSatisfyingVersion | ManifestError | HttpError | ConfigError


def print_error(error: AppError, console: ConsoleProtocol) -> None:
    """Print an error with a hint where one helps."""
    match error:
        case UnsupportedMajorVersion(requested=requested):
            console.error(error.message)
            console.hint(f"requested: {requested}")
        case NoSatisfyingVersion():
            console.error(error.message)
            console.hint("hint: run `jdkres matrix` to list offered platforms")
        case ManifestError(url=url, message=message):
            console.error(f"invalid manifest: {message}")
            console.hint(f"source: {url}")
        case HttpError():
            console.error(f"manifest fetch failed: {error}")
        case ConfigError(message=message, path=path):
            console.error(message)
            if path is not None:
                console.hint(f"config: {path}")


def error_exit_code(error: AppError) -> int:
    """Get exit code for an error."""
    match error:
        case UnsupportedMajorVersion():
            return int(ErrorCode.USER_ERROR)
        case NoSatisfyingVersion():
            return int(ErrorCode.NOT_FOUND)
        case ManifestError() | HttpError():
            return int(ErrorCode.NETWORK_ERROR)
        case ConfigError():
            return int(ErrorCode.ENV_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.USER_ERROR)
