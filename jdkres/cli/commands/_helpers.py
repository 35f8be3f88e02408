"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer

from jdkres.core.errors import ErrorCode
from jdkres.core.result import Err, Result
from jdkres.output.errors import AppError, error_exit_code, print_error
from jdkres.platform.detection import (
    Arch,
    Platform,
    detect_arch,
    detect_platform,
    normalize_arch,
    normalize_platform,
)
from jdkres.releases.cache import ManifestCache
from jdkres.releases.http import RealHttpClient
from jdkres.releases.manifest import load_manifest
from jdkres.releases.model import PackageType, VersionRequest
from jdkres.releases.resolver import Resolver, check_major
from jdkres.releases.version import TieBreak

if TYPE_CHECKING:
    from jdkres.cli.context import CLIContext

T = TypeVar("T")


def exit_on_error(result: Result[T, AppError], ctx: CLIContext) -> T:
    """Return the Ok value, or print the error and exit with its code."""
    if isinstance(result, Err):
        print_error(result.error, ctx.console)
        raise typer.Exit(code=error_exit_code(result.error))
    return result.value


def exit_with_code(code: int) -> NoReturn:
    raise typer.Exit(code=code)


def _platform_name(value: str | None, ctx: CLIContext) -> str:
    if value is None:
        host = detect_platform()
        if host == Platform.UNKNOWN:
            ctx.console.error("cannot detect host platform, pass --platform")
            exit_with_code(int(ErrorCode.ENV_ERROR))
        return str(host)
    known = normalize_platform(value)
    # Unknown names pass through; they simply match nothing
    return str(known) if known != Platform.UNKNOWN else value.strip().lower()


def _arch_name(value: str | None, ctx: CLIContext) -> str:
    if value is None:
        host = detect_arch()
        if host == Arch.UNKNOWN:
            ctx.console.error("cannot detect host architecture, pass --arch")
            exit_with_code(int(ErrorCode.ENV_ERROR))
        return str(host)
    known = normalize_arch(value)
    return str(known) if known != Arch.UNKNOWN else value.strip().lower()


def build_request(
    ctx: CLIContext,
    *,
    version: str,
    arch: str | None,
    platform: str | None,
    package_type: str,
    check_latest: bool,
) -> VersionRequest:
    """Build a VersionRequest, defaulting platform and arch to the host.

    Exits with USER_ERROR for an unpublished major before any manifest is
    fetched.
    """
    parsed_type = PackageType.parse(package_type)
    if parsed_type is None:
        ctx.console.error(f"unknown package type: {package_type} (expected jdk or jre)")
        exit_with_code(int(ErrorCode.USER_ERROR))

    request = VersionRequest(
        version=version.strip(),
        architecture=_arch_name(arch, ctx),
        platform=_platform_name(platform, ctx),
        package_type=parsed_type,
        check_latest=check_latest,
    )
    error = check_major(request)
    if error is not None:
        print_error(error, ctx.console)
        exit_with_code(error_exit_code(error))
    return request


def build_resolver(
    ctx: CLIContext,
    *,
    manifest_url: str | None,
    check_latest: bool,
) -> Resolver:
    """Load the manifest (cache-aware) and wrap it in a Resolver."""
    url = manifest_url or ctx.config.manifest.url
    http = RealHttpClient(timeout=ctx.config.manifest.timeout)
    cache = ManifestCache(ctx.cache_dir)

    ctx.console.info(f"manifest: {url}")
    manifest = exit_on_error(load_manifest(http, url, cache, check_latest=check_latest), ctx)
    if manifest.skipped:
        ctx.console.warning(f"skipped {manifest.skipped} malformed manifest record(s)")
    ctx.console.info(f"{len(manifest.releases)} release(s) in manifest")

    return Resolver(manifest.releases, tie_break=TieBreak(ctx.config.resolver.tie_break))
