from __future__ import annotations

import json as _json
from pathlib import Path

import typer

from jdkres.cli.commands._helpers import build_request, build_resolver, exit_on_error
from jdkres.cli.context import build_context
from jdkres.output.console import Style
from jdkres.releases.version import sort_descriptors


def versions(
    version: str = typer.Argument(..., help="Requested version (e.g. 8, 11.0.17, 17.x)."),
    arch: str | None = typer.Option(None, "--arch", "-a", help="Architecture (default: host)."),
    platform: str | None = typer.Option(
        None, "--platform", "-p", help="Platform (default: host)."
    ),
    package_type: str = typer.Option("jdk", "--package-type", help="jdk or jre."),
    check_latest: bool = typer.Option(
        False, "--check-latest", help="Ignore the cached manifest and refetch."
    ),
    manifest_url: str | None = typer.Option(None, "--manifest-url", help="Override manifest URL."),
    config: Path | None = typer.Option(None, "--config", help="Config file path."),
    json: bool = typer.Option(False, "--json", help="Output JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show diagnostics."),
) -> None:
    """List releases available for a version request, newest first."""
    ctx = build_context(config, verbose=verbose)
    request = build_request(
        ctx,
        version=version,
        arch=arch,
        platform=platform,
        package_type=package_type,
        check_latest=check_latest,
    )
    resolver = build_resolver(ctx, manifest_url=manifest_url, check_latest=check_latest)
    releases = sort_descriptors(exit_on_error(resolver.get_available_versions(request), ctx))

    if json:
        ctx.console.print(_json.dumps([r.to_dict() for r in releases], indent=2))
        return

    target = f"{request.package_type} {request.major} {request.platform}/{request.architecture}"
    if not releases:
        ctx.console.print(f"no releases for {target}", Style.DIM)
        return

    ctx.console.table(
        f"{len(releases)} release(s) for {target}",
        ["version", "url"],
        [[r.version, r.url] for r in releases],
    )
