from __future__ import annotations

from pathlib import Path

import typer

from jdkres.cli.commands._helpers import exit_with_code
from jdkres.cli.context import build_context
from jdkres.core.errors import ErrorCode
from jdkres.output.console import Style
from jdkres.releases.cache import ManifestCache

cache_app = typer.Typer(no_args_is_help=True, help="Manage the cached manifest.")


@cache_app.command("clear")
def clear(
    config: Path | None = typer.Option(None, "--config", help="Config file path."),
) -> None:
    """Delete cached manifests."""
    ctx = build_context(config)
    try:
        removed = ManifestCache(ctx.cache_dir).clear()
    except OSError as e:
        ctx.console.error(f"cannot clear {ctx.cache_dir}: {e}")
        exit_with_code(int(ErrorCode.IO_ERROR))
    ctx.console.print(f"removed {removed} cached manifest(s)", Style.DIM)


@cache_app.command("path")
def path(
    config: Path | None = typer.Option(None, "--config", help="Config file path."),
) -> None:
    """Print the cache directory."""
    ctx = build_context(config)
    ctx.console.print(str(ctx.cache_dir))
