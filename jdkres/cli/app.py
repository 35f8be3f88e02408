from __future__ import annotations

import typer

from jdkres import __version__
from jdkres.cli.commands.cache import cache_app
from jdkres.cli.commands.matrix import matrix
from jdkres.cli.commands.resolve import resolve
from jdkres.cli.commands.versions import versions


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Resolve JDK version requests to downloadable release artifacts.",
)


# Commands
app.command()(resolve)
app.command()(versions)
app.command()(matrix)

# Sub-apps
app.add_typer(cache_app, name="cache")


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


def main() -> None:
    app()
