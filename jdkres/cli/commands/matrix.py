from __future__ import annotations

import typer

from jdkres.cli.commands._helpers import exit_with_code
from jdkres.core.errors import ErrorCode
from jdkres.output.console import ConsoleProtocol, RichConsole
from jdkres.releases.errors import UnsupportedMajorVersion
from jdkres.releases.filter import archive_extension
from jdkres.releases.support import offered_entries, supported_majors


def print_matrix(console: ConsoleProtocol, major: int | None = None) -> None:
    entries = offered_entries(major)
    console.table(
        "Offered combinations",
        ["major", "platform", "arch", "archive"],
        [
            [str(e.major_version), e.platform, e.architecture, archive_extension(e.platform)]
            for e in entries
        ],
    )


def matrix(
    major: int | None = typer.Option(None, "--major", "-m", help="Only this major version."),
) -> None:
    """Show which major/platform/arch combinations are published."""
    console = RichConsole()
    if major is not None and major not in supported_majors():
        error = UnsupportedMajorVersion(str(major), tuple(sorted(supported_majors())))
        console.error(error.message)
        exit_with_code(int(ErrorCode.USER_ERROR))
    print_matrix(console, major)
