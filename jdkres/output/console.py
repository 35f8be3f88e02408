"""Console output.

Commands never call ``print``; they write through a ``ConsoleProtocol``.
Results (a URL, a JSON document, a table) go to stdout. Diagnostics go to
stderr, so ``url=$(jdkres resolve 17)`` captures nothing but the URL.
``info`` lines are diagnostics shown only with ``--verbose``. ``hint`` lines
follow an error on stderr, unlabelled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from rich.console import Console
from rich.markup import escape
from rich.table import Table

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Output styles, valued with their rich style string."""

    DEFAULT = ""
    DIM = "dim"
    HEADER = "blue bold"
    INFO = "cyan"
    WARNING = "yellow"
    ERROR = "red bold"

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def hint(self, message: str) -> None: ...

    def table(self, title: str, columns: list[str], rows: list[list[str]]) -> None: ...


class RichConsole:
    def __init__(self, *, verbose: bool = False) -> None:
        self._stdout = Console(highlight=False)
        self._stderr = Console(stderr=True, highlight=False)
        self._verbose = verbose

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        # URLs and JSON: no markup parsing, no hard wrapping
        self._stdout.print(message, style=style.value or None, markup=False, soft_wrap=True)

    def _diagnostic(self, label: str, style: Style, message: str) -> None:
        self._stderr.print(f"[{style.value}]{label}:[/] {escape(message)}")

    def error(self, message: str) -> None:
        self._diagnostic("error", Style.ERROR, message)

    def warning(self, message: str) -> None:
        self._diagnostic("warning", Style.WARNING, message)

    def info(self, message: str) -> None:
        if self._verbose:
            self._diagnostic("info", Style.INFO, message)

    def hint(self, message: str) -> None:
        self._stderr.print(message, style=Style.DIM.value, markup=False, soft_wrap=True)

    def table(self, title: str, columns: list[str], rows: list[list[str]]) -> None:
        table = Table(*columns, title=title, header_style=Style.HEADER.value)
        for row in rows:
            table.add_row(*row)
        self._stdout.print(table)


@dataclass(frozen=True, slots=True)
class OutputRecord:
    message: str
    style: Style


@dataclass
class MockConsole:
    """Records everything written, in order, for assertions.

    Diagnostics are recorded with their ``error:``/``warning:``/``info:``
    label; a table becomes its title (HEADER) followed by one tab-joined
    line per row.
    """

    outputs: list[OutputRecord] = field(default_factory=list)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def hint(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.DIM))

    def table(self, title: str, columns: list[str], rows: list[list[str]]) -> None:
        self.outputs.append(OutputRecord(title, Style.HEADER))
        self.outputs.extend(OutputRecord("\t".join(row), Style.DEFAULT) for row in rows)

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style is Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]
