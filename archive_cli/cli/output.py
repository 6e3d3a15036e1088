"""
Terminal Output.

Shared rendering for all commands: fixed-width tables, raw JSON,
status lines and the progress spinner. Styling goes through Rich;
when stdout is not a terminal the text is printed plain.
"""

import json
from collections.abc import Awaitable, Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, TypeVar

from rich.console import Console
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

MAX_COLUMN_WIDTH = 60
COLUMN_SEPARATOR = "  "

T = TypeVar("T")


@dataclass(frozen=True)
class Column:
    """A table column: the row key it reads and its header label."""

    key: str
    label: str


def _cell(row: dict[str, Any], key: str) -> str:
    value = row.get(key)
    return "" if value is None else str(value)


def column_widths(rows: Sequence[dict[str, Any]], columns: Sequence[Column]) -> dict[str, int]:
    """Widest of header and cells per column, capped at MAX_COLUMN_WIDTH."""
    widths = {}
    for col in columns:
        width = max([len(col.label)] + [len(_cell(row, col.key)) for row in rows])
        widths[col.key] = min(width, MAX_COLUMN_WIDTH)
    return widths


def print_table(rows: Sequence[dict[str, Any]], columns: Sequence[Column]) -> None:
    """
    Print rows as a left-justified text table.

    Prints a header, a rule as wide as the header, one line per row and a
    trailing count. An empty row list prints a single "No results found." line.
    """
    if not rows:
        console.print("No results found.", style="yellow")
        return

    widths = column_widths(rows, columns)

    header = COLUMN_SEPARATOR.join(col.label.ljust(widths[col.key]) for col in columns)
    console.print(Text(header, style="bold cyan"), soft_wrap=True)
    console.print(Text("─" * len(header), style="dim"), soft_wrap=True)

    for row in rows:
        line = COLUMN_SEPARATOR.join(
            _cell(row, col.key)[:widths[col.key]].ljust(widths[col.key]) for col in columns
        )
        console.print(Text(line), soft_wrap=True)

    console.print(Text(f"\n{len(rows)} result(s)", style="dim"), soft_wrap=True)


def print_json(data: Any) -> None:
    """Print a payload exactly as received, pretty-printed."""
    console.print(
        json.dumps(data, indent=2, ensure_ascii=False),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def print_success(message: str) -> None:
    console.print(Text.assemble(("✓", "green"), " ", message), soft_wrap=True)


def print_error(message: str) -> None:
    err_console.print(Text.assemble(("✗", "red"), " ", message), soft_wrap=True)


@contextmanager
def spinner(message: str) -> Iterator[None]:
    """Show a spinner on stderr for the duration of the block."""
    with err_console.status(message):
        yield


async def with_spinner(message: str, fn: Callable[[], Awaitable[T]]) -> T:
    """Await ``fn()`` while the spinner runs. It stops on success and failure."""
    with spinner(message):
        return await fn()
