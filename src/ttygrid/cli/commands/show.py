"""Show command: render a delimited text file as a grid."""

from __future__ import annotations

import csv
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ttygrid.config import GridConfig, load_config_file
from ttygrid.core import DEFAULT_PAD, TTYGrid, header
from ttygrid.errors import ConfigurationError, TTYGridError


def parse_priorities(values: list[str] | None) -> dict[str, int]:
    """Parse ``NAME=N`` pairs.

    Raises:
        ConfigurationError: If a pair is malformed or N is not a
            non-negative integer.
    """
    priorities: dict[str, int] = {}
    for value in values or []:
        name, sep, number = value.rpartition("=")
        if not sep or not name:
            raise ConfigurationError(f"Invalid priority {value!r}, expected NAME=N", field="priority")
        try:
            priority = int(number)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid priority {value!r}, {number!r} is not an integer", field="priority"
            ) from e
        if priority < 0:
            raise ConfigurationError(f"Invalid priority {value!r}, must be >= 0", field="priority")
        priorities[name] = priority
    return priorities


def read_rows(path: Path | None, delimiter: str) -> list[list[str]]:
    """Read delimited rows from a file, or stdin when ``path`` is ``None`` or ``-``."""
    if len(delimiter) != 1:
        raise ConfigurationError("Delimiter must be a single character", field="delimiter")
    if path is None or str(path) == "-":
        return list(csv.reader(sys.stdin, delimiter=delimiter))
    with path.open(newline="", encoding="utf-8") as f:
        return list(csv.reader(f, delimiter=delimiter))


def build_file_grid(
    rows: list[list[str]],
    priorities: dict[str, int] | None = None,
    pad: int = DEFAULT_PAD,
    config: GridConfig | None = None,
) -> TTYGrid:
    """Build a grid whose headers come from the first row.

    Blank rows are skipped. Unlisted columns get priority 0.
    """
    rows = [row for row in rows if row]
    if not rows:
        raise ConfigurationError("Input has no header row")

    priorities = priorities or {}
    unknown = set(priorities) - set(rows[0])
    if unknown:
        raise ConfigurationError(
            f"Unknown column(s) in priorities: {', '.join(sorted(unknown))}", field="priority"
        )

    g = TTYGrid([header(text, priorities.get(text, 0), pad) for text in rows[0]], config=config)
    g.add_lines(rows[1:])
    return g


def handle_show(
    path: Path | None,
    *,
    delimiter: str,
    priority: list[str] | None,
    pad: int,
    width: int | None,
    config_path: Path | None = None,
    console: Console,
    error_console: Console,
) -> None:
    """Handle show command."""
    try:
        rows = read_rows(path, delimiter)
        config = load_config_file(config_path) if config_path else None
        g = build_file_grid(rows, parse_priorities(priority), pad, config)
        g.write(console.file, width=width)
    except OSError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except TTYGridError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e
