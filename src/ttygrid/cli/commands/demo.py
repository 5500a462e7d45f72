"""Demo command: a grid of random strings sized to the terminal."""

from __future__ import annotations

import random
import string
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ttygrid.config import GridConfig, load_config_file
from ttygrid.core import TTYGrid, grid, header
from ttygrid.errors import TTYGridError

DEFAULT_MAX_LEN = 30
DEFAULT_MIN_LEN = 10
DEFAULT_ROWS = 10


def random_string(rng: random.Random, length: int) -> str:
    """Mixed case ASCII letters."""
    return "".join(rng.choice(string.ascii_letters) for _ in range(length))


def random_contents(rng: random.Random, max_len: int, min_len: int) -> str:
    """Random string with a length in ``[min_len, min_len + max_len)``."""
    return random_string(rng, rng.randrange(max(1, max_len)) + min_len)


def build_demo_grid(
    max_len: int = DEFAULT_MAX_LEN,
    min_len: int = DEFAULT_MIN_LEN,
    rows: int = DEFAULT_ROWS,
    seed: int | None = None,
    config: GridConfig | None = None,
) -> TTYGrid:
    """Build the demo grid.

    The line number column has the lowest priority; the others are named
    after their priority so it is easy to see which ones survive. Without
    a config the demo colors are applied.
    """
    rng = random.Random(seed)
    g = grid(
        header("line"),
        header("p3", 3),
        header("p1", 1),
        header("p4", 4),
        header("p5", 5),
        header("p2", 2),
        config=config,
    )

    for lineno in range(rows):
        g.add_line(lineno, *(random_contents(rng, max_len, min_len) for _ in range(5)))

    if config is None:
        g.set_header_color("dark_cyan")
        g.set_delimiter_color("cyan")
        g.set_primary_color("white")
        g.set_secondary_color("grey70")
    return g


def handle_demo(
    max_len: int,
    min_len: int,
    rows: int,
    *,
    width: int | None,
    seed: int | None,
    config_path: Path | None = None,
    console: Console,
    error_console: Console,
) -> None:
    """Handle demo command."""
    try:
        config = load_config_file(config_path) if config_path else None
        g = build_demo_grid(max_len, min_len, rows, seed, config)
        g.write(console.file, width=width)
    except TTYGridError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e
