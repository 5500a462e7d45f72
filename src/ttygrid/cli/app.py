"""ttygrid CLI application."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from ttygrid.cli.commands.demo import DEFAULT_MAX_LEN, DEFAULT_MIN_LEN, DEFAULT_ROWS


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from ttygrid import __version__

        print(f"ttygrid {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="ttygrid",
    help="Terminal tables that drop low priority columns to fit",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def _app_callback(
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", "-V", help="Show version and exit", callback=version_callback),
    ] = False,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Log column selection to stderr"),
    ] = 0,
) -> None:
    """Terminal tables that fit."""
    from ttygrid.logging import configure_logging

    configure_logging(verbosity=verbose)


console = Console()
error_console = Console(stderr=True)


@app.command()
def demo(
    max_len: Annotated[
        int,
        typer.Argument(help="Spread of random string lengths", min=1),
    ] = DEFAULT_MAX_LEN,
    min_len: Annotated[
        int,
        typer.Argument(help="Minimum random string length", min=0),
    ] = DEFAULT_MIN_LEN,
    rows: Annotated[
        int,
        typer.Argument(help="Number of lines to display", min=0),
    ] = DEFAULT_ROWS,
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", help="Width budget (defaults to the terminal width)"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed for reproducible output"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="YAML grid configuration file"),
    ] = None,
) -> None:
    """Render a grid of random strings sized to the terminal."""
    from ttygrid.cli.commands.demo import handle_demo

    handle_demo(
        max_len,
        min_len,
        rows,
        width=width,
        seed=seed,
        config_path=config,
        console=console,
        error_console=error_console,
    )


@app.command()
def show(
    path: Annotated[
        Path | None,
        typer.Argument(help="Delimited text file, first row is the header ('-' for stdin)"),
    ] = None,
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", "-d", help="Field delimiter"),
    ] = ",",
    priority: Annotated[
        list[str] | None,
        typer.Option("--priority", "-p", help="Column priority as NAME=N (repeatable)"),
    ] = None,
    pad: Annotated[
        int,
        typer.Option("--pad", help="Padding added to every column", min=0),
    ] = 4,
    width: Annotated[
        int | None,
        typer.Option("--width", "-w", help="Width budget (defaults to the terminal width)"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="YAML grid configuration file"),
    ] = None,
) -> None:
    """Render a delimited text file, dropping low priority columns to fit."""
    from ttygrid.cli.commands.show import handle_show

    handle_show(
        path,
        delimiter=delimiter,
        priority=priority,
        pad=pad,
        width=width,
        config_path=config,
        console=console,
        error_console=error_console,
    )


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
