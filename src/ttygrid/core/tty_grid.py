"""The grid: column registry, accumulated lines and rendering."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Any, TextIO

from pydantic import ValidationError

from ttygrid.config.schema import GridConfig
from ttygrid.core.header import GridHeader
from ttygrid.core.line import GridLine
from ttygrid.errors import ConfigurationError, RowArityMismatchError
from ttygrid.layout.selection import Selection
from ttygrid.layout.selector import select_columns
from ttygrid.layout.widths import WidthMap
from ttygrid.output.table import render_text, write_grid
from ttygrid.output.terminal import terminal_width


class TTYGrid:
    """A table that drops low priority columns to fit the terminal.

    Headers are fixed at construction; lines accumulate until cleared.
    Every render measures widths and selects columns from scratch.

    Attributes:
        config: Rendering configuration.
    """

    def __init__(self, headers: Sequence[GridHeader], config: GridConfig | None = None) -> None:
        """Initialize grid.

        Args:
            headers: Columns in display order.
            config: Rendering configuration.
        """
        self._headers = tuple(headers)
        self._lines: list[GridLine] = []
        self.config = config or GridConfig()

    @property
    def headers(self) -> tuple[GridHeader, ...]:
        return self._headers

    @property
    def lines(self) -> tuple[GridLine, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def add_line(self, *values: Any) -> GridLine:
        """Append a line with one value per header.

        Values are converted with ``str()``.

        Returns:
            The stored line.

        Raises:
            RowArityMismatchError: If the value count differs from the
                header count. The grid is left unchanged.
        """
        if len(values) != len(self._headers):
            raise RowArityMismatchError(len(self._headers), len(values))
        line = GridLine.from_values(values)
        self._lines.append(line)
        return line

    def add_lines(self, rows: Iterable[Sequence[Any]]) -> int:
        """Append several lines at once.

        Every row is checked before any is stored, so a bad row leaves the
        grid unchanged.

        Returns:
            Number of lines added.
        """
        rows = list(rows)
        for row in rows:
            if len(row) != len(self._headers):
                raise RowArityMismatchError(len(self._headers), len(row))
        self._lines.extend(GridLine.from_values(row) for row in rows)
        return len(rows)

    def clear_lines(self) -> None:
        self._lines.clear()

    def resolve_width(self, width: int | None = None, stream: TextIO | None = None) -> int:
        """Width budget for a render, querying the terminal when not given."""
        if width is not None:
            return width
        return terminal_width(stream, fallback=self.config.fallback_width)

    def widths(self) -> WidthMap:
        """Measure every column against the current lines."""
        return WidthMap.build(self._headers, self._lines)

    def select(self, width: int | None = None) -> Selection:
        """Choose the columns that fit a width budget.

        Args:
            width: Width budget. ``None`` queries the terminal.

        Raises:
            TerminalTooSmallError: If not even one column fits.
        """
        return select_columns(self._headers, self.widths(), self.resolve_width(width))

    def display(self, width: int | None = None) -> str:
        """Render the grid to a string."""
        selection = self.select(width)
        return render_text(self._lines, selection, self.config.delimiter_char)

    def write(self, stream: TextIO | None = None, width: int | None = None) -> None:
        """Write the grid to a stream, styled when the stream is a terminal.

        Args:
            stream: Destination. Defaults to stdout.
            width: Width budget. ``None`` queries the terminal of ``stream``.
        """
        stream = stream if stream is not None else sys.stdout
        selection = select_columns(
            self._headers, self.widths(), self.resolve_width(width, stream)
        )
        write_grid(self._lines, selection, stream, self.config)

    def _set_style(self, section: str, style: str | None) -> None:
        try:
            setattr(self.config.style, section, style)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid {section} color: {e.errors()[0]['msg']}", field=f"style.{section}"
            ) from e

    def set_header_color(self, style: str | None) -> None:
        self._set_style("header", style)

    def set_delimiter_color(self, style: str | None) -> None:
        self._set_style("delimiter", style)

    def set_primary_color(self, style: str | None) -> None:
        self._set_style("primary", style)

    def set_secondary_color(self, style: str | None) -> None:
        self._set_style("secondary", style)

    def __str__(self) -> str:
        return self.display()


def grid(*headers: GridHeader, config: GridConfig | None = None) -> TTYGrid:
    """Create a grid from headers."""
    return TTYGrid(headers, config=config)
