"""Tests for TTYGrid."""

from __future__ import annotations

import io

import pytest

from ttygrid.config import GridConfig
from ttygrid.core import GridHeader, TTYGrid, grid, header
from ttygrid.errors import ConfigurationError, RowArityMismatchError, TerminalTooSmallError


class TestAddLine:
    """Tests for line ingestion."""

    def test_add_line(self, sample_grid: TTYGrid) -> None:
        """Should store one item per header."""
        assert len(sample_grid) == 1
        line = sample_grid.lines[0]
        assert [item.contents for item in line] == ["0", "abc", "abcdef"]
        assert [item.index for item in line] == [0, 1, 2]

    def test_values_converted_to_str(self, sample_headers: list[GridHeader]) -> None:
        """Non-string values are stringified."""
        g = TTYGrid(sample_headers)
        line = g.add_line(1, 2.5, None)
        assert [item.contents for item in line] == ["1", "2.5", "None"]

    def test_too_few_values_rejected(self, sample_grid: TTYGrid) -> None:
        """A short row is rejected and the grid is unchanged."""
        with pytest.raises(RowArityMismatchError) as exc_info:
            sample_grid.add_line("a", "b")

        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2
        assert len(sample_grid) == 1

    def test_too_many_values_rejected(self, sample_grid: TTYGrid) -> None:
        with pytest.raises(RowArityMismatchError):
            sample_grid.add_line("a", "b", "c", "d")
        assert len(sample_grid) == 1

    def test_add_lines(self, sample_headers: list[GridHeader]) -> None:
        """Should add every row."""
        g = TTYGrid(sample_headers)
        added = g.add_lines([("a", "b", "c"), ("d", "e", "f")])
        assert added == 2
        assert len(g) == 2

    def test_add_lines_all_or_nothing(self, sample_headers: list[GridHeader]) -> None:
        """A bad row anywhere leaves the grid unchanged."""
        g = TTYGrid(sample_headers)
        with pytest.raises(RowArityMismatchError):
            g.add_lines([("a", "b", "c"), ("d", "e")])
        assert len(g) == 0

    def test_clear_lines(self, sample_grid: TTYGrid) -> None:
        """Should remove all lines but keep the headers."""
        sample_grid.clear_lines()
        assert len(sample_grid) == 0
        assert len(sample_grid.headers) == 3


class TestDisplay:
    """Tests for rendering through the grid."""

    def test_display_fits_all(self, sample_grid: TTYGrid) -> None:
        """Everything is shown when the budget covers the total width."""
        assert sample_grid.display(width=23) == (
            "line" "one     " "two        \n"
            + "-" * 23
            + "\n"
            + "0   " "abc     " "abcdef     \n"
        )

    def test_display_drops_low_priority(self, sample_grid: TTYGrid) -> None:
        """Only the highest priority column survives a narrow budget."""
        assert sample_grid.display(width=15) == (
            "two        \n" + "-" * 15 + "\n" + "abcdef     \n"
        )

    def test_display_too_small(self, sample_grid: TTYGrid) -> None:
        with pytest.raises(TerminalTooSmallError):
            sample_grid.display(width=3)

    def test_display_is_repeatable(self, sample_grid: TTYGrid) -> None:
        """Rendering twice with the same inputs gives the same text."""
        assert sample_grid.display(width=15) == sample_grid.display(width=15)
        assert sample_grid.display(width=23) == sample_grid.display(width=23)

    def test_renders_after_failure(self, sample_grid: TTYGrid) -> None:
        """A failed render leaves the grid usable."""
        with pytest.raises(TerminalTooSmallError):
            sample_grid.display(width=3)
        assert sample_grid.select(width=23).indices == (0, 1, 2)

    def test_empty_grid_uses_header_text(self) -> None:
        """Without lines the header width is text length plus two."""
        g = grid(header("name", pad=0))
        assert g.display(width=10) == "name  \n" + "-" * 10 + "\n"

    def test_width_from_terminal(
        self, sample_grid: TTYGrid, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The budget is queried when no width is given."""
        monkeypatch.setattr("ttygrid.core.tty_grid.terminal_width", lambda stream, fallback: 15)
        assert sample_grid.select().indices == (2,)

    def test_shared_headers_between_grids(self, sample_headers: list[GridHeader]) -> None:
        """Rendering one grid does not affect another using the same headers."""
        narrow = TTYGrid(sample_headers)
        narrow.add_line("0", "abc", "abcdef")
        wide = TTYGrid(sample_headers)
        wide.add_line("0", "a", "b")

        assert narrow.select(width=15).indices == (2,)
        assert wide.select(width=15).indices == (0, 1, 2)
        assert narrow.select(width=15).indices == (2,)

    def test_write_plain_stream(self, sample_grid: TTYGrid) -> None:
        """write() emits the same text as display() on a plain stream."""
        out = io.StringIO()
        sample_grid.write(out, width=15)
        assert out.getvalue() == sample_grid.display(width=15)

    def test_write_keeps_tabs(self) -> None:
        g = grid(header("a", pad=0), header("b", pad=0))
        g.add_line("x\ty", "z")
        out = io.StringIO()
        g.write(out, width=40)
        assert out.getvalue() == g.display(width=40)

    def test_long_header_stays_within_budget(self) -> None:
        g = grid(header("description", pad=0), header("id", pad=0))
        g.add_line("x", "y")
        first = g.display(width=8).splitlines()[0]
        assert first == "descid  "
        assert len(first) <= 8

    def test_write_uses_fallback_width(self) -> None:
        """A stream without a terminal falls back to the configured width."""
        g = TTYGrid([header("a", pad=0)], config=GridConfig(fallback_width=12))
        out = io.StringIO()
        g.write(out)
        assert out.getvalue().splitlines()[1] == "-" * 12


class TestColors:
    """Tests for color setters."""

    def test_set_colors(self, sample_grid: TTYGrid) -> None:
        sample_grid.set_header_color("dark_cyan")
        sample_grid.set_delimiter_color("cyan")
        sample_grid.set_primary_color("white")
        sample_grid.set_secondary_color("grey70")

        style = sample_grid.config.style
        assert style.header == "dark_cyan"
        assert style.delimiter == "cyan"
        assert style.primary == "white"
        assert style.secondary == "grey70"

    def test_invalid_color(self, sample_grid: TTYGrid) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            sample_grid.set_header_color("nosuchcolor")
        assert exc_info.value.field == "style.header"

    def test_colors_do_not_change_text(self, sample_grid: TTYGrid) -> None:
        before = sample_grid.display(width=23)
        sample_grid.set_header_color("bold red")
        assert sample_grid.display(width=23) == before
