"""Grid rendering to text and to styled streams."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import Enum
from typing import TextIO

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from ttygrid.config.schema import GridConfig
from ttygrid.core.line import GridLine
from ttygrid.errors import MissingColumnError
from ttygrid.layout.selection import Selection


class Section(Enum):
    """Part of the rendered grid a line belongs to."""

    HEADER = "header"
    DELIMITER = "delimiter"
    PRIMARY = "primary"
    SECONDARY = "secondary"


def format_header(selection: Selection) -> str:
    """Header texts, each left aligned to its column width.

    Column widths are measured from line contents only, so a header longer
    than its column is cut to the column width.
    """
    return "".join(
        column.header.text[: column.width].ljust(column.width) for column in selection
    )


def format_line(line: GridLine, selection: Selection, line_index: int = 0) -> str:
    """Selected items of a line, each left aligned to its column width."""
    parts = []
    for column in selection:
        item = line.item_for(column.index)
        if item is None:
            raise MissingColumnError(column.index, line_index)
        parts.append(item.contents.ljust(column.width))
    return "".join(parts)


def iter_sections(
    lines: Sequence[GridLine],
    selection: Selection,
    delimiter_char: str = "-",
) -> Iterator[tuple[Section, str]]:
    """Yield every output line of the grid tagged with its section.

    Lines alternate between primary and secondary, starting with primary.
    """
    yield Section.HEADER, format_header(selection)
    yield Section.DELIMITER, delimiter_char * selection.budget
    for i, line in enumerate(lines):
        section = Section.PRIMARY if i % 2 == 0 else Section.SECONDARY
        yield section, format_line(line, selection, i)


def render_text(
    lines: Sequence[GridLine],
    selection: Selection,
    delimiter_char: str = "-",
) -> str:
    """Render the grid as plain text, one newline terminated line per row."""
    return "".join(f"{text}\n" for _, text in iter_sections(lines, selection, delimiter_char))


def write_grid(
    lines: Sequence[GridLine],
    selection: Selection,
    stream: TextIO,
    config: GridConfig | None = None,
) -> None:
    """Write the grid to a stream, styling each section when it is a terminal.

    The text written is identical to ``render_text``; styles only add
    escape sequences around each line. Cell contents are written as is,
    rich only supplies the escape codes.

    Args:
        lines: Grid lines.
        selection: Columns to render.
        stream: Destination stream.
        config: Delimiter, colors and terminal forcing.
    """
    config = config or GridConfig()
    console = Console(file=stream, force_terminal=config.force_terminal)
    color_system = COLOR_SYSTEMS.get(console.color_system) if console.color_system else None
    styles = {
        Section.HEADER: config.style.header,
        Section.DELIMITER: config.style.delimiter,
        Section.PRIMARY: config.style.primary,
        Section.SECONDARY: config.style.secondary,
    }
    for section, text in iter_sections(lines, selection, config.delimiter_char):
        style = styles[section]
        if style and color_system is not None:
            text = Style.parse(style).render(text, color_system=color_system)
        stream.write(f"{text}\n")
