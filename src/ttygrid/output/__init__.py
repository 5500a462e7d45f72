"""Grid output."""

from ttygrid.output.table import Section, format_header, format_line, render_text, write_grid
from ttygrid.output.terminal import terminal_width

__all__ = [
    "Section",
    "format_header",
    "format_line",
    "render_text",
    "terminal_width",
    "write_grid",
]
