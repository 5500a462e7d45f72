"""Grid data model."""

from ttygrid.core.header import DEFAULT_PAD, GridHeader, header
from ttygrid.core.line import GridItem, GridLine
from ttygrid.core.tty_grid import TTYGrid, grid

__all__ = [
    "DEFAULT_PAD",
    "GridHeader",
    "GridItem",
    "GridLine",
    "TTYGrid",
    "grid",
    "header",
]
