"""Width measurement and column selection."""

from ttygrid.layout.selection import SelectedColumn, Selection
from ttygrid.layout.selector import Candidate, select_columns, shrink
from ttygrid.layout.widths import MIN_SEPARATOR, WidthMap

__all__ = [
    "MIN_SEPARATOR",
    "Candidate",
    "SelectedColumn",
    "Selection",
    "WidthMap",
    "select_columns",
    "shrink",
]
