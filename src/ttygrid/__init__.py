"""ttygrid - terminal tables that fit.

Declare prioritized columns once, feed lines, and render. When the whole
table is wider than the terminal, the lowest priority columns are dropped
so the rest stay aligned and readable.
"""

from ttygrid.config import GridConfig, GridStyle, load_config
from ttygrid.core import GridHeader, GridItem, GridLine, TTYGrid, grid, header
from ttygrid.errors import (
    ConfigurationError,
    MissingColumnError,
    RowArityMismatchError,
    TerminalTooSmallError,
    TTYGridError,
)
from ttygrid.layout import Selection, WidthMap, select_columns
from ttygrid.output import render_text, terminal_width, write_grid

__version__ = "0.3.0"

__all__ = [
    # Version
    "__version__",
    # Core
    "TTYGrid",
    "GridHeader",
    "GridLine",
    "GridItem",
    "grid",
    "header",
    # Layout
    "WidthMap",
    "Selection",
    "select_columns",
    # Output
    "render_text",
    "write_grid",
    "terminal_width",
    # Config
    "GridConfig",
    "GridStyle",
    "load_config",
    # Errors
    "TTYGridError",
    "ConfigurationError",
    "RowArityMismatchError",
    "MissingColumnError",
    "TerminalTooSmallError",
]
