"""Terminal width detection."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from ttygrid.config.schema import DEFAULT_WIDTH

logger = logging.getLogger(__name__)


def terminal_width(stream: TextIO | None = None, fallback: int = DEFAULT_WIDTH) -> int:
    """Return the column count of the terminal behind a stream.

    The ``COLUMNS`` environment variable takes precedence, as it does for
    ``shutil.get_terminal_size``. The size is queried on every call so a
    resized terminal is picked up by the next render.

    Args:
        stream: Stream attached to the terminal. Defaults to stdout.
        fallback: Width returned when the size cannot be determined.

    Returns:
        Width in columns.
    """
    columns = os.environ.get("COLUMNS", "")
    if columns.isdigit() and int(columns) > 0:
        return int(columns)

    stream = stream if stream is not None else sys.stdout
    try:
        width = os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError) as e:
        logger.debug("terminal width unavailable (%s), using %d", e, fallback)
        return fallback

    if width <= 0:
        logger.debug("terminal reported no width, using %d", fallback)
        return fallback
    return width
