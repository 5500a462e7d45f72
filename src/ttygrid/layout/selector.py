"""Priority based column selection.

When every column fits the width budget the whole registry is shown.
Otherwise each prefix of the registry (longest first) is shrunk by
dropping its lowest priority column until it fits, and the shrunk prefix
keeping the highest total priority wins. Ties go to the candidate using
more of the budget.

This is not an exhaustive subset search: only subsets reachable by
shrinking a contiguous prefix are considered.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ttygrid.core.header import GridHeader
from ttygrid.errors import TerminalTooSmallError
from ttygrid.layout.selection import Selection
from ttygrid.layout.widths import WidthMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """A shrunk prefix and its score.

    Attributes:
        prefix: Number of leading columns the candidate started from.
        indices: Registry indices that survived shrinking.
        priority_sum: Total priority of the surviving columns.
        width: Combined display width of the surviving columns.
    """

    prefix: int
    indices: tuple[int, ...]
    priority_sum: int
    width: int

    def fits(self, budget: int) -> bool:
        return bool(self.indices) and self.width <= budget


def lowest_priority_position(headers: Sequence[GridHeader], indices: Sequence[int]) -> int | None:
    """Position within ``indices`` of the column to drop next.

    Among equal lowest priorities the latest declared column is dropped,
    so content falls off the right edge first.
    """
    lowest: int | None = None
    position: int | None = None
    for pos in range(len(indices) - 1, -1, -1):
        priority = headers[indices[pos]].priority
        if lowest is None or priority < lowest:
            lowest = priority
            position = pos
    return position


def shrink(headers: Sequence[GridHeader], widths: WidthMap, prefix: int, budget: int) -> Candidate:
    """Drop lowest priority columns from a prefix until it fits the budget.

    Args:
        headers: Column registry.
        widths: Measured widths for the registry.
        prefix: Number of leading columns to start from.
        budget: Width budget.

    Returns:
        The shrunk candidate. Its ``indices`` are empty when nothing fits.
    """
    indices = list(range(prefix))
    width = widths.subset_width(indices)

    while width > budget:
        position = lowest_priority_position(headers, indices)
        if position is None:
            break
        dropped = indices.pop(position)
        width = widths.subset_width(indices)
        logger.debug(
            "prefix %d: dropped %r (priority %d), width now %d",
            prefix,
            headers[dropped].text,
            headers[dropped].priority,
            width,
        )

    return Candidate(
        prefix=prefix,
        indices=tuple(indices),
        priority_sum=sum(headers[i].priority for i in indices),
        width=width,
    )


def select_columns(headers: Sequence[GridHeader], widths: WidthMap, budget: int) -> Selection:
    """Choose the columns to display within a width budget.

    Args:
        headers: Column registry in declaration order.
        widths: Measured widths for the registry.
        budget: Width budget, usually the terminal width.

    Returns:
        Selection in declaration order whose total width is within budget.

    Raises:
        TerminalTooSmallError: If no single column fits the budget.
    """
    headers = tuple(headers)
    all_indices = tuple(range(len(headers)))
    total = widths.subset_width(all_indices)

    if total <= budget:
        logger.debug("all columns fit: width %d <= budget %d", total, budget)
        return Selection.of(headers, widths.display_widths, all_indices, budget)

    logger.debug("width %d exceeds budget %d, selecting by priority", total, budget)

    candidates = [shrink(headers, widths, prefix, budget) for prefix in range(len(headers), 0, -1)]
    feasible = [c for c in candidates if c.fits(budget)]
    if not feasible:
        raise TerminalTooSmallError(budget, min(widths.display_widths, default=None))

    # max() keeps the first of equal keys, i.e. the longest prefix.
    best = max(feasible, key=lambda c: (c.priority_sum, c.width))
    logger.debug(
        "selected %s (priority %d, width %d)",
        [headers[i].text for i in best.indices],
        best.priority_sum,
        best.width,
    )
    return Selection.of(headers, widths.display_widths, best.indices, budget)
