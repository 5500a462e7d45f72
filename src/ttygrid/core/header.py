"""Column headers."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAD = 4


@dataclass(frozen=True, eq=False)
class GridHeader:
    """A named, prioritized column.

    Headers compare by identity, so two columns may share the same text.

    Attributes:
        text: Text shown in the header line.
        priority: Retention preference when the grid does not fit. Higher
            priorities are kept longer.
        pad: Extra blank cells added to the column's width.
    """

    text: str
    priority: int = 0
    pad: int = DEFAULT_PAD

    def __post_init__(self) -> None:
        if self.priority < 0:
            raise ValueError(f"priority must be >= 0, got {self.priority}")
        if self.pad < 0:
            raise ValueError(f"pad must be >= 0, got {self.pad}")

    @property
    def fallback_width(self) -> int:
        """Width used when the grid has no lines to measure."""
        return len(self.text) + 2


def header(text: str, priority: int = 0, pad: int = DEFAULT_PAD) -> GridHeader:
    """Create a header.

    Args:
        text: Header text.
        priority: Retention priority (higher survives longer).
        pad: Padding added to the measured column width.

    Returns:
        New header.
    """
    return GridHeader(text=text, priority=priority, pad=pad)
