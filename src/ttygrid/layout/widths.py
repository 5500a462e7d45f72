"""Column width computation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ttygrid.core.header import GridHeader
from ttygrid.core.line import GridLine
from ttygrid.errors import MissingColumnError

# Blank cells every column gets on top of its padding, even when pad is 0.
MIN_SEPARATOR = 2


@dataclass(frozen=True)
class WidthMap:
    """Measured widths for every column of a grid.

    Built once per render and shared by the selector and the renderer.

    Attributes:
        headers: The column registry the widths were measured for.
        raw_widths: Widest item (content + 1) per column, or ``None`` when
            there were no lines to measure.
        display_widths: Width each column occupies when rendered.
    """

    headers: tuple[GridHeader, ...]
    raw_widths: tuple[int | None, ...]
    display_widths: tuple[int, ...]

    @classmethod
    def build(cls, headers: Sequence[GridHeader], lines: Sequence[GridLine]) -> WidthMap:
        """Measure every column against the given lines.

        Args:
            headers: Column registry in declaration order.
            lines: Lines to measure.

        Returns:
            Width map for the registry.

        Raises:
            MissingColumnError: If a line has no item for some column.
        """
        headers = tuple(headers)
        if not lines:
            return cls(
                headers=headers,
                raw_widths=tuple(None for _ in headers),
                display_widths=tuple(h.fallback_width for h in headers),
            )

        raw = [0] * len(headers)
        for line_index, line in enumerate(lines):
            for column_index in range(len(headers)):
                item = line.item_for(column_index)
                if item is None:
                    raise MissingColumnError(column_index, line_index)
                raw[column_index] = max(raw[column_index], item.raw_width)

        display = tuple(
            width + header.pad + MIN_SEPARATOR for width, header in zip(raw, headers)
        )
        return cls(headers=headers, raw_widths=tuple(raw), display_widths=display)

    def raw_width(self, index: int) -> int | None:
        """Widest item in a column, ``None`` if nothing was measured."""
        return self.raw_widths[index]

    def display_width(self, index: int) -> int:
        """Rendered width of a column."""
        return self.display_widths[index]

    def subset_width(self, indices: Iterable[int]) -> int:
        """Combined rendered width of the given columns."""
        return sum(self.display_widths[i] for i in indices)

    @property
    def total_width(self) -> int:
        """Rendered width of the whole registry."""
        return sum(self.display_widths)

    def __len__(self) -> int:
        return len(self.display_widths)
