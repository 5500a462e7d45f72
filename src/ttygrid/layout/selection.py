"""Selected columns for a single render."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ttygrid.core.header import GridHeader


@dataclass(frozen=True)
class SelectedColumn:
    """A column chosen for display.

    Attributes:
        display_index: Position among the selected columns.
        index: Position in the grid's header registry.
        header: The column header.
        width: Rendered width of the column.
    """

    display_index: int
    index: int
    header: GridHeader
    width: int


@dataclass(frozen=True)
class Selection:
    """Ordered subset of a grid's columns chosen to fit a width budget.

    Selections are plain values: computing one never mutates the headers,
    so the same headers can back any number of grids.
    """

    columns: tuple[SelectedColumn, ...]
    budget: int

    @classmethod
    def of(
        cls,
        headers: tuple[GridHeader, ...],
        widths: tuple[int, ...],
        indices: tuple[int, ...],
        budget: int,
    ) -> Selection:
        """Build a selection from registry indices in declaration order."""
        return cls(
            columns=tuple(
                SelectedColumn(display_index=pos, index=i, header=headers[i], width=widths[i])
                for pos, i in enumerate(sorted(indices))
            ),
            budget=budget,
        )

    @property
    def indices(self) -> tuple[int, ...]:
        return tuple(c.index for c in self.columns)

    @property
    def headers(self) -> tuple[GridHeader, ...]:
        return tuple(c.header for c in self.columns)

    @property
    def total_width(self) -> int:
        return sum(c.width for c in self.columns)

    @property
    def priority_sum(self) -> int:
        return sum(c.header.priority for c in self.columns)

    def display_index(self, index: int) -> int | None:
        """Display position of a registry column, ``None`` when not selected."""
        for column in self.columns:
            if column.index == index:
                return column.display_index
        return None

    def is_selected(self, index: int) -> bool:
        return self.display_index(index) is not None

    def __iter__(self) -> Iterator[SelectedColumn]:
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self.columns)
