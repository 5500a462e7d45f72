"""Grid lines and their items."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GridItem:
    """One cell of a line, bound to its column by registry index."""

    index: int
    contents: str

    @property
    def raw_width(self) -> int:
        """Content length plus one trailing blank."""
        return len(self.contents) + 1


@dataclass(frozen=True)
class GridLine:
    """A single row of grid content."""

    items: tuple[GridItem, ...]

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> GridLine:
        """Build a line binding each value to the column at the same position."""
        return cls(tuple(GridItem(i, str(value)) for i, value in enumerate(values)))

    def __iter__(self) -> Iterator[GridItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def item_for(self, index: int) -> GridItem | None:
        """Find the item bound to a column index."""
        if 0 <= index < len(self.items) and self.items[index].index == index:
            return self.items[index]
        return next((item for item in self.items if item.index == index), None)
