# raster/cells.py
from collections.abc import Iterable, Iterator

import numpy as np

from road_raster.domain.entities.geography import Cell


class RoadCellSet:
    """
    Grow-only set of road cells produced by one rasterization pass.
    Membership is by value; enumeration order carries no meaning.
    """

    def __init__(self, cells: Iterable[Cell] = ()):
        self._cells: set[Cell] = set(cells)

    def add(self, cell: Cell) -> None:
        self._cells.add(cell)

    def update(self, cells: Iterable[Cell]) -> None:
        self._cells.update(cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RoadCellSet):
            return self._cells == other._cells
        if isinstance(other, (set, frozenset)):
            return self._cells == other
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"RoadCellSet(n={len(self._cells)})"

    def sorted(self) -> list[Cell]:
        return sorted(self._cells)

    def to_array(self) -> np.ndarray:
        if not self._cells:
            return np.empty((0, 2), dtype=np.int64)
        return np.array([(c.col, c.row) for c in self.sorted()], dtype=np.int64)

    def as_frozenset(self) -> frozenset[Cell]:
        return frozenset(self._cells)

    def bounds(self) -> tuple[int, int, int, int] | None:
        """(min_col, min_row, max_col, max_row) or None when empty."""
        if not self._cells:
            return None
        cols = [c.col for c in self._cells]
        rows = [c.row for c in self._cells]
        return min(cols), min(rows), max(cols), max(rows)
