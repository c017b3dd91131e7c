# raster/stamping.py
import math
from functools import lru_cache

import numpy as np

from road_raster.domain.entities.geography import Cell
from road_raster.raster.cells import RoadCellSet


def radius_cells(road_width_m: float, cell_size: float) -> int:
    return max(0, math.ceil((road_width_m * 0.5) / cell_size))


@lru_cache(maxsize=32)
def disk_offsets(r: int) -> np.ndarray:
    """All integer (dx, dy) with dx^2 + dy^2 <= r^2; r <= 0 gives only (0, 0)."""
    if r <= 0:
        out = np.zeros((1, 2), dtype=np.int64)
    else:
        span = np.arange(-r, r + 1, dtype=np.int64)
        dx, dy = np.meshgrid(span, span, indexing="ij")
        inside = dx * dx + dy * dy <= r * r
        out = np.column_stack([dx[inside], dy[inside]])
    out.flags.writeable = False  # shared through the cache
    return out


def stamp(center: Cell, r: int, into: RoadCellSet) -> None:
    if r <= 0:
        into.add(center)
        return
    for dx, dy in disk_offsets(r).tolist():
        into.add(Cell(center.col + dx, center.row + dy))


def stamp_many(centers: np.ndarray, r: int, into: RoadCellSet) -> None:
    """Stamp a disk around every (col, row) in an (N,2) int array."""
    centers = np.asarray(centers, dtype=np.int64).reshape(-1, 2)
    if not len(centers):
        return
    # duplicate centers stamp identical disks
    centers = np.unique(centers, axis=0)
    cells = (centers[:, None, :] + disk_offsets(r)[None, :, :]).reshape(-1, 2)
    into.update(Cell(col, row) for col, row in np.unique(cells, axis=0).tolist())
