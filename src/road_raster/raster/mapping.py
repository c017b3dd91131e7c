# raster/mapping.py
import math

import numpy as np

from road_raster.domain.entities.geography import Cell, Point, Point3


def world_to_cell(p: Point, cell_size: float) -> Cell:
    return Cell(math.floor(p.x / cell_size), math.floor(p.y / cell_size))


def world_to_cells(xy: np.ndarray, cell_size: float) -> np.ndarray:
    """(N,2) meters -> (N,2) int64 (col, row). Same floor rule as world_to_cell."""
    return np.floor(np.asarray(xy, dtype=np.float64) / cell_size).astype(np.int64)


def cell_to_world(cell: Cell, cell_size: float, scale: float = 1.0, y_offset: float = 0.0) -> Point3:
    # cell center in meters, then output scale; the grid itself never sees scale
    return Point3(
        (cell.col + 0.5) * cell_size * scale,
        y_offset,
        (cell.row + 0.5) * cell_size * scale,
    )
