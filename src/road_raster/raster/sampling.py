# raster/sampling.py
import math
from collections.abc import Iterable, Iterator

import numpy as np

from road_raster.domain.entities.geography import Point

DEGENERATE_EDGE_M = 1e-6  # edges shorter than this are skipped
STEP_FLOOR_M = 0.01  # hard floor under the configurable min_step_m


def step_meters(cell_size: float, sample_step_factor: float, min_step_m: float = 0.01) -> float:
    return max(min_step_m, STEP_FLOOR_M, cell_size * sample_step_factor)


def edge_length(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def sample_count(length_m: float, step_m: float) -> int:
    return math.ceil(length_m / step_m)


def sample_edge(a: Point, b: Point, step_m: float) -> np.ndarray:
    """
    Points along a->b no farther apart than step_m, both endpoints included.

    Returns an (n+1, 2) float64 array with n = ceil(len / step_m), or an empty
    (0, 2) array for a degenerate or non-finite edge.
    """
    length = edge_length(a, b)
    if not math.isfinite(length) or length < DEGENERATE_EDGE_M:
        return np.empty((0, 2), dtype=np.float64)
    n = sample_count(length, step_m)
    t = np.arange(n + 1, dtype=np.float64) / n
    xs = a.x + (b.x - a.x) * t
    ys = a.y + (b.y - a.y) * t
    return np.column_stack([xs, ys])


def sample_polyline(pts: Iterable[Point], step_m: float) -> Iterator[np.ndarray]:
    """Yield one sample array per non-degenerate edge, in polyline order."""
    pts = list(pts)
    for a, b in zip(pts, pts[1:]):
        samples = sample_edge(a, b, step_m)
        if len(samples):
            yield samples
