# raster/pipeline.py
import math
import time
from dataclasses import dataclass
from enum import Enum

import numpy as np

from road_raster.domain.entities.geography import City
from road_raster.raster.cells import RoadCellSet
from road_raster.raster.hooks import NoopHooks, RasterHooks
from road_raster.raster.mapping import world_to_cells
from road_raster.raster.sampling import sample_polyline, step_meters
from road_raster.raster.stamping import radius_cells, stamp_many


class RasterState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SAMPLING = "sampling"
    STAMPING = "stamping"
    DONE = "done"
    EMPTY = "empty"


@dataclass(frozen=True)
class RasterSettings:
    """Grid inputs, all in input meters. Output scale is not part of these."""

    cell_size: float = 5.0
    sample_step_factor: float = 0.5
    road_width_m: float = 12.0
    min_step_m: float = 0.01

    def __post_init__(self):
        if not self.cell_size > 0:
            raise ValueError(f"cell_size must be > 0, got {self.cell_size!r}")

    @property
    def radius_cells(self) -> int:
        return radius_cells(self.road_width_m, self.cell_size)

    @property
    def step_m(self) -> float:
        return step_meters(self.cell_size, self.sample_step_factor, self.min_step_m)


@dataclass
class RasterStats:
    segments: int = 0
    skipped: int = 0
    edges: int = 0
    degenerate: int = 0
    samples: int = 0
    cells: int = 0
    wall_ms: float = 0.0


class RasterPipeline:
    def __init__(self, settings: RasterSettings | None = None, hooks: RasterHooks | None = None):
        self.settings = settings or RasterSettings()
        self._hooks = hooks or NoopHooks()
        self.state = RasterState.IDLE
        self.stats = RasterStats()

    def rasterize(self, city: City | None) -> RoadCellSet:
        t0 = time.perf_counter()
        cells = RoadCellSet()
        self.stats = stats = RasterStats()

        self.state = RasterState.VALIDATING
        if city is None or not city.segments:
            self.state = RasterState.EMPTY
            self._hooks.empty_input(reason="no_city" if city is None else "no_segments")
            self._finish(cells, t0)
            return cells

        r = self.settings.radius_cells
        step = self.settings.step_m
        cell_size = self.settings.cell_size
        self._hooks.run_start(
            segments=len(city.segments), cell_size=cell_size, radius_cells=r, step_m=step
        )

        for seg in city.segments:
            stats.segments += 1
            if not seg.drawable:
                stats.skipped += 1
                self._hooks.segment_skipped(seg, reason="too_few_points", points=len(seg.pts))
                continue
            if not all(math.isfinite(p.x) and math.isfinite(p.y) for p in seg.pts):
                stats.skipped += 1
                self._hooks.segment_skipped(seg, reason="non_finite_point", points=len(seg.pts))
                continue

            self.state = RasterState.SAMPLING
            chunks = list(sample_polyline(seg.pts, step))
            n_edges = len(seg.pts) - 1
            stats.edges += n_edges
            stats.degenerate += n_edges - len(chunks)
            if not chunks:
                # every edge collapsed: the segment is a single point
                p = seg.pts[0]
                chunks.append(np.array([[p.x, p.y]], dtype=np.float64))
            xy = np.concatenate(chunks)
            stats.samples += len(xy)

            self.state = RasterState.STAMPING
            stamp_many(world_to_cells(xy, cell_size), r, cells)

        self.state = RasterState.DONE
        self._finish(cells, t0)
        return cells

    def _finish(self, cells: RoadCellSet, t0: float) -> None:
        s = self.stats
        s.cells = len(cells)
        s.wall_ms = (time.perf_counter() - t0) * 1000
        self._hooks.run_end(
            state=self.state.value,
            cells=s.cells,
            segments=s.segments,
            skipped=s.skipped,
            edges=s.edges,
            degenerate=s.degenerate,
            samples=s.samples,
            wall_ms=s.wall_ms,
        )


def rasterize(city: City | None, settings: RasterSettings | None = None) -> RoadCellSet:
    return RasterPipeline(settings).rasterize(city)
