# raster/hooks.py
from typing import Protocol

from road_raster.domain.entities.geography import Segment


class RasterHooks(Protocol):
    def run_start(self, *, segments, cell_size, radius_cells, step_m): ...
    def empty_input(self, *, reason: str): ...
    def segment_skipped(self, seg: Segment, *, reason: str, points: int): ...
    def run_end(self, *, state, cells, segments, skipped, edges, degenerate, samples, wall_ms): ...
    def tiles_rendered(self, *, tiles: int, sinks: int): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def empty_input(self, **_):
        pass

    def segment_skipped(self, *_, **__):
        pass

    def run_end(self, **_):
        pass

    def tiles_rendered(self, **_):
        pass
