from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from road_raster.domain.entities.geography import Cell
from road_raster.domain.entities.tile import Tile


@runtime_checkable
class TileSink(Protocol):
    """
    Consumer of placed tiles (a scene builder, a file, a test buffer).
    Receives one flat tile per road cell: center plus dimensions.
    """

    def write(self, tile: Tile) -> None: ...


@runtime_checkable
class TilePlacer(Protocol):
    """
    Responsibilities:
      • Turn road cells into positioned, sized tiles.
      • Hand every tile to each sink.
    Units: cells in, renderer-space coordinates out.
    """

    def render(self, cells: Iterable[Cell], *sinks: TileSink) -> int: ...
