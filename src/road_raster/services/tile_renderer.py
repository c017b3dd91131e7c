# road_raster/services/tile_renderer.py
from collections.abc import Iterable

from road_raster.app.protocols import TilePlacer, TileSink
from road_raster.config.models import OutputModel
from road_raster.domain.entities.geography import Cell
from road_raster.domain.entities.tile import Tile
from road_raster.raster.mapping import cell_to_world


class TileRenderer(TilePlacer):
    """Places one flat tile per road cell. Only this stage applies the output scale."""

    def __init__(
        self,
        cell_size: float,
        scale: float = 1.0,
        *,
        y_offset: float = 0.0,
        thickness: float = 0.2,
        color: tuple[float, float, float] = (0.05, 0.05, 0.05),
        glossiness: float = 0.0,
    ):
        self.cell_size, self.scale, self.y_offset = cell_size, scale, y_offset
        self.thickness, self.color, self.glossiness = thickness, color, glossiness

    @classmethod
    def from_model(cls, cell_size: float, out: OutputModel) -> "TileRenderer":
        return cls(
            cell_size,
            out.scale,
            y_offset=out.y_offset,
            thickness=out.tile_thickness,
            color=out.color,
            glossiness=out.glossiness,
        )

    @property
    def tile_xz(self) -> float:
        return self.cell_size * self.scale

    def tile(self, cell: Cell) -> Tile:
        return Tile(
            name=f"Road_{cell.col}_{cell.row}",
            cell=cell,
            position=cell_to_world(cell, self.cell_size, self.scale, self.y_offset),
            size=(self.tile_xz, self.thickness, self.tile_xz),
            color=self.color,
            glossiness=self.glossiness,
        )

    def render(self, cells: Iterable[Cell], *sinks: TileSink) -> int:
        n = 0
        for cell in sorted(cells):
            t = self.tile(cell)
            for s in sinks:
                s.write(t)
            n += 1
        return n
