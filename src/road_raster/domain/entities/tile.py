from dataclasses import dataclass

from road_raster.domain.entities.geography import Cell, Point3


@dataclass(frozen=True)
class Tile:
    name: str
    cell: Cell
    position: Point3  # tile center, renderer space
    size: tuple[float, float, float]  # (x, thickness, z)
    color: tuple[float, float, float]
    glossiness: float = 0.0
