from collections.abc import Iterator
from dataclasses import dataclass, field


# Core geometry types used by the rasterizer
@dataclass(frozen=True)
class Point:
    x: float  # meters in projected CRS
    y: float


@dataclass(frozen=True)
class Point3:
    """Renderer-space position (y is up)."""

    x: float
    y: float
    z: float


@dataclass(frozen=True, order=True)
class Cell:
    col: int
    row: int


@dataclass(frozen=True)
class Segment:
    id: int
    pts: tuple[Point, ...] = ()

    @property
    def drawable(self) -> bool:
        return len(self.pts) >= 2

    def edges(self) -> Iterator[tuple[Point, Point]]:
        for i in range(len(self.pts) - 1):
            yield self.pts[i], self.pts[i + 1]


@dataclass(frozen=True)
class City:
    segments: tuple[Segment, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.segments)
