# io/tiles.py
import json
import sys
from dataclasses import asdict

from road_raster.domain.entities.tile import Tile


class JsonlTileSink:
    def __init__(self, fp=None, *, owns_fp: bool = False):
        self.fp, self.owns_fp = fp or sys.stdout, owns_fp

    @classmethod
    def open(cls, path: str) -> "JsonlTileSink":
        return cls(open(path, "w", encoding="utf-8"), owns_fp=True)

    def write(self, tile: Tile) -> None:
        self.fp.write(json.dumps(asdict(tile)) + "\n")

    def close(self) -> None:
        if self.owns_fp:
            self.fp.close()
        else:
            self.fp.flush()


class MemoryTileSink:
    def __init__(self):
        self.tiles: list[Tile] = []

    def write(self, tile: Tile) -> None:
        self.tiles.append(tile)

    def close(self) -> None:
        pass
