# io/city_loader.py
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, FiniteFloat, ValidationError

from road_raster.domain.entities.geography import City, Point, Segment


class CityFormatError(ValueError):
    """The input document is not a readable city description."""


# Document schema. Missing pieces are tolerated here and skipped downstream.
class SegmentDoc(BaseModel):
    model_config = ConfigDict(extra="ignore")
    id: int = 0
    pts: list[tuple[FiniteFloat, FiniteFloat]] | None = None  # each is [x, y] in meters


class CityDoc(BaseModel):
    model_config = ConfigDict(extra="ignore")
    segments: list[SegmentDoc] | None = None


def to_city(doc: CityDoc) -> City:
    segs = tuple(
        Segment(id=s.id, pts=tuple(Point(x, y) for x, y in (s.pts or ()))) for s in doc.segments or ()
    )
    return City(segments=segs)


def parse_city(data: str | bytes | Mapping) -> City:
    try:
        if isinstance(data, Mapping):
            doc = CityDoc.model_validate(data)
        else:
            doc = CityDoc.model_validate_json(data)
    except ValidationError as e:
        raise CityFormatError(f"invalid city document: {e.error_count()} error(s)\n{e}") from e
    return to_city(doc)


def load_city(path: str | Path) -> City:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"city file not found: {path}")
    return parse_city(path.read_bytes())
