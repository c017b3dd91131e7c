import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class GridModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    cell_size: float = Field(5.0, gt=0)  # meters per cell, before output scale
    sample_step_factor: float = 0.5  # step = cell_size * factor
    min_step_m: float = Field(0.01, gt=0)  # clamp to avoid unbounded sampling


class RoadModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    width_m: float = 12.0  # total width; negative behaves like 0


class OutputModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    scale: float = 0.01  # 0.01 => 100x smaller
    y_offset: float = 0.0
    tile_thickness: float = 0.2
    color: tuple[float, float, float] = (0.05, 0.05, 0.05)  # near-black asphalt
    glossiness: float = 0.0

    @field_validator("tile_thickness")
    @classmethod
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v

    @field_validator("color")
    @classmethod
    def _unit_rgb(cls, v: tuple[float, float, float]) -> tuple[float, float, float]:
        if any(not 0.0 <= c <= 1.0 for c in v):
            raise ValueError("color channels must be within [0, 1]")
        return v

    @field_validator("glossiness")
    @classmethod
    def _unit(cls, v: float, info: ValidationInfo) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"{info.field_name} must be within [0, 1]")
        return v


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class InputModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file: str
    must_exist: bool = True

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


# ----------------- TILE SINKS ---------------------


class JsonlSinkModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["jsonl"] = "jsonl"
    file: str | None = None  # None => stdout

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str | None) -> str | None:
        return None if v is None else os.path.expandvars(os.path.expanduser(v))


class MemorySinkModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["memory"] = "memory"


SinkUnion = Annotated[JsonlSinkModel | MemorySinkModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "city"
    run_id: str = "local"
    grid: GridModel = GridModel()
    road: RoadModel = RoadModel()
    output: OutputModel = OutputModel()
    log: LogModel = LogModel()
    input: InputModel | None = None
    sinks: list[SinkUnion] = Field(default_factory=list)
