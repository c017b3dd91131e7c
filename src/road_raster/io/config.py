# src/road_raster/io/config.py
from pathlib import Path

from road_raster.config.models import GridModel, RoadModel, ScenarioModel
from road_raster.raster.pipeline import RasterSettings


def load_scenario(path: str | Path) -> ScenarioModel:
    return ScenarioModel.model_validate_json(Path(path).read_text(encoding="utf-8"))


def raster_settings(grid: GridModel, road: RoadModel) -> RasterSettings:
    # output scale is not passed on: rasterization never depends on it
    return RasterSettings(
        cell_size=grid.cell_size,
        sample_step_factor=grid.sample_step_factor,
        road_width_m=road.width_m,
        min_step_m=grid.min_step_m,
    )
