# road_raster/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass, field

from road_raster.app.protocols import TileSink
from road_raster.config.models import ScenarioModel
from road_raster.domain.entities.geography import City
from road_raster.io.city_loader import load_city
from road_raster.io.config import raster_settings
from road_raster.io.raster_logging import RasterLogging  # JSON logs
from road_raster.raster.cells import RoadCellSet
from road_raster.raster.hooks import NoopHooks, RasterHooks
from road_raster.raster.pipeline import RasterPipeline
from road_raster.runtime.registries import make_sink
from road_raster.services.tile_renderer import TileRenderer


@dataclass
class App:
    model: ScenarioModel
    hooks: RasterHooks
    pipeline: RasterPipeline
    renderer: TileRenderer
    sinks: list[TileSink] = field(default_factory=list)

    def close(self) -> None:
        for s in self.sinks:
            close = getattr(s, "close", None)
            if close is not None:
                close()


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    sinks: list[TileSink] | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        RasterLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 2) Rasterizer (input meters only) and renderer (output scale)
    pipeline = RasterPipeline(raster_settings(model.grid, model.road), hooks=hooks)
    renderer = TileRenderer.from_model(model.grid.cell_size, model.output)

    # 3) Sinks: explicit ones win over configured ones
    if sinks is None:
        sinks = [make_sink(s) for s in model.sinks]

    return App(model, hooks, pipeline, renderer, list(sinks))


def run(app: App, city: City | None = None) -> RoadCellSet:
    if city is None and app.model.input is not None:
        inp = app.model.input
        try:
            city = load_city(inp.file)
        except FileNotFoundError:
            if inp.must_exist:
                raise
            city = None

    cells = app.pipeline.rasterize(city)
    if app.sinks:
        n = app.renderer.render(cells, *app.sinks)
        app.hooks.tiles_rendered(tiles=n, sinks=len(app.sinks))
    return cells
