# tests/app/test_build_and_run.py
import json

import pytest
from pydantic import ValidationError

from road_raster.app.build import build, run
from road_raster.config.models import ScenarioModel
from road_raster.domain.entities.geography import Cell, City, Point, Segment
from road_raster.io.tiles import MemoryTileSink
from road_raster.raster.pipeline import RasterState

STRAIGHT = City((Segment(1, (Point(0.0, 0.0), Point(20.0, 0.0))),))


def _cfg(**over):
    cfg = {
        "name": "test",
        "run_id": "t-1",
        "grid": {"cell_size": 5.0, "sample_step_factor": 0.5},
        "road": {"width_m": 10.0},
        "output": {"scale": 0.01},
        "sinks": [{"kind": "memory"}],
    }
    cfg.update(over)
    return cfg


def test_build_runs():
    app = build(_cfg(), use_logging=False)
    cells = run(app, STRAIGHT)
    assert len(cells) == 17
    (sink,) = app.sinks
    assert isinstance(sink, MemoryTileSink)
    assert len(sink.tiles) == 17
    assert sink.tiles[0].size == pytest.approx((0.05, 0.2, 0.05))


def test_output_scale_never_changes_the_cells():
    small = run(build(_cfg(output={"scale": 0.01}), use_logging=False), STRAIGHT)
    big = run(build(_cfg(output={"scale": 7.0}), use_logging=False), STRAIGHT)
    assert small == big


def test_scale_only_moves_tiles():
    a = build(_cfg(output={"scale": 1.0}), use_logging=False)
    b = build(_cfg(output={"scale": 3.0}), use_logging=False)
    run(a, STRAIGHT)
    run(b, STRAIGHT)
    ta, tb = a.sinks[0].tiles, b.sinks[0].tiles
    assert [t.cell for t in ta] == [t.cell for t in tb]
    assert tb[0].position.x == pytest.approx(3.0 * ta[0].position.x)


def test_explicit_sinks_replace_configured_ones():
    mine = MemoryTileSink()
    app = build(_cfg(), use_logging=False, sinks=[mine])
    run(app, STRAIGHT)
    assert app.sinks == [mine]
    assert {t.cell for t in mine.tiles} == {Cell(c, 0) for c in range(-1, 6)} | {
        Cell(c, r) for c in range(0, 5) for r in (-1, 1)
    }


def test_input_file_is_loaded(tmp_path):
    p = tmp_path / "city.json"
    p.write_text(json.dumps({"segments": [{"id": 1, "pts": [[0, 0], [20, 0]]}]}))
    app = build(_cfg(input={"file": str(p)}), use_logging=False)
    assert len(run(app)) == 17


def test_missing_input_file(tmp_path):
    missing = str(tmp_path / "none.json")
    with pytest.raises(FileNotFoundError):
        run(build(_cfg(input={"file": missing}), use_logging=False))

    app = build(_cfg(input={"file": missing, "must_exist": False}), use_logging=False)
    cells = run(app)
    assert len(cells) == 0
    assert app.pipeline.state is RasterState.EMPTY
    assert app.sinks[0].tiles == []


def test_defaults_validate():
    model = ScenarioModel.model_validate({})
    assert model.grid.cell_size == 5.0
    assert model.road.width_m == 12.0
    assert model.output.scale == 0.01
    app = build(model, use_logging=False)
    assert app.pipeline.settings.radius_cells == 2
    assert app.pipeline.settings.step_m == 2.5


@pytest.mark.parametrize(
    "over",
    [
        {"grid": {"cell_size": 0}},
        {"grid": {"cellSize": 5}},
        {"output": {"color": [2, 0, 0]}},
        {"output": {"tile_thickness": -1}},
        {"sinks": [{"kind": "hologram"}]},
    ],
)
def test_bad_config_is_rejected(over):
    with pytest.raises(ValidationError):
        build(_cfg(**over), use_logging=False)
