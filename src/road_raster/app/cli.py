import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from road_raster.app.build import build, run
from road_raster.io.city_loader import CityFormatError


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="road-raster", description="Rasterize road centerlines into grid cells."
    )
    ap.add_argument("city", help="City JSON: {'segments': [{'id': int, 'pts': [[x, y], ...]}]}")
    ap.add_argument("--config", help="Scenario JSON; command-line options override it")
    ap.add_argument("--cell-size", type=float, help="Meters per grid cell")
    ap.add_argument("--sample-step-factor", type=float, help="Sampling step relative to cell size")
    ap.add_argument("--road-width", type=float, help="Total road width in meters")
    ap.add_argument("--scale", type=float, help="Output-only scale for tile positions")
    ap.add_argument("--out", help="Write tiles as JSON lines to this file")
    ap.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--no-log", action="store_true", help="Disable JSON run logs")
    return ap


def _scenario(args) -> dict:
    cfg = json.loads(Path(args.config).read_text(encoding="utf-8")) if args.config else {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{args.config}: top level must be a JSON object")
    cfg["input"] = {"file": args.city, "must_exist": True}

    def put(section: str, key: str, value):
        if value is not None:
            cfg.setdefault(section, {})[key] = value

    put("grid", "cell_size", args.cell_size)
    put("grid", "sample_step_factor", args.sample_step_factor)
    put("road", "width_m", args.road_width)
    put("output", "scale", args.scale)
    put("log", "level", args.log_level)
    if args.out:
        cfg["sinks"] = [{"kind": "jsonl", "file": args.out}]
    return cfg


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        app = build(_scenario(args), use_logging=not args.no_log)
    except (OSError, ValueError, ValidationError) as e:
        print(f"[ERROR] bad configuration: {e}", file=sys.stderr)
        return 2

    try:
        cells = run(app)
    except (FileNotFoundError, CityFormatError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    finally:
        app.close()

    print(f"[DONE] state={app.pipeline.state.value} cells={len(cells)} bounds={cells.bounds()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
