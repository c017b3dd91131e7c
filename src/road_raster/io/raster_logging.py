# io/raster_logging.py
import json
import logging
import sys

from road_raster.raster.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def _default_json_logger(name="road_raster", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class RasterLogging(NoopHooks):
    """
    Structured JSON logs for a rasterization run and the tile hand-off.
    Skipped segments are logged individually only in debug mode; their count is
    always part of run_end.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level="DEBUG" if debug else level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def run_start(self, *, segments: int, cell_size: float, radius_cells: int, step_m: float):
        self._emit(
            "INFO",
            "run_start",
            segments=segments,
            cell_size=cell_size,
            radius_cells=radius_cells,
            step_m=step_m,
        )

    def empty_input(self, *, reason: str):
        self._emit("WARNING", "empty_input", reason=reason)

    def segment_skipped(self, seg, *, reason: str, points: int):
        if self.debug:
            self._emit("DEBUG", "segment_skipped", segment_id=seg.id, reason=reason, points=points)

    def run_end(self, *, state: str, cells: int, **extra):
        self._emit("INFO", "run_end", state=state, cells=cells, **extra)

    def tiles_rendered(self, *, tiles: int, sinks: int):
        self._emit("INFO", "tiles_rendered", tiles=tiles, sinks=sinks)
