# runtime/registries.py
from collections.abc import Callable

from road_raster.app.protocols import TileSink
from road_raster.config.models import JsonlSinkModel, MemorySinkModel, SinkUnion
from road_raster.io.tiles import JsonlTileSink, MemoryTileSink

SinkFactory = Callable[[SinkUnion, dict], TileSink]

_sink_registry: dict[str, SinkFactory] = {}


# ------------------- Tile sink registries ---------------------------


def register_sink(kind: str):
    def deco(fn: SinkFactory):
        _sink_registry[kind] = fn
        return fn

    return deco


def make_sink(cfg: SinkUnion, *, deps: dict | None = None) -> TileSink:
    try:
        factory = _sink_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown sink kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_sink("jsonl")
def _make_jsonl(cfg: JsonlSinkModel, deps):
    if cfg.file is None:
        return JsonlTileSink(deps["stdout"]) if "stdout" in deps else JsonlTileSink()
    return JsonlTileSink.open(cfg.file)


@register_sink("memory")
def _make_memory(cfg: MemorySinkModel, deps):
    return MemoryTileSink()
