# runtime/registries.py
from collections.abc import Callable
from dataclasses import dataclass

from route_nav.app.protocols import Heuristic, Pathfinder
from route_nav.config.models import AStarModel, DijkstraModel, PathfinderUnion
from route_nav.search.heuristics import euclidean_h, zero_h
from route_nav.search.pathfinder import AStarPathfinder, DijkstraPathfinder
from route_nav.sim.hooks import SearchHooks

PathfinderFactory = Callable[[PathfinderUnion, dict], Pathfinder]


@dataclass(frozen=True)
class AlgorithmInfo:
    kind: str
    label: str
    description: str
    config: type[DijkstraModel] | type[AStarModel]


_pathfinder_registry: dict[str, PathfinderFactory] = {}
_algorithm_info: dict[str, AlgorithmInfo] = {}
_heuristic_registry: dict[str, Heuristic] = {}


# ------------------- Heuristics ---------------------------


def register_heuristic(name: str):
    def deco(fn: Heuristic):
        _heuristic_registry[name] = fn
        return fn

    return deco


def get_heuristic(name: str) -> Heuristic:
    try:
        return _heuristic_registry[name]
    except KeyError:
        raise ValueError(f"Unknown heuristic {name!r}")


register_heuristic("euclidean")(euclidean_h)
register_heuristic("zero")(zero_h)


# ------------------- Pathfinders ---------------------------


def register_pathfinder(info: AlgorithmInfo):
    def deco(fn: PathfinderFactory):
        _pathfinder_registry[info.kind] = fn
        _algorithm_info[info.kind] = info
        return fn

    return deco


def algorithm_info(kind: str) -> AlgorithmInfo:
    try:
        return _algorithm_info[kind]
    except KeyError:
        raise ValueError(f"Unknown pathfinder kind {kind!r}")


def algorithm_kinds() -> list[str]:
    return list(_algorithm_info)


def pathfinder_config(kind: str) -> PathfinderUnion:
    return algorithm_info(kind).config()


def make_pathfinder(cfg: PathfinderUnion | str, *, hooks: SearchHooks | None = None) -> Pathfinder:
    if isinstance(cfg, str):
        cfg = pathfinder_config(cfg)
    try:
        factory = _pathfinder_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown pathfinder kind {cfg.kind!r}")
    return factory(cfg, {"hooks": hooks})


@register_pathfinder(
    AlgorithmInfo(
        kind="dijkstra",
        label="Dijkstra's Algorithm",
        description="Finds shortest path by exploring all nodes systematically. "
        "Guaranteed optimal solution.",
        config=DijkstraModel,
    )
)
def _make_dijkstra(cfg: DijkstraModel, deps):
    return DijkstraPathfinder(hooks=deps.get("hooks"))


@register_pathfinder(
    AlgorithmInfo(
        kind="astar",
        label="A* Search",
        description="Uses heuristic (straight-line distance) to guide search toward goal. "
        "Often faster than Dijkstra.",
        config=AStarModel,
    )
)
def _make_astar(cfg: AStarModel, deps):
    return AStarPathfinder(heuristic=get_heuristic(cfg.heuristic), hooks=deps.get("hooks"))
