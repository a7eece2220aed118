# route_nav/app/session.py
import time
from dataclasses import dataclass, field

from route_nav.config.models import GraphModel, PathfinderUnion
from route_nav.domain.generator import generate_graph
from route_nav.domain.graph import RoadGraph
from route_nav.domain.narrator import Instruction, Narration, narrate, reconstruct_path
from route_nav.runtime.registries import algorithm_info, make_pathfinder
from route_nav.sim.hooks import NoopHooks, SearchHooks
from route_nav.sim.rng import RNGRegistry


@dataclass
class RouteReport:
    algorithm: str
    label: str
    start: int
    end: int
    path: list[int]
    visited_order: list[int]
    compute_ms: float  # measured around the search only
    narration: Narration = field(default_factory=Narration)

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def nodes_visited(self) -> int:
        return len(self.visited_order)

    @property
    def total_distance(self) -> float:
        return self.narration.total_distance

    @property
    def instructions(self) -> list[Instruction]:
        return self.narration.instructions


class RouteSession:
    """
    Owns the current road graph and the last route computed over it.

    This is the caller layer: it validates start/end selections before handing
    them to a pathfinder, which itself never rejects ids.
    """

    def __init__(
        self,
        graph_cfg: GraphModel,
        rng: RNGRegistry,
        *,
        pathfinder: PathfinderUnion | str = "dijkstra",
        hooks: SearchHooks | None = None,
    ):
        self.graph_cfg = graph_cfg
        self.rng = rng
        self.default_pathfinder = pathfinder
        self.hooks = hooks or NoopHooks()
        self.generation = -1
        self.graph = RoadGraph()
        self.report: RouteReport | None = None

    @property
    def path(self) -> list[int]:
        return self.report.path if self.report else []

    @property
    def visited_order(self) -> list[int]:
        return self.report.visited_order if self.report else []

    # ---------------- actions ----------------

    def regenerate(self) -> RoadGraph:
        cfg = self.graph_cfg
        for _ in range(cfg.max_attempts):
            self.generation += 1
            g = generate_graph(
                cfg.node_count,
                cfg.width,
                cfg.height,
                rng=self.rng.substream("graph", self.generation),
                name_pool=cfg.name_pool,
                k=cfg.k,
                margin=cfg.margin,
                anchor=(cfg.anchor.lat, cfg.anchor.lon),
                span_deg=cfg.anchor.span_deg,
            )
            n_comp = len(g.components())
            self.hooks.graph_built(
                generation=self.generation, nodes=len(g), edges=g.edge_count(), components=n_comp
            )
            if n_comp <= 1 or not cfg.require_connected:
                break
        else:
            raise RuntimeError(f"no connected graph after {cfg.max_attempts} attempts")

        self.graph = g
        self.clear()
        return g

    def find_route(
        self, start: int | None, end: int | None, algorithm: PathfinderUnion | str | None = None
    ) -> RouteReport:
        reason = self._invalid_selection(start, end)
        if reason:
            self.hooks.route_rejected(reason=reason, start=start, end=end)
            raise ValueError(reason)

        pf = make_pathfinder(algorithm or self.default_pathfinder, hooks=self.hooks)
        t0 = time.perf_counter()
        result = pf.search(self.graph, start, end)
        compute_ms = (time.perf_counter() - t0) * 1000

        path = reconstruct_path(result.previous, start, end)
        report = RouteReport(
            algorithm=pf.kind,
            label=algorithm_info(pf.kind).label,
            start=start,
            end=end,
            path=path,
            visited_order=list(result.visited_order),
            compute_ms=compute_ms,
            narration=narrate(path, self.graph),
        )
        self.report = report
        self.hooks.route_computed(report)
        return report

    def clear(self) -> None:
        self.report = None

    def _invalid_selection(self, start, end) -> str | None:
        if start is None or end is None:
            return "select both start and destination"
        for nid in (start, end):
            if nid not in self.graph:
                return f"node {nid} is not in the current graph"
        if start == end:
            return "start and destination cannot be the same"
        return None
