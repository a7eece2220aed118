# search/pathfinder.py
"""
Dijkstra and A* over a RoadGraph.

Both run the same best-first loop and differ only in the queue priority:
Dijkstra orders by accumulated cost g, A* by g + h(node, end). Instead of a
decrease-key operation, an improved cost is pushed as a fresh queue entry and
the outdated copy is dropped when it is extracted after the node was
finalized. Queue growth stays bounded because finalized nodes are never
relaxed again.

Callers are expected to validate start/end ids. An id missing from the graph
is not an error here: the search just reports the end as unreachable.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass, field

from route_nav.app.protocols import Heuristic
from route_nav.domain.graph import RoadGraph
from route_nav.search.heuristics import euclidean_h
from route_nav.sim.hooks import NoopHooks, SearchHooks
from route_nav.sim.pqueue import PriorityQueue

Priority = Callable[[int, float], float]  # (node_id, g) -> queue priority


@dataclass
class SearchResult:
    algorithm: str
    costs: dict[int, float] = field(default_factory=dict)
    previous: dict[int, int | None] = field(default_factory=dict)
    visited_order: list[int] = field(default_factory=list)

    def cost(self, node_id: int) -> float:
        return self.costs.get(node_id, math.inf)

    def reached(self, node_id: int) -> bool:
        return math.isfinite(self.cost(node_id))


def _best_first(
    graph: RoadGraph,
    start: int,
    end: int,
    *,
    algorithm: str,
    priority: Priority,
    hooks: SearchHooks,
) -> SearchResult:
    res = SearchResult(algorithm=algorithm)
    for nid in graph.nodes:
        res.costs[nid] = math.inf
        res.previous[nid] = None
    res.costs[start] = 0.0
    res.previous[start] = None

    finalized: set[int] = set()
    pq: PriorityQueue[int] = PriorityQueue()
    pq.insert(start, priority(start, 0.0))
    hooks.search_start(algorithm=algorithm, start=start, end=end, nodes=len(graph))

    while not pq.is_empty():
        current, _ = pq.extract_min()
        if current in finalized:
            continue  # stale entry
        finalized.add(current)
        res.visited_order.append(current)
        hooks.node_finalized(current, cost=res.costs[current], qsize=len(pq))
        if current == end:
            break

        g = res.costs[current]
        for edge in graph.neighbors(current):
            nb = edge.to
            if nb in finalized:
                continue
            tentative = g + edge.weight
            if tentative < res.costs.get(nb, math.inf):
                res.costs[nb] = tentative
                res.previous[nb] = current
                pq.insert(nb, priority(nb, tentative))

    hooks.search_end(
        algorithm=algorithm,
        finalized=len(res.visited_order),
        reached=end in finalized,
        qsize=len(pq),
    )
    return res


class DijkstraPathfinder:
    kind = "dijkstra"

    def __init__(self, hooks: SearchHooks | None = None):
        self.hooks = hooks or NoopHooks()

    def search(self, graph: RoadGraph, start: int, end: int) -> SearchResult:
        return _best_first(
            graph, start, end, algorithm=self.kind, priority=lambda _n, g: g, hooks=self.hooks
        )


class AStarPathfinder:
    """A* search; optimal as long as the heuristic is admissible and consistent."""

    kind = "astar"

    def __init__(self, heuristic: Heuristic = euclidean_h, hooks: SearchHooks | None = None):
        self.heuristic = heuristic
        self.hooks = hooks or NoopHooks()

    def search(self, graph: RoadGraph, start: int, end: int) -> SearchResult:
        def f(n: int, g: float) -> float:
            return g + self.heuristic(graph, n, end)

        return _best_first(graph, start, end, algorithm=self.kind, priority=f, hooks=self.hooks)


# Convenience entry points


def dijkstra(
    graph: RoadGraph, start: int, end: int, hooks: SearchHooks | None = None
) -> SearchResult:
    return DijkstraPathfinder(hooks).search(graph, start, end)


def astar(
    graph: RoadGraph,
    start: int,
    end: int,
    heuristic: Heuristic = euclidean_h,
    hooks: SearchHooks | None = None,
) -> SearchResult:
    return AStarPathfinder(heuristic, hooks).search(graph, start, end)


def find_path(graph: RoadGraph, start: int, end: int, algorithm: str = "dijkstra") -> SearchResult:
    # local import: registries imports this module
    from route_nav.runtime.registries import make_pathfinder

    return make_pathfinder(algorithm).search(graph, start, end)
