# route_nav/io/route_events.py

from dataclasses import dataclass


# Base type for analytics events emitted after each session action
@dataclass
class RouteEvent:
    run_id: str
    seq: int  # emission sequence within the run
    name: str  # stable event name


@dataclass
class GraphRegeneratedBiz(RouteEvent):
    generation: int
    nodes: int
    edges: int
    components: int


@dataclass
class RouteFoundBiz(RouteEvent):
    algorithm: str
    start: int
    end: int
    path: list[int]
    total_distance: float
    nodes_visited: int
    compute_ms: float


@dataclass
class RouteNotFoundBiz(RouteEvent):
    algorithm: str
    start: int
    end: int
    nodes_visited: int
    compute_ms: float
