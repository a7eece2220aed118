import math

from route_nav.domain.graph import RoadGraph


def euclidean_h(graph: RoadGraph, u: int, goal: int) -> float:
    """Straight-line distance from u to goal; 0 if either id is not in the graph."""
    pu, pg = graph.node(u), graph.node(goal)
    if pu is None or pg is None:
        return 0.0
    return math.hypot(pg.x - pu.x, pg.y - pu.y)


def zero_h(graph: RoadGraph, u: int, goal: int) -> float:
    return 0.0
