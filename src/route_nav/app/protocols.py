from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from route_nav.domain.graph import RoadGraph


@runtime_checkable
class Heuristic(Protocol):
    """
    Estimated remaining cost from node u to goal.
    Must never overestimate the true shortest distance, or A* loses optimality.
    """

    def __call__(self, graph: RoadGraph, u: int, goal: int) -> float: ...


@runtime_checkable
class SearchOutcome(Protocol):
    algorithm: str
    costs: Mapping[int, float]
    previous: Mapping[int, int | None]
    visited_order: list[int]


@runtime_checkable
class Pathfinder(Protocol):
    """
    Responsibilities:
      • Compute best-known cost and predecessor for every node reached from start.
      • Record the order in which nodes were finalized (for visualisation only).
    Start/end ids absent from the graph are not an error: the end is simply unreachable.
    """

    kind: str

    def search(self, graph: RoadGraph, start: int, end: int) -> SearchOutcome: ...
