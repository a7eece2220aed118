import math
from dataclasses import dataclass


# Core geometry types shared by the graph, the search and the narrator
@dataclass(frozen=True)
class Point:
    x: float  # planar map units, y grows downwards like screen space
    y: float


@dataclass(frozen=True)
class Node:
    id: int
    x: float
    y: float
    name: str
    lat: float | None = None  # synthetic geo coordinates, None for hand-built graphs
    lon: float | None = None


@dataclass(frozen=True)
class Edge:
    to: int
    weight: float
    label: str = ""


def euclidean(a: Point | Node, b: Point | Node) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)
