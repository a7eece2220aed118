# route_nav/domain/generator.py
from collections.abc import Sequence

import numpy as np

from route_nav.domain.entities.geography import Node
from route_nav.domain.graph import RoadGraph

CITY_NAMES: tuple[str, ...] = (
    "Downtown",
    "Airport",
    "Mall",
    "Hospital",
    "University",
    "Stadium",
    "Beach",
    "Harbor",
    "Station",
    "Plaza",
    "Park",
    "Bridge",
    "Market",
    "Tower",
    "Center",
    "District",
    "Junction",
    "Terminal",
    "Complex",
    "Square",
)

DEFAULT_ANCHOR = (40.7128, -74.0060)  # (lat, lon) of the map centre


def node_name(node_id: int, name_pool: Sequence[str]) -> str:
    return name_pool[node_id] if node_id < len(name_pool) else f"Node {node_id}"


def generate_graph(
    node_count: int,
    width: float,
    height: float,
    *,
    rng: np.random.Generator,
    name_pool: Sequence[str] = CITY_NAMES,
    k: int = 4,
    margin: float = 50.0,
    anchor: tuple[float, float] = DEFAULT_ANCHOR,
    span_deg: float = 0.1,
) -> RoadGraph:
    """
    Scatter `node_count` nodes uniformly inside the map minus `margin` on every
    side, then link each node to its `k` nearest neighbours.

    Pairs already linked from the other side are skipped, so a node can end up
    with more than `k` edges but never with a duplicate. The result is not
    guaranteed to be connected.
    """
    if node_count < 0:
        raise ValueError(f"node_count must be >= 0, got {node_count}")
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    if width <= 2 * margin or height <= 2 * margin:
        raise ValueError(f"map {width}x{height} too small for margin {margin}")

    xs = rng.uniform(margin, width - margin, size=node_count)
    ys = rng.uniform(margin, height - margin, size=node_count)

    g = RoadGraph()
    lat0, lon0 = anchor
    for i in range(node_count):
        x, y = float(xs[i]), float(ys[i])
        g.add_node(
            Node(
                id=i,
                x=x,
                y=y,
                name=node_name(i, name_pool),
                lat=lat0 + (y / height - 0.5) * span_deg,
                lon=lon0 + (x / width - 0.5) * span_deg,
            )
        )

    if node_count < 2:
        return g

    # pairwise distance matrix; self distance pushed to the back of every row
    d = np.hypot(xs[:, None] - xs[None, :], ys[:, None] - ys[None, :])
    np.fill_diagonal(d, np.inf)
    n_links = min(k, node_count - 1)
    for i in range(node_count):
        for j in map(int, np.argsort(d[i], kind="stable")[:n_links]):
            g.add_edge(i, j, g.distance(i, j), label=f"Road {i}-{j}")
    return g
