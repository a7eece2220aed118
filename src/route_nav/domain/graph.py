# route_nav/domain/graph.py
import math
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from route_nav.domain.entities.geography import Edge, Node, euclidean


@dataclass
class RoadGraph:
    """
    Undirected weighted road network.

    Every edge is stored twice, once in the adjacency of each endpoint, with the
    same weight and label. Edges reference node ids, never Node objects.
    Treat an instance as read-only once built; regeneration builds a new one.
    """

    nodes: dict[int, Node] = field(default_factory=dict)
    adjacency: dict[int, list[Edge]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    # ---------------- construction ----------------

    def add_node(self, node: Node) -> None:
        if node.id in self.nodes:
            raise ValueError(f"duplicate node id {node.id}")
        self.nodes[node.id] = node
        self.adjacency.setdefault(node.id, [])

    def add_edge(self, a: int, b: int, weight: float | None = None, label: str = "") -> bool:
        """Connect a and b in both directions. Returns False if they already were."""
        if a not in self.nodes or b not in self.nodes:
            missing = a if a not in self.nodes else b
            raise ValueError(f"unknown node id {missing}")
        if a == b:
            raise ValueError(f"self-loop on node {a}")
        if weight is None:
            weight = self.distance(a, b)
        if not math.isfinite(weight) or weight <= 0:
            raise ValueError(f"edge weight must be finite and > 0, got {weight}")
        if self.has_edge(a, b):
            return False
        self.adjacency[a].append(Edge(to=b, weight=weight, label=label))
        self.adjacency[b].append(Edge(to=a, weight=weight, label=label))
        return True

    # ---------------- queries ----------------

    def node(self, node_id: int) -> Node | None:
        return self.nodes.get(node_id)

    def neighbors(self, node_id: int) -> list[Edge]:
        return self.adjacency.get(node_id, [])

    def has_edge(self, a: int, b: int) -> bool:
        return any(e.to == b for e in self.adjacency.get(a, ())) or any(
            e.to == a for e in self.adjacency.get(b, ())
        )

    def edges(self) -> Iterator[tuple[int, Edge]]:
        """Yield each undirected edge once as (lower id, edge to higher id)."""
        for a, out in self.adjacency.items():
            for e in out:
                if a < e.to:
                    yield a, e

    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    def distance(self, a: int, b: int) -> float:
        return euclidean(self.nodes[a], self.nodes[b])

    def components(self) -> list[set[int]]:
        seen: set[int] = set()
        out: list[set[int]] = []
        for root in self.nodes:
            if root in seen:
                continue
            comp = {root}
            todo = deque([root])
            while todo:
                u = todo.popleft()
                for e in self.neighbors(u):
                    if e.to not in comp:
                        comp.add(e.to)
                        todo.append(e.to)
            seen |= comp
            out.append(comp)
        return out

    def is_connected(self) -> bool:
        return len(self.components()) <= 1
