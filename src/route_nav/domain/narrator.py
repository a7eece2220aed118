# route_nav/domain/narrator.py
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from route_nav.domain.entities.geography import Node, Point, euclidean
from route_nav.domain.graph import RoadGraph

STRAIGHT_TOLERANCE_DEG = 20.0
U_TURN_THRESHOLD_DEG = 160.0

CONTINUE = "Continue straight"
TURN_RIGHT = "Turn right"
TURN_LEFT = "Turn left"
U_TURN = "Make a U-turn"


@dataclass(frozen=True)
class Instruction:
    text: str
    distance: float  # map units, unrounded
    from_name: str
    to_name: str


@dataclass
class Narration:
    instructions: list[Instruction] = field(default_factory=list)
    total_distance: float = 0.0


def reconstruct_path(previous: Mapping[int, int | None], start: int, end: int) -> list[int]:
    """
    Walk predecessors back from `end`. Returns [] when the walk does not land on
    `start` or yields fewer than two nodes (which also covers start == end).
    """
    path: list[int] = []
    seen: set[int] = set()
    cur: int | None = end
    while cur is not None:
        if cur in seen:
            raise ValueError(f"predecessor cycle through node {cur}")
        seen.add(cur)
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    if path[0] != start or len(path) < 2:
        return []
    return path


def bearing(a: Point | Node, b: Point | Node) -> float:
    return math.degrees(math.atan2(b.y - a.y, b.x - a.x))


def turn_angle(b1: float, b2: float) -> float:
    """Signed change from bearing b1 to b2, in (-180, 180]."""
    a = (b2 - b1) % 360.0
    return a - 360.0 if a > 180.0 else a


def turn_direction(b1: float, b2: float) -> str:
    a = turn_angle(b1, b2)
    if abs(a) < STRAIGHT_TOLERANCE_DEG:
        return CONTINUE
    if STRAIGHT_TOLERANCE_DEG <= a < U_TURN_THRESHOLD_DEG:
        return TURN_RIGHT
    if -U_TURN_THRESHOLD_DEG < a <= -STRAIGHT_TOLERANCE_DEG:
        return TURN_LEFT
    return U_TURN


def _lookup(graph: RoadGraph, node_id: int) -> Node:
    n = graph.node(node_id)
    if n is None:
        raise KeyError(f"path references node {node_id} missing from graph")
    return n


def narrate(path: Sequence[int], graph: RoadGraph) -> Narration:
    if len(path) < 2:
        return Narration()

    nodes = [_lookup(graph, nid) for nid in path]
    out: list[Instruction] = []
    total = 0.0
    for i in range(len(nodes) - 1):
        cur, nxt = nodes[i], nodes[i + 1]
        hop = euclidean(cur, nxt)
        total += hop
        if i == 0:
            text = f"Start at {cur.name}"
        else:
            turn = turn_direction(bearing(nodes[i - 1], cur), bearing(cur, nxt))
            text = f"{turn} toward {nxt.name}"
        out.append(Instruction(text, hop, cur.name, nxt.name))

    last = nodes[-1]
    out.append(Instruction(f"Arrive at {last.name}", 0.0, last.name, last.name))
    return Narration(out, total)
