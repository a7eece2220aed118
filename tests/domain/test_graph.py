# tests/domain/test_graph.py
import math

import pytest

from route_nav.domain.entities.geography import Node
from route_nav.domain.graph import RoadGraph


def _graph(*coords) -> RoadGraph:
    g = RoadGraph()
    for i, (x, y) in enumerate(coords):
        g.add_node(Node(id=i, x=x, y=y, name=f"N{i}"))
    return g


def test_add_edge_is_symmetric_with_default_euclidean_weight():
    g = _graph((0.0, 0.0), (3.0, 4.0))
    assert g.add_edge(0, 1, label="Road 0-1") is True
    (e01,) = g.neighbors(0)
    (e10,) = g.neighbors(1)
    assert (e01.to, e10.to) == (1, 0)
    assert e01.weight == e10.weight == 5.0
    assert e01.label == e10.label == "Road 0-1"


def test_duplicate_pair_is_skipped_from_either_direction():
    g = _graph((0.0, 0.0), (1.0, 0.0))
    assert g.add_edge(0, 1)
    assert not g.add_edge(1, 0)
    assert not g.add_edge(0, 1, 99.0)
    assert len(g.neighbors(0)) == len(g.neighbors(1)) == 1
    assert g.edge_count() == 1


def test_rejects_self_loops_unknown_ids_and_bad_weights():
    g = _graph((0.0, 0.0), (1.0, 0.0))
    with pytest.raises(ValueError):
        g.add_edge(0, 0)
    with pytest.raises(ValueError):
        g.add_edge(0, 5)
    with pytest.raises(ValueError):
        g.add_edge(0, 1, -1.0)
    with pytest.raises(ValueError):
        g.add_edge(0, 1, math.nan)
    with pytest.raises(ValueError):
        g.add_node(Node(id=0, x=1.0, y=1.0, name="dup"))


def test_zero_length_edges_are_rejected():
    g = _graph((2.0, 2.0), (2.0, 2.0))
    with pytest.raises(ValueError, match="> 0"):
        g.add_edge(0, 1)
    with pytest.raises(ValueError):
        g.add_edge(0, 1, 0.0)
    assert g.edge_count() == 0


def test_lookups_never_raise_for_unknown_ids():
    g = _graph((0.0, 0.0))
    assert g.neighbors(42) == []
    assert g.neighbors(0) == []
    assert g.node(42) is None
    assert g.node(0).name == "N0"
    assert 0 in g and 42 not in g


def test_edges_yields_each_undirected_edge_once():
    g = _graph((0.0, 0.0), (1.0, 0.0), (1.0, 1.0))
    g.add_edge(0, 1)
    g.add_edge(2, 1)
    assert sorted((a, e.to) for a, e in g.edges()) == [(0, 1), (1, 2)]


def test_components():
    g = _graph((0.0, 0.0), (1.0, 0.0), (5.0, 5.0), (6.0, 5.0), (9.0, 9.0))
    g.add_edge(0, 1)
    g.add_edge(2, 3)
    comps = sorted(g.components(), key=min)
    assert comps == [{0, 1}, {2, 3}, {4}]
    assert not g.is_connected()
    g2 = _graph((0.0, 0.0), (1.0, 0.0))
    g2.add_edge(0, 1)
    assert g2.is_connected()
