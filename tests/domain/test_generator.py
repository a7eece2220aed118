# tests/domain/test_generator.py
from collections import Counter

import numpy as np
import pytest

from route_nav.domain.generator import CITY_NAMES, generate_graph

SEEDS = [0, 1, 2, 3, 42]


@pytest.fixture(params=SEEDS)
def graph(request):
    return generate_graph(20, 800, 500, rng=np.random.default_rng(request.param))


def test_adjacency_is_symmetric(graph):
    for a, out in graph.adjacency.items():
        for e in out:
            back = [r for r in graph.neighbors(e.to) if r.to == a]
            assert len(back) == 1
            assert back[0].weight == e.weight


def test_no_self_loops_or_duplicates(graph):
    for a, out in graph.adjacency.items():
        targets = Counter(e.to for e in out)
        assert a not in targets
        assert all(n == 1 for n in targets.values())
        assert set(targets) <= set(graph.nodes)


def test_every_node_reaches_at_least_k_neighbours(graph):
    assert all(len(out) >= 4 for out in graph.adjacency.values())


def test_weights_are_euclidean_and_labelled(graph):
    for a, e in graph.edges():
        assert e.weight == pytest.approx(graph.distance(a, e.to))
        assert e.weight > 0
        assert e.label in (f"Road {a}-{e.to}", f"Road {e.to}-{a}")


def test_coordinates_stay_inside_margin(graph):
    for n in graph.nodes.values():
        assert 50 <= n.x <= 750
        assert 50 <= n.y <= 450


def test_names_and_fallback():
    g = generate_graph(22, 800, 500, rng=np.random.default_rng(5))
    assert [g.node(i).name for i in range(20)] == list(CITY_NAMES)
    assert g.node(20).name == "Node 20"
    assert g.node(21).name == "Node 21"


def test_synthetic_lat_lon_follow_position():
    g = generate_graph(5, 800, 500, rng=np.random.default_rng(9), anchor=(10.0, 20.0), span_deg=1.0)
    for n in g.nodes.values():
        assert n.lat == pytest.approx(10.0 + (n.y / 500 - 0.5))
        assert n.lon == pytest.approx(20.0 + (n.x / 800 - 0.5))


def test_same_seed_same_graph():
    g1 = generate_graph(15, 800, 500, rng=np.random.default_rng(11))
    g2 = generate_graph(15, 800, 500, rng=np.random.default_rng(11))
    assert g1.nodes == g2.nodes
    assert g1.adjacency == g2.adjacency


def test_small_graphs():
    assert len(generate_graph(0, 800, 500, rng=np.random.default_rng(0))) == 0
    one = generate_graph(1, 800, 500, rng=np.random.default_rng(0))
    assert one.neighbors(0) == []
    three = generate_graph(3, 800, 500, rng=np.random.default_rng(0), k=4)
    assert three.edge_count() == 3  # k capped at node_count - 1


def test_rejects_bad_arguments():
    rng = np.random.default_rng(0)
    with pytest.raises(ValueError):
        generate_graph(-1, 800, 500, rng=rng)
    with pytest.raises(ValueError):
        generate_graph(5, 100, 500, rng=rng)
    with pytest.raises(ValueError):
        generate_graph(5, 800, 500, rng=rng, k=0)
