# tests/app/test_build_and_run.py
import json

from route_nav.app.build import build
from route_nav.io.config import load_config
from route_nav.io.recorder import MemorySink, Recorder
from route_nav.io.route_events import GraphRegeneratedBiz, RouteFoundBiz
from route_nav.sim.hooks import NoopHooks


def test_build_runs():
    cfg = {
        "name": "test",
        "run_id": "t-1",
        "seed": 1,
        "graph": {"node_count": 15, "width": 600, "height": 400},
        "pathfinder": {"kind": "astar"},
    }
    app = build(cfg, use_logging=False)
    assert isinstance(app.hooks, NoopHooks)
    assert len(app.session.graph) == 15
    comp = sorted(max(app.session.graph.components(), key=len))
    report = app.session.find_route(comp[0], comp[-1])
    assert report.found
    assert report.algorithm == "astar"


def test_build_with_defaults_and_recorder():
    sink = MemorySink()
    app = build(recorder=Recorder(sink))
    assert len(app.session.graph) == 20
    comp = sorted(max(app.session.graph.components(), key=len))
    app.session.find_route(comp[0], comp[1])
    kinds = [type(ev) for ev in sink.events]
    assert kinds == [GraphRegeneratedBiz, RouteFoundBiz]
    assert [ev.seq for ev in sink.events] == [1, 2]
    assert all(ev.run_id == "local" for ev in sink.events)


def test_same_config_same_graph(tmp_path):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"name": "repro", "seed": 99}))
    cfg = load_config(path)
    g1 = build(cfg, use_logging=False).session.graph
    g2 = build(cfg, use_logging=False).session.graph
    assert g1.nodes == g2.nodes
    assert g1.adjacency == g2.adjacency
