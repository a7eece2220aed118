# tests/config/test_config_models.py
import pytest
from pydantic import ValidationError

from route_nav.config.models import AStarModel, DijkstraModel, GraphModel, SessionModel
from route_nav.domain.generator import CITY_NAMES
from route_nav.runtime.registries import (
    algorithm_info,
    algorithm_kinds,
    get_heuristic,
    make_pathfinder,
)
from route_nav.search.heuristics import euclidean_h


def test_defaults_match_demo_map():
    cfg = SessionModel()
    assert (cfg.graph.node_count, cfg.graph.width, cfg.graph.height) == (20, 800.0, 500.0)
    assert cfg.graph.k == 4 and cfg.graph.margin == 50.0
    assert cfg.graph.name_pool == list(CITY_NAMES)
    assert cfg.graph.require_connected is False
    assert isinstance(cfg.pathfinder, DijkstraModel)


def test_pathfinder_union_discriminates_on_kind():
    cfg = SessionModel.model_validate({"pathfinder": {"kind": "astar"}})
    assert isinstance(cfg.pathfinder, AStarModel)
    assert cfg.pathfinder.heuristic == "euclidean"
    with pytest.raises(ValidationError):
        SessionModel.model_validate({"pathfinder": {"kind": "bfs"}})


def test_map_must_leave_room_inside_margin():
    with pytest.raises(ValidationError) as exc_info:
        GraphModel(width=100, margin=50)
    assert "margin" in str(exc_info.value)
    with pytest.raises(ValidationError):
        GraphModel(height=80, margin=40)


def test_unknown_fields_are_forbidden():
    with pytest.raises(ValidationError):
        SessionModel.model_validate({"graph": {"nodes": 10}})
    with pytest.raises(ValidationError):
        GraphModel(k=0)


def test_registry_catalogue():
    assert algorithm_kinds() == ["dijkstra", "astar"]
    assert algorithm_info("astar").label == "A* Search"
    assert "heuristic" in algorithm_info("astar").description
    assert algorithm_info("dijkstra").label == "Dijkstra's Algorithm"
    assert get_heuristic("euclidean") is euclidean_h
    with pytest.raises(ValueError):
        algorithm_info("bfs")
    with pytest.raises(ValueError):
        get_heuristic("manhattan")


def test_make_pathfinder_from_kind_or_model():
    assert make_pathfinder("dijkstra").kind == "dijkstra"
    pf = make_pathfinder(AStarModel(heuristic="zero"))
    assert pf.kind == "astar"
    assert pf.heuristic is get_heuristic("zero")
