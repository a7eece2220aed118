# sim/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def search_start(self, *, algorithm, start, end, nodes): ...
    def node_finalized(self, node_id, *, cost, qsize): ...
    def search_end(self, *, algorithm, finalized, reached, qsize): ...
    def graph_built(self, *, generation, nodes, edges, components): ...
    def route_computed(self, report): ...
    def route_rejected(self, *, reason: str, start, end): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def node_finalized(self, *_, **__):
        pass

    def search_end(self, **_):
        pass

    def graph_built(self, **_):
        pass

    def route_computed(self, *_):
        pass

    def route_rejected(self, **_):
        pass
