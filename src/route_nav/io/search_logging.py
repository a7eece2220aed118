# io/search_logging.py
import json
import logging
import sys

from route_nav.io.recorder import Recorder
from route_nav.io.route_events import GraphRegeneratedBiz, RouteFoundBiz, RouteNotFoundBiz
from route_nav.sim.hooks import NoopHooks


def _default_json_logger(name="route_nav", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for graph generation, searches and route requests, plus
    analytics events forwarded to an optional Recorder.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._finalized = 0
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def _biz(self, cls, name: str, **fields):
        if self.recorder is None:
            return
        self._seq += 1
        self.recorder.emit(cls(run_id=self.run_id, seq=self._seq, name=name, **fields))

    # --------------- search lifecycle ---------------------

    def search_start(self, *, algorithm: str, start, end, nodes: int):
        self._finalized = 0
        if self.debug:
            self._emit(
                "DEBUG", "search_start", algorithm=algorithm, start=start, end=end, nodes=nodes
            )

    def node_finalized(self, node_id, *, cost: float, qsize: int):
        self._finalized += 1
        if self.debug and (self._finalized % self.sample_every) == 0:
            self._emit("DEBUG", "node_finalized", node=node_id, cost=cost, qsize=qsize)

    def search_end(self, *, algorithm: str, finalized: int, reached: bool, qsize: int):
        self._emit(
            "INFO",
            "search_end",
            algorithm=algorithm,
            finalized=finalized,
            reached=reached,
            qsize=qsize,
        )

    # --------------- session actions ----------------------

    def graph_built(self, *, generation: int, nodes: int, edges: int, components: int):
        level = "WARNING" if components > 1 else "INFO"
        self._emit(
            level,
            "graph_built",
            generation=generation,
            nodes=nodes,
            edges=edges,
            components=components,
        )
        self._biz(
            GraphRegeneratedBiz,
            "graph_regenerated",
            generation=generation,
            nodes=nodes,
            edges=edges,
            components=components,
        )

    def route_computed(self, report):
        common = dict(
            algorithm=report.algorithm,
            start=report.start,
            end=report.end,
            nodes_visited=report.nodes_visited,
            compute_ms=report.compute_ms,
        )
        if report.found:
            self._emit(
                "INFO",
                "route_found",
                total_distance=report.total_distance,
                hops=len(report.path) - 1,
                **common,
            )
            self._biz(
                RouteFoundBiz,
                "route_found",
                path=list(report.path),
                total_distance=report.total_distance,
                **common,
            )
        else:
            self._emit("WARNING", "route_not_found", **common)
            self._biz(RouteNotFoundBiz, "route_not_found", **common)

    def route_rejected(self, *, reason: str, start, end):
        self._emit("WARNING", "route_rejected", reason=reason, start=start, end=end)
