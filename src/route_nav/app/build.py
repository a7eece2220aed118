# route_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from route_nav.app.session import RouteSession
from route_nav.config.models import SessionModel
from route_nav.io.recorder import Recorder
from route_nav.io.search_logging import SearchLogging
from route_nav.sim.hooks import NoopHooks, SearchHooks
from route_nav.sim.rng import RNGRegistry


@dataclass
class App:
    config: SessionModel
    rng: RNGRegistry
    hooks: SearchHooks
    session: RouteSession


def build(
    cfg: SessionModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = SessionModel()
    else:
        model = cfg if isinstance(cfg, SessionModel) else SessionModel.model_validate(cfg)

    # 1) RNG
    rng_registry = RNGRegistry(model.seed, scenario=model.name)

    # 2) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Session with a first graph
    session = RouteSession(model.graph, rng_registry, pathfinder=model.pathfinder, hooks=hooks)
    session.regenerate()

    return App(model, rng_registry, hooks, session)
