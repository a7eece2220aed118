from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from route_nav.domain.generator import CITY_NAMES


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- GRAPH ---------------------


class GeoAnchorModel(BaseModel):
    """Where the planar map is pinned on the globe for the synthetic lat/lon."""

    model_config = ConfigDict(extra="forbid")
    lat: float = 40.7128
    lon: float = -74.0060
    span_deg: float = 0.1


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    node_count: int = Field(default=20, ge=0)
    width: float = 800.0
    height: float = 500.0
    margin: float = Field(default=50.0, ge=0)
    k: int = Field(default=4, ge=1)  # nearest neighbours linked per node
    name_pool: list[str] = Field(default_factory=lambda: list(CITY_NAMES))
    require_connected: bool = False
    max_attempts: int = Field(default=10, ge=1)
    anchor: GeoAnchorModel = Field(default_factory=GeoAnchorModel)

    @model_validator(mode="after")
    def _check_extent(self):
        if self.width <= 2 * self.margin or self.height <= 2 * self.margin:
            raise ValueError(
                f"map {self.width}x{self.height} leaves no room inside margin {self.margin}"
            )
        return self


# ----------------- PATHFINDERS ---------------------


class DijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


class AStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"
    heuristic: Literal["euclidean", "zero"] = "euclidean"


PathfinderUnion = Annotated[DijkstraModel | AStarModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class SessionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "default"
    run_id: str = "local"
    seed: int = 123
    log: LogModel = LogModel()
    graph: GraphModel = Field(default_factory=GraphModel)
    pathfinder: PathfinderUnion = Field(default_factory=DijkstraModel)
