from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- HEURISTICS ---------------------


class _HeuristicBase(BaseModel):
    model_config = ConfigDict(extra="forbid")
    weight: float = 1.0

    @field_validator("weight")
    @classmethod
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


class HeuristicChebyshevModel(_HeuristicBase):
    kind: Literal["chebyshev"] = "chebyshev"


class HeuristicManhattanModel(_HeuristicBase):
    kind: Literal["manhattan"] = "manhattan"


class HeuristicEuclideanModel(_HeuristicBase):
    kind: Literal["euclidean"] = "euclidean"


class HeuristicOctileModel(_HeuristicBase):
    kind: Literal["octile"] = "octile"


class HeuristicZeroModel(_HeuristicBase):
    kind: Literal["zero"] = "zero"


HeuristicUnion = Annotated[
    HeuristicChebyshevModel
    | HeuristicManhattanModel
    | HeuristicEuclideanModel
    | HeuristicOctileModel
    | HeuristicZeroModel,
    Field(discriminator="kind"),
]


class EngineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    tie_break: Literal["fifo", "lifo"] = "fifo"
    heuristic: HeuristicUnion = Field(default_factory=HeuristicChebyshevModel)


# --------------------- GRIDS -------------------------


class GridRowsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["rows"] = "rows"
    rows: list[str]

    @field_validator("rows")
    @classmethod
    def _rectangular(cls, v: list[str]) -> list[str]:
        if not v or not v[0]:
            raise ValueError("rows must be non-empty")
        if any(len(r) != len(v[0]) for r in v):
            raise ValueError("all rows must have the same length")
        if any(set(r) - {".", "#"} for r in v):
            raise ValueError("rows may only contain '.' and '#'")
        return v

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)


class GridRandomModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["random"] = "random"
    width: int = Field(ge=1)
    height: int = Field(ge=1)
    density: float = Field(default=0.2, ge=0.0, lt=1.0)
    seed: int = 0


GridUnion = Annotated[GridRowsModel | GridRandomModel, Field(discriminator="kind")]


class MovementModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    connectivity: Literal[4, 8] = 8
    corner_cutting: bool = True


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    seed: int = 0
    log: LogModel = LogModel()
    engine: EngineModel = EngineModel()
    grid: GridUnion
    movement: MovementModel = MovementModel()
    start: tuple[int, int]
    end: tuple[int, int]
    max_steps: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _endpoints_in_grid(self):
        w, h = self.grid.width, self.grid.height
        for label, (x, y) in (("start", self.start), ("end", self.end)):
            if not (0 <= x < w and 0 <= y < h):
                raise ValueError(f"{label} {(x, y)} lies outside the {w}x{h} grid")
        return self
