# pullstar/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from pullstar.app.driver import DriveReport, drive
from pullstar.config.models import ScenarioModel
from pullstar.domain.grid import Grid
from pullstar.io.recorder import Recorder
from pullstar.io.search_logging import SearchLogging
from pullstar.runtime.registries import make_grid, make_heuristic
from pullstar.runtime.rng import RNGRegistry
from pullstar.search.engine import Engine
from pullstar.search.hooks import NoopHooks, SearchHooks


@dataclass
class App:
    scenario: ScenarioModel
    rng: RNGRegistry
    grid: Grid
    engine: Engine
    hooks: SearchHooks

    def neighbors(self, cell):
        mv = self.scenario.movement
        return self.grid.neighbors(
            cell, connectivity=mv.connectivity, corner_cutting=mv.corner_cutting
        )

    def run(self) -> DriveReport:
        s = self.scenario
        return drive(self.engine, s.start, s.end, self.neighbors, max_steps=s.max_steps)


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) RNG & map
    rng = RNGRegistry(model.seed, scenario=model.name)
    grid = make_grid(model.grid, rng=rng, keep_clear=(model.start, model.end))

    # 2) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level="DEBUG" if model.log.debug else model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
            recorder=recorder,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Engine
    heuristic = make_heuristic(model.engine.heuristic)
    engine = Engine(heuristic, tie_break=model.engine.tie_break, hooks=hooks)

    return App(model, rng, grid, engine, hooks)


def run(cfg: ScenarioModel | Mapping, **kw) -> DriveReport:
    return build(cfg, **kw).run()

