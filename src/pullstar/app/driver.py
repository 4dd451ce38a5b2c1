# app/driver.py
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from pullstar.search.engine import Engine
from pullstar.search.outcome import Done, Outcome, Request
from pullstar.search.path import Position

NeighborFn = Callable[[Position], Iterable[Position]]


@dataclass
class DriveReport:
    outcome: Outcome
    steps: int  # advance() calls made
    budget_exhausted: bool = False

    @property
    def found(self) -> bool:
        return isinstance(self.outcome, Done)

    @property
    def route(self) -> list | None:
        return self.outcome.route if isinstance(self.outcome, Done) else None


def drive(
    engine: Engine,
    start: Position,
    end: Position,
    neighbors_of: NeighborFn,
    *,
    max_steps: int | None = None,
) -> DriveReport:
    """
    Run the begin/advance loop to completion, or until ``max_steps`` advances.
    On budget exhaustion the last ``Request`` is returned and the engine is
    left mid-search, so the caller may keep advancing it by hand.
    """
    outcome = engine.begin(start, end)
    steps = 0
    while isinstance(outcome, Request):
        if max_steps is not None and steps >= max_steps:
            return DriveReport(outcome, steps, budget_exhausted=True)
        outcome = engine.advance(neighbors_of(outcome.position))
        steps += 1
    return DriveReport(outcome, steps)
