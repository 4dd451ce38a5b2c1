# search/path.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

Position = Any  # caller-owned; equality required, hashability preferred
Distance = Callable[[Any, Any], float]


@dataclass
class Path:
    """
    Route taken so far plus the frontier tip.

    ``path`` holds the positions from the start up to (excluding) ``current``.
    Once finalized, ``current`` is the end and ``path`` is the full inclusive route.
    """

    current: Position
    path: list[Position] = field(default_factory=list)
    finalized: bool = False

    @property
    def cost(self) -> int:
        # unit edges; a finalized path also holds its tip
        return len(self.path) - 1 if self.finalized else len(self.path)

    def f(self, distance: Distance, end: Position) -> float:
        return self.cost + distance(self.current, end)

    def extend(self, position: Position) -> Path:
        return Path(current=position, path=[*self.path, self.current])

    def finalize(self, end: Position) -> Path:
        self.path.append(self.current)
        self.path.append(end)
        self.current = end
        self.finalized = True
        return self

    def arrive(self) -> Path:
        """Finalize a path whose tip already is the end."""
        self.path.append(self.current)
        self.finalized = True
        return self

    def positions(self) -> list[Position]:
        """Inclusive start -> tip route."""
        return list(self.path) if self.finalized else [*self.path, self.current]
