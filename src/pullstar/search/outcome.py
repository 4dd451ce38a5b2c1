# search/outcome.py
from dataclasses import dataclass
from typing import Any, ClassVar

from pullstar.search.path import Path


@dataclass(frozen=True)
class Request:
    """Resume by calling ``advance`` with the neighbors of ``position``."""

    position: Any
    terminal: ClassVar[bool] = False


@dataclass(frozen=True)
class Done:
    path: Path
    terminal: ClassVar[bool] = True

    @property
    def route(self) -> list:
        return self.path.positions()


@dataclass(frozen=True)
class NoPath:
    terminal: ClassVar[bool] = True


Outcome = Request | Done | NoPath
