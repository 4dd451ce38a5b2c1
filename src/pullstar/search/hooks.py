# search/hooks.py
from typing import Protocol

from pullstar.search.path import Path, Position


class SearchHooks(Protocol):
    def begin(self, start: Position, end: Position): ...
    def expand(self, best: Path, *, enqueued: int, skipped: int, frontier_size: int): ...
    def done(self, path: Path, *, expansions: int, frontier_size: int): ...
    def no_path(self, *, expansions: int, visited: int): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def begin(self, *_, **__):
        pass

    def expand(self, *_, **__):
        pass

    def done(self, *_, **__):
        pass

    def no_path(self, **_):
        pass

    def error(self, **_):
        pass
