# search/visited.py
from collections.abc import Hashable


class Visited:
    """
    Positions already queued or expanded.
    Hashable positions go in a set; anything else is kept in a list and
    matched by equality alone.
    """

    def __init__(self):
        self._hashed: set = set()
        self._scan: list = []

    def add(self, pos) -> None:
        if isinstance(pos, Hashable):
            try:
                self._hashed.add(pos)
                return
            except TypeError:
                # e.g. a tuple holding a list
                pass
        self._scan.append(pos)

    def __contains__(self, pos) -> bool:
        if isinstance(pos, Hashable):
            try:
                if pos in self._hashed:
                    return True
            except TypeError:
                pass
        return any(pos == p for p in self._scan)

    def __len__(self) -> int:
        return len(self._hashed) + len(self._scan)

    def clear(self) -> None:
        self._hashed.clear()
        self._scan.clear()
