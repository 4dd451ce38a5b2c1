# search/frontier.py
import heapq
from typing import Literal

from pullstar.search.path import Distance, Path, Position

TieBreak = Literal["fifo", "lifo"]


class Frontier:
    """
    Min-heap of paths keyed by ``cost + distance(current, end)``.
    Equal keys pop in insertion order (fifo) or reverse insertion order (lifo).
    """

    def __init__(self, distance: Distance, tie_break: TieBreak = "fifo"):
        if tie_break not in ("fifo", "lifo"):
            raise ValueError(f"Unknown tie_break {tie_break!r}")
        self._distance = distance
        self._sign = 1 if tie_break == "fifo" else -1
        self._q: list[tuple[float, int, Path]] = []
        self._seq = 0
        self.end: Position = None

    def reset(self, end: Position) -> None:
        self._q.clear()
        self._seq = 0
        self.end = end

    def key(self, p: Path) -> float:
        return p.f(self._distance, self.end)

    def push(self, p: Path, key: float | None = None) -> None:
        """Queue ``p``; a ``key`` computed earlier with ``key(p)`` is used as is."""
        if key is None:
            key = self.key(p)
        self._seq += 1
        heapq.heappush(self._q, (key, self._sign * self._seq, p))

    def pop(self) -> Path:
        if not self._q:
            raise IndexError("pop from empty frontier")
        return heapq.heappop(self._q)[2]

    def peek(self) -> Path:
        if not self._q:
            raise IndexError("peek at empty frontier")
        return self._q[0][2]

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)
