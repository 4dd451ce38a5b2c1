# domain/heuristics.py
import math
from collections.abc import Callable

Cell = tuple[int, int]
Heuristic = Callable[[Cell, Cell], float]

SQRT2 = math.sqrt(2.0)


def chebyshev(a: Cell, b: Cell) -> int:
    """Exact step count on an 8-connected open grid; consistent there."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Cell, b: Cell) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def octile(a: Cell, b: Cell) -> float:
    dx, dy = abs(a[0] - b[0]), abs(a[1] - b[1])
    return max(dx, dy) + (SQRT2 - 1.0) * min(dx, dy)


def zero(a: Cell, b: Cell) -> int:
    # degrades A* to uniform-cost search
    return 0


def min_axis(a: Cell, b: Cell) -> int:
    """min(|dx|, |dy|): admissible on 8-connected grids but weak."""
    return min(abs(a[0] - b[0]), abs(a[1] - b[1]))


def weighted(fn: Heuristic, w: float) -> Heuristic:
    if w < 0:
        raise ValueError(f"heuristic weight must be >= 0, got {w}")
    if w == 1.0:
        return fn

    def h(a: Cell, b: Cell) -> float:
        return w * fn(a, b)

    h.__name__ = f"{fn.__name__}_x{w:g}"
    return h
