# domain/grid.py
from collections.abc import Iterable, Sequence

import numpy as np

Cell = tuple[int, int]  # (x, y)

OPEN, BLOCKED = ".", "#"
_OFFSETS = (-1, 0, 1)


class Grid:
    """
    Rectangular map with blocked cells; ``blocked[y, x]`` is True for walls.
    Supplies neighbor lists to the engine, which never sees the grid itself.
    """

    def __init__(self, blocked: np.ndarray):
        blocked = np.asarray(blocked, dtype=bool)
        if blocked.ndim != 2 or 0 in blocked.shape:
            raise ValueError(f"grid must be a non-empty 2-D array, got shape {blocked.shape}")
        self.blocked = blocked

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        if not rows:
            raise ValueError("grid needs at least one row")
        width = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != width:
                raise ValueError(f"row {i} has length {len(r)}, expected {width}")
            bad = set(r) - {OPEN, BLOCKED}
            if bad:
                raise ValueError(f"row {i} has unknown cell markers {sorted(bad)}")
        return cls(np.array([[c == BLOCKED for c in r] for r in rows], dtype=bool))

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        density: float,
        rng: np.random.Generator,
        keep_clear: Iterable[Cell] = (),
    ) -> "Grid":
        blocked = rng.random((height, width)) < density
        for x, y in keep_clear:
            if 0 <= x < width and 0 <= y < height:
                blocked[y, x] = False
        return cls(blocked)

    @property
    def width(self) -> int:
        return int(self.blocked.shape[1])

    @property
    def height(self) -> int:
        return int(self.blocked.shape[0])

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_open(self, cell: Cell) -> bool:
        return self.in_bounds(cell) and not self.blocked[cell[1], cell[0]]

    def neighbors(
        self, cell: Cell, *, connectivity: int = 8, corner_cutting: bool = True
    ) -> list[Cell]:
        """Open neighbors, scanned x-major over offsets (-1, 0, 1), then y."""
        if connectivity not in (4, 8):
            raise ValueError(f"connectivity must be 4 or 8, got {connectivity}")
        x, y = cell
        out: list[Cell] = []
        for dx in _OFFSETS:
            for dy in _OFFSETS:
                if dx == 0 and dy == 0:
                    continue
                diagonal = dx != 0 and dy != 0
                if diagonal and connectivity == 4:
                    continue
                nxt = (x + dx, y + dy)
                if not self.is_open(nxt):
                    continue
                if diagonal and not corner_cutting:
                    # both orthogonal cells next to the diagonal must be open
                    if not (self.is_open((x + dx, y)) and self.is_open((x, y + dy))):
                        continue
                out.append(nxt)
        return out

    def render(self, route: Iterable[Cell] = ()) -> str:
        chars = np.where(self.blocked, BLOCKED, OPEN).astype("<U1")
        route = list(route)
        for x, y in route:
            chars[y, x] = "*"
        if route:
            chars[route[0][1], route[0][0]] = "S"
            chars[route[-1][1], route[-1][0]] = "E"
        return "\n".join("".join(row) for row in chars)
