# search/engine.py
from collections.abc import Iterable
from enum import Enum

from pullstar.search.errors import SearchResourceError, SearchStateError
from pullstar.search.frontier import Frontier, TieBreak
from pullstar.search.hooks import NoopHooks, SearchHooks
from pullstar.search.outcome import Done, NoPath, Outcome, Request
from pullstar.search.path import Distance, Path, Position
from pullstar.search.visited import Visited


class SearchState(Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    TERMINAL = "terminal"


class Engine:
    """
    Resumable A* driven by the caller.

    ``begin`` answers with a ``Request`` for the start's neighbors; every
    ``advance(neighbors)`` expands the best frontier path with those neighbors
    and answers with the next ``Request``, a ``Done`` or a ``NoPath``.
    One live search per instance.
    """

    def __init__(
        self,
        distance: Distance,
        *,
        tie_break: TieBreak = "fifo",
        hooks: SearchHooks | None = None,
    ):
        self._distance = distance
        self._frontier = Frontier(distance, tie_break)
        self._visited = Visited()
        self._hooks = hooks or NoopHooks()
        self._state = SearchState.IDLE
        self._start: Position = None
        self._end: Position = None
        self._request: Position = None
        self._expansions = 0

    # ---------------- read-only view -----------------

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def start(self) -> Position:
        return self._start

    @property
    def end(self) -> Position:
        return self._end

    @property
    def request(self) -> Position:
        """Position whose neighbors the next ``advance`` expects (None when not searching)."""
        return self._request

    @property
    def expansions(self) -> int:
        return self._expansions

    @property
    def frontier_size(self) -> int:
        return len(self._frontier)

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    # ---------------- protocol -----------------

    def begin(self, start: Position, end: Position) -> Outcome:
        self._abandon()
        self._start, self._end = start, end
        self._hooks.begin(start, end)
        try:
            self._frontier.reset(end)
            self._visited.add(start)
            self._frontier.push(Path(start))
        except MemoryError as exc:
            self._abandon()
            self._hooks.error(reason="out_of_memory", stage="begin")
            raise SearchResourceError("out of memory starting search", retryable=True) from exc
        self._state = SearchState.SEARCHING
        self._request = start
        return Request(start)

    def advance(self, neighbors: Iterable[Position]) -> Outcome:
        if self._state is not SearchState.SEARCHING:
            self._hooks.error(reason="out_of_sequence", state=self._state.value)
            raise SearchStateError(
                f"advance() while {self._state.value}; call begin() to start a search"
            )
        if not self._frontier:
            return self._finish_no_path()

        best = self._frontier.peek()
        if best.current == self._end:
            return self._finish_at_start()

        # Nothing below touches engine state until the commit, so a failure
        # here leaves the search as it was and the same advance can be retried.
        try:
            fresh, hit_end, skipped = self._collect(best, neighbors)
        except MemoryError as exc:
            self._hooks.error(reason="out_of_memory", stage="expand", position=best.current)
            raise SearchResourceError(
                f"out of memory expanding {best.current!r}", retryable=True
            ) from exc

        try:
            self._frontier.pop()
            for key, p in fresh:
                self._visited.add(p.current)
                self._frontier.push(p, key)
            if hit_end:
                best.finalize(self._end)
        except MemoryError as exc:
            self._abandon()
            self._hooks.error(reason="out_of_memory", stage="commit", position=best.current)
            raise SearchResourceError(
                "out of memory committing expansion; search abandoned", retryable=False
            ) from exc
        except Exception as exc:
            self._abandon()
            self._hooks.error(reason=type(exc).__name__, stage="commit", position=best.current)
            raise

        self._expansions += 1
        if hit_end:
            self._state = SearchState.TERMINAL
            self._request = None
            self._hooks.done(best, expansions=self._expansions, frontier_size=len(self._frontier))
            return Done(best)

        self._hooks.expand(
            best, enqueued=len(fresh), skipped=skipped, frontier_size=len(self._frontier)
        )
        # A batch of only visited (or no) neighbors can leave the frontier empty.
        if not self._frontier:
            return self._finish_no_path()
        self._request = self._frontier.peek().current
        return Request(self._request)

    # ---------------- helpers -----------------

    def _collect(self, best: Path, neighbors: Iterable[Position]):
        # keys are computed here so a failing distance() never reaches the commit
        fresh: list[tuple[float, Path]] = []
        batch = Visited()
        skipped = 0
        for n in neighbors:
            if n == self._end:
                return fresh, True, skipped
            if n in self._visited or n in batch:
                skipped += 1
                continue
            batch.add(n)
            child = best.extend(n)
            fresh.append((self._frontier.key(child), child))
        return fresh, False, skipped

    def _finish_at_start(self) -> Done:
        # start == end: the lone start path is closed without looking at neighbors
        best = self._frontier.pop().arrive()
        self._expansions += 1
        self._state = SearchState.TERMINAL
        self._request = None
        self._hooks.done(best, expansions=self._expansions, frontier_size=len(self._frontier))
        return Done(best)

    def _finish_no_path(self) -> NoPath:
        self._state = SearchState.TERMINAL
        self._request = None
        self._hooks.no_path(expansions=self._expansions, visited=len(self._visited))
        return NoPath()

    def _abandon(self) -> None:
        self._frontier.reset(None)
        self._visited.clear()
        self._state = SearchState.IDLE
        self._request = None
        self._expansions = 0
