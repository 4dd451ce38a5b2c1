# io/search_logging.py
import json
import logging
import sys

from pullstar.io.recorder import Recorder
from pullstar.io.trace_events import NodeExpanded, SearchBegan, SearchFinished
from pullstar.search.hooks import NoopHooks


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=repr)


def _default_json_logger(name="pullstar", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for engine lifecycle, plus optional trace events to a Recorder.
    Expansions are DEBUG and only emitted every ``sample_every`` steps with ``debug`` on.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._seq = 0
        self._steps = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(
            getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}}
        )

    def _record(self, cls, name: str, **fields):
        if self.recorder:
            self._seq += 1
            self.recorder.emit(cls(run_id=self.run_id, seq=self._seq, name=name, **fields))

    # --------------------------------------------------------

    def begin(self, start, end):
        self._steps = 0
        self._emit("INFO", "search_begin", start=start, end=end)
        self._record(SearchBegan, "search_begin", start=start, end=end)

    def expand(self, best, *, enqueued: int, skipped: int, frontier_size: int):
        self._steps += 1
        if self.debug and (self._steps % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "expand",
                position=best.current,
                cost=best.cost,
                enqueued=enqueued,
                skipped=skipped,
                frontier_size=frontier_size,
            )
        self._record(
            NodeExpanded,
            "expand",
            position=best.current,
            cost=best.cost,
            enqueued=enqueued,
            skipped=skipped,
            frontier_size=frontier_size,
        )

    def done(self, path, *, expansions: int, frontier_size: int):
        route = path.positions()
        self._emit(
            "INFO",
            "search_done",
            steps=expansions,
            length=len(route) - 1,
            frontier_size=frontier_size,
        )
        self._record(SearchFinished, "search_done", found=True, steps=expansions, route=route)

    def no_path(self, *, expansions: int, visited: int):
        self._emit("INFO", "search_no_path", steps=expansions, visited=visited)
        self._record(SearchFinished, "search_no_path", found=False, steps=expansions)

    def error(self, *, reason: str, **extra):
        self._emit("ERROR", "search_error", reason=reason, **extra)
