# io/recorder.py
import json
import logging
import os
import sys
from dataclasses import fields, is_dataclass
from typing import IO, Protocol

import numpy as np

from pullstar.io.trace_events import TraceEvent

log = logging.getLogger(__name__)


def plain(value):
    """Caller positions as JSON-ready values: tuples and arrays become lists."""
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {str(k): plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [plain(v) for v in value]
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return repr(value)


class TraceSink(Protocol):
    def write(self, ev: TraceEvent) -> None: ...
    def close(self) -> None: ...


class JsonlSink:
    """One JSON object per trace event, to an open text stream or a file path (appended)."""

    def __init__(self, target: IO[str] | str | os.PathLike | None = None):
        if target is None or hasattr(target, "write"):
            self.fp, self._owned = sys.stdout if target is None else target, False
        else:
            self.fp, self._owned = open(target, "a", encoding="utf-8"), True

    def write(self, ev: TraceEvent) -> None:
        self.fp.write(json.dumps(plain(ev)) + "\n")

    def close(self) -> None:
        if self._owned:
            self.fp.close()
        else:
            self.fp.flush()


class MemorySink:
    def __init__(self):
        self.events: list[TraceEvent] = []

    def write(self, ev: TraceEvent) -> None:
        self.events.append(ev)

    def named(self, name: str) -> list[TraceEvent]:
        return [ev for ev in self.events if ev.name == name]

    def close(self) -> None:
        pass


class Recorder:
    """
    Fans trace events out to sinks. A sink that raises is logged and counted
    in ``failures``; the search that produced the event carries on.
    """

    def __init__(self, *sinks: TraceSink):
        self.sinks = sinks or (JsonlSink(),)
        self.failures = 0

    def emit(self, ev: TraceEvent) -> None:
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                self.failures += 1
                log.exception("trace sink %s dropped %s #%d", type(s).__name__, ev.name, ev.seq)

    def close(self) -> None:
        for s in self.sinks:
            s.close()

    def __enter__(self) -> "Recorder":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
