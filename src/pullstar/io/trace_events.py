# pullstar/io/trace_events.py

from dataclasses import dataclass


# Base type for recorded search events (analytics/replay, not engine input)
@dataclass
class TraceEvent:
    run_id: str
    seq: int  # emission order within one SearchLogging instance
    name: str  # stable event name


@dataclass
class SearchBegan(TraceEvent):
    start: object
    end: object


@dataclass
class NodeExpanded(TraceEvent):
    position: object
    cost: int
    enqueued: int
    skipped: int
    frontier_size: int


@dataclass
class SearchFinished(TraceEvent):
    found: bool
    steps: int
    route: list | None = None
