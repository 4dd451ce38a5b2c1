# tests/app/test_build_and_run.py
from pullstar.app.build import build, run
from pullstar.domain.heuristics import chebyshev
from pullstar.io.recorder import MemorySink, Recorder
from pullstar.io.search_logging import SearchLogging
from pullstar.search.hooks import NoopHooks
from pullstar.search.outcome import NoPath

REFERENCE = {
    "name": "reference",
    "run_id": "t-1",
    "grid": {"kind": "rows", "rows": [".#...", ".#...", ".#...", ".#...", "...#."]},
    "start": [0, 0],
    "end": [4, 4],
}


def test_build_runs_reference():
    app = build(REFERENCE, use_logging=False)
    assert isinstance(app.hooks, NoopHooks)
    report = app.run()
    assert report.found
    assert report.route[:6] == [(0, 0), (0, 1), (0, 2), (0, 3), (1, 4), (2, 3)]
    assert report.route[-1] == (4, 4)


def test_build_wires_logging_and_recorder():
    sink = MemorySink()
    app = build(REFERENCE, recorder=Recorder(sink))
    assert isinstance(app.hooks, SearchLogging)
    assert app.hooks.run_id == "t-1"
    app.run()
    assert sink.events[-1].found


def test_four_connectivity_takes_longer_route():
    cfg = {
        **REFERENCE,
        "movement": {"connectivity": 4},
        "engine": {"heuristic": {"kind": "manhattan"}},
    }
    report = run(cfg, use_logging=False)
    assert report.found
    # down column 0, along row 4 to x=2, then around the block at (3, 4)
    assert len(report.route) - 1 == 10
    for (ax, ay), (bx, by) in zip(report.route, report.route[1:]):
        assert abs(ax - bx) + abs(ay - by) == 1


def test_sealed_goal_gives_no_path():
    cfg = {
        **REFERENCE,
        "grid": {"kind": "rows", "rows": ["...", ".##", ".#."]},
        "end": [2, 2],
    }
    report = run(cfg, use_logging=False)
    assert report.outcome == NoPath()


def test_max_steps_from_config():
    report = run({**REFERENCE, "max_steps": 2}, use_logging=False)
    assert report.budget_exhausted and report.steps == 2


def test_open_random_grid_finds_straight_route():
    cfg = {
        "name": "open",
        "grid": {"kind": "random", "width": 12, "height": 7, "density": 0.0, "seed": 1},
        "start": [0, 0],
        "end": [11, 6],
    }
    report = run(cfg, use_logging=False)
    assert report.found
    assert len(report.route) - 1 == chebyshev((0, 0), (11, 6))


def test_random_grid_search_terminates():
    cfg = {
        "name": "dense",
        "seed": 7,
        "grid": {"kind": "random", "width": 15, "height": 15, "density": 0.35, "seed": 2},
        "start": [0, 0],
        "end": [14, 14],
    }
    app = build(cfg, use_logging=False)
    report = app.run()
    assert report.outcome.terminal
    assert app.grid.is_open((0, 0)) and app.grid.is_open((14, 14))
    if report.found:
        for a, b in zip(report.route, report.route[1:]):
            assert b in app.neighbors(a)
