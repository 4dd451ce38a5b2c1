# main.py
from pullstar.app.build import build

# 5x5 map: wall down column 1 (rows 0-3) and one block at (3, 4)
REFERENCE = {
    "name": "reference-5x5",
    "run_id": "demo",
    "grid": {"kind": "rows", "rows": [".#...", ".#...", ".#...", ".#...", "...#."]},
    "start": [0, 0],
    "end": [4, 4],
    "engine": {"heuristic": {"kind": "chebyshev"}, "tie_break": "fifo"},
    "movement": {"connectivity": 8},
}


def main(cfg=REFERENCE):
    app = build(cfg)
    report = app.run()
    if report.found:
        print(app.grid.render(report.route))
    else:
        print(f"no path after {report.steps} steps")
    return report


if __name__ == "__main__":
    main()
