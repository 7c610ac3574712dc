#!/usr/bin/env python3
import importlib, sys, traceback, os
from pathlib import Path

# --- Ensure the repo root is on sys.path ---
ROOT = Path(__file__).resolve().parent.parent  # repo root = parent of scripts/
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

OK = "\x1b[92mOK\x1b[0m"
BAD = "\x1b[91mERR\x1b[0m"

def check(name, fn):
    try:
        fn()
        print(f"[{OK}] {name}")
    except Exception as e:
        print(f"[{BAD}] {name}: {e}")
        traceback.print_exc()
        sys.exit(1)

def test_grid():
    grids = importlib.import_module("grids")
    g = grids.Grid(3, 3, 1).combine(grids.Grid(3, 3, 2), lambda a, b: a + b)
    assert list(g) == [3] * 9

def test_searches():
    pf = importlib.import_module("pathfinding")
    line = lambda n: [n - 1, n + 1]
    res = pf.dijkstra(0, 10, line, lambda a, b: 1)
    assert res.distance_to_end == 10
    path = pf.a_star(0, 10, lambda n: abs(10 - n), line, lambda a, b: 1)
    assert path is not None and len(path) == 10

def test_day12_sample():
    from puzzles import HeightMap
    text = (ROOT / "data" / "day12_test.txt").read_text()
    hm = HeightMap.parse(text)
    assert hm.shortest_path_from_start() == 31
    assert hm.shortest_path_from_sea_reversed() == 29

def test_cli_help():
    import subprocess
    for mod in ["cli.run_day"]:
        r = subprocess.run([sys.executable, "-m", mod, "--help"], cwd=str(ROOT),
                           stdout=subprocess.PIPE, stderr=subprocess.STDOUT)
        assert r.returncode == 0, f"{mod} --help failed"

if __name__ == "__main__":
    check("grids", test_grid)
    check("pathfinding", test_searches)
    check("puzzles.day12", test_day12_sample)
    check("CLIs --help", test_cli_help)
    print(f"[{OK}] All self-checks passed.")
