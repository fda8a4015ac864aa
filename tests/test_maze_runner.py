import csv

import pytest
from pathfinding3d.core.grid import Grid as FinderGrid

from algorithm_comparison import Category, main as run_comparison
from maze_record import MazeRecord
from maze_runner import build_maze_and_run, make_finders, run_finder


def test_finders_agree_on_known_maze():
    grid = MazeRecord.decode("3,3:1:9:310310110").to_grid()
    finder_grid = FinderGrid(matrix=grid.occupancy_matrix())
    for name, finder in make_finders():
        res = run_finder(finder_grid, finder, grid.cell_centre(1), grid.cell_centre(9))
        assert res["success"], name
        assert res["path_length"] == 4, name


def test_finders_report_blocked_end():
    grid = MazeRecord.decode("2,2:1:4:1010").to_grid()
    finder_grid = FinderGrid(matrix=grid.occupancy_matrix())
    for name, finder in make_finders():
        res = run_finder(finder_grid, finder, grid.cell_centre(1), grid.cell_centre(4))
        assert not res["success"], name


@pytest.mark.parametrize("rows,cols,seed", [(5, 5, 1), (8, 13, 2), (15, 4, 3)])
def test_build_maze_and_run_cross_check(rows, cols, seed):
    out = build_maze_and_run(rows, cols, seed=seed)
    solution = out["solution"]

    assert solution.path[0] == out["start"]
    assert solution.path[-1] == out["end"]
    assert out["record"].encode().startswith(f"{rows},{cols}:")
    assert set(out["results"]) == {"A*", "Dijkstra", "Breadth-First"}
    for name, res in out["results"].items():
        assert res["agrees"], name
        assert res["path_length"] == solution.solution_length


def test_single_cell_skips_cross_check():
    out = build_maze_and_run(1, 1, seed=0)
    assert out["solution"].path == [1]
    assert out["results"] == {}


def test_comparison_csv(tmp_path, capsys):
    csv_file = tmp_path / "results.csv"
    run_comparison(runs_per_category=2, csv_filename=str(csv_file),
                   categories=[Category("tiny", 4, 5), Category("row", 1, 6)])

    with open(csv_file, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2 * 2 * 4
    assert {r["algorithm"] for r in rows} == {"BFS (core)", "A*", "Dijkstra", "Breadth-First"}
    assert all(r["agrees"] == "True" for r in rows)
    assert "Comparison complete!" in capsys.readouterr().out
