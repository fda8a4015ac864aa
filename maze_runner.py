# maze_runner.py
import time
from typing import Any, Dict, List, Tuple

from pathfinding3d.core.diagonal_movement import DiagonalMovement
from pathfinding3d.core.grid import Grid as FinderGrid
from pathfinding3d.finder.a_star import AStarFinder
from pathfinding3d.finder.breadth_first import BreadthFirstFinder
from pathfinding3d.finder.dijkstra import DijkstraFinder

from maze_generator import generate_maze
from maze_grid import Grid
from maze_solver import solve


# ----------------- helpers -----------------
def _coord_from_node_or_tuple(p):
    if hasattr(p, "x") and hasattr(p, "y") and hasattr(p, "z"):
        return (p.x, p.y, p.z)
    if hasattr(p, "identifier"):
        return tuple(p.identifier)
    return (p[0], p[1], p[2])


def _path_steps(coords) -> int:
    return max(0, len(coords) - 1)


def make_finders() -> List[Tuple[str, Any]]:
    # mazes only open orthogonally, so diagonal moves would cut through wall corners
    return [
        ('A*', AStarFinder(diagonal_movement=DiagonalMovement.never)),
        ('Dijkstra', DijkstraFinder(diagonal_movement=DiagonalMovement.never)),
        ('Breadth-First', BreadthFirstFinder(diagonal_movement=DiagonalMovement.never)),
    ]


def run_finder(finder_grid: FinderGrid, finder, start: Tuple[int, int, int], end: Tuple[int, int, int]) -> Dict[str, Any]:
    """Run one pathfinding3d finder on the occupancy grid between two cell centres."""
    finder_grid.cleanup()
    s = finder_grid.node(*start)
    e = finder_grid.node(*end)

    t0 = time.time()
    path_nodes, ops = finder.find_path(s, e, finder_grid)
    elapsed = time.time() - t0

    coords = [_coord_from_node_or_tuple(p) for p in (path_nodes or [])]
    success = bool(coords) and tuple(coords[-1]) == tuple(end)
    return {
        "success": success,
        "execution_time": elapsed,
        "operations": ops,
        # occupancy steps are half-cells: one maze move crosses a cell centre and a gap
        "path_length": _path_steps(coords) // 2 if success else 0,
        "path": coords,
    }


def cross_check(grid: Grid, start_index: int, end_index: int, solution_length: int) -> Dict[str, Dict[str, Any]]:
    """Solve the same maze with third-party finders and compare lengths with ours."""
    finder_grid = FinderGrid(matrix=grid.occupancy_matrix())
    start = grid.cell_centre(start_index)
    end = grid.cell_centre(end_index)

    results: Dict[str, Dict[str, Any]] = {}
    for name, finder in make_finders():
        res = run_finder(finder_grid, finder, start, end)
        res["agrees"] = res["success"] and res["path_length"] == solution_length
        results[name] = res
    return results


# ----------------- main API -----------------
def build_maze_and_run(rows: int, cols: int, seed: int = 42) -> Dict[str, Any]:
    """
    Generate a rows x cols perfect maze, solve it from its start to its end
    cell with the breadth-first solver, and cross-check the answer with the
    pathfinding3d A*, Dijkstra and Breadth-First finders.
    """
    maze = generate_maze(rows, cols, seed=seed)

    t0 = time.time()
    solution = solve(maze.grid, maze.start_index, maze.end_index)
    elapsed = time.time() - t0

    if solution.solution_length > 0:
        results = cross_check(maze.grid, maze.start_index, maze.end_index, solution.solution_length)
    else:
        results = {}

    return {
        "record": maze.to_record(),
        "grid": maze.grid,
        "start": maze.start_index,
        "end": maze.end_index,
        "solution": solution,
        "execution_time": elapsed,
        "results": results,
    }
