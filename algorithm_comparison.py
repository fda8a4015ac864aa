import csv
import time
from dataclasses import dataclass
from typing import List, Optional

from pathfinding3d.core.grid import Grid as FinderGrid

from maze_generator import generate_maze
from maze_runner import make_finders, run_finder
from maze_solver import solve


@dataclass
class Category:
    name: str
    rows: int
    cols: int


DEFAULT_CATEGORIES = [
    Category('small', 10, 10),
    Category('medium', 25, 25),
    Category('wide', 10, 60),
    Category('large', 60, 60),
]

FIELDNAMES = [
    'category', 'rows', 'cols', 'seed', 'algorithm',
    'execution_time', 'operations', 'success', 'path_length', 'steps_taken', 'agrees'
]


def main(runs_per_category: int = 20,
         csv_filename: str = 'maze_solver_comparison.csv',
         categories: Optional[List[Category]] = None) -> str:
    """
    Time the breadth-first solver against the pathfinding3d finders on the
    same seeded mazes and write one CSV row per (maze, algorithm).
    """
    categories = categories or DEFAULT_CATEGORIES
    algos = make_finders()

    with open(csv_filename, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()

        for ci, cat in enumerate(categories):
            print(f"\nCategory {cat.name} • {cat.rows}x{cat.cols} • {runs_per_category} runs")
            for i in range(runs_per_category):
                # Unique seed per maze per category
                seed = 500000 + ci * 10000 + i

                # Maze generation (excluded from algorithm timing)
                maze = generate_maze(cat.rows, cat.cols, seed=seed)
                grid = maze.grid
                start, end = maze.start_index, maze.end_index

                t0 = time.time()
                solution = solve(grid, start, end)
                dt = time.time() - t0
                print(f"  run {i+1:03d}: seed={seed} start={start} end={end} length={solution.solution_length}")

                row_base = {'category': cat.name, 'rows': cat.rows, 'cols': cat.cols, 'seed': seed}
                writer.writerow({
                    **row_base,
                    'algorithm': 'BFS (core)',
                    'execution_time': round(dt, 6),
                    'operations': solution.steps_taken,
                    'success': True,
                    'path_length': solution.solution_length,
                    'steps_taken': solution.steps_taken,
                    'agrees': True,
                })

                if solution.solution_length == 0:
                    f.flush()
                    continue

                finder_grid = FinderGrid(matrix=grid.occupancy_matrix())
                s, e = grid.cell_centre(start), grid.cell_centre(end)
                for name, finder in algos:
                    res = run_finder(finder_grid, finder, s, e)
                    writer.writerow({
                        **row_base,
                        'algorithm': name,
                        'execution_time': round(res['execution_time'], 6),
                        'operations': int(res['operations']),
                        'success': bool(res['success']),
                        'path_length': res['path_length'],
                        'steps_taken': '',
                        'agrees': res['success'] and res['path_length'] == solution.solution_length,
                    })
                f.flush()

    print(f"\nComparison complete! Results saved to {csv_filename}")
    return csv_filename


if __name__ == "__main__":
    main()
