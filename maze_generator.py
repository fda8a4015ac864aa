# maze_generator.py
import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from maze_grid import Grid
from maze_record import MazeRecord

logger = logging.getLogger(__name__)


@dataclass
class GeneratedMaze:
    grid: Grid
    start_index: int
    end_index: int
    seed: Optional[int] = None

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    def to_record(self) -> MazeRecord:
        return MazeRecord.from_grid(self.grid, self.start_index, self.end_index)


def generate_maze(rows: int,
                  cols: int,
                  seed: Optional[int] = None,
                  rng: Optional[np.random.Generator] = None) -> GeneratedMaze:
    """
    Carve a perfect maze with a randomized depth-first walk.

    The walk starts on a uniformly random cell and keeps a stack of cells.
    Each round pops the top cell; if it still has unvisited adjacent cells one
    of them is picked uniformly, the wall between them is carved, and both
    cells are pushed back (current first, so the walk goes on from the new
    cell and can later backtrack to the current one). A cell without
    unvisited neighbours is simply dropped, which is the backtrack.

    Every cell is visited once, so the carved openings form a spanning tree.
    The end of the maze is the last cell the walk reached.
    """
    rng = rng if rng is not None else np.random.default_rng(seed)
    grid = Grid(rows, cols)

    start_row = int(rng.integers(rows))
    start_col = int(rng.integers(cols))
    start = grid.cells[start_row][start_col]
    end_index = start.index

    # visited is local to this walk, indexed by cell index (slot 0 unused)
    visited = np.zeros(grid.size + 1, dtype=bool)
    visited[start.index] = True
    stack: List = [start]

    while stack:
        current = stack.pop()
        unvisited_steps = [
            step for step, cell in enumerate(current.adjacent)
            if cell is not None and not visited[cell.index]
        ]
        if not unvisited_steps:
            continue

        step = unvisited_steps[int(rng.integers(len(unvisited_steps)))]
        nxt = grid.carve(current, step)
        visited[nxt.index] = True
        end_index = nxt.index

        stack.append(current)
        stack.append(nxt)

    logger.debug(f"Generated {rows}x{cols} maze (seed={seed}) start={start.index} end={end_index}")
    return GeneratedMaze(grid=grid, start_index=start.index, end_index=end_index, seed=seed)
