# maze_solver.py
import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from maze_errors import InvalidInputError, NoPathFoundError
from maze_grid import Grid
from maze_record import MazeRecord

logger = logging.getLogger(__name__)


@dataclass
class Solution:
    path: List[int]
    steps_taken: int

    @property
    def solution_length(self) -> int:
        return len(self.path) - 1

    @property
    def start_index(self) -> int:
        return self.path[0]

    @property
    def end_index(self) -> int:
        return self.path[-1]


def _reconstruct(previous: Dict[int, int], start_index: int, end_index: int) -> List[int]:
    reverse = [end_index]
    pointer = end_index
    while pointer != start_index:
        pointer = previous[pointer]
        reverse.append(pointer)
    reverse.reverse()
    return reverse


def solve(grid: Grid, start_index: int, end_index: int) -> Solution:
    """
    Breadth-first shortest path from ``start_index`` to ``end_index``.

    Neighbours are explored in the order their openings were registered. The
    step counter starts at -1 (the start cell is not a step), grows by one per
    dequeued cell and once more when the end cell turns up as a neighbour, at
    which point the search stops. ``steps_taken`` therefore includes the dead
    ends explored before the target was found and is usually larger than the
    solution length.

    Cells are marked visited when enqueued. On a hand-written record with
    cycles this can give a smaller ``steps_taken`` than marking on dequeue.

    Raises InvalidInputError for an index outside the grid and NoPathFoundError
    when the queue drains without reaching the end cell.
    """
    start = grid.cell_at_index(start_index)
    end = grid.cell_at_index(end_index)
    if start is None or end is None:
        raise InvalidInputError(
            f"Start {start_index} and end {end_index} must both lie in 1..{grid.size}."
        )
    if start_index == end_index:
        return Solution(path=[start_index], steps_taken=0)

    # run-local search state, indexed by cell index (slot 0 unused)
    visited = np.zeros(grid.size + 1, dtype=bool)
    previous: Dict[int, int] = {}
    steps = -1
    found = False

    queue = deque([start])
    visited[start.index] = True
    while queue:
        current = queue.popleft()
        steps += 1
        for neighbor in current.neighbors:
            if neighbor.index == end_index:
                previous[neighbor.index] = current.index
                steps += 1
                found = True
                break
            if not visited[neighbor.index]:
                visited[neighbor.index] = True
                previous[neighbor.index] = current.index
                queue.append(neighbor)
        if found:
            queue.clear()

    if not found:
        logger.info(f"End cell {end_index} unreachable from {start_index} after {steps} steps")
        raise NoPathFoundError(start_index, end_index, steps)

    path = _reconstruct(previous, start_index, end_index)
    logger.debug(f"Solved: length={len(path) - 1} steps={steps}")
    return Solution(path=path, steps_taken=steps)


def solve_record(record: MazeRecord) -> Solution:
    return solve(record.to_grid(), record.start_index, record.end_index)
