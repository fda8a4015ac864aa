# maze_grid.py
import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Set, Tuple

import numpy as np

import maze_config
from maze_errors import DimensionTooLargeError, InvalidInputError, MalformedRecordError

logger = logging.getLogger(__name__)

# Positions in Cell.adjacent
UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3

# Openness bits: a cell only ever records the openings to its right and below
OPEN_RIGHT = 1
OPEN_DOWN = 2


@dataclass(eq=False)
class Cell:
    row: int
    col: int
    index: int
    openness: int = 0
    # geometric neighbours (up, right, down, left); None off the grid
    adjacent: List[Optional["Cell"]] = field(default_factory=lambda: [None, None, None, None], repr=False)
    # cells reachable through an opening, in insertion order
    neighbors: List["Cell"] = field(default_factory=list, repr=False)

    def is_open_right(self) -> bool:
        return bool(self.openness & OPEN_RIGHT)

    def is_open_down(self) -> bool:
        return bool(self.openness & OPEN_DOWN)


class Grid:
    """
    A rows x cols grid of cells seen as an undirected graph.

    Cells are addressed either by (row, col), both 0-based, or by a 1-based
    row-major index in [1, rows*cols]. Two adjacency views are kept per cell:
    ``adjacent`` is pure geometry, ``neighbors`` holds the carved or decoded
    openings and is always symmetric.
    """

    def __init__(self, rows: int, cols: int):
        if not isinstance(rows, int) or not isinstance(cols, int) or rows <= 0 or cols <= 0:
            raise InvalidInputError(f"Rows and columns must be positive integers, got {rows!r} and {cols!r}.")
        if rows * cols > maze_config.MAX_CELLS:
            raise DimensionTooLargeError(rows, cols, maze_config.MAX_CELLS)

        self.rows = rows
        self.cols = cols
        try:
            self.cells: List[List[Cell]] = [
                [Cell(r, c, r * cols + c + 1) for c in range(cols)] for r in range(rows)
            ]
        except MemoryError as e:
            raise DimensionTooLargeError(rows, cols) from e

        for r in range(rows):
            for c in range(cols):
                cell = self.cells[r][c]
                cell.adjacent[UP] = self.cell_at(r - 1, c)
                cell.adjacent[RIGHT] = self.cell_at(r, c + 1)
                cell.adjacent[DOWN] = self.cell_at(r + 1, c)
                cell.adjacent[LEFT] = self.cell_at(r, c - 1)
        logger.debug(f"Initialized {rows}x{cols} grid")

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def __iter__(self):
        """Cells in index order."""
        for row in self.cells:
            yield from row

    # ----------------- addressing -----------------
    def cell_at(self, row: int, col: int) -> Optional[Cell]:
        # boundary probing is routine, so out of range is None rather than an error
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.cells[row][col]
        return None

    def index_to_coord(self, index: int) -> Tuple[int, int]:
        # row = ceil(index / cols) - 1, col = (index - 1) mod cols
        return -(-index // self.cols) - 1, (index - 1) % self.cols

    def coord_to_index(self, row: int, col: int) -> int:
        return row * self.cols + col + 1

    def is_valid_index(self, index: int) -> bool:
        return isinstance(index, int) and 1 <= index <= self.size

    def cell_at_index(self, index: int) -> Optional[Cell]:
        if not self.is_valid_index(index):
            return None
        return self.cell_at(*self.index_to_coord(index))

    # ----------------- edges -----------------
    def link_by_openness(self, cell: Cell) -> None:
        """Register the right and down openings of ``cell`` on both endpoints."""
        if cell.is_open_right():
            other = self.cell_at(cell.row, cell.col + 1)
            if other is None:
                raise MalformedRecordError(f"Cell {cell.index} is open to the right of the last column.")
            cell.neighbors.append(other)
            other.neighbors.append(cell)
        if cell.is_open_down():
            other = self.cell_at(cell.row + 1, cell.col)
            if other is None:
                raise MalformedRecordError(f"Cell {cell.index} is open below the last row.")
            cell.neighbors.append(other)
            other.neighbors.append(cell)

    def link_all(self) -> None:
        for cell in self:
            self.link_by_openness(cell)

    def carve(self, current: Cell, step: int) -> Cell:
        """
        Open the wall between ``current`` and its adjacent cell in direction ``step``.

        Right and down steps set a bit on ``current``; up and left steps set the
        mirrored bit on the other cell, since openness only describes the right
        and lower walls of a cell. Returns the cell stepped into.
        """
        nxt = current.adjacent[step]
        if nxt is None:
            raise InvalidInputError(f"Cannot carve off the grid from cell {current.index}.")
        if step == RIGHT:
            current.openness |= OPEN_RIGHT
        elif step == DOWN:
            current.openness |= OPEN_DOWN
        elif step == UP:
            nxt.openness |= OPEN_DOWN
        else:
            nxt.openness |= OPEN_RIGHT
        current.neighbors.append(nxt)
        nxt.neighbors.append(current)
        return nxt

    def edges(self) -> Set[FrozenSet[int]]:
        return {frozenset((cell.index, other.index)) for cell in self for other in cell.neighbors}

    def openness_string(self) -> str:
        return "".join(str(cell.openness) for cell in self)

    def occupancy_matrix(self) -> np.ndarray:
        """
        Walkability matrix of shape (2*rows+1, 2*cols+1, 1): 1 = free, 0 = wall.

        Cell (r, c) sits at (2r+1, 2c+1, 0); an opening frees the slot between
        two cell centres. The trailing axis lets 3D grid finders consume it.
        """
        m = np.zeros((2 * self.rows + 1, 2 * self.cols + 1, 1), dtype=np.int8)
        for cell in self:
            x, y = 2 * cell.row + 1, 2 * cell.col + 1
            m[x, y, 0] = 1
            if cell.is_open_right():
                m[x, y + 1, 0] = 1
            if cell.is_open_down():
                m[x + 1, y, 0] = 1
        return m

    def cell_centre(self, index: int) -> Tuple[int, int, int]:
        row, col = self.index_to_coord(index)
        return (2 * row + 1, 2 * col + 1, 0)
