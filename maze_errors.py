# maze_errors.py
"""Exceptions raised by the maze generator, solver and record codec.

Library code raises these and lets them propagate; only ``main.py`` turns
them into console messages and exit codes.
"""

from typing import Optional


class MazeError(Exception):
    """Base class for every maze error."""


class InvalidInputError(MazeError, ValueError):
    """Dimensions or cell indices that cannot describe a maze."""


class MalformedRecordError(InvalidInputError):
    """A maze record whose text cannot be decoded."""


class DimensionTooLargeError(MazeError):
    """The requested grid is too large to allocate. Retry with smaller numbers."""

    def __init__(self, rows: int, cols: int, limit: Optional[int] = None):
        self.rows = rows
        self.cols = cols
        self.limit = limit
        if limit is None:
            reason = "could not be allocated"
        else:
            reason = f"is more than the limit of {limit}"
        super().__init__(
            f"A {rows}x{cols} maze ({rows * cols} cells) {reason}. "
            "Please try again with smaller numbers."
        )


class RecordNotFoundError(MazeError, FileNotFoundError):
    """The maze record file is missing or unreadable."""

    def __init__(self, path: str, reason: str = "not found"):
        self.path = path
        super().__init__(f"Maze file '{path}' {reason}, please ensure the filename is correct.")


class NoPathFoundError(MazeError):
    """Breadth-first search drained its queue without reaching the end cell."""

    def __init__(self, start_index: int, end_index: int, steps_taken: int):
        self.start_index = start_index
        self.end_index = end_index
        self.steps_taken = steps_taken
        super().__init__(
            f"No path from cell {start_index} to cell {end_index} "
            f"(searched {steps_taken} steps)."
        )
