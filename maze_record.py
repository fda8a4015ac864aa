# maze_record.py
"""Text interchange record shared by the generator and the solver.

A record is one line::

    <rows>,<cols>:<startIndex>:<endIndex>:<openness digits>

where the digits hold one wall code (0-3) per cell in row-major index order.
"""

import logging
import os
import re
import tempfile
from dataclasses import dataclass

import maze_config
from maze_errors import DimensionTooLargeError, MalformedRecordError, RecordNotFoundError
from maze_grid import OPEN_DOWN, OPEN_RIGHT, Grid

logger = logging.getLogger(__name__)

RECORD_PATTERN = re.compile(r"^(\d+),(\d+):(\d+):(\d+):(\d*)$", re.ASCII)
OPENNESS_PATTERN = re.compile(r"^[0-3]*$")
MAX_FIELD_DIGITS = 18  # int() refuses very long digit strings; no real maze needs more


@dataclass(frozen=True)
class MazeRecord:
    rows: int
    cols: int
    start_index: int
    end_index: int
    openness: str

    def encode(self) -> str:
        return f"{self.rows},{self.cols}:{self.start_index}:{self.end_index}:{self.openness}"

    @classmethod
    def decode(cls, text: str) -> "MazeRecord":
        """Parse and validate a record. Raises MalformedRecordError on any defect."""
        if text is None:
            raise MalformedRecordError("The maze file is empty.")
        line = text.strip()
        match = RECORD_PATTERN.match(line)
        if not match:
            raise MalformedRecordError(
                "An error was found within the file contents; expected "
                "'<rows>,<cols>:<start>:<end>:<openness digits>'."
            )
        fields = match.groups()[:4]
        if any(len(g) > MAX_FIELD_DIGITS for g in fields):
            raise MalformedRecordError(
                f"Dimension and index fields may have at most {MAX_FIELD_DIGITS} digits."
            )
        rows, cols, start, end = (int(g) for g in fields)
        openness = match.group(5)

        if rows <= 0 or cols <= 0:
            raise MalformedRecordError(f"Rows and columns must be positive, got {rows},{cols}.")
        if rows * cols > maze_config.MAX_CELLS:
            raise DimensionTooLargeError(rows, cols, maze_config.MAX_CELLS)
        if len(openness) != rows * cols:
            raise MalformedRecordError(
                f"Expected {rows * cols} openness digits for a {rows}x{cols} maze, found {len(openness)}."
            )
        if not OPENNESS_PATTERN.match(openness):
            raise MalformedRecordError("Openness digits must each be 0, 1, 2 or 3.")
        for name, index in (("start", start), ("end", end)):
            if not 1 <= index <= rows * cols:
                raise MalformedRecordError(f"The {name} index {index} is outside 1..{rows * cols}.")

        for r in range(rows):
            last = int(openness[r * cols + cols - 1])
            if last & OPEN_RIGHT:
                raise MalformedRecordError(f"Cell {r * cols + cols} is open to the right of the last column.")
        for c in range(cols):
            if int(openness[(rows - 1) * cols + c]) & OPEN_DOWN:
                raise MalformedRecordError(f"Cell {(rows - 1) * cols + c + 1} is open below the last row.")

        return cls(rows=rows, cols=cols, start_index=start, end_index=end, openness=openness)

    @classmethod
    def from_grid(cls, grid: Grid, start_index: int, end_index: int) -> "MazeRecord":
        return cls(
            rows=grid.rows,
            cols=grid.cols,
            start_index=start_index,
            end_index=end_index,
            openness=grid.openness_string(),
        )

    def to_grid(self) -> Grid:
        """Rebuild the grid and link every opening described by the wall codes."""
        grid = Grid(self.rows, self.cols)
        for cell, code in zip(grid, self.openness):
            cell.openness = int(code)
        grid.link_all()
        return grid


# ----------------- file I/O -----------------
def read_record(path: str) -> MazeRecord:
    try:
        with open(path, "r") as f:
            line = f.readline()
    except FileNotFoundError as e:
        raise RecordNotFoundError(path) from e
    except (IsADirectoryError, PermissionError, UnicodeDecodeError) as e:
        raise RecordNotFoundError(path, "could not be read") from e
    logger.info(f"Read maze record from {path}")
    return MazeRecord.decode(line)


def write_record(path: str, record: MazeRecord) -> str:
    """
    Write ``record`` to ``path`` atomically.

    The text goes to a temporary file in the destination directory first and
    replaces ``path`` only once fully written, so an interrupted write never
    leaves a truncated record behind.
    """
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=".maze_", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w") as f:
            f.write(record.encode())
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    logger.info(f"Wrote {record.rows}x{record.cols} maze record to {path}")
    return path
