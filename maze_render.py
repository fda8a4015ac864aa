# maze_render.py
from typing import Iterable, List, Optional, Sequence

from maze_grid import OPEN_DOWN, OPEN_RIGHT, Grid

# glyphs per cell: text row (right wall) and the row under it (lower wall)
_RIGHT_CLOSED, _RIGHT_OPEN = "  |", "   "
_DOWN_CLOSED, _DOWN_OPEN = "--|", "  |"
_BORDER = "---"


def _marked(mark: str, openness: int) -> str:
    return f"{mark}  " if openness & OPEN_RIGHT else f"{mark} |"


def draw_graph(rows: int,
               cols: int,
               openness: Sequence[int],
               start_index: int,
               end_index: int,
               path: Optional[Iterable[int]] = None) -> List[List[str]]:
    """
    Build the (2*rows+1) x (cols+1) text buffer of a maze.

    ``openness`` holds one wall code per cell in index order. A cell open to
    the right loses its vertical bar, a cell open below loses its horizontal
    bar. The start cell is drawn as S, the end cell as F and any other cell on
    ``path`` as *.
    """
    graph = [["" for _ in range(cols + 1)] for _ in range(2 * rows + 1)]
    for i in range(1, 2 * rows):
        graph[i][0] = "|"
    graph[0][0] = "-"
    graph[2 * rows][0] = "-"

    for r in range(rows):
        for c in range(cols):
            code = int(openness[r * cols + c])
            graph[2 * r + 1][c + 1] = _RIGHT_OPEN if code & OPEN_RIGHT else _RIGHT_CLOSED
            graph[2 * r + 2][c + 1] = _DOWN_OPEN if code & OPEN_DOWN else _DOWN_CLOSED

    def mark(index: int, symbol: str):
        r, c = -(-index // cols) - 1, (index - 1) % cols
        graph[2 * r + 1][c + 1] = _marked(symbol, int(openness[index - 1]))

    for index in path or ():
        if index not in (start_index, end_index):
            mark(index, "*")
    mark(start_index, "S")
    mark(end_index, "F")

    for c in range(1, cols + 1):
        graph[0][c] = _BORDER
        graph[2 * rows][c] = _BORDER
    return graph


def render_ascii(rows: int,
                 cols: int,
                 openness: Sequence[int],
                 start_index: int,
                 end_index: int,
                 path: Optional[Iterable[int]] = None) -> str:
    graph = draw_graph(rows, cols, openness, start_index, end_index, path)
    return "\n".join("".join(line) for line in graph)


def render_grid(grid: Grid, start_index: int, end_index: int, path: Optional[Iterable[int]] = None) -> str:
    return render_ascii(grid.rows, grid.cols, [cell.openness for cell in grid], start_index, end_index, path)
