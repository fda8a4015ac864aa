# run_and_export.py
import logging
import time
from typing import Iterable, Optional, Tuple

import plotly.graph_objects as go
from plotly.io import write_html

import maze_config
from maze_generator import generate_maze
from maze_grid import Grid
from maze_record import MazeRecord, read_record, write_record
from maze_render import render_grid
from maze_solver import Solution, solve

logger = logging.getLogger(__name__)


def _make_html(grid: Grid, start: int, end: int, path: Optional[Iterable[int]], outfile: str,
               title: str, auto_open: bool = False) -> str:
    occ = grid.occupancy_matrix()[:, :, 0]
    fig = go.Figure()

    # Walls dark, corridors light; row 0 at the top like the ASCII picture
    fig.add_trace(go.Heatmap(
        z=occ,
        colorscale=[[0, "black"], [1, "white"]],
        showscale=False,
        hoverinfo="skip",
        name="maze"
    ))

    if path:
        centres = [grid.cell_centre(i) for i in path]
        fig.add_trace(go.Scatter(
            x=[c[1] for c in centres], y=[c[0] for c in centres], mode="lines",
            line=dict(width=4, color="royalblue"),
            name="solution"
        ))

    sx, sy, _ = grid.cell_centre(start)
    ex, ey, _ = grid.cell_centre(end)
    fig.add_trace(go.Scatter(
        x=[sy], y=[sx], mode="markers+text", text=["S"], textposition="top center",
        marker=dict(size=12, symbol="circle", color="green"), name="start"
    ))
    fig.add_trace(go.Scatter(
        x=[ey], y=[ex], mode="markers+text", text=["F"], textposition="top center",
        marker=dict(size=12, symbol="x", color="red"), name="end"
    ))

    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, autorange="reversed", scaleanchor="x"),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
    )

    write_html(fig, file=outfile, auto_open=auto_open, include_plotlyjs="cdn")
    return outfile


def generate_and_export(rows: int,
                        cols: int,
                        filename: str,
                        seed: Optional[int] = None,
                        html: Optional[str] = None,
                        auto_open_html: bool = False,
                        render_limit: Optional[int] = None) -> Tuple[MazeRecord, Optional[str]]:
    """
    Generates one rows x cols maze, prints it when small enough, writes the
    record to ``filename`` and optionally an HTML picture.
    Returns (record, html_path_or_None).
    """
    limit = maze_config.RENDER_LIMIT if render_limit is None else render_limit
    maze = generate_maze(rows, cols, seed=seed)
    record = maze.to_record()

    if rows < limit and cols < limit:
        print(render_grid(maze.grid, maze.start_index, maze.end_index))
    else:
        logger.info(f"Skipping ASCII output for {rows}x{cols} maze (limit {limit})")

    # picture first: a failed HTML write must not leave a record behind
    html_path = None
    if html:
        html_path = _make_html(maze.grid, maze.start_index, maze.end_index, None, html,
                               title=f"Maze {rows} x {cols}", auto_open=auto_open_html)
        print(f"Saved HTML: {html_path}")

    write_record(filename, record)
    print(f"Saved maze: {filename}")

    print(f"Start: {record.start_index}  End: {record.end_index}")
    return record, html_path


def solve_and_export(filename: str,
                     html: Optional[str] = None,
                     auto_open_html: bool = False) -> Tuple[Solution, Optional[str]]:
    """
    Reads a maze record, solves it and prints the maze with the path overlaid,
    the path, its length, the steps taken and the elapsed time.
    Returns (solution, html_path_or_None).
    """
    t0 = time.time()
    record = read_record(filename)
    grid = record.to_grid()
    solution = solve(grid, record.start_index, record.end_index)

    print(render_grid(grid, record.start_index, record.end_index, solution.path))
    print("( " + " ".join(str(i) for i in solution.path) + " )")
    print(solution.solution_length)
    print(solution.steps_taken)

    html_path = None
    if html:
        html_path = _make_html(grid, record.start_index, record.end_index, solution.path, html,
                               title=f"Maze {record.rows} x {record.cols} • solution length {solution.solution_length}",
                               auto_open=auto_open_html)
        print(f"Saved HTML: {html_path}")

    print(f"{int((time.time() - t0) * 1000)}ms")
    return solution, html_path
