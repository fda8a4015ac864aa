from collections import deque

import pytest

import maze_config


def reachable_from(grid, index):
    """Indices reachable from ``index`` through ``neighbors``."""
    start = grid.cell_at_index(index)
    seen = {start.index}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for other in cell.neighbors:
            if other.index not in seen:
                seen.add(other.index)
                queue.append(other)
    return seen


@pytest.fixture(autouse=True)
def default_limits(monkeypatch):
    # keep tests independent of any MAZE_* variables in the environment
    monkeypatch.setattr(maze_config, "MAX_CELLS", 4_000_000)
    monkeypatch.setattr(maze_config, "RENDER_LIMIT", 25)
