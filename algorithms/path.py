"""
path.py — Path Reconstruction & Final Render
=============================================
Once a search pops the goal, walk the `prev` links back to the start
and replay the route one cell at a time as "path" steps.
"""

from typing import Generator, List

from grid import Grid
from algorithms.step import GridStep, grid_step, PAUSE_PATH, PHASE_PATH


def reconstruct_path(grid: Grid, goal: int) -> List[int]:
    """Cell indices from start to `goal` inclusive, following `prev` links."""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = grid.cells[cur].prev
    path.reverse()
    return path


def final_path_steps(
    grid: Grid,
    frontier: List[int],
) -> Generator[GridStep, None, None]:
    """One step per cell on the route to the goal, each with a longer prefix."""
    path = reconstruct_path(grid, grid.goal)
    for i in range(1, len(path) + 1):
        yield grid_step(grid, frontier=frontier, path=path[:i], pause=PAUSE_PATH, phase=PHASE_PATH)
