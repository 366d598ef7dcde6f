"""
dfs.py — Depth-First Search
============================
Same loop as BFS with a LIFO stack: the most recently pushed cell is
expanded next, so the search dives along one route and only backs up
at dead ends.

Cells are marked visited when PUSHED, not when popped.  That keeps the
stack free of duplicates but also means the route found depends on the
neighbour order and is generally not the shortest one.
"""

from typing import Callable, Generator

from grid import Grid
from algorithms.step import GridStep, grid_step
from algorithms.path import final_path_steps


def dfs(
    grid: Grid,
    log: Callable[[str], None],
) -> Generator[GridStep, None, None]:
    log("DFS: start")
    stack = [grid.start]
    grid.start_cell.visited = True

    while stack:
        cur = stack.pop()
        yield grid_step(grid, current=cur, frontier=stack)

        if cur == grid.goal:
            log("DFS: path found")
            yield from final_path_steps(grid, list(stack))
            return

        for nb in grid.neighbours(cur):
            if not nb.wall and not nb.visited:
                nb.visited = True
                nb.prev = cur
                stack.append(nb.index)

    log("DFS: no path")
