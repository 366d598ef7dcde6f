"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over the grid.  Yields a GridStep every time a cell
is dequeued (current = that cell, frontier = what is left in the queue),
then one step per cell of the final path.

Cells are marked visited when they are ENQUEUED, so nothing is ever in
the queue twice.  With unit edge costs BFS pops cells in non-decreasing
distance order, which makes the reconstructed route a shortest one by
hop count.
"""

from collections import deque
from typing import Callable, Generator

from grid import Grid
from algorithms.step import GridStep, grid_step
from algorithms.path import final_path_steps


def bfs(
    grid: Grid,
    log: Callable[[str], None],
) -> Generator[GridStep, None, None]:
    log("BFS: start")
    queue = deque([grid.start])
    grid.start_cell.visited = True

    while queue:
        cur = queue.popleft()
        yield grid_step(grid, current=cur, frontier=queue)

        if cur == grid.goal:
            log("BFS: path found")
            yield from final_path_steps(grid, list(queue))
            return

        for nb in grid.neighbours(cur):
            if not nb.wall and not nb.visited:
                nb.visited = True
                nb.prev = cur
                queue.append(nb.index)

    log("BFS: no path")
