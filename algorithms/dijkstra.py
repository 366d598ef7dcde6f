"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra over the grid with unit edge costs.

The open set is a plain list scanned linearly for the smallest g; on a
tie the cell found first (earliest inserted) wins.  That is plenty for
a few hundred cells, and the tie-break order is part of the visible
behaviour, so a heap would have to reproduce it exactly.

Yields a GridStep every time a cell is taken out of the open set and
finalised, then one step per cell of the final path.
"""

from typing import Callable, Generator, List

from grid import Grid, Cell
from algorithms.step import GridStep, grid_step
from algorithms.path import final_path_steps


def dijkstra(
    grid: Grid,
    log: Callable[[str], None],
) -> Generator[GridStep, None, None]:
    log("Dijkstra: start")
    cells = grid.cells

    start = grid.start_cell
    start.g = 0
    start.in_open = True
    open_set: List[int] = [start.index]

    while open_set:
        idx = 0
        for i in range(1, len(open_set)):
            if cells[open_set[i]].g < cells[open_set[idx]].g:
                idx = i
        cur: Cell = cells[open_set.pop(idx)]
        cur.in_open = False
        cur.visited = True

        yield grid_step(grid, current=cur.index, frontier=open_set)

        if cur.index == grid.goal:
            log("Dijkstra: path found")
            yield from final_path_steps(grid, list(open_set))
            return

        for nb in grid.neighbours(cur.index):
            if nb.wall or nb.visited:
                continue
            tentative = cur.g + 1
            if tentative < nb.g:
                nb.g = tentative
                nb.prev = cur.index
                if not nb.in_open:
                    nb.in_open = True
                    open_set.append(nb.index)

    log("Dijkstra: no path")
