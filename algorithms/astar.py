"""
astar.py — A* Search
=====================
Dijkstra with a heuristic: the open set is ordered by f = g + h, ties
going to the smaller h (the cell believed closer to the goal), then to
whichever was found first.

h is ALWAYS the Manhattan distance.  On a 4-connected grid with unit
costs it never overestimates and is consistent, so the first time the
goal is popped its g is optimal.
"""

from typing import Callable, Generator, List

from grid import Grid, Cell
from algorithms.step import GridStep, grid_step
from algorithms.path import final_path_steps


def astar(
    grid: Grid,
    log: Callable[[str], None],
) -> Generator[GridStep, None, None]:
    log("A*: start")
    cells = grid.cells
    goal = grid.goal_cell

    start = grid.start_cell
    start.g = 0
    start.h = grid.manhattan(start.index, goal.index)
    start.f = start.g + start.h
    start.in_open = True
    open_set: List[int] = [start.index]

    while open_set:
        idx = 0
        for i in range(1, len(open_set)):
            a, b = cells[open_set[i]], cells[open_set[idx]]
            if a.f < b.f or (a.f == b.f and a.h < b.h):
                idx = i
        cur: Cell = cells[open_set.pop(idx)]
        cur.in_open = False
        cur.visited = True

        yield grid_step(grid, current=cur.index, frontier=open_set)

        if cur.index == goal.index:
            log("A*: path found")
            yield from final_path_steps(grid, list(open_set))
            return

        for nb in grid.neighbours(cur.index):
            if nb.wall or nb.visited:
                continue
            tentative = cur.g + 1
            if tentative < nb.g:
                nb.prev = cur.index
                nb.g = tentative
                nb.h = grid.manhattan(nb.index, goal.index)
                nb.f = nb.g + nb.h
                if not nb.in_open:
                    nb.in_open = True
                    open_set.append(nb.index)

    log("A*: no path")
