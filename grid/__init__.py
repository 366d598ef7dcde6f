"""
grid/
-----
Core data layer for the path-finding algorithms.  Public API:

    from grid import Grid, Cell
    from grid import ROWS, COLS, WALL_PROB, manhattan
"""

from grid.cell import Cell, INF
from grid.grid import Grid, ROWS, COLS, WALL_PROB, manhattan

__all__ = [
    "Cell",
    "Grid",
    "INF",
    "ROWS",
    "COLS",
    "WALL_PROB",
    "manhattan",
]
