from typing import Optional


INF = float("inf")


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------
class Cell:
    """
    One square of the grid.  Position and wall flag are fixed at creation;
    everything else is search bookkeeping written by the algorithms.

    Attributes:
        index    : Position in the owning Grid's flat cell list.
        row, col : Grid coordinates.
        wall     : True if the cell cannot be entered.
        g        : Cost from start (Dijkstra / A*).
        h        : Heuristic estimate to the goal (A* only).
        f        : g + h (A* only).
        visited  : Finalised (Dijkstra / A*) or discovered (BFS / DFS).
        in_open  : Currently sitting in the Dijkstra / A* open set.
        prev     : Index of the predecessor cell on the best known route.
                   An index, never a Cell, so the grid holds no cycles.
    """

    __slots__ = ("index", "row", "col", "wall", "g", "h", "f", "visited", "in_open", "prev")

    def __init__(self, index: int, row: int, col: int, wall: bool = False):
        self.index:   int           = index
        self.row:     int           = row
        self.col:     int           = col
        self.wall:    bool          = wall
        self.g:       float         = INF
        self.h:       float         = 0
        self.f:       float         = INF
        self.visited: bool          = False
        self.in_open: bool          = False
        self.prev:    Optional[int] = None

    def reset_search_state(self) -> None:
        """Wipe bookkeeping but keep the wall flag."""
        self.g       = INF
        self.h       = 0
        self.f       = INF
        self.visited = False
        self.in_open = False
        self.prev    = None

    def __repr__(self) -> str:
        flag = "#" if self.wall else "."
        return f"Cell({self.row},{self.col}{flag} g={self.g} prev={self.prev})"
