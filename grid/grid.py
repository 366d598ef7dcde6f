"""
grid.py — Grid Container & Generator
=====================================
Single source of truth for one search run.  Algorithms mutate the
cells' bookkeeping; the renderer only ever sees immutable snapshots.

Responsibilities:
  1. Random generation with walls                 (generate)
  2. Fixed layouts from text, for tests and demos (from_text)
  3. Adjacency queries                            (neighbours)
  4. The Manhattan heuristic                      (manhattan)
  5. Serialisation                                (to_dict)

Design decisions:
  - Cells live in ONE flat list in row-major order and refer to each other
    by index (arena + index).  `prev` links are plain ints, so path
    reconstruction needs nothing but the list.
  - Start is always (0, 0), goal always (rows-1, cols-1); both are forced
    open after the walls are drawn.
  - A fresh Grid is built for every run and dropped as a whole afterwards.
"""

import random
from typing import List, Optional, FrozenSet, Iterator, Dict, Any

from grid.cell import Cell


ROWS      = 18
COLS      = 32
WALL_PROB = 0.20

# neighbour order: +row, -row, +col, -col.  DFS tie-breaks depend on it.
DIRECTIONS = [(1, 0), (-1, 0), (0, 1), (0, -1)]


def manhattan(a: Cell, b: Cell) -> int:
    """|Δrow| + |Δcol| — admissible and consistent on a 4-connected unit grid."""
    return abs(a.row - b.row) + abs(a.col - b.col)


class Grid:
    """
    Attributes:
        rows, cols : Dimensions.
        cells      : Flat list of Cells, index = row * cols + col.
        start      : Index of the start cell.
        goal       : Index of the goal cell.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid needs at least one cell, got {rows}x{cols}")
        self.rows:  int        = rows
        self.cols:  int        = cols
        self.cells: List[Cell] = [
            Cell(r * cols + c, r, c) for r in range(rows) for c in range(cols)
        ]
        self.start: int = 0
        self.goal:  int = rows * cols - 1
        self._walls: Optional[FrozenSet[int]] = None

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def generate(
        cls,
        rows: int = ROWS,
        cols: int = COLS,
        wall_prob: float = WALL_PROB,
        seed: Optional[int] = None,
    ) -> "Grid":
        """
        Random walls with independent probability `wall_prob` per cell.
        Every cell draws a number (corners included) so a given seed always
        yields the same layout; start and goal are then forced open.
        """
        rng = random.Random(seed)
        g = cls(rows, cols)
        for cell in g.cells:
            cell.wall = rng.random() < wall_prob
        g._open_endpoints()
        return g

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """
        Build a grid from rows of characters:
            '#'            wall
            '.', 'S', 'G'  open
        Blank lines and surrounding whitespace are ignored.
        """
        lines = [ln.strip() for ln in text.strip().splitlines() if ln.strip()]
        if not lines:
            raise ValueError("Empty grid text")
        width = len(lines[0])
        for i, ln in enumerate(lines):
            if len(ln) != width:
                raise ValueError(f"Row {i} has {len(ln)} columns, expected {width}")
            bad = set(ln) - set("#.SG")
            if bad:
                raise ValueError(f"Row {i}: unexpected characters {sorted(bad)}")

        g = cls(len(lines), width)
        for r, ln in enumerate(lines):
            for c, ch in enumerate(ln):
                g.cells[g.index(r, c)].wall = ch == "#"
        g._open_endpoints()
        return g

    # ==================================================================
    # LOOKUPS
    # ==================================================================
    def index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[self.index(row, col)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbours(self, idx: int) -> List[Cell]:
        """Up to four axis-aligned cells in the fixed +row, -row, +col, -col order."""
        cur = self.cells[idx]
        res = []
        for dr, dc in DIRECTIONS:
            nr, nc = cur.row + dr, cur.col + dc
            if self.in_bounds(nr, nc):
                res.append(self.cells[self.index(nr, nc)])
        return res

    def manhattan(self, a: int, b: int) -> int:
        return manhattan(self.cells[a], self.cells[b])

    @property
    def start_cell(self) -> Cell:
        return self.cells[self.start]

    @property
    def goal_cell(self) -> Cell:
        return self.cells[self.goal]

    # ==================================================================
    # SNAPSHOT HELPERS
    # ==================================================================
    @property
    def walls(self) -> FrozenSet[int]:
        # walls never change once a run has begun
        if self._walls is None:
            self._walls = frozenset(c.index for c in self.cells if c.wall)
        return self._walls

    def visited_set(self) -> FrozenSet[int]:
        return frozenset(c.index for c in self.cells if c.visited)

    def reset_search_state(self) -> None:
        for c in self.cells:
            c.reset_search_state()

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "start": self.start,
            "goal":  self.goal,
            "walls": sorted(self.walls),
        }

    def to_text(self) -> str:
        out = []
        for r in range(self.rows):
            out.append("".join("#" if self.cell(r, c).wall else "." for c in range(self.cols)))
        return "\n".join(out)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _open_endpoints(self) -> None:
        self.cells[self.start].wall = False
        self.cells[self.goal].wall = False
        self._walls = None

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, walls={len(self.walls)})"
