"""
step.py — Algorithm Step Snapshots
===================================
Every algorithm is a generator that yields one snapshot per visible
step.  A snapshot is a frozen-in-time picture of everything the
renderer needs to draw one frame:

    • BarStep  – the bar heights and the one or two highlighted indices
    • GridStep – walls, visited cells, the current cell, the frontier
                 and (during the final phase) the path drawn so far

Design decisions:
  - Snapshots are frozen dataclasses.  The algorithm generator is the
    only writer; the run wrapper and the renderer are pure readers.
  - `pause` tells the scheduler how long to suspend after rendering:
        "intro"  fixed preview pause before a sort starts
        "step"   the normal speed-dependent delay
        "path"   the shorter final-path delay
        "none"   render only, no suspension
  - `phase` is "search" until the final path starts being drawn.
"""

from dataclasses import dataclass, field
from typing import Tuple, FrozenSet, Optional, Iterable, Union

from grid import Grid


PAUSE_INTRO = "intro"
PAUSE_STEP  = "step"
PAUSE_PATH  = "path"
PAUSE_NONE  = "none"

PHASE_SEARCH = "search"
PHASE_PATH   = "path"


@dataclass(frozen=True)
class BarStep:
    """
    Attributes:
        values     : Bar heights, left to right.
        highlights : Indices drawn in the highlight colour (0, 1 or 2 of them).
    """

    values:     Tuple[int, ...]
    highlights: Tuple[int, ...] = ()
    pause:      str             = PAUSE_STEP
    phase:      str             = PHASE_SEARCH

    kind = "bars"


@dataclass(frozen=True)
class GridStep:
    """
    Attributes:
        rows, cols : Grid dimensions.
        walls      : Indices of wall cells.
        visited    : Indices with the visited flag set.
        current    : Index being expanded right now (None during the path phase).
        frontier   : Queue / stack / open-set contents, in container order.
        path       : Final-path prefix drawn so far, start first.
        start/goal : Endpoint indices.
    """

    rows:     int
    cols:     int
    walls:    FrozenSet[int]
    visited:  FrozenSet[int]
    current:  Optional[int]   = None
    frontier: Tuple[int, ...] = ()
    path:     Tuple[int, ...] = ()
    start:    int             = 0
    goal:     int             = 0
    pause:    str             = PAUSE_STEP
    phase:    str             = PHASE_SEARCH

    kind = "grid"


Step = Union[BarStep, GridStep]


# ---------------------------------------------------------------------------
# Convenience constructors so algorithms don't have to spell out every kwarg
# ---------------------------------------------------------------------------
def bar_step(values: Iterable[int], *highlights: int, pause: str = PAUSE_STEP) -> BarStep:
    return BarStep(values=tuple(values), highlights=tuple(highlights), pause=pause)


def grid_step(
    grid: Grid,
    current: Optional[int] = None,
    frontier: Iterable[int] = (),
    path: Iterable[int] = (),
    pause: str = PAUSE_STEP,
    phase: str = PHASE_SEARCH,
) -> GridStep:
    return GridStep(
        rows=grid.rows,
        cols=grid.cols,
        walls=grid.walls,
        visited=grid.visited_set(),
        current=current,
        frontier=tuple(frontier),
        path=tuple(path),
        start=grid.start,
        goal=grid.goal,
        pause=pause,
        phase=phase,
    )
