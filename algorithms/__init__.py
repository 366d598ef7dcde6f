"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, require_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, log_name, fn, kind, description, …),
        …
    }

The set of keys is closed: bubble, merge, bfs, dfs, dijkstra, astar.
Every `fn` is a generator function taking (data, log) where `data` is a
list of bar heights for kind "bars" and a Grid for kind "grid".
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional, Union

from grid import Grid

from algorithms.bars     import make_bars
from algorithms.bubble   import bubble_sort as _bubble
from algorithms.merge    import merge_sort  as _merge
from algorithms.bfs      import bfs         as _bfs
from algorithms.dfs      import dfs         as _dfs
from algorithms.dijkstra import dijkstra    as _dijkstra
from algorithms.astar    import astar       as _astar


KIND_BARS = "bars"
KIND_GRID = "grid"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:             str                    # registry key, e.g. "bfs"
    label:           str                    # human label, e.g. "Breadth-First Search"
    log_name:        str                    # prefix of every log line, e.g. "BFS"
    fn:              Callable               # the generator function
    kind:            str                    # KIND_BARS or KIND_GRID
    description:     str       = ""         # shown when the algorithm is selected
    tags:            List[str] = field(default_factory=list)
    complexity_time: str       = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", log_name="Bubble", fn=_bubble, kind=KIND_BARS,
        tags=["sorting", "in-place"], complexity_time="O(n²)",
        description="Bubble Sort repeatedly compares adjacent items and swaps them when out of order.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", log_name="Merge", fn=_merge, kind=KIND_BARS,
        tags=["sorting", "divide-and-conquer", "stable"], complexity_time="O(n log n)",
        description="Merge Sort splits the array, recursively sorts halves, then merges them back together.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", log_name="BFS", fn=_bfs, kind=KIND_GRID,
        tags=["unweighted", "shortest-path", "traversal"], complexity_time="O(V + E)",
        description="BFS explores the grid level-by-level (waves) from the start until it reaches the goal.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", log_name="DFS", fn=_dfs, kind=KIND_GRID,
        tags=["unweighted", "traversal"], complexity_time="O(V + E)",
        description="DFS dives deep along one route, backtracking when it hits dead ends.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", log_name="Dijkstra", fn=_dijkstra, kind=KIND_GRID,
        tags=["weighted", "shortest-path"], complexity_time="O(V²)",
        description="Dijkstra expands nodes by increasing distance (g), guaranteeing shortest paths on uniform costs.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", log_name="A*", fn=_astar, kind=KIND_GRID,
        tags=["shortest-path", "heuristic"], complexity_time="O(V²)",
        description="A* uses f = g + h (Manhattan heuristic) to prioritize promising nodes toward the goal.",
    ),
}

DEFAULT_ALGORITHM = "bubble"


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def require_algorithm(key: str) -> AlgoInfo:
    """Return AlgoInfo by key; unknown keys are an error."""
    info = REGISTRY.get(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")
    return info


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def make_input(info: AlgoInfo, seed: Optional[int] = None) -> Union[List[int], Grid]:
    """Fresh data for one run: a new bar array or a new walled grid."""
    if info.kind == KIND_BARS:
        return make_bars(seed=seed)
    return Grid.generate(seed=seed)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "DEFAULT_ALGORITHM",
    "KIND_BARS",
    "KIND_GRID",
    "require_algorithm",
    "list_algorithms",
    "make_input",
]
