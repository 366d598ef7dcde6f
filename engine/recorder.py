"""
recorder.py — Headless Run Recorder & Comparison
=================================================
Runs one algorithm to completion without any real delays, keeps every
snapshot, and condenses the run into RunMetrics.

Usage:
    rec = Recorder()
    rec.start("dijkstra", seed=7)
    metrics = rec.run_to_completion()

Comparison Mode:
    Two Recorders started with the same seed search the same grid
    layout (each on its own copy), so compare(rec1, rec2) is a fair
    side-by-side of e.g. Dijkstra and A*.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Any

from algorithms import AlgoInfo, KIND_BARS, require_algorithm, make_input
from algorithms.bars import is_sorted
from algorithms.step import Step, PHASE_PATH
from engine.pacing import NullWaiter, DEFAULT_SPEED
from engine.run import Run
from engine.stepper import Stepper
from engine.token import RunTokens


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str       = ""
    algo_label:    str       = ""
    total_steps:   int       = 0          # snapshots rendered
    cells_visited: int       = 0          # grid cells with the visited flag at the end
    path_length:   int       = 0          # edges on the final path (cells - 1)
    path_found:    bool      = False
    is_sorted:     bool      = False      # bar runs only
    paused_ms:     int       = 0          # total suspension the run asked for
    log:           List[str] = field(default_factory=list)


@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    winner_cells: str = ""   # which algo visited fewer cells
    winner_path:  str = ""   # which algo found the shorter path


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Every snapshot from the run.
        metrics : RunMetrics (available after run_to_completion).
        run     : The underlying Run.
    """

    def __init__(self, speed: int = DEFAULT_SPEED):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.run:     Optional[Run]        = None

        self._info:    Optional[AlgoInfo] = None
        self._lines:   List[str]          = []
        self._waiter                      = NullWaiter()
        self._stepper                     = Stepper(waiter=self._waiter, speed=speed, record=True)

    def start(self, algo_key: str, seed: Optional[int] = None, data: Any = None) -> None:
        """Build the run.  `data` overrides the generated bar list / grid."""
        info = require_algorithm(algo_key)
        tokens = RunTokens()
        self._info  = info
        self._lines = []
        self.steps  = []
        self.metrics = None
        self.run = Run(
            info=info,
            token=tokens.new_token(),
            tokens=tokens,
            data=data if data is not None else make_input(info, seed=seed),
            render=lambda step: None,
            log=self._lines.append,
        )
        self._stepper.attach(self.run)

    def run_to_completion(self) -> RunMetrics:
        if self.run is None:
            raise RuntimeError("Call start() first.")
        self._stepper.drive()
        self.steps = list(self._stepper.steps)
        self.metrics = self._compute_metrics()
        return self.metrics

    @property
    def log(self) -> List[str]:
        return list(self._lines)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self) -> RunMetrics:
        info = self._info
        data = self.run.data
        m = RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            total_steps=len(self.steps),
            paused_ms=self._waiter.total_ms,
            log=list(self._lines),
        )
        if info.kind == KIND_BARS:
            m.is_sorted = is_sorted(data)
            return m

        m.cells_visited = len(data.visited_set())
        path_steps = [s for s in self.steps if s.phase == PHASE_PATH]
        if path_steps:
            m.path_found  = True
            m.path_length = len(path_steps[-1].path) - 1
        return m


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    if l.path_found and r.path_found:
        winner_path = winner(l.path_length, r.path_length, l.algo_label, r.algo_label)
    elif l.path_found or r.path_found:
        winner_path = l.algo_label if l.path_found else r.algo_label
    else:
        winner_path = "none"

    return ComparisonResult(
        left=l,
        right=r,
        winner_cells=winner(l.cells_visited, r.cells_visited, l.algo_label, r.algo_label),
        winner_path=winner_path,
    )
