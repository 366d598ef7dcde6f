"""
session.py — Visualizer Session Controller
===========================================
Everything one browser tab (or one test) needs: the run tokens, the
user-facing log, the selected algorithm, the speed and at most one
active Run.

Control surface:
    select(key)   – change the algorithm; clears the log, never starts a run
    start(key)    – ignored while start is disabled, otherwise begins a run
    stop()        – invalidates the active run, logs "Stopped.", re-enables start
    tick()        – advance the active run by exactly one step

The session never sleeps.  `tick()` reports how long the caller should
wait before the next tick, so the browser's timer (or a Stepper, or a
test loop) is the suspension primitive.

Not thread-safe on its own; callers that share a session between threads
hold `session.lock` around every call.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional, List

from algorithms import AlgoInfo, DEFAULT_ALGORITHM, require_algorithm, make_input
from algorithms.step import Step
from engine.pacing import DEFAULT_SPEED, clamp_speed, pause_for
from engine.run import Run, StepStatus
from engine.token import RunTokens


logger = logging.getLogger(__name__)


class RunLog:
    """Append-only list of lines, cleared wholesale."""

    def __init__(self):
        self.lines: List[str] = []

    def append(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines = []

    def __iter__(self):
        return iter(list(self.lines))

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class Tick:
    status:   StepStatus
    step:     Optional[Step] = None     # frame rendered by this tick
    delay_ms: Optional[int]  = None     # how long to wait before the next tick


class VisualizerSession:
    """
    Attributes:
        tokens        : RunTokens owned by this session.
        log           : RunLog shown to the user.
        selected      : Key of the selected algorithm.
        speed         : Slider value 1..100.
        start_enabled : False while a run is in progress.
        run           : The active (or last) Run.
        frame         : Last snapshot handed to the renderer.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        speed: int = DEFAULT_SPEED,
        cancel_during_path: bool = True,
        selected: str = DEFAULT_ALGORITHM,
    ):
        require_algorithm(selected)
        self.tokens:        RunTokens      = RunTokens()
        self.log:           RunLog         = RunLog()
        self.selected:      str            = selected
        self.speed:         int            = clamp_speed(speed)
        self.start_enabled: bool           = True
        self.run:           Optional[Run]  = None
        self.frame:         Optional[Step] = None
        self.lock                          = threading.Lock()

        self.cancel_during_path = cancel_during_path
        self._seed = seed
        self._runs_started = 0

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------
    def select(self, key: str) -> str:
        """Change the selected algorithm and return its description."""
        info = require_algorithm(key)
        self.selected = key
        self.log.clear()
        return info.description

    def start(self, key: Optional[str] = None) -> bool:
        """Begin a new run.  Returns False (and does nothing) while start is disabled."""
        if not self.start_enabled:
            return False
        info = require_algorithm(key or self.selected)

        # let a superseded run notice its stale token before the log is wiped
        if self.run is not None and not self.run.done:
            self.run.step()

        self.start_enabled = False
        self.selected = info.key
        token = self.tokens.new_token()
        self.log.clear()
        self.frame = None
        self.run = Run(
            info=info,
            token=token,
            tokens=self.tokens,
            data=make_input(info, seed=self._next_seed()),
            render=self._render,
            log=self.log.append,
            cancel_during_path=self.cancel_during_path,
        )
        logger.debug("started run %d (%s)", token, info.key)
        return True

    def stop(self) -> None:
        self.tokens.new_token()
        self.start_enabled = True
        self.log.append("Stopped.")
        logger.debug("stop requested, current token now %d", self.tokens.current)

    def tick(self) -> Tick:
        """Advance the active run by one step."""
        run = self.run
        if run is None:
            return Tick(StepStatus.DONE)

        status = run.step()
        if status is StepStatus.DONE:
            if self.tokens.is_current(run.token):
                self.start_enabled = True
            return Tick(StepStatus.DONE)

        delay = pause_for(run.last_step, self.speed) if status is StepStatus.SUSPEND else None
        return Tick(status, run.last_step, delay)

    def set_speed(self, speed: float) -> int:
        self.speed = clamp_speed(speed)
        return self.speed

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def info(self) -> AlgoInfo:
        return require_algorithm(self.selected)

    @property
    def description(self) -> str:
        return self.info.description

    @property
    def running(self) -> bool:
        return self.run is not None and not self.run.done and self.tokens.is_current(self.run.token)

    def state(self) -> dict:
        return {
            "selected":      self.selected,
            "description":   self.description,
            "speed":         self.speed,
            "start_enabled": self.start_enabled,
            "running":       self.running,
            "log":           list(self.log.lines),
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _render(self, step: Step) -> None:
        self.frame = step

    def _next_seed(self) -> Optional[int]:
        # a seeded session still gets a different layout on every run
        self._runs_started += 1
        if self._seed is None:
            return None
        return self._seed + self._runs_started - 1
