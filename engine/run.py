"""
run.py — One Algorithm Run as an Explicit State Machine
========================================================
A Run owns the generator of ONE algorithm execution plus the token it
was started with.  The scheduler calls `step()` repeatedly; each call
produces at most one rendered snapshot and reports what to do next:

    CONTINUE  – a frame was rendered, call step() again right away
    SUSPEND   – a frame was rendered, wait the step's delay first
    DONE      – finished, stopped, or nothing left to do

Cancellation contract:
  - The token is checked right before the generator is resumed (that is,
    right after the previous suspension) and again right before the
    resulting frame is rendered.
  - On the first failed check the run logs "<Name>: stopped" once and
    becomes DONE.  It never renders or logs anything after that.
  - Log lines the algorithm emits itself go through a guard that drops
    them as soon as the token is stale.
  - Whether the final-path animation still honours the token is a
    per-run switch (`cancel_during_path`).
"""

import enum
import logging
from typing import Callable, Optional, Any

from algorithms import AlgoInfo
from algorithms.step import Step, PAUSE_NONE, PHASE_PATH
from engine.token import RunTokens


logger = logging.getLogger(__name__)


class StepStatus(enum.Enum):
    CONTINUE = "continue"
    SUSPEND  = "suspend"
    DONE     = "done"


class Run:
    """
    Attributes:
        info        : AlgoInfo of the algorithm being run.
        token       : Token captured at start.
        data        : The bar list or Grid this run exclusively owns.
        last_step   : Most recently rendered snapshot (None before the first).
        steps_taken : Number of snapshots rendered.
        stopped     : True once cancellation was noticed.
        finished    : True once the generator ran to its end.
    """

    def __init__(
        self,
        info: AlgoInfo,
        token: int,
        tokens: RunTokens,
        data: Any,
        render: Callable[[Step], None],
        log: Callable[[str], None],
        cancel_during_path: bool = True,
    ):
        self.info:        AlgoInfo       = info
        self.token:       int            = token
        self.data:        Any            = data
        self.last_step:   Optional[Step] = None
        self.steps_taken: int            = 0
        self.stopped:     bool           = False
        self.finished:    bool           = False

        self._tokens             = tokens
        self._render             = render
        self._log                = log
        self._cancel_during_path = cancel_during_path
        self._gen                = info.fn(data, self._guarded_log)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def aborted(self) -> bool:
        return self._tokens.aborted(self.token)

    @property
    def done(self) -> bool:
        return self.stopped or self.finished

    @property
    def in_path_phase(self) -> bool:
        return self.last_step is not None and self.last_step.phase == PHASE_PATH

    # ------------------------------------------------------------------
    # Transition
    # ------------------------------------------------------------------
    def step(self) -> StepStatus:
        if self.done:
            return StepStatus.DONE

        if self._should_stop():
            return self._halt()

        try:
            snapshot = next(self._gen)
        except StopIteration:
            self.finished = True
            logger.debug("run %d (%s) finished after %d steps", self.token, self.info.key, self.steps_taken)
            return StepStatus.DONE

        if self._should_stop():
            return self._halt()

        self.last_step = snapshot
        self.steps_taken += 1
        self._render(snapshot)
        return StepStatus.CONTINUE if snapshot.pause == PAUSE_NONE else StepStatus.SUSPEND

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _should_stop(self) -> bool:
        if not self.aborted:
            return False
        return self._cancel_during_path or not self.in_path_phase

    def _halt(self) -> StepStatus:
        self.stopped = True
        self._gen.close()
        self._log(f"{self.info.log_name}: stopped")
        logger.debug("run %d (%s) stopped after %d steps", self.token, self.info.key, self.steps_taken)
        return StepStatus.DONE

    def _guarded_log(self, line: str) -> None:
        if self._should_stop():
            return
        self._log(line)

    def __repr__(self) -> str:
        return f"Run(token={self.token}, algo={self.info.key}, steps={self.steps_taken}, done={self.done})"
