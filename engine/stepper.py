"""
stepper.py — Scheduler Loop
============================
The Stepper drives a Run and owns the timing primitive.  It alternates
`run.step()` with `waiter.wait(delay)` until the run reports DONE, so the
algorithms themselves never sleep and can be stepped synchronously in
tests by handing the Stepper a NullWaiter.

State machine:
    IDLE     →  attach()           →  RUNNING
    RUNNING  →  (run finished)     →  FINISHED
    RUNNING  →  (run was aborted)  →  STOPPED
    any      →  reset()            →  IDLE

Thread safety:
  `drive()` blocks the calling thread.  Another thread may call `cancel()`
  to cut the current wait short; the run still learns that it must stop
  from its token, never from the Stepper.
"""

import logging
from enum import Enum
from typing import Optional, Callable, List

from algorithms.step import Step
from engine.pacing import StepWaiter, SleepWaiter, DEFAULT_SPEED, clamp_speed, pause_for
from engine.run import Run, StepStatus


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    FINISHED = "finished"
    STOPPED  = "stopped"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state   : Current StepperState.
        steps   : Every snapshot rendered so far (only when `record` is on).
        speed   : Slider value 1..100, read afresh before every wait.
        waiter  : The suspension primitive.
        on_step : Optional callback(Step) fired after each rendered step.
    """

    def __init__(
        self,
        waiter: Optional[StepWaiter] = None,
        speed: int = DEFAULT_SPEED,
        on_step: Optional[Callable[[Step], None]] = None,
        record: bool = False,
    ):
        self.waiter:  StepWaiter     = waiter or SleepWaiter()
        self.speed:   int            = clamp_speed(speed)
        self.on_step: Optional[Callable[[Step], None]] = on_step
        self.record:  bool           = record
        self.steps:   List[Step]     = []
        self.state:   StepperState   = StepperState.IDLE
        self.run:     Optional[Run]  = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def attach(self, run: Run) -> None:
        self.run   = run
        self.steps = []
        self.state = StepperState.RUNNING
        self.waiter.reset()

    def reset(self) -> None:
        self.run   = None
        self.steps = []
        self.state = StepperState.IDLE

    def cancel(self) -> None:
        """Wake a pending wait early."""
        self.waiter.cancel()

    def set_speed(self, speed: float) -> None:
        self.speed = clamp_speed(speed)

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------
    def advance(self) -> StepStatus:
        """One step of the attached run, plus its suspension if any."""
        if self.run is None:
            raise RuntimeError("Call attach() first.")
        if self.state is not StepperState.RUNNING:
            return StepStatus.DONE

        status = self.run.step()
        if status is StepStatus.DONE:
            self.state = StepperState.STOPPED if self.run.stopped else StepperState.FINISHED
            return status

        step = self.run.last_step
        if self.record:
            self.steps.append(step)
        if self.on_step is not None:
            self.on_step(step)

        if status is StepStatus.SUSPEND:
            ms = pause_for(step, self.speed)
            if ms is not None:
                self.waiter.wait(ms)
        return status

    def drive(self, run: Optional[Run] = None) -> StepperState:
        """Run to completion (or cancellation).  Blocks."""
        if run is not None:
            self.attach(run)
        while self.advance() is not StepStatus.DONE:
            pass
        logger.debug("stepper done: %s (%d steps)", self.state.value, self.run.steps_taken)
        return self.state

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_stopped(self) -> bool:
        return self.state == StepperState.STOPPED

    @property
    def current_step(self) -> Optional[Step]:
        return self.run.last_step if self.run else None
