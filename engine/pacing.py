"""
pacing.py — Step Delays & Waiters
==================================
The per-step delay is the only pacing mechanism.  It is derived from the
UI speed slider (1 = slowest, 100 = fastest) every time it is needed, so
moving the slider mid-run takes effect on the next step.

    delay_ms(speed)      = max(10, int(200 - speed * 1.9))     # 198 … 10
    path_delay_ms(speed) = max(10, int(delay_ms(speed) * 0.6))
    INTRO_DELAY_MS       = 300                                   # sort preview

Waiters implement the suspension itself.  The scheduler owns one and
calls `wait(ms)` between steps; `cancel()` wakes a pending wait early.
"""

import threading
import time
from typing import List, Optional

from algorithms.step import PAUSE_INTRO, PAUSE_STEP, PAUSE_PATH, PAUSE_NONE


SPEED_MIN      = 1
SPEED_MAX      = 100
DEFAULT_SPEED  = 50
MIN_DELAY_MS   = 10
INTRO_DELAY_MS = 300


def clamp_speed(speed: float) -> int:
    return int(min(SPEED_MAX, max(SPEED_MIN, speed)))


def delay_ms(speed: float) -> int:
    return max(MIN_DELAY_MS, int(200 - clamp_speed(speed) * 1.9))


def path_delay_ms(speed: float) -> int:
    return max(MIN_DELAY_MS, int(delay_ms(speed) * 0.6))


def pause_for(step, speed: float) -> Optional[int]:
    """Milliseconds to suspend after rendering `step`; None means don't."""
    pause = step.pause
    if pause == PAUSE_STEP:
        return delay_ms(speed)
    if pause == PAUSE_PATH:
        return path_delay_ms(speed)
    if pause == PAUSE_INTRO:
        return INTRO_DELAY_MS
    if pause == PAUSE_NONE:
        return None
    raise ValueError(f"Unknown pause kind: {pause!r}")


# ---------------------------------------------------------------------------
# Waiters
# ---------------------------------------------------------------------------
class StepWaiter:
    """Cooperative, time-bounded suspension between two steps."""

    def wait(self, ms: int) -> bool:
        """Suspend for `ms` milliseconds.  Returns False if cancelled."""
        raise NotImplementedError

    def cancel(self) -> None:
        pass

    def reset(self) -> None:
        pass


class SleepWaiter(StepWaiter):
    """Plain blocking sleep.  Cannot be interrupted."""

    def wait(self, ms: int) -> bool:
        time.sleep(ms / 1000.0)
        return True


class EventWaiter(StepWaiter):
    """Sleeps on a threading.Event so another thread can cut the wait short."""

    def __init__(self):
        self._cancelled = threading.Event()

    def wait(self, ms: int) -> bool:
        return not self._cancelled.wait(ms / 1000.0)

    def cancel(self) -> None:
        self._cancelled.set()

    def reset(self) -> None:
        self._cancelled.clear()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()


class NullWaiter(StepWaiter):
    """Never sleeps; remembers what it was asked to wait.  Used headless and in tests."""

    def __init__(self):
        self.waits: List[int] = []

    def wait(self, ms: int) -> bool:
        self.waits.append(ms)
        return True

    @property
    def total_ms(self) -> int:
        return sum(self.waits)
