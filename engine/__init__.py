"""
engine/
-------
Run control, pacing & recording layer.

    from engine import VisualizerSession, Stepper, Recorder, compare
"""

from engine.token    import RunTokens
from engine.pacing   import (
    StepWaiter, SleepWaiter, EventWaiter, NullWaiter,
    delay_ms, path_delay_ms, pause_for, clamp_speed,
    DEFAULT_SPEED, INTRO_DELAY_MS,
)
from engine.run      import Run, StepStatus
from engine.stepper  import Stepper, StepperState
from engine.session  import VisualizerSession, RunLog, Tick
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "RunTokens",
    "StepWaiter",
    "SleepWaiter",
    "EventWaiter",
    "NullWaiter",
    "delay_ms",
    "path_delay_ms",
    "pause_for",
    "clamp_speed",
    "DEFAULT_SPEED",
    "INTRO_DELAY_MS",
    "Run",
    "StepStatus",
    "Stepper",
    "StepperState",
    "VisualizerSession",
    "RunLog",
    "Tick",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
