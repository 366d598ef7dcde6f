"""
ui/
---
Presentation layer.

    from ui import render_step
    from ui import algorithm_selector, run_controls, …
"""

from ui.canvas import render_step, render_bars, render_grid, render_blank, CanvasConfig

from ui.controls import (
    algorithm_selector,
    description_panel,
    run_controls,
    speed_control,
    log_panel,
    comparison_panel,
)

__all__ = [
    "render_step",
    "render_bars",
    "render_grid",
    "render_blank",
    "CanvasConfig",
    "algorithm_selector",
    "description_panel",
    "run_controls",
    "speed_control",
    "log_panel",
    "comparison_panel",
]
