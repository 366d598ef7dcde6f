"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • algorithm_selector   – dropdown of the six algorithms
  • description_panel    – the selected algorithm's one-line description
  • run_controls         – start / stop buttons (start can be disabled)
  • speed_control        – 1..100 slider with live value label
  • log_panel            – the run log as a list
  • comparison_panel     – side-by-side metrics of two headless runs

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import Optional, List
from algorithms import AlgoInfo
from engine import ComparisonResult
from engine.pacing import SPEED_MIN, SPEED_MAX, delay_ms


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = "bubble") -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(f'<option value="{algo.key}" {sel}>{algo.label}</option>')

    return f"""
    <div class="panel algorithm-selector">
      <h3>Algorithm</h3>
      <select id="algorithm">
        {''.join(options)}
      </select>
    </div>
    """


def description_panel(text: str = "") -> str:
    return f"""<p id="algoDesc" class="description">{text}</p>"""


# ---------------------------------------------------------------------------
# Start / Stop
# ---------------------------------------------------------------------------
def run_controls(start_enabled: bool = True) -> str:
    disabled = '' if start_enabled else 'disabled'
    return f"""
    <div class="panel run-controls">
      <div class="button-row">
        <button id="startBtn" class="btn-primary" {disabled}>Start</button>
        <button id="stopBtn" class="btn-secondary">Stop</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Speed Slider
# ---------------------------------------------------------------------------
def speed_control(speed: int = 50) -> str:
    return f"""
    <div class="panel speed-control">
      <label>Speed: <span id="speedVal">{speed}</span>
        <span id="speedHint" class="hint">({delay_ms(speed)} ms / step)</span></label>
      <input type="range" id="speed" min="{SPEED_MIN}" max="{SPEED_MAX}" value="{speed}">
    </div>
    """


# ---------------------------------------------------------------------------
# Log
# ---------------------------------------------------------------------------
def log_panel(lines: Optional[List[str]] = None) -> str:
    items = ''.join(f'<li>{line}</li>' for line in (lines or []))
    return f"""<ul id="log">{items}</ul>"""


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if not comp:
        return """
        <div class="panel comparison-panel">
          <h3>Comparison</h3>
          <p class="placeholder">Compare two algorithms on the same grid.</p>
        </div>
        """

    left = comp.left
    right = comp.right

    def path_cell(m):
        return f"{m.path_length}" if m.path_found else "no path"

    return f"""
    <div class="panel comparison-panel">
      <h3>Comparison: {left.algo_label} vs {right.algo_label}</h3>
      <table class="comparison-table">
        <tr><th>Metric</th><th>{left.algo_label}</th><th>{right.algo_label}</th><th>Winner</th></tr>
        <tr><td>Cells Visited</td><td>{left.cells_visited}</td><td>{right.cells_visited}</td><td>{comp.winner_cells}</td></tr>
        <tr><td>Path Length</td><td>{path_cell(left)}</td><td>{path_cell(right)}</td><td>{comp.winner_path}</td></tr>
        <tr><td>Steps</td><td>{left.total_steps}</td><td>{right.total_steps}</td><td>—</td></tr>
      </table>
    </div>
    """
