from algorithms.step import BarStep, grid_step
from grid import Grid
from ui import render_step, render_blank, CanvasConfig
from ui.controls import log_panel, run_controls, algorithm_selector
from algorithms import list_algorithms


def test_bars_highlighted_in_black():
    svg = render_step(BarStep(values=(30, 40, 50), highlights=(1,)))
    assert svg.count('class="bar"') == 3
    assert svg.count(CanvasConfig.bar_highlight) == 1
    assert svg.count(CanvasConfig.bar_color) == 2


def test_grid_layers():
    g = Grid.from_text("""
        ..#
        ...
    """)
    g.cells[0].visited = True
    svg = render_step(grid_step(g, current=0, frontier=[1, 3], path=[0]))
    assert svg.count('class="cell"') == 6 + 1          # base cells + current fill
    assert svg.count('class="open"') == 2
    assert svg.count('class="endpoint"') == 2
    assert svg.count('class="current"') == 1
    assert svg.count('class="path"') == 1


def test_open_outline_skips_visited_cells():
    g = Grid(2, 2)
    g.cells[1].visited = True
    svg = render_step(grid_step(g, frontier=[1, 2]))
    assert svg.count('class="open"') == 1


def test_blank_canvas():
    assert render_step(None) == render_blank()


def test_controls():
    assert "<li>a</li><li>b</li>" in log_panel(["a", "b"])
    assert "disabled" in run_controls(start_enabled=False)
    assert "disabled" not in run_controls(start_enabled=True)
    html = algorithm_selector(list_algorithms(), "merge")
    assert '<option value="merge" selected>' in html
    assert html.count("<option") == 6
