"""
canvas.py — SVG Frame Renderer
===============================
Pure rendering function: snapshot → SVG string.

    render_step(step)      dispatches on step.kind
    render_bars(step)      bar chart, highlighted bars in black
    render_grid(step)      walls / visited / open set / current / path
    render_blank()         empty canvas shown before the first frame

Design decisions:
  - NO mutation.  The renderer reads an immutable snapshot and returns a
    string; it never touches the Grid or the bar list.
  - Strictly three colours plus the path green: white, black, crimson.
  - Layers for the grid are painted in a fixed order: cell fill, open-set
    outlines, start/goal borders, current cell, path, grid lines.
"""

from typing import Dict, List, Optional

from algorithms.step import Step, BarStep, GridStep


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 960
    height: int = 540
    bg:     str = "#ffffff"

    bar_color:       str = "#FF1B1C"   # crimson
    bar_highlight:   str = "#000000"   # black

    cell_colors: Dict[str, str] = {
        "wall":      "#000000",
        "visited":   "#dc143c",
        "unvisited": "#ffffff",
        "current":   "#dc143c",
        "path":      "#3BC14A",
    }
    open_outline:    str = "#dc143c"
    endpoint_border: str = "#dc143c"
    current_cross:   str = "#000000"
    grid_line:       str = "#00000022"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Functions
# ---------------------------------------------------------------------------
def render_step(step: Optional[Step], config: CanvasConfig = CONFIG) -> str:
    if step is None:
        return render_blank(config)
    if isinstance(step, BarStep):
        return render_bars(step, config)
    if isinstance(step, GridStep):
        return render_grid(step, config)
    raise TypeError(f"Cannot render {type(step).__name__}")


def render_blank(config: CanvasConfig = CONFIG) -> str:
    return "\n".join([_open_svg(config), "</svg>"])


def render_bars(step: BarStep, config: CanvasConfig = CONFIG) -> str:
    parts = [_open_svg(config)]
    n = len(step.values)
    if n:
        w = config.width / n
        for i, h in enumerate(step.values):
            fill = config.bar_highlight if i in step.highlights else config.bar_color
            parts.append(
                f'<rect class="bar" x="{i * w + 1:.2f}" y="{config.height - h}" '
                f'width="{max(w - 2, 1):.2f}" height="{h}" fill="{fill}"/>'
            )
    parts.append("</svg>")
    return "\n".join(parts)


def render_grid(step: GridStep, config: CanvasConfig = CONFIG) -> str:
    cw = config.width / step.cols
    ch = config.height / step.rows
    colors = config.cell_colors
    parts = [_open_svg(config)]

    # -- base fill --
    for idx in range(step.rows * step.cols):
        if idx in step.walls:
            fill = colors["wall"]
        elif idx in step.visited:
            fill = colors["visited"]
        else:
            fill = colors["unvisited"]
        parts.append(_cell_rect(idx, step.cols, cw, ch, fill))

    # -- open set: outlines on cells that are not visited yet --
    for idx in step.frontier:
        if idx in step.walls or idx in step.visited:
            continue
        r, c = divmod(idx, step.cols)
        parts.append(
            f'<rect class="open" x="{c * cw + 2:.2f}" y="{r * ch + 2:.2f}" '
            f'width="{cw - 4:.2f}" height="{ch - 4:.2f}" fill="none" '
            f'stroke="{config.open_outline}" stroke-width="2"/>'
        )

    # -- start / goal --
    for idx in (step.start, step.goal):
        r, c = divmod(idx, step.cols)
        parts.append(
            f'<rect class="endpoint" x="{c * cw + 1:.2f}" y="{r * ch + 1:.2f}" '
            f'width="{cw - 2:.2f}" height="{ch - 2:.2f}" fill="none" '
            f'stroke="{config.endpoint_border}" stroke-width="3"/>'
        )

    # -- current: filled + X --
    if step.current is not None:
        parts.append(_render_current(step.current, step.cols, cw, ch, config))

    # -- final path --
    for idx in step.path:
        parts.append(_cell_rect(idx, step.cols, cw, ch, colors["path"], css="path"))

    # -- grid lines --
    parts.extend(_grid_lines(step.rows, step.cols, cw, ch, config))

    parts.append("</svg>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _open_svg(config: CanvasConfig) -> str:
    return (
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    )


def _cell_rect(idx: int, cols: int, cw: float, ch: float, fill: str, css: str = "cell") -> str:
    r, c = divmod(idx, cols)
    return (
        f'<rect class="{css}" x="{c * cw:.2f}" y="{r * ch:.2f}" '
        f'width="{cw:.2f}" height="{ch:.2f}" fill="{fill}"/>'
    )


def _render_current(idx: int, cols: int, cw: float, ch: float, config: CanvasConfig) -> str:
    r, c = divmod(idx, cols)
    x0, y0 = c * cw, r * ch
    x1, y1 = x0 + cw, y0 + ch
    stroke = config.current_cross
    return "\n".join([
        '<g class="current">',
        _cell_rect(idx, cols, cw, ch, config.cell_colors["current"]),
        f'  <line x1="{x0 + 4:.2f}" y1="{y0 + 4:.2f}" x2="{x1 - 4:.2f}" y2="{y1 - 4:.2f}" stroke="{stroke}"/>',
        f'  <line x1="{x1 - 4:.2f}" y1="{y0 + 4:.2f}" x2="{x0 + 4:.2f}" y2="{y1 - 4:.2f}" stroke="{stroke}"/>',
        '</g>',
    ])


def _grid_lines(rows: int, cols: int, cw: float, ch: float, config: CanvasConfig) -> List[str]:
    lines = []
    for r in range(rows):
        lines.append(
            f'<line x1="0" y1="{r * ch:.2f}" x2="{config.width}" y2="{r * ch:.2f}" '
            f'stroke="{config.grid_line}" stroke-width="1"/>'
        )
    for c in range(cols):
        lines.append(
            f'<line x1="{c * cw:.2f}" y1="0" x2="{c * cw:.2f}" y2="{config.height}" '
            f'stroke="{config.grid_line}" stroke-width="1"/>'
        )
    return lines
