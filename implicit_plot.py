"""
Implicit curve plotting from equation strings.

Provides render() which converts an equation and view settings into a
character grid, and render_text() which frames it for printing.
"""

import numpy as np

from equations import render_field
from config import PlotSettings, DEFAULT_SETTINGS, make_cfg


# ---------------------------------------------------------------------------
# dict-based interface to the numba kernel
# ---------------------------------------------------------------------------

def do_render_field(render_cfg):
    grid = render_field(
        render_cfg["f"],
        int(render_cfg["width"]),
        int(render_cfg["height"]),
        float(render_cfg["zoom"]),
        float(render_cfg["x_offset"]),
        float(render_cfg["y_offset"]),
        float(render_cfg["scale"]),
        float(render_cfg["y_min"]),
        float(render_cfg["y_max"]),
        int(render_cfg["n_guesses"]),
        int(render_cfg["n_sub"]),
        bool(render_cfg["periodic"]),
        int(render_cfg["max_iter"]),
        float(render_cfg["eps"]),
        float(render_cfg["h"]),
        float(render_cfg["damping"]),
    )
    return grid


def render(equation: str, settings: PlotSettings = DEFAULT_SETTINGS) -> np.ndarray:
    """
    Plot an implicit equation onto a fresh character grid.

    Args:
        equation: Equation text like "y=x^2"; no '=' means "= 0"
        settings: View zoom and offsets

    Returns:
        uint8 array of ASCII codes, shape (GRID_HEIGHT, GRID_WIDTH)
    """
    render_cfg = make_cfg(equation, settings)
    return do_render_field(render_cfg)


# ---------------------------------------------------------------------------
# grid -> text
# ---------------------------------------------------------------------------

def grid_rows(grid: np.ndarray) -> list[str]:
    return [row.tobytes().decode("ascii") for row in np.ascontiguousarray(grid)]


def frame_grid(grid: np.ndarray, settings: PlotSettings = DEFAULT_SETTINGS) -> str:
    width = grid.shape[1]
    border = "+" + "-" * width + "+"
    lines = [border]
    lines.extend(f"|{row}|" for row in grid_rows(grid))
    lines.append(border)
    lines.append("")
    lines.append(
        f"Plot (Zoom: {settings.zoom:.2f}, "
        f"Offset: {settings.x_offset:.2f}, {settings.y_offset:.2f})"
    )
    return "\n".join(lines)


def render_text(equation: str, settings: PlotSettings = DEFAULT_SETTINGS) -> str:
    return frame_grid(render(equation, settings), settings)
