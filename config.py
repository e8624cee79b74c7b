"""
Equation + view settings -> render configuration builder.

Converts an equation string and a PlotSettings value into a render_cfg
dictionary ready for the grid kernels.
"""

from dataclasses import dataclass, replace

import equations


# ---------------------------------------------------------------------------
# View settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PlotSettings:
    zoom: float = equations.DEFAULT_ZOOM
    x_offset: float = equations.DEFAULT_X_OFFSET
    y_offset: float = equations.DEFAULT_Y_OFFSET

    def __post_init__(self):
        if not self.zoom > 0.0:
            raise ValueError(f"zoom must be > 0, got {self.zoom}")


DEFAULT_SETTINGS = PlotSettings()


def reset() -> PlotSettings:
    return DEFAULT_SETTINGS


def zoom_in(s: PlotSettings) -> PlotSettings:
    return replace(s, zoom=s.zoom * equations.ZOOM_STEP)


def zoom_out(s: PlotSettings) -> PlotSettings:
    return replace(s, zoom=s.zoom / equations.ZOOM_STEP)


# one pan step is AXIS_SCALE grid cells at any zoom

def move_left(s: PlotSettings) -> PlotSettings:
    return replace(s, x_offset=s.x_offset - 1.0 / s.zoom)


def move_right(s: PlotSettings) -> PlotSettings:
    return replace(s, x_offset=s.x_offset + 1.0 / s.zoom)


def move_up(s: PlotSettings) -> PlotSettings:
    return replace(s, y_offset=s.y_offset + 1.0 / s.zoom)


def move_down(s: PlotSettings) -> PlotSettings:
    return replace(s, y_offset=s.y_offset - 1.0 / s.zoom)


# ---------------------------------------------------------------------------
# Equation text heuristics
# ---------------------------------------------------------------------------

def y_search_range(equation: str) -> tuple[float, float]:
    """
    Window for the initial y guesses, chosen by substring:

    - "sin" or "cos" anywhere -> (-1.5, 1.5)
    - "ln" or "log" anywhere  -> (-10, 10)
    - otherwise               -> (-5, 5)
    """
    if "sin" in equation or "cos" in equation:
        return equations.Y_RANGE_TRIG
    if "ln" in equation or "log" in equation:
        return equations.Y_RANGE_LOG
    return equations.Y_RANGE_DEFAULT


# ---------------------------------------------------------------------------
# equation -> render config
# ---------------------------------------------------------------------------

def make_cfg(equation: str, settings: PlotSettings = DEFAULT_SETTINGS) -> dict:
    """
    Build a render configuration dictionary.

    Args:
        equation: Equation text like "y=x^2" or "x^2+y^2=4"
        settings: View (zoom and offsets) for this render

    Returns:
        dict with the compiled equation and every kernel parameter
    """
    eq = equations.build_equation(equation)

    render_cfg = dict(eq)
    y_min, y_max = y_search_range(eq["equation"])

    render_cfg["width"] = equations.GRID_WIDTH
    render_cfg["height"] = equations.GRID_HEIGHT
    render_cfg["scale"] = equations.AXIS_SCALE
    render_cfg["zoom"] = float(settings.zoom)
    render_cfg["x_offset"] = float(settings.x_offset)
    render_cfg["y_offset"] = float(settings.y_offset)
    render_cfg["y_min"] = float(y_min)
    render_cfg["y_max"] = float(y_max)
    render_cfg["n_guesses"] = equations.NUM_INITIAL_GUESSES
    render_cfg["n_sub"] = equations.POINTS_PER_COLUMN
    render_cfg["max_iter"] = equations.MAX_ITER
    render_cfg["eps"] = equations.EPSILON
    render_cfg["h"] = equations.DERIV_STEP
    render_cfg["damping"] = equations.DAMPING

    return render_cfg
