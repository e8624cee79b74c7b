"""
Damped Newton-Raphson for y given x on an implicit equation.

Non-convergence is reported as NaN; nothing here raises for bad input.
"""

import math
import numpy as np
from numba import njit

from .defaults import MAX_ITER, EPSILON, DERIV_STEP, DAMPING, PI, TWO_PI
from .eq_functions import build_equation

NO_SOLUTION = math.nan


@njit(cache=False, fastmath=False)
def wrap_angle(y):
    # into (-pi, pi]
    return PI - ((PI - y) % TWO_PI)


@njit(cache=False, fastmath=False)
def newton_solve(f, x, initial_y, periodic, max_iter, eps, h, damping):
    """
    Root of y -> f(x, y) starting at initial_y.

    Forward-difference derivative with step h, |df| clamped to eps with
    its sign kept, fixed damping on every step. Stops once a step moves y
    by eps or less; hitting max_iter first returns NaN.
    """
    y = initial_y
    it = 0
    while True:
        prev_y = y

        fy = f(x, y)
        fh = f(x, y + h)
        df = (fh - fy) / h

        if abs(df) < eps:
            df = -eps if df < 0.0 else eps

        y -= damping * (fy / df)

        if periodic:
            y = wrap_angle(y)

        it += 1
        # NaN steps compare False and end the loop here
        if not (abs(y - prev_y) > eps and it < max_iter):
            break

    if it < max_iter:
        return y
    return np.nan


@njit(cache=False, fastmath=False)
def has_solution(value):
    return np.isfinite(value)


def solve(equation: str, x: float, initial_y: float) -> float:
    """
    Solve equation for y at x, starting from initial_y.

    Returns the converged y, or NO_SOLUTION (NaN) when the iteration cap
    is reached. Check with has_solution() before using the value.
    """
    eq = build_equation(equation)
    return float(
        newton_solve(
            eq["f"],
            float(x),
            float(initial_y),
            eq["periodic"],
            MAX_ITER,
            EPSILON,
            DERIV_STEP,
            DAMPING,
        )
    )
