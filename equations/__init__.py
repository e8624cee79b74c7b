"""
Equations package - tokenizing, evaluating, compiling and solving
implicit equations in x and y, plus the grid rendering kernels.

- tokenizer: equation text -> token list
- evaluator: precedence-by-scan interpreter over token lists
- eq_functions: token lists -> numba-compiled f(x, y)
- solver: damped Newton kernel and solve()
- raster_fields: axis / segment / curve kernels on uint8 grids
"""

from .defaults import (
    GRID_WIDTH,
    GRID_HEIGHT,
    AXIS_SCALE,
    MAX_EQUATION_LENGTH,
    MAX_TOKENS,
    MAX_ITER,
    EPSILON,
    DERIV_STEP,
    DAMPING,
    NUM_INITIAL_GUESSES,
    POINTS_PER_COLUMN,
    Y_RANGE_TRIG,
    Y_RANGE_LOG,
    Y_RANGE_DEFAULT,
    DEFAULT_ZOOM,
    DEFAULT_X_OFFSET,
    DEFAULT_Y_OFFSET,
    ZOOM_STEP,
)

from .tokenizer import (
    Token,
    NUMBER,
    VARIABLE,
    OPERATOR,
    FUNCTION,
    LPAREN,
    RPAREN,
    EQUALS,
    FUNCTION_NAMES,
    tokenize,
    split_equation,
    format_tokens,
)

from .evaluator import evaluate

from .eq_functions import (
    normalize_equation,
    is_periodic,
    exprtext,
    funtext_eq,
    funpy_eq,
    funjit_eq,
    EQ_SIG,
    build_equation,
)

from .solver import (
    NO_SOLUTION,
    newton_solve,
    has_solution,
    solve,
)

from .raster_fields import (
    BLANK,
    CURVE,
    axis_center,
    draw_axes,
    draw_segment,
    y_to_row,
    render_field,
)

__all__ = [
    # Defaults
    "GRID_WIDTH",
    "GRID_HEIGHT",
    "AXIS_SCALE",
    "MAX_EQUATION_LENGTH",
    "MAX_TOKENS",
    "MAX_ITER",
    "EPSILON",
    "DERIV_STEP",
    "DAMPING",
    "NUM_INITIAL_GUESSES",
    "POINTS_PER_COLUMN",
    "Y_RANGE_TRIG",
    "Y_RANGE_LOG",
    "Y_RANGE_DEFAULT",
    "DEFAULT_ZOOM",
    "DEFAULT_X_OFFSET",
    "DEFAULT_Y_OFFSET",
    "ZOOM_STEP",
    # Tokens
    "Token",
    "NUMBER",
    "VARIABLE",
    "OPERATOR",
    "FUNCTION",
    "LPAREN",
    "RPAREN",
    "EQUALS",
    "FUNCTION_NAMES",
    "tokenize",
    "split_equation",
    "format_tokens",
    # Evaluation / compilation
    "evaluate",
    "normalize_equation",
    "is_periodic",
    "exprtext",
    "funtext_eq",
    "funpy_eq",
    "funjit_eq",
    "EQ_SIG",
    "build_equation",
    # Solver
    "NO_SOLUTION",
    "newton_solve",
    "has_solution",
    "solve",
    # Raster kernels
    "BLANK",
    "CURVE",
    "axis_center",
    "draw_axes",
    "draw_segment",
    "y_to_row",
    "render_field",
]
