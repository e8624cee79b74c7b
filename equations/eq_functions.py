"""
Equation building and JIT compilation.

This module contains:
- Source text generation from token lists (same split rule as the evaluator)
- Python function builders and numba JIT wrappers
- build_equation() - the compiled equation configuration builder
"""

import math
from functools import lru_cache

from numba import njit, types

from . import functions
from .defaults import MAX_EQUATION_LENGTH
from .evaluator import find_split, is_call, is_wrapped
from .tokenizer import NUMBER, VARIABLE, tokenize, split_equation


# ---------------------------------------------------------------------------
# Equation text helpers
# ---------------------------------------------------------------------------

def normalize_equation(text: str) -> str:
    """Treat text like one line read from a terminal: drop the line end, cap the length."""
    text = text.split("\n", 1)[0].rstrip("\r")
    return text[: MAX_EQUATION_LENGTH - 1]


def is_periodic(equation: str) -> bool:
    # plain substring test: "sinh" or "cost" count too
    return "sin" in equation or "cos" in equation or "tan" in equation


# ---------------------------------------------------------------------------
# Build python expression text
# ---------------------------------------------------------------------------

def exprtext(tokens) -> str:
    n = len(tokens)
    if n == 0:
        return "0.0"

    if n == 1:
        tok = tokens[0]
        if tok.kind == NUMBER:
            value = float(tok.value)
            if math.isinf(value):
                return "np.inf"
            return repr(value)
        if tok.kind == VARIABLE and tok.text in ("x", "y"):
            return tok.text
        return "0.0"

    split = find_split(tokens)

    if split == -1:
        if is_call(tokens):
            name = functions.FUNCTION_NS_NAMES[tokens[0].text]
            return f"{name}({exprtext(tokens[2:-1])})"
        if is_wrapped(tokens):
            return exprtext(tokens[1:-1])
        return "0.0"

    left = exprtext(tokens[:split])
    right = exprtext(tokens[split + 1:])
    op = tokens[split].text
    if op == "/":
        return f"div({left}, {right})"
    if op == "^":
        return f"power({left}, {right})"
    return f"({left} {op} {right})"


def funtext_eq(name: str, left_tokens, right_tokens) -> str:
    lines = [
        f"def {name}(x, y):",
        f"    lhs = {exprtext(left_tokens)}",
        f"    rhs = {exprtext(right_tokens)}",
        f"    return lhs - rhs",
    ]
    source = "\n".join(lines)
    return source


# ---------------------------------------------------------------------------
# Build python functions from text
# ---------------------------------------------------------------------------

def funpy_eq(left_tokens, right_tokens):
    ns = functions.NS.copy()
    src = funtext_eq("impl_eq", left_tokens, right_tokens)
    exec(src, ns, ns)
    return ns["impl_eq"]


# ---------------------------------------------------------------------------
# JIT function signatures
# ---------------------------------------------------------------------------

EQ_SIG = types.float64(
    types.float64,   # x
    types.float64,   # y
)


# ---------------------------------------------------------------------------
# JIT compilation wrappers
# ---------------------------------------------------------------------------

def funjit_eq(left_tokens, right_tokens):
    fun = funpy_eq(left_tokens, right_tokens)
    jit = njit(EQ_SIG, cache=False, fastmath=False, error_model="numpy")(fun)
    return jit


# ---------------------------------------------------------------------------
# build_equation - compiled equation configuration
# ---------------------------------------------------------------------------

@lru_cache(maxsize=64)
def build_equation(equation: str) -> dict:
    """
    Tokenize and compile an equation.

    Args:
        equation: Equation text like "y=x^2" or "x^2+y^2-4"

    Returns:
        dict with the normalized text, both token lists, the compiled
        f(x, y) = left - right and the periodic-wrap flag

    The result is cached per text; treat it as read-only.
    """
    text = normalize_equation(equation)
    left, right = split_equation(text)
    left_tokens = tokenize(left)
    right_tokens = tokenize(right)

    return dict(
        equation=text,
        left=left,
        right=right,
        left_tokens=left_tokens,
        right_tokens=right_tokens,
        source=funtext_eq("impl_eq", left_tokens, right_tokens),
        f=funjit_eq(left_tokens, right_tokens),
        periodic=is_periodic(text),
    )
