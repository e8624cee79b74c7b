"""
Precedence-by-scan evaluation of a token list.

No parse tree is built: each call finds the lowest-precedence operator
outside parentheses, splits there, and recurses into both halves. The
same split rule drives the source generator in eq_functions, so the
interpreted and compiled paths agree.
"""

import numpy as np

from .tokenizer import (
    NUMBER,
    VARIABLE,
    OPERATOR,
    FUNCTION,
    LPAREN,
    RPAREN,
    PRECEDENCE,
)


def find_split(tokens) -> int:
    """
    Index of the operator to split at, or -1.

    Scans right to left at parenthesis depth 0. Ties keep the rightmost
    operator, so chains group to the left: 8-3-2 is (8-3)-2 and 2^3^2 is
    (2^3)^2.
    """
    split = -1
    lowest = 999
    depth = 0
    for i in range(len(tokens) - 1, -1, -1):
        tok = tokens[i]
        if tok.kind == RPAREN:
            depth += 1
        elif tok.kind == LPAREN:
            depth -= 1
        elif depth == 0 and tok.kind == OPERATOR:
            prec = PRECEDENCE[tok.text]
            if prec < lowest:
                lowest = prec
                split = i
    return split


def is_call(tokens) -> bool:
    return len(tokens) > 0 and tokens[0].kind == FUNCTION


def is_wrapped(tokens) -> bool:
    return (
        len(tokens) > 1
        and tokens[0].kind == LPAREN
        and tokens[-1].kind == RPAREN
    )


def apply_function(name: str, arg):
    if name == "sin":
        return np.sin(arg)
    if name == "cos":
        return np.cos(arg)
    if name == "tan":
        return np.tan(arg)
    if name == "log":
        return np.log10(arg)
    if name == "ln":
        return np.log(arg)
    if name == "exp":
        return np.exp(arg)
    return np.float64(0.0)


def apply_operator(op: str, left, right):
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0.0:
            return np.float64(np.inf)
        return left / right
    if op == "^":
        return np.power(left, right)
    return np.float64(0.0)


def _evaluate(tokens, x, y):
    n = len(tokens)
    if n == 0:
        return np.float64(0.0)

    if n == 1:
        tok = tokens[0]
        if tok.kind == NUMBER:
            return np.float64(tok.value)
        if tok.kind == VARIABLE:
            if tok.text == "x":
                return x
            if tok.text == "y":
                return y
        return np.float64(0.0)

    split = find_split(tokens)

    if split == -1:
        if is_call(tokens):
            arg = _evaluate(tokens[2:-1], x, y)
            return apply_function(tokens[0].text, arg)
        if is_wrapped(tokens):
            return _evaluate(tokens[1:-1], x, y)
        return np.float64(0.0)

    left = _evaluate(tokens[:split], x, y)
    right = _evaluate(tokens[split + 1:], x, y)
    return apply_operator(tokens[split].text, left, right)


def evaluate(tokens, x: float, y: float) -> float:
    """
    Value of a token list at (x, y).

    Never raises for malformed input: shapes that cannot be read
    evaluate to 0, division by zero gives +inf and domain errors give
    NaN, all of which propagate arithmetically.
    """
    with np.errstate(all="ignore"):
        value = _evaluate(tokens, np.float64(x), np.float64(y))
    return float(value)
