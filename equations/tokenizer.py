"""
Equation text -> flat token list.

Classification order is digit > letter > symbol; each class consumes the
longest run it can. Characters outside the grammar are dropped.
"""

from dataclasses import dataclass
import re as regex
import string

from .defaults import MAX_TOKENS

NUMBER = "number"
VARIABLE = "variable"
OPERATOR = "operator"
FUNCTION = "function"
LPAREN = "lparen"
RPAREN = "rparen"
EQUALS = "equals"

FUNCTION_NAMES = ("sin", "cos", "tan", "log", "ln", "exp")
OPERATORS = "+-*/^"

PRECEDENCE = {
    "^": 3,
    "*": 2,
    "/": 2,
    "+": 1,
    "-": 1,
}

_DIGITS = frozenset(string.digits + ".")
_LETTERS = frozenset(string.ascii_letters)
_SINGLE = {
    "=": EQUALS,
    "(": LPAREN,
    ")": RPAREN,
}

_ATOF_RE = regex.compile(r"\d*(?:\.\d*)?")


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    value: float = 0.0


def parse_number(text: str) -> float:
    """
    atof-style parse: longest decimal prefix wins, no prefix means 0.

        "3.5"   -> 3.5
        "1.2.3" -> 1.2
        "."     -> 0.0
    """
    head = _ATOF_RE.match(text).group(0)
    if head in ("", "."):
        return 0.0
    return float(head)


def tokenize(expr: str, max_tokens: int = MAX_TOKENS) -> list[Token]:
    tokens: list[Token] = []
    i = 0
    n = len(expr)

    while i < n and len(tokens) < max_tokens:
        ch = expr[i]

        if ch in _DIGITS:
            j = i
            while j < n and expr[j] in _DIGITS:
                j += 1
            text = expr[i:j]
            tokens.append(Token(NUMBER, text, parse_number(text)))
            i = j
            continue

        if ch in _LETTERS:
            j = i
            while j < n and expr[j] in _LETTERS:
                j += 1
            text = expr[i:j]
            kind = FUNCTION if text in FUNCTION_NAMES else VARIABLE
            tokens.append(Token(kind, text))
            i = j
            continue

        if ch in _SINGLE:
            tokens.append(Token(_SINGLE[ch], ch))
        elif ch in OPERATORS:
            tokens.append(Token(OPERATOR, ch))
        # whitespace and anything unrecognized falls through
        i += 1

    return tokens


def split_equation(equation: str) -> tuple[str, str]:
    """Split at the first '='; a missing right side reads as "0"."""
    left, sep, right = equation.partition("=")
    if not sep:
        return equation, "0"
    return left, right


def format_tokens(tokens: list[Token]) -> str:
    parts = []
    for tok in tokens:
        if tok.kind == NUMBER:
            parts.append(f"Number({tok.value!r})")
        elif tok.kind == VARIABLE:
            parts.append(f"Variable({tok.text!r})")
        elif tok.kind == OPERATOR:
            parts.append(f"Operator({tok.text!r})")
        elif tok.kind == FUNCTION:
            parts.append(f"Function({tok.text!r})")
        elif tok.kind == LPAREN:
            parts.append("LParen")
        elif tok.kind == RPAREN:
            parts.append("RParen")
        else:
            parts.append("Equals")
    return " ".join(parts)
