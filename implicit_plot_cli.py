#!/usr/bin/env python
"""
implicit_plot_cli.py

Terminal plotter for implicit equations in x and y.

Every equation is read as

    left(x, y) = right(x, y)

and solved for y at each sampled x with damped Newton iteration from
a bank of initial guesses. The solutions are projected onto an 80x20
character grid and stitched into curves column by column.
"""

import argparse
import time
from pathlib import Path

import equations
from config import PlotSettings
from implicit_plot import render, frame_grid
from session import INSTRUCTIONS, run_session


# ---------------------------------------------------------------------------
# debugging helpers
# ---------------------------------------------------------------------------

def show_tokens(equation: str) -> None:
    eq = equations.build_equation(equation)
    print(f"left : {equations.format_tokens(eq['left_tokens'])}")
    print(f"right: {equations.format_tokens(eq['right_tokens'])}")
    print("compiled:")
    print(eq["source"])


def probe(equation: str, x: float, y: float) -> None:
    """
    Print both sides and f = left - right at one point, using the
    interpreted evaluator.
    """
    eq = equations.build_equation(equation)
    lhs = equations.evaluate(eq["left_tokens"], x, y)
    rhs = equations.evaluate(eq["right_tokens"], x, y)
    print(f"at x={x}, y={y}:")
    print(f"  left  = {lhs}")
    print(f"  right = {rhs}")
    print(f"  f     = {lhs - rhs}")


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def main() -> None:
    p = argparse.ArgumentParser(
        "implicit-plot",
        description=(
            "Plot implicit equations in x and y on a character grid.\n"
            "Supports + - * / ^, sin cos tan log ln exp and parentheses."
        ),
    )

    p.add_argument(
        "--eq",
        type=str,
        default=None,
        help="Equation like 'y=x^2' or 'x^2+y^2=4' (prompted when missing).",
    )
    p.add_argument(
        "--zoom",
        type=float,
        default=equations.DEFAULT_ZOOM,
        help="Zoom factor (> 0).",
    )
    p.add_argument(
        "--xoff",
        type=float,
        default=equations.DEFAULT_X_OFFSET,
        help="x offset of the view center.",
    )
    p.add_argument(
        "--yoff",
        type=float,
        default=equations.DEFAULT_Y_OFFSET,
        help="y offset of the view center.",
    )
    p.add_argument(
        "--interactive",
        action="store_true",
        help="Run the zoom/pan menu loop instead of a single render.",
    )
    p.add_argument(
        "--out",
        type=str,
        default=None,
        help="Also write the framed plot to this text file.",
    )
    p.add_argument(
        "--show-tokens",
        action="store_true",
        help="Print token lists and compiled source for the equation and exit.",
    )
    p.add_argument(
        "--probe",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Print left, right and left-right at (X, Y) and exit.",
    )
    p.add_argument(
        "--timing",
        action="store_true",
        help="Print render time.",
    )

    args = p.parse_args()

    try:
        settings = PlotSettings(args.zoom, args.xoff, args.yoff)
    except ValueError as e:
        raise SystemExit(str(e))

    if args.interactive:
        print(INSTRUCTIONS)

    equation = args.eq
    if equation is None:
        try:
            equation = input("\nEnter equation with 'x' and 'y': ")
        except EOFError:
            raise SystemExit("No equation given")
    equation = equations.normalize_equation(equation)

    if args.show_tokens:
        show_tokens(equation)
        return

    if args.probe is not None:
        probe(equation, args.probe[0], args.probe[1])
        return

    if args.interactive:
        run_session(equation, settings=settings)
        return

    t0 = time.perf_counter()
    grid = render(equation, settings)
    if args.timing:
        print(f"render time: {time.perf_counter() - t0:.3f}s")

    text = frame_grid(grid, settings)
    print(text)

    if args.out is not None:
        Path(args.out).write_text(text + "\n")
        print(f"saved: {args.out}")


if __name__ == "__main__":
    main()
