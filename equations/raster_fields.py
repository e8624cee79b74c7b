"""
Character-grid rendering kernels.

The grid is a (height, width) uint8 array of ASCII codes. Curve points
come from independent Newton solves; continuity is rebuilt afterwards by
joining consecutive columns of the same initial guess with line segments.
"""

import numpy as np
from numba import njit, prange

from .solver import has_solution, newton_solve

BLANK = ord(" ")
CURVE = ord("*")
AXIS_CROSS = ord("+")
AXIS_H = ord("-")
AXIS_V = ord("|")


@njit(cache=False, fastmath=False)
def axis_center(width, height, zoom, x_offset, y_offset, scale):
    center_x = int(width // 2 - x_offset * scale * zoom)
    center_y = int(height // 2 + y_offset * scale * zoom)
    return center_x, center_y


@njit(cache=False, fastmath=False)
def draw_axes(grid, center_x, center_y):
    height, width = grid.shape
    if 0 <= center_y < height:
        for j in range(width):
            grid[center_y, j] = AXIS_CROSS if j % 2 == 0 else AXIS_H
    if 0 <= center_x < width:
        for i in range(height):
            grid[i, center_x] = AXIS_CROSS if i % 2 == 0 else AXIS_V


@njit(cache=False, fastmath=False)
def draw_segment(grid, x0, y0, x1, y1):
    """Integer Bresenham, all octants; paints blank cells only."""
    height, width = grid.shape
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    x = x0
    y = y0
    while True:
        if 0 <= y < height and 0 <= x < width:
            if grid[y, x] == BLANK:
                grid[y, x] = CURVE
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


@njit(cache=False, fastmath=False)
def column_to_x(j, sub, n_sub, width, zoom, x_offset, scale):
    return (j - width // 2 + sub / n_sub) / (scale * zoom) + x_offset


@njit(cache=False, fastmath=False)
def y_to_row(y, height, zoom, y_offset, scale):
    """
    Grid row for y, or -1 when off the grid.

    Rows truncate toward zero, so anything in (-1, height) lands on the
    grid; the float test keeps huge values away from the int cast.
    """
    py = height // 2 - y * scale * zoom + y_offset * scale * zoom
    if py > -1.0 and py < height:
        return int(py)
    return -1


@njit(cache=False, fastmath=False, parallel=True)
def render_field(
    f,
    width,
    height,
    zoom,
    x_offset,
    y_offset,
    scale,
    y_min,
    y_max,
    n_guesses,
    n_sub,
    periodic,
    max_iter,
    eps,
    h,
    damping,
):
    """
    Plot f(x, y) = 0 onto a fresh (height, width) grid.

    Each initial guess is an independent shard: its columns are walked in
    order and every point it lands in column j is joined to the last row
    it produced in an earlier column. Shards only ever write CURVE, and
    segments never touch non-blank cells, so the result does not depend
    on shard scheduling.
    """
    grid = np.full((height, width), BLANK, dtype=np.uint8)

    center_x, center_y = axis_center(width, height, zoom, x_offset, y_offset, scale)
    draw_axes(grid, center_x, center_y)

    denom = 1.0 if n_guesses <= 1 else (n_guesses - 1.0)

    for k in prange(n_guesses):
        initial_y = y_min + (y_max - y_min) * k / denom
        has_prev = False
        prev_row = 0

        for j in range(width):
            found = False
            last_row = 0

            for sub in range(n_sub):
                x_val = column_to_x(j, sub, n_sub, width, zoom, x_offset, scale)
                y_val = newton_solve(f, x_val, initial_y, periodic, max_iter, eps, h, damping)

                if not has_solution(y_val):
                    continue

                row = y_to_row(y_val, height, zoom, y_offset, scale)
                if row < 0:
                    continue

                grid[row, j] = CURVE
                if has_prev and j > 0:
                    draw_segment(grid, j - 1, prev_row, j, row)
                found = True
                last_row = row

            if found:
                has_prev = True
                prev_row = last_row

    return grid
