"""
Default values and hard limits for equation solving and plotting.
"""

import math

# Grid
GRID_WIDTH = 80
GRID_HEIGHT = 20
AXIS_SCALE = 5.0  # grid cells per unit at zoom 1

# Input bounds
MAX_EQUATION_LENGTH = 256
MAX_TOKENS = 100

# Newton solver
MAX_ITER = 100
EPSILON = 1e-10
DERIV_STEP = 1e-7
DAMPING = 0.5

# Sampling
NUM_INITIAL_GUESSES = 40
POINTS_PER_COLUMN = 10

# y search windows for the initial guesses
Y_RANGE_TRIG = (-1.5, 1.5)
Y_RANGE_LOG = (-10.0, 10.0)
Y_RANGE_DEFAULT = (-5.0, 5.0)

# View
DEFAULT_ZOOM = 1.0
DEFAULT_X_OFFSET = 0.0
DEFAULT_Y_OFFSET = 0.0
ZOOM_STEP = 1.5

PI = math.pi
TWO_PI = 2.0 * PI
