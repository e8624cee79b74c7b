import math
import numpy as np
from numba import njit, types

# ---------------------------------------------------------------------------
# Numba helpers used inside generated equation code
# ---------------------------------------------------------------------------

@njit(types.float64(types.float64, types.float64), cache=True, fastmath=False, error_model="numpy")
def div(a, b):
    # x/0 is +inf regardless of the sign of x
    if b == 0.0:
        return np.inf
    return a / b


@njit(types.float64(types.float64, types.float64), cache=True, fastmath=False, error_model="numpy")
def power(a, b):
    return math.pow(a, b)


NS = {
    "div": div,
    "power": power,
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "log10": np.log10,
    "ln": np.log,
    "exp": np.exp,
    "np": np,
}

# function token -> name in NS
FUNCTION_NS_NAMES = {
    "sin": "sin",
    "cos": "cos",
    "tan": "tan",
    "log": "log10",
    "ln": "ln",
    "exp": "exp",
}
