import numpy as np


def binarize(grid: np.ndarray, cutoff: float) -> np.ndarray:
    """
    Replaces every value v of `grid` in place with 1.0 if v >= cutoff,
    else 0.0. Returns the same array for convenience.
    """
    on = grid >= cutoff
    grid[...] = 0.0
    grid[on] = 1.0
    return grid
