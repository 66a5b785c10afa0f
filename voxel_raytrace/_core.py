"""
Low-level Numba kernels for the unit-grid voxel walk.
"""
import math
import numpy as np
from numba import njit
from typing import Tuple


@njit(cache=True)
def _sign(x: float) -> float:
    """-1, 0 or +1 depending on how *x* compares to zero."""
    if x == 0.0:
        return 0.0
    elif x < 0.0:
        return -1.0
    return 1.0


@njit(cache=True)
def _distance_to_boundary(s: float, ds: float) -> float:
    """
    Distance along a unit direction from coordinate *s* (moving *ds* per unit
    length) to the first integer boundary on that axis.
    """
    if ds == 0.0:
        return math.inf
    if ds < 0.0:
        # mirror so the walk is always towards +inf
        s = -s
        ds = -ds
        if np.floor(s) == s:
            return 0.0
    return (1.0 - (s - np.floor(s))) / ds


@njit(cache=True)
def _delta(ds: float, step: float) -> float:
    """Distance needed to cross one whole voxel on an axis (never negative)."""
    if ds == 0.0:
        return 0.0
    return step / ds


@njit(cache=True)
def _prepare(o: np.ndarray, d: np.ndarray) -> Tuple[np.ndarray, np.ndarray,
                                                    np.ndarray, np.ndarray]:
    """
    Per-axis walk state for origin *o* and unit direction *d*:
    (voxel, step, t_next, t_delta).
    """
    voxel = np.empty(3, dtype=np.int64)
    step = np.empty(3, dtype=np.int64)
    t_next = np.empty(3, dtype=np.float64)
    t_delta = np.empty(3, dtype=np.float64)
    for k in range(3):
        voxel[k] = int(np.floor(o[k]))
        s = _sign(d[k])
        step[k] = int(s)
        t_next[k] = _distance_to_boundary(o[k], d[k])
        t_delta[k] = _delta(d[k], s)
    return voxel, step, t_next, t_delta


@njit(cache=True)
def _march(voxel: np.ndarray,
           step: np.ndarray,
           t_next: np.ndarray,
           t_delta: np.ndarray,
           radius: float,
           t_enter: float,
           out_ix: np.ndarray,
           out_t0: np.ndarray,
           out_t1: np.ndarray) -> Tuple[int, float, bool]:
    """
    Walk until *radius* is exceeded or the output buffers are full.

    ``voxel`` and ``t_next`` are advanced in place, so a walk that returns
    with ``finished == False`` picks up where it stopped on the next call.
    Returns ``(count, t_enter, finished)``.
    """
    count = 0
    while count < out_ix.shape[0]:
        out_ix[count, 0] = voxel[0]
        out_ix[count, 1] = voxel[1]
        out_ix[count, 2] = voxel[2]
        out_t0[count] = t_enter

        # strict-< comparisons:
        #   X wins only when strictly smallest
        #   Y beats X when X == Y < Z
        #   Z wins every remaining tie
        if t_next[0] < t_next[1] and t_next[0] < t_next[2]:
            axis = 0
        elif t_next[1] < t_next[2]:
            axis = 1
        else:
            axis = 2
        t_cross = t_next[axis]

        if t_cross > radius:
            out_t1[count] = radius
            return count + 1, t_enter, True

        out_t1[count] = t_cross
        count += 1
        t_enter = t_cross
        voxel[axis] += step[axis]
        t_next[axis] += t_delta[axis]

    return count, t_enter, False
