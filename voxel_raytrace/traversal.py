"""
Numba-accelerated implementation of

    J. Amanatides & A. Woo,
    "A Fast Voxel Traversal Algorithm for Ray Tracing" (Eurographics '87)

on the infinite grid of unit cubes aligned to integer coordinates.

Public API
----------
traverse_segment(start, end)
    - generator yielding every visited voxel (ix, iy, iz), start to end

traverse_direction(start, direction, max_distance)
    - same walk, ending at ``start + direction * max_distance``

traverse_segment_intervals / traverse_direction_intervals
    - generators yielding (ix, iy, iz, t_enter, t_exit) per voxel

max_voxel_count(start, end)
    - upper bound on the number of voxels a segment can visit
"""
from __future__ import annotations

import logging
import math
from typing import Generator, Iterable, Iterator, Tuple

import numpy as np

from ._core import _march, _prepare
from .exceptions import DegenerateRayError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 256

# floor(x) must fit in int64
_MIN_COORD = -2.0 ** 63
_MAX_COORD = 2.0 ** 63

Voxel = Tuple[int, int, int]
Interval = Tuple[int, int, int, float, float]


# --------------------------------------------------------------------------- #
# Input validation
# --------------------------------------------------------------------------- #

def _as_point(value: Iterable[float], name: str, *, on_grid: bool = True) -> np.ndarray:
    p = np.asarray(value, dtype=np.float64)
    if p.shape != (3,):
        raise ValueError(f"{name} must have exactly 3 coordinates, got shape {p.shape}")
    if not np.all(np.isfinite(p)):
        raise ValueError(f"{name} must be finite, got {tuple(p.tolist())}")
    if on_grid and np.any((p < _MIN_COORD) | (p >= _MAX_COORD)):
        raise ValueError(f"{name} lies outside the int64 voxel range, got {tuple(p.tolist())}")
    return p


def _check_chunk_size(chunk_size: int) -> int:
    chunk_size = int(chunk_size)
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
    return chunk_size


def _setup(start: Iterable[float],
           end: Iterable[float]) -> Tuple[np.ndarray, np.ndarray, float]:
    """Return (origin, unit direction, radius) or raise before any walking."""
    o = _as_point(start, "start")
    e = _as_point(end, "end")
    diff = e - o
    radius = math.hypot(*diff.tolist())
    if radius <= 0.0:
        raise DegenerateRayError(o, e)
    if not math.isfinite(radius):
        raise ValueError("distance between start and end overflows a float")
    d = diff / radius
    logger.debug("Traversing from %s to %s (radius %.6g)", o, e, radius)
    return o, d, radius


# --------------------------------------------------------------------------- #
# Chunked walk - lazy generators over the compiled kernel
# --------------------------------------------------------------------------- #

def _walk(o: np.ndarray,
          d: np.ndarray,
          radius: float,
          chunk_size: int) -> Generator[Interval, None, None]:
    voxel, step, t_next, t_delta = _prepare(o, d)
    buf_ix = np.empty((chunk_size, 3), dtype=np.int64)
    buf_t0 = np.empty(chunk_size, dtype=np.float64)
    buf_t1 = np.empty(chunk_size, dtype=np.float64)

    t_enter = 0.0
    total = 0
    finished = False
    while not finished:
        count, t_enter, finished = _march(voxel, step, t_next, t_delta,
                                          radius, t_enter,
                                          buf_ix, buf_t0, buf_t1)
        for i in range(count):
            yield (
                int(buf_ix[i, 0]),
                int(buf_ix[i, 1]),
                int(buf_ix[i, 2]),
                float(buf_t0[i]),
                float(buf_t1[i]),
            )
        total += count
    logger.debug("Traversal visited %d voxels", total)


def _voxels_only(intervals: Iterator[Interval]) -> Generator[Voxel, None, None]:
    for ix, iy, iz, _, _ in intervals:
        yield ix, iy, iz


def _end_point(start: Iterable[float],
               direction: Iterable[float],
               max_distance: float) -> Tuple[np.ndarray, np.ndarray]:
    o = _as_point(start, "start")
    v = _as_point(direction, "direction", on_grid=False)
    max_distance = float(max_distance)
    if not math.isfinite(max_distance):
        raise ValueError(f"max_distance must be finite, got {max_distance}")
    return o, o + v * max_distance


# --------------------------------------------------------------------------- #
# Public operations
# --------------------------------------------------------------------------- #

def traverse_segment(start: Iterable[float],
                     end: Iterable[float],
                     *,
                     chunk_size: int = DEFAULT_CHUNK_SIZE
                     ) -> Generator[Voxel, None, None]:
    """
    Yield `(ix, iy, iz)` for every unit voxel the segment *start* -> *end*
    passes through, beginning with ``floor(start)``.

    Inputs are validated immediately; :class:`DegenerateRayError` is raised
    by this call (not on first iteration) when *start* equals *end*.

    Parameters
    ----------
    start, end : array-like(3)
    chunk_size : voxels computed per kernel call while iterating
    """
    chunk_size = _check_chunk_size(chunk_size)
    o, d, radius = _setup(start, end)
    return _voxels_only(_walk(o, d, radius, chunk_size))


def traverse_direction(start: Iterable[float],
                       direction: Iterable[float],
                       max_distance: float,
                       *,
                       chunk_size: int = DEFAULT_CHUNK_SIZE
                       ) -> Generator[Voxel, None, None]:
    """
    Walk from *start* to ``start + direction * max_distance``.

    *direction* does not need to be normalized. A zero direction or a zero
    *max_distance* raises :class:`DegenerateRayError`.
    """
    o, e = _end_point(start, direction, max_distance)
    return traverse_segment(o, e, chunk_size=chunk_size)


def traverse_segment_intervals(start: Iterable[float],
                               end: Iterable[float],
                               *,
                               chunk_size: int = DEFAULT_CHUNK_SIZE
                               ) -> Generator[Interval, None, None]:
    """
    Yield `(ix, iy, iz, t_enter, t_exit)` for every voxel on the segment.

    ``t_enter``/``t_exit`` are Euclidean distances from *start*. The first
    voxel is entered at 0 and the last one is left at ``|end - start|``.
    """
    chunk_size = _check_chunk_size(chunk_size)
    o, d, radius = _setup(start, end)
    return _walk(o, d, radius, chunk_size)


def traverse_direction_intervals(start: Iterable[float],
                                 direction: Iterable[float],
                                 max_distance: float,
                                 *,
                                 chunk_size: int = DEFAULT_CHUNK_SIZE
                                 ) -> Generator[Interval, None, None]:
    """Interval form of :func:`traverse_direction`."""
    o, e = _end_point(start, direction, max_distance)
    return traverse_segment_intervals(o, e, chunk_size=chunk_size)


def max_voxel_count(start: Iterable[float], end: Iterable[float]) -> int:
    """Upper bound on how many voxels the segment *start* -> *end* visits."""
    o = _as_point(start, "start")
    e = _as_point(end, "end")
    span = np.ceil(np.abs(e - o))
    # one possible crossing per axis beyond the span, plus the start voxel
    return int(span.sum()) + 4
