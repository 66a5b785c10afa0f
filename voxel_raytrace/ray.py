"""
Ray class encapsulating origin and direction, with traversal helpers.
"""
from typing import Iterable, Tuple

import numpy as np

from .traversal import (
    DEFAULT_CHUNK_SIZE,
    traverse_direction,
    traverse_direction_intervals,
)


class Ray:
    def __init__(self, origin: Iterable[float], direction: Iterable[float]):
        self.origin = tuple(float(x) for x in origin)
        self.direction = tuple(float(x) for x in direction)

    @classmethod
    def from_points(cls, start: Iterable[float], end: Iterable[float]) -> "Ray":
        """Ray from *start* whose direction is ``end - start``."""
        start = np.asarray(start, dtype=np.float64)
        end = np.asarray(end, dtype=np.float64)
        return cls(start, end - start)

    def point_at(self, t: float) -> Tuple[float, float, float]:
        """Return ``origin + direction * t``."""
        return tuple(o + d * t for o, d in zip(self.origin, self.direction))

    def traverse(self, max_distance: float = 1.0,
                 chunk_size: int = DEFAULT_CHUNK_SIZE):
        """Delegate to traverse_direction, ending at ``point_at(max_distance)``."""
        return traverse_direction(self.origin, self.direction, max_distance,
                                  chunk_size=chunk_size)

    def intervals(self, max_distance: float = 1.0,
                  chunk_size: int = DEFAULT_CHUNK_SIZE):
        """Delegate to traverse_direction_intervals."""
        return traverse_direction_intervals(self.origin, self.direction,
                                            max_distance, chunk_size=chunk_size)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
