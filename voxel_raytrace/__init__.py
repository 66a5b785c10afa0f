"""voxel_raytrace"""

from .exceptions import DegenerateRayError, VoxelTraversalError
from .traversal import (
    DEFAULT_CHUNK_SIZE,
    max_voxel_count,
    traverse_direction,
    traverse_direction_intervals,
    traverse_segment,
    traverse_segment_intervals,
)
from .ray import Ray
from .logging_config import setup_logging

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DegenerateRayError",
    "Ray",
    "VoxelTraversalError",
    "max_voxel_count",
    "setup_logging",
    "traverse_direction",
    "traverse_direction_intervals",
    "traverse_segment",
    "traverse_segment_intervals",
]
