"""Custom exceptions for the voxel_raytrace package."""


class VoxelTraversalError(Exception):
    """Base exception for all traversal errors."""

    pass


class DegenerateRayError(VoxelTraversalError, ValueError):
    """Raised when start and end coincide, leaving no direction to walk in."""

    def __init__(self, start, end):
        self.start = tuple(float(x) for x in start)
        self.end = tuple(float(x) for x in end)
        super().__init__(
            "start and end points are the same, giving a zero direction vector "
            f"(start={self.start}, end={self.end})"
        )
