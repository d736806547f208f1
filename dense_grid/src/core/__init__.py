"""Core grid containers and their errors."""

from .errors import GridError, GridIndexError, InvalidGridError, PointNotFoundError
from .grid2d import Grid2D, Point
from .grid3d import Grid3D

__all__ = [
    "Grid2D",
    "Grid3D",
    "Point",
    "GridError",
    "GridIndexError",
    "InvalidGridError",
    "PointNotFoundError",
]
