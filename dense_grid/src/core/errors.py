"""Exceptions raised by the grid containers."""

from __future__ import annotations

__all__ = [
    "GridError",
    "InvalidGridError",
    "GridIndexError",
    "PointNotFoundError",
]


class GridError(Exception):
    """Base class for grid container errors."""


class InvalidGridError(GridError, ValueError):
    """Raised when grid dimensions or parse input are malformed."""


class GridIndexError(GridError, IndexError):
    """Raised when an unchecked operation receives out-of-range coordinates."""


class PointNotFoundError(GridError, LookupError):
    """Raised when a search finds no matching cell."""
