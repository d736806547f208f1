"""Validation helpers for grid construction input."""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

import numpy as np

from .errors import InvalidGridError


def validate_dimensions(*dims: int) -> None:
    """Raise :class:`InvalidGridError` unless every dimension is a positive int."""
    for dim in dims:
        if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)) or dim <= 0:
            raise InvalidGridError(f"grid dimensions must be positive integers, got {dims}")


def validate_source(source: Any) -> Tuple[int, int]:
    """Validate a 2D parse source and return its ``(height, width)``.

    ``source`` is a 2D array or a sequence whose rows are sequences or 1D
    arrays of equal length.
    """
    if isinstance(source, np.ndarray):
        if source.ndim != 2:
            raise InvalidGridError("source array must be 2-dimensional")
        h, w = source.shape
        if h == 0 or w == 0:
            raise InvalidGridError("Grid cannot be empty")
        return int(h), int(w)

    if not isinstance(source, Sequence) or isinstance(source, str):
        raise InvalidGridError("source must be a 2D list or numpy array")
    if not source:
        raise InvalidGridError("Grid cannot be empty")
    for row in source:
        if isinstance(row, np.ndarray):
            if row.ndim != 1:
                raise InvalidGridError("source array rows must be 1-dimensional")
        elif not isinstance(row, Sequence) or isinstance(row, str):
            raise InvalidGridError("source rows must be sequences or 1D arrays")
    h = len(source)
    w = len(source[0])
    if w == 0:
        raise InvalidGridError("Grid cannot be empty")
    for row in source:
        if len(row) != w:
            raise InvalidGridError("All rows must have the same length")
    return h, w


def to_rows(source: Any) -> List[List[Any]]:
    """Return ``source`` as a list of row lists holding Python scalars."""
    if isinstance(source, np.ndarray):
        return source.tolist()
    return [row.tolist() if isinstance(row, np.ndarray) else list(row) for row in source]


__all__ = ["validate_dimensions", "validate_source", "to_rows"]
