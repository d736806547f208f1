"""Dense numeric 3D grid backed by a flat ``numpy`` array."""

from __future__ import annotations

import numbers
from typing import Any, Callable, List, Tuple

import numpy as np

from ..utils import config_loader
from ..utils.logger import get_logger
from .errors import GridIndexError, InvalidGridError
from .grid_utils import validate_dimensions

__all__ = ["Grid3D"]

logger = get_logger(__name__)


class Grid3D:
    """Cuboid of numeric values addressed by ``(x, y, z)``.

    Storage is a single object array of ``width * height * depth`` cells with
    linear address ``x + y * width + z * width * height``, so every number is
    kept exactly as written. Coordinates are only validated when
    ``strict_bounds`` is enabled.
    """

    def __init__(self, height: int, width: int, depth: int, fill_value: Any = 0) -> None:
        validate_dimensions(height, width, depth)
        if isinstance(fill_value, bool) or not isinstance(fill_value, numbers.Number):
            raise InvalidGridError(f"fill value must be numeric, got {fill_value!r}")
        self.height = int(height)
        self.width = int(width)
        self.depth = int(depth)
        self._y_mod = self.width
        self._z_mod = self.width * self.height
        self._data = np.full(self._z_mod * self.depth, fill_value, dtype=object)
        logger.debug("Created %r filled with %r", self, fill_value)

    def __repr__(self) -> str:
        return f"{type(self).__name__} [w: {self.width}, h: {self.height}, d: {self.depth}]"

    __str__ = __repr__

    def shape(self) -> Tuple[int, int, int]:
        """Return the grid shape as (depth, height, width)."""
        return self.depth, self.height, self.width

    def _check(self, x: int, y: int, z: int) -> None:
        if not config_loader.STRICT_BOUNDS:
            return
        if 0 <= x < self.width and 0 <= y < self.height and 0 <= z < self.depth:
            return
        logger.warning("(%d, %d, %d) out of bounds on %r", x, y, z, self)
        raise GridIndexError(f"({x}, {y}, {z}) is outside {self!r}")

    def _index(self, x: int, y: int, z: int) -> int:
        self._check(x, y, z)
        return x + y * self._y_mod + z * self._z_mod

    def get(self, x: int, y: int, z: int) -> Any:
        value = self._data[self._index(x, y, z)]
        return value.item() if isinstance(value, np.generic) else value

    def set(self, x: int, y: int, z: int, value: Any) -> None:
        self._data[self._index(x, y, z)] = value

    def increment(self, x: int, y: int, z: int) -> None:
        self._data[self._index(x, y, z)] += 1

    def set_cube(
        self,
        x1: int,
        y1: int,
        z1: int,
        x2: int,
        y2: int,
        z2: int,
        value: Any,
    ) -> None:
        """Fill the inclusive box from ``(x1, y1, z1)`` to ``(x2, y2, z2)``.

        Bounds are expected in ascending order; a reversed range fills nothing.
        """
        if x1 > x2 or y1 > y2 or z1 > z2:
            return
        self._check(x1, y1, z1)
        self._check(x2, y2, z2)
        cube = self._data.reshape(self.depth, self.height, self.width)
        cube[z1 : z2 + 1, y1 : y2 + 1, x1 : x2 + 1] = value
        logger.debug(
            "Filled cube (%d, %d, %d) -> (%d, %d, %d) with %r", x1, y1, z1, x2, y2, z2, value
        )

    def filter(self, predicate: Callable[[Any], bool]) -> List[Any]:
        """Return all values matching ``predicate`` in storage order."""
        return [v for v in self._values() if predicate(v)]

    def _values(self) -> List[Any]:
        return [v.item() if isinstance(v, np.generic) else v for v in self._data]

    def count(self, predicate: Callable[[Any], bool]) -> int:
        return len(self.filter(predicate))

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the grid with shape (depth, height, width)."""
        return np.array(self._values()).reshape(self.depth, self.height, self.width)
