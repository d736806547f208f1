"""Dense 2D grid container addressed by ``(x, y)`` coordinates."""

from __future__ import annotations

import sys
from typing import Any, Callable, List, Optional, TextIO, Tuple

import numpy as np

from ..utils import config_loader
from ..utils.logger import get_logger
from .errors import GridIndexError, PointNotFoundError
from .grid_utils import to_rows, validate_dimensions, validate_source

__all__ = ["Grid2D", "Point"]

Point = Tuple[int, int]

logger = get_logger(__name__)


def _slope(start: int, end: int) -> int:
    if start == end:
        return 0
    return -1 if start > end else 1


class Grid2D:
    """Rectangular grid of arbitrary values stored as one row-major list.

    Cells are addressed by ``(x, y)`` with ``x`` the column and ``y`` the row.
    :meth:`get` and :meth:`set` silently ignore coordinates outside the grid;
    the numeric helpers :meth:`increment` and :meth:`increment_line` follow
    the ``strict_bounds`` setting instead.
    """

    def __init__(self, height: int, width: int, fill_value: Any = None) -> None:
        validate_dimensions(height, width)
        self.height = int(height)
        self.width = int(width)
        self._stride = self.width
        self._data: List[Any] = [fill_value] * (self.width * self.height)
        logger.debug("Created %r filled with %r", self, fill_value)

    @classmethod
    def parse(cls, source: Any) -> "Grid2D":
        """Build a grid from ``source`` indexed as ``source[row][col]``.

        ``source`` may be a nested sequence or a 2D ``numpy.ndarray``. Empty or
        jagged input raises :class:`~dense_grid.src.core.errors.InvalidGridError`.
        """
        height, width = validate_source(source)
        rows = to_rows(source)
        grid = cls(height, width)
        for y in range(height):
            for x in range(width):
                grid.set(x, y, rows[y][x])
        logger.debug("Parsed %r", grid)
        return grid

    def __repr__(self) -> str:
        return f"{type(self).__name__} [w: {self.width}, h: {self.height}]"

    __str__ = __repr__

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (height, width)."""
        return self.height, self.width

    # Access ----------------------------------------------------------------

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        return x + y * self._stride

    def _point(self, idx: int) -> Point:
        y, x = divmod(idx, self._stride)
        return x, y

    def get(self, x: int, y: int) -> Any:
        """Return the value at ``(x, y)`` or ``None`` when out of bounds."""
        if not self._in_bounds(x, y):
            return None
        return self._data[self._index(x, y)]

    def set(self, x: int, y: int, value: Any) -> None:
        """Set the value at ``(x, y)``; out-of-bounds writes are ignored."""
        if not self._in_bounds(x, y):
            return
        self._data[self._index(x, y)] = value

    def increment(self, x: int, y: int) -> None:
        """Add one to the numeric value at ``(x, y)``."""
        if config_loader.STRICT_BOUNDS and not self._in_bounds(x, y):
            logger.warning("increment out of bounds at (%d, %d) on %r", x, y, self)
            raise GridIndexError(f"({x}, {y}) is outside {self!r}")
        self._data[self._index(x, y)] += 1

    def increment_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Increment every cell on the path from ``(x1, y1)`` to ``(x2, y2)``.

        Each axis steps by the sign of its delta for ``max(|dx|, |dy|)`` steps,
        endpoints included. Horizontal, vertical and 45 degree lines are
        traced exactly; other slopes keep stepping diagonally past the shorter
        axis and are not Bresenham lines. With ``strict_bounds`` enabled the
        whole path is checked before any cell changes.
        """
        dx = _slope(x1, x2)
        dy = _slope(y1, y2)
        length = max(abs(x1 - x2), abs(y1 - y2))
        path = [(x1 + i * dx, y1 + i * dy) for i in range(length + 1)]
        if config_loader.STRICT_BOUNDS:
            outside = [p for p in path if not self._in_bounds(*p)]
            if outside:
                logger.warning("line (%d, %d) -> (%d, %d) leaves %r", x1, y1, x2, y2, self)
                raise GridIndexError(f"line passes through {outside[0]} outside {self!r}")
        logger.debug("Incrementing line (%d, %d) -> (%d, %d)", x1, y1, x2, y2)
        for x, y in path:
            self._data[self._index(x, y)] += 1

    # Search ----------------------------------------------------------------

    def filter(self, predicate: Callable[[Any], bool]) -> List[Any]:
        """Return all values matching ``predicate`` in storage order."""
        return [v for v in self._data if predicate(v)]

    def count(self, predicate: Callable[[Any], bool]) -> int:
        return len(self.filter(predicate))

    def find(self, predicate: Callable[[Any], bool]) -> Point:
        """Return the coordinates of the first value matching ``predicate``.

        Raises :class:`~dense_grid.src.core.errors.PointNotFoundError` when no
        cell matches.
        """
        for idx, value in enumerate(self._data):
            if predicate(value):
                return self._point(idx)
        raise PointNotFoundError(f"no cell in {self!r} matches the predicate")

    def find_value(self, value: Any) -> Point:
        return self.find(lambda v: v == value)

    def find_all(self, predicate: Callable[[Any], bool]) -> List[Point]:
        """Return the coordinates of every value matching ``predicate``."""
        return [self._point(idx) for idx, v in enumerate(self._data) if predicate(v)]

    def adjacent(self, x: int, y: int) -> List[Point]:
        """Return in-bounds 4-way neighbours ordered left, right, up, down."""
        res: List[Point] = []
        if x > 0:
            res.append((x - 1, y))
        if x < self.width - 1:
            res.append((x + 1, y))
        if y > 0:
            res.append((x, y - 1))
        if y < self.height - 1:
            res.append((x, y + 1))
        return res

    # Derived views ---------------------------------------------------------

    def horizontals(self) -> List[List[Any]]:
        return [[self.get(x, y) for x in range(self.width)] for y in range(self.height)]

    def verticals(self) -> List[List[Any]]:
        return [[self.get(x, y) for y in range(self.height)] for x in range(self.width)]

    def _diagonal_lengths(self) -> List[int]:
        num_diags = self.width + self.height - 2
        max_len = min(self.width, self.height)
        return [
            min(max_len, d + 1 if d < num_diags / 2 else num_diags - d + 1)
            for d in range(num_diags + 1)
        ]

    def diagonals(self) -> List[List[Any]]:
        """Return top-left to bottom-right diagonals.

        The first diagonal is the bottom-left corner cell and the last one the
        top-right corner cell.
        """
        res: List[List[Any]] = []
        for d, length in enumerate(self._diagonal_lengths()):
            if d < self.height:
                start_x, start_y = 0, self.height - d - 1
            else:
                start_x, start_y = d - self.height + 1, 0
            res.append([self.get(start_x + i, start_y + i) for i in range(length)])
        return res

    def anti_diagonals(self) -> List[List[Any]]:
        """Return top-right to bottom-left diagonals.

        The first diagonal is the top-left corner cell and the last one the
        bottom-right corner cell.
        """
        res: List[List[Any]] = []
        for d, length in enumerate(self._diagonal_lengths()):
            if d < self.width:
                start_x, start_y = d, 0
            else:
                start_x, start_y = self.width - 1, d - self.width + 1
            res.append([self.get(start_x - i, start_y + i) for i in range(length)])
        return res

    def to_list(self) -> List[List[Any]]:
        """Return a deep list copy of the grid rows."""
        return self.horizontals()

    def to_numpy(self) -> np.ndarray:
        """Return the grid as an array of shape (height, width)."""
        return np.array(self.horizontals())

    def render(self, delimiter: Optional[str] = None, pad: Optional[int] = None) -> str:
        """Return rows of values left-filled to ``pad`` and joined by ``delimiter``."""
        if delimiter is None:
            delimiter = config_loader.PRINT_DELIMITER
        if pad is None:
            pad = config_loader.PRINT_PAD
        return "\n".join(
            delimiter.join(str(v).rjust(pad) for v in row) for row in self.horizontals()
        )

    def print(
        self,
        delimiter: Optional[str] = None,
        pad: Optional[int] = None,
        file: Optional[TextIO] = None,
    ) -> None:
        """Write :meth:`render` output to ``file`` (stdout by default)."""
        print(self.render(delimiter, pad), file=file if file is not None else sys.stdout)
