"""Fixed-size 2D grids and the colour Canvas built on them.

A Matrix stores height x width cells in a flat row-major list. Cells are
addressed 1-based as (row, col). The pixel functions below expose the
0-based (x, y) convention used by renderers: x is the column, y the row.

Canvas contract:
  - write_pixel() mutates the canvas in place and returns the same object.
    Take a snapshot with copy_canvas() when the previous state is needed.
  - Colours are copied on the way in and on the way out, so a caller's
    Tuple and the stored Tuple never alias.
  - One writer per canvas. There is no internal locking.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

import numpy as np

from rt_canvas.core.errors import InvalidDimensions, OutOfBounds
from rt_canvas.core.tuples import Tuple, colour
from rt_canvas.core.tuples import copy as tuple_copy

logger = logging.getLogger(__name__)

A = TypeVar('A')


class Matrix(Generic[A]):
    """A height x width grid of values of one type."""

    def __init__(self, height: int, width: int, cells: list[A]):
        if height < 1 or width < 1:
            raise InvalidDimensions(f'matrix must be at least 1x1, got {height}x{width}')
        if len(cells) != height * width:
            raise InvalidDimensions(f'{height}x{width} matrix needs {height * width} cells, got {len(cells)}')
        self._height = height
        self._width = width
        self._cells = cells

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def _index(self, row: int, col: int) -> int:
        if not (1 <= row <= self._height and 1 <= col <= self._width):
            raise OutOfBounds(f'cell ({row}, {col}) outside {self._height}x{self._width} matrix')
        return (row - 1) * self._width + (col - 1)

    def get_elem(self, row: int, col: int) -> A:
        return self._cells[self._index(row, col)]

    def set_elem(self, row: int, col: int, value: A) -> None:
        self._cells[self._index(row, col)] = value

    def get_row(self, row: int) -> list[A]:
        start = self._index(row, 1)
        return self._cells[start : start + self._width]

    def elems(self) -> list[A]:
        """All cells, row-major."""
        return list(self._cells)


class Canvas(Matrix[Tuple]):
    """A Matrix of colour Tuples."""

    def copy(self) -> Canvas:
        return Canvas(self.height, self.width, [tuple_copy(c) for c in self._cells])

    def to_array(self) -> np.ndarray:
        """Return the r/g/b channels as a (height, width, 3) float array."""
        arr = np.array([(c.r, c.g, c.b) for c in self._cells], dtype=np.float64)
        return arr.reshape(self.height, self.width, 3)


def matrix(height: int, width: int, init: Callable[[], A]) -> Matrix[A]:
    """Allocate a grid, calling init() once per cell so no two cells share a value."""
    return Matrix(height, width, [init() for _ in range(height * width)])


def canvas(width: int, height: int) -> Canvas:
    """Create a black canvas. Note the (width, height) argument order."""
    if height < 1 or width < 1:
        raise InvalidDimensions(f'canvas must be at least 1x1, got {width}x{height}')
    logger.debug('Allocating %dx%d canvas', width, height)
    return Canvas(height, width, [colour(0, 0, 0) for _ in range(height * width)])


def width(m: Matrix) -> int:
    return m.width


def height(m: Matrix) -> int:
    return m.height


def _check_pixel(c: Canvas, x: int, y: int) -> None:
    # bool is an int subclass but never a coordinate
    if not all(isinstance(v, (int, np.integer)) and not isinstance(v, bool) for v in (x, y)):
        raise OutOfBounds(f'pixel coordinates must be integers, got ({x!r}, {y!r})')
    if not (0 <= x < c.width and 0 <= y < c.height):
        raise OutOfBounds(f'pixel ({x}, {y}) outside {c.width}x{c.height} canvas')


def pixel_at(c: Canvas, x: int, y: int) -> Tuple:
    _check_pixel(c, x, y)
    return tuple_copy(c.get_elem(y + 1, x + 1))


def write_pixel(c: Canvas, x: int, y: int, pixel: Tuple) -> Canvas:
    _check_pixel(c, x, y)
    c.set_elem(y + 1, x + 1, tuple_copy(pixel))
    return c


def pixels(c: Canvas) -> list[Tuple]:
    return [tuple_copy(p) for p in c.elems()]


def canvas_map(f: Callable[[Tuple], Tuple], c: Canvas) -> Canvas:
    """Build a new canvas by applying f to every pixel of c."""
    return Canvas(c.height, c.width, [tuple_copy(f(p)) for p in c.elems()])


def copy_canvas(c: Canvas) -> Canvas:
    return c.copy()
