"""Tuple algebra for points, vectors and colours.

A Tuple is an immutable run of floats. By convention four components
(x, y, z, w) describe geometry: w == 1 is a point, w == 0 a vector.
Colours use three components named (r, g, b).

The raw constructor is the Tuple class itself, Tuple(*components). There
is no tuple() factory function because it would shadow the builtin.

Every operation returns a new Tuple. Float division follows IEEE rules:
dividing by zero gives inf/nan instead of raising, so normalize() of a
zero vector propagates NaN to the caller.

Comparisons against computed geometry should use is_tuple_equiv_to()
(tolerance EPSILON) or equiv_round_tuple() (EQUIV_PRECISION places).
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator

import numpy as np

from rt_canvas.core.errors import DimensionMismatch

EPSILON = 1e-5
EQUIV_PRECISION = 5


class Tuple:
    """Immutable numeric tuple with x/y/z/w and r/g/b accessors."""

    __slots__ = ('_values',)

    def __init__(self, *components: float):
        self._values: tuple[float, ...] = tuple(float(c) for c in components)

    @property
    def values(self) -> tuple[float, ...]:
        return self._values

    def _component(self, index: int, name: str) -> float:
        if index >= len(self._values):
            raise DimensionMismatch(f'{len(self._values)}-component tuple has no {name} component')
        return self._values[index]

    @property
    def x(self) -> float:
        return self._component(0, 'x')

    @property
    def y(self) -> float:
        return self._component(1, 'y')

    @property
    def z(self) -> float:
        return self._component(2, 'z')

    @property
    def w(self) -> float:
        return self._component(3, 'w')

    @property
    def r(self) -> float:
        return self._component(0, 'r')

    @property
    def g(self) -> float:
        return self._component(1, 'g')

    @property
    def b(self) -> float:
        return self._component(2, 'b')

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f'Tuple({", ".join(repr(v) for v in self._values)})'

    def __add__(self, other: Tuple) -> Tuple:
        return add(self, other)

    def __sub__(self, other: Tuple) -> Tuple:
        return sub(self, other)

    def __neg__(self) -> Tuple:
        return negate(self)

    def __mul__(self, scalar: float) -> Tuple:
        return multiply(self, scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        return divide(self, scalar)


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 1)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 0)


def colour(r: float, g: float, b: float) -> Tuple:
    return Tuple(r, g, b)


def copy(t: Tuple) -> Tuple:
    return Tuple(*t.values)


def is_point(t: Tuple) -> bool:
    return len(t) == 4 and t.w == 1


def is_vector(t: Tuple) -> bool:
    return len(t) == 4 and t.w == 0


def _check_arity(t1: Tuple, t2: Tuple) -> None:
    if len(t1) != len(t2):
        raise DimensionMismatch(f'cannot combine a {len(t1)}-tuple with a {len(t2)}-tuple')


def _apply_bin_op(op: Callable[[float, float], float], t1: Tuple, t2: Tuple) -> Tuple:
    """Apply op pair-wise over the components of two equal-arity tuples."""
    _check_arity(t1, t2)
    return Tuple(*(op(a, b) for a, b in zip(t1.values, t2.values)))


def add(t1: Tuple, t2: Tuple) -> Tuple:
    return _apply_bin_op(lambda a, b: a + b, t1, t2)


def sub(t1: Tuple, t2: Tuple) -> Tuple:
    return _apply_bin_op(lambda a, b: a - b, t1, t2)


def negate(t: Tuple) -> Tuple:
    return Tuple(*(-v for v in t.values))


def multiply(t: Tuple, scalar: float) -> Tuple:
    return Tuple(*(v * scalar for v in t.values))


def divide(t: Tuple, scalar: float) -> Tuple:
    """Divide every component by scalar; zero gives inf/nan, not an exception."""
    with np.errstate(divide='ignore', invalid='ignore'):
        result = np.asarray(t.values, dtype=np.float64) / np.float64(scalar)
    return Tuple(*result.tolist())


def magnitude(t: Tuple) -> float:
    return math.sqrt(sum(v * v for v in t.values))


def normalize(t: Tuple) -> Tuple:
    return divide(t, magnitude(t))


def dot(t1: Tuple, t2: Tuple) -> float:
    _check_arity(t1, t2)
    return sum(a * b for a, b in zip(t1.values, t2.values))


def cross(a: Tuple, b: Tuple) -> Tuple:
    """Right-handed cross product of the x/y/z parts. Always returns a vector."""
    if len(a) < 3 or len(b) < 3:
        raise DimensionMismatch(f'cross product needs 3 components, got {len(a)} and {len(b)}')
    return vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def multiply_colours(c1: Tuple, c2: Tuple) -> Tuple:
    """Hadamard product of the r/g/b channels, used to blend light and surface colours."""
    return colour(c1.r * c2.r, c1.g * c2.g, c1.b * c2.b)


def is_equiv_to(x: float, y: float) -> bool:
    return abs(x - y) <= EPSILON


def is_tuple_equiv_to(t1: Tuple, t2: Tuple) -> bool:
    if len(t1) != len(t2):
        return False
    return all(is_equiv_to(a, b) for a, b in zip(t1.values, t2.values))


def equiv_round(x: float) -> float:
    return round(x, EQUIV_PRECISION)


def equiv_round_tuple(t: Tuple) -> Tuple:
    return Tuple(*(equiv_round(v) for v in t.values))
