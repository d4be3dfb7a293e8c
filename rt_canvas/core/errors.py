"""Typed errors raised by the tuple, canvas and export layers."""


class CanvasError(Exception):
    """Base error for rt_canvas."""


class DimensionMismatch(CanvasError, ValueError):
    """Two tuples of different arity were combined."""


class OutOfBounds(CanvasError, IndexError):
    """A cell or pixel coordinate lies outside the grid."""


class InvalidDimensions(CanvasError, ValueError):
    """A matrix or canvas was requested with a non-positive size."""


class SceneError(CanvasError, RuntimeError):
    """A scene module is malformed or its draw function misbehaved."""
