"""rt_canvas — tuple algebra, colour canvas and plain PPM export for a ray tracer."""

from rt_canvas.core.canvas import (
    Canvas,
    Matrix,
    canvas,
    canvas_map,
    copy_canvas,
    height,
    matrix,
    pixel_at,
    pixels,
    width,
    write_pixel,
)
from rt_canvas.core.errors import CanvasError, DimensionMismatch, InvalidDimensions, OutOfBounds
from rt_canvas.core.ppm import canvas_to_ppm
from rt_canvas.core.tuples import (
    Tuple,
    add,
    colour,
    cross,
    divide,
    dot,
    equiv_round,
    equiv_round_tuple,
    is_equiv_to,
    is_point,
    is_tuple_equiv_to,
    is_vector,
    magnitude,
    multiply,
    multiply_colours,
    negate,
    normalize,
    point,
    sub,
    vector,
)

__version__ = '0.1.0'
