"""Fill every pixel with one colour.

Colour comes from --colour R G B (floats, 0..1, out-of-range values are
clamped on export). Defaults to (1, 0.8, 0.6), which wraps each row of a
10 pixel wide canvas across two PPM lines.

Example:
    rt-canvas fill 10 2
    rt-canvas fill 10 2 --colour 0 0.5 1
"""

from rt_canvas.core.basics import always
from rt_canvas.core.canvas import Canvas, canvas_map
from rt_canvas.core.types import Scene

scene = Scene(name='fill', help='Fill the canvas with a single colour.')


@scene.draw
def draw(c: Canvas, args) -> Canvas:
    return canvas_map(always(args.colour), c)
