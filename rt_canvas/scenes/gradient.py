"""Horizontal ramp from black on the left to --colour on the right.

Each column x gets colour * x / (width - 1). A 1 pixel wide canvas gets the
full colour.

Example:
    rt-canvas gradient 64 8 --colour 1 0.5 0
"""

from rt_canvas.core.canvas import Canvas, write_pixel
from rt_canvas.core.tuples import multiply
from rt_canvas.core.types import Scene

scene = Scene(name='gradient', help='Horizontal ramp from black to the chosen colour.')


@scene.draw
def draw(c: Canvas, args) -> Canvas:
    for x in range(c.width):
        shade = multiply(args.colour, x / (c.width - 1)) if c.width > 1 else args.colour
        for y in range(c.height):
            write_pixel(c, x, y, shade)
    return c
