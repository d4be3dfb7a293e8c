"""Leave the canvas black.

Useful for checking the PPM header and the row wrapping of a plain canvas.

Example:
    rt-canvas blank 5 3
"""

from rt_canvas.core.canvas import Canvas
from rt_canvas.core.types import Scene

scene = Scene(name='blank', help='Black canvas, nothing drawn.')


@scene.draw
def draw(c: Canvas, args) -> Canvas:
    return c
