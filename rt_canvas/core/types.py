"""Shared types for rt-canvas: Scene, CanvasSummary."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from rt_canvas.core.canvas import Canvas, canvas
from rt_canvas.core.errors import SceneError


@dataclass
class CanvasSummary:
    """What a rendered canvas looks like, for text/JSON output."""

    scene: str
    width: int
    height: int
    pixel_count: int
    lit_pixels: int  # pixels that are not black
    ppm_lines: int  # lines in the exported PPM, blank terminator included


class Scene:
    """A self-registering drawing routine.

    Usage in a scene module:

        scene = Scene(name='fill', help='Fill the canvas with one colour')

        @scene.draw
        def draw(c, args):
            ...
            return c
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self.doc = ''  # module docstring, filled in by the registry
        self._draw_fn: Callable | None = None

    @property
    def has_draw(self) -> bool:
        return self._draw_fn is not None

    @property
    def summary(self) -> str:
        """First line of the module docs, or the help text."""
        return self.doc.splitlines()[0] if self.doc else self.help

    def draw(self, fn: Callable) -> Callable:
        """Decorator to register the draw function."""
        self._draw_fn = fn
        return fn

    def render(self, width: int, height: int, args: Any) -> Canvas:
        """Create a black canvas and run the scene's draw function on it."""
        if self._draw_fn is None:
            raise SceneError(f'Scene {self.name} has no draw function')
        result = self._draw_fn(canvas(width, height), args)
        if not isinstance(result, Canvas):
            raise SceneError(f'Scene {self.name} returned {type(result).__name__}, expected Canvas')
        return result
