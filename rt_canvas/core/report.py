"""Summary builder — text and JSON output describing a rendered canvas."""

import json
from dataclasses import asdict

from rt_canvas.core.canvas import Canvas, pixels
from rt_canvas.core.ppm import canvas_to_ppm
from rt_canvas.core.tuples import colour, is_tuple_equiv_to
from rt_canvas.core.types import CanvasSummary

BLACK = colour(0, 0, 0)


def summarize(scene_name: str, c: Canvas, ppm: str | None = None) -> CanvasSummary:
    """Summarize a canvas. Pass ppm when it has already been exported."""
    if ppm is None:
        ppm = canvas_to_ppm(c)
    lit = sum(1 for p in pixels(c) if not is_tuple_equiv_to(p, BLACK))
    return CanvasSummary(
        scene=scene_name,
        width=c.width,
        height=c.height,
        pixel_count=c.width * c.height,
        lit_pixels=lit,
        ppm_lines=len(ppm.splitlines()),
    )


def format_text(summary: CanvasSummary) -> str:
    """Format summary as human-readable text."""
    dim = f'{summary.width}×{summary.height}'
    lines = [
        f'rt-canvas: {summary.scene} ({dim})',
        f'  pixels: {summary.pixel_count}',
        f'  lit:    {summary.lit_pixels}',
        f'  ppm:    {summary.ppm_lines} lines',
    ]
    return '\n'.join(lines)


def format_json(summary: CanvasSummary) -> str:
    """Format summary as JSON."""
    return json.dumps(asdict(summary), indent=2)
