"""Plain-text PPM (P3) export.

Output layout:

    P3
    <width> <height>
    255
    <row data, wrapped at 70 chars>
    ...
    <blank line>

Each channel is scaled to [0, 255], clamped, then rounded half-up, so
colour values outside [0, 1] are silently clamped rather than rejected.
Pixel rows are flattened to R G B tokens and greedily word-wrapped. A
row never shares a line with the next row.
"""

import logging

import numpy as np

from rt_canvas.core.canvas import Canvas
from rt_canvas.core.tuples import Tuple

logger = logging.getLogger(__name__)

PPM_MAGIC = 'P3'
MAX_COLOUR_VALUE = 255
MAX_LINE_LENGTH = 70


def _scale_channels(values: np.ndarray, max_colour_value: int) -> np.ndarray:
    """Scale, clamp and round an array of float channels to ints in [0, max]."""
    with np.errstate(over='ignore', invalid='ignore'):
        scaled = np.clip(np.nan_to_num(values * max_colour_value, nan=0.0), 0, max_colour_value)
    return np.floor(scaled + 0.5).astype(int)


def clamped_ppm_int_from_float(max_colour_value: int, colour_value: float) -> int:
    return int(_scale_channels(np.array([colour_value], dtype=np.float64), max_colour_value)[0])


def pixel_to_clamped_ppm_ints(max_colour_value: int, pixel: Tuple) -> list[int]:
    """Return the scaled r, g, b channels of a pixel. Any 4th channel is ignored."""
    channels = np.array([pixel.r, pixel.g, pixel.b], dtype=np.float64)
    return _scale_channels(channels, max_colour_value).tolist()


def parse_line(max_len: int, words: list[str]) -> tuple[list[str], list[str]]:
    """Take words while they fit in max_len. Return (line, remaining words).

    A word longer than max_len on its own still gets a line to itself.
    """
    if max_len <= 0 or not words:
        return [], []
    budget = max_len
    taken = 0
    for word in words:
        if len(word) > budget and taken > 0:
            break
        budget -= len(word) + 1
        taken += 1
        if budget < 0:
            break
    return words[:taken], words[taken:]


def split_lines(max_len: int, words: list[str]) -> list[list[str]]:
    """Greedily wrap words into lines of at most max_len characters."""
    if max_len <= 0:
        return []
    result = []
    remaining = words
    while remaining:
        line, remaining = parse_line(max_len, remaining)
        result.append(line)
    return result


def _row_lines(row: list[Tuple], max_colour_value: int) -> list[str]:
    channels = np.array([(p.r, p.g, p.b) for p in row], dtype=np.float64)
    tokens = [str(v) for v in _scale_channels(channels, max_colour_value).ravel().tolist()]
    return [' '.join(words) for words in split_lines(MAX_LINE_LENGTH, tokens)]


def ppm_data_lines(c: Canvas, max_colour_value: int = MAX_COLOUR_VALUE) -> list[str]:
    """Build the wrapped data lines for every row, top row first."""
    data_lines = []
    for row_number in range(1, c.height + 1):
        data_lines.extend(_row_lines(c.get_row(row_number), max_colour_value))
    return data_lines


def ppm_header(c: Canvas, max_colour_value: int = MAX_COLOUR_VALUE) -> list[str]:
    return [PPM_MAGIC, f'{c.width} {c.height}', str(max_colour_value)]


def canvas_to_ppm(c: Canvas) -> str:
    """Serialize a canvas to a P3 PPM string ending in a blank line."""
    data_lines = ppm_data_lines(c, MAX_COLOUR_VALUE)
    logger.debug('Exported %dx%d canvas to %d PPM data lines', c.width, c.height, len(data_lines))
    return '\n'.join(ppm_header(c, MAX_COLOUR_VALUE) + data_lines) + '\n\n'
