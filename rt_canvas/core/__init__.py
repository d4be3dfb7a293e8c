"""rt_canvas.core — Foundation layer.

Contains the tuple algebra, the canvas grid, the PPM exporter, config and
logging setup. This module has NO dependencies on rt_canvas.scenes or
rt_canvas.registry. Only stdlib and numpy are allowed here.
"""
