"""Auto-discovery of scene modules.

Every .py file in this package that defines a `scene` object is
auto-registered by rt_canvas.registry.discover().
"""
