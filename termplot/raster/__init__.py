from .canvas import Canvas, CanvasCell, new_canvas
from .draw_markers import DEFAULT_DENSITY_TABLE, DOT_GLYPH, DensityScale, RenderStats, draw_counts, draw_dots

__all__ = [
    "Canvas",
    "CanvasCell",
    "DEFAULT_DENSITY_TABLE",
    "DOT_GLYPH",
    "DensityScale",
    "RenderStats",
    "draw_counts",
    "draw_dots",
    "new_canvas",
]
