"""
Visualization Tools

Provides drawing and saving utilities for:
- Extracted segments (edges.png)
- Thresholded difference grids (debug dumps)
"""

from .draw_lines import new_canvas, draw_segment, render_segments
from .save_outputs import save_edges, prepare_dump_dir, save_grid_dumps, grid_to_image

__all__ = [
    "new_canvas",
    "draw_segment",
    "render_segments",
    "save_edges",
    "prepare_dump_dir",
    "save_grid_dumps",
    "grid_to_image",
]
