"""
Visualization utilities for rendering extracted segments.

This module provides:
    • new_canvas(width, height)
    • draw_segment(canvas, segment)
    • render_segments(segments, width, height)

Horizontal segments light the red channel, vertical segments the green one.
Channels compose, so a cell covered by both orientations shows yellow.
"""

from typing import List

import numpy as np

from config import HORIZONTAL_CHANNEL, VERTICAL_CHANNEL
from models.segment import Segment
from utils.errors import RenderBoundsError


def new_canvas(width: int, height: int) -> np.ndarray:
    """Black (H, W, 3) uint8 RGB canvas."""
    if width <= 0 or height <= 0:
        raise RenderBoundsError(f"canvas must be non-empty, got {width}x{height}")
    return np.zeros((height, width, 3), dtype=np.uint8)


def draw_segment(canvas: np.ndarray, segment: Segment):
    """
    Sets the orientation channel to 255 over the segment span (in place).
    Raises RenderBoundsError if any covered cell lies outside the canvas.
    """
    h, w = canvas.shape[:2]
    x0, y0 = segment.x, segment.y
    x1, y1 = segment.end

    if x0 < 0 or y0 < 0 or x1 >= w or y1 >= h:
        raise RenderBoundsError(f"{segment} exceeds canvas {w}x{h}")

    if segment.is_horizontal:
        canvas[y0, x0:x1 + 1, HORIZONTAL_CHANNEL] = 255
    else:
        canvas[y0:y1 + 1, x0, VERTICAL_CHANNEL] = 255
    return canvas


def render_segments(segments: List[Segment], width: int, height: int) -> np.ndarray:
    """
    Paints all segments onto a fresh black canvas of the given size.

    Args:
        segments: filtered segment list
        width, height: size of the source raster

    Returns:
        (height, width, 3) uint8 RGB canvas
    """
    canvas = new_canvas(width, height)
    for seg in segments:
        draw_segment(canvas, seg)
    return canvas
