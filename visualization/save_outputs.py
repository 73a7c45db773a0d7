"""
Centralized output-saving utilities for the edge line extraction pipeline.

This module provides:
    • save_edges(path, segments, width, height)
    • prepare_dump_dir(output_dir)
    • save_grid_dumps(output_dir, grid_pair)
    • grid_to_image(grid)

Uses draw_lines to render and utils.image_io for filesystem handling.
"""

import logging
import os
from typing import Dict, List

import numpy as np

from config import GRID_DUMP_FILES
from models.grid_pair import GridPair
from models.segment import Segment
from utils.errors import OutputError
from utils.image_io import save_image, ensure_output_dir
from visualization.draw_lines import render_segments

logger = logging.getLogger(__name__)


def save_edges(path: str, segments: List[Segment], width: int, height: int) -> np.ndarray:
    """
    Renders the segments onto a width x height canvas and saves it.
    Rendering finishes before anything touches the disk.
    """
    canvas = render_segments(segments, width, height)
    save_image(path, canvas)
    logger.info("wrote %s (%dx%d, %d segments)", path, width, height, len(segments))
    return canvas


def grid_to_image(grid: np.ndarray) -> np.ndarray:
    """
    Maps a [0, 1] grid to an 8-bit grayscale image (values are clipped).
    """
    return (np.clip(grid, 0.0, 1.0) * 255).astype(np.uint8)


def prepare_dump_dir(output_dir: str) -> str:
    """
    Creates the grid dump directory and checks it is writable.
    Raises OutputError otherwise.
    """
    try:
        ensure_output_dir(output_dir)
    except OSError as e:
        raise OutputError(f"could not create dump directory {output_dir}: {e}") from e
    if not os.path.isdir(output_dir) or not os.access(output_dir, os.W_OK):
        raise OutputError(f"dump directory is not writable: {output_dir}")
    return output_dir


def save_grid_dumps(output_dir: str, grid_pair: GridPair) -> Dict[str, str]:
    """
    Writes both grids as grayscale images (edge_x.png / edge_y.png).
    Empty grids (1-pixel-wide or -tall rasters) are skipped.
    """
    prepare_dump_dir(output_dir)
    written = {}

    for axis, grid in (("column", grid_pair.column_diff), ("row", grid_pair.row_diff)):
        if grid.size == 0:
            logger.debug("%s grid is empty, not dumped", axis)
            continue
        path = os.path.join(output_dir, GRID_DUMP_FILES[axis])
        save_image(path, grid_to_image(grid))
        written[axis] = path

    return written
