"""
Difference grid construction.

This module provides:
    • build_difference_grids(raster, params)
    • validate_raster(raster)

Each cell holds the squared perceptual (Lab) distance between a pixel and
its right (column grid) or lower (row grid) neighbor, divided by
params.distance_normalizer.
"""

import logging

import numpy as np

from config import PipelineParams
from models.grid_pair import GridPair
from utils.color import raster_to_lab, squared_distance
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


def validate_raster(raster):
    """
    Raises ConfigurationError unless raster is a non-empty (H, W, 3) uint8 array.
    """
    if raster is None:
        raise ConfigurationError("no raster supplied")
    raster = np.asarray(raster)
    if raster.ndim != 3 or raster.shape[2] != 3:
        raise ConfigurationError(
            f"expected an RGB raster of shape (H, W, 3), got {raster.shape}"
        )
    if raster.dtype != np.uint8:
        raise ConfigurationError(f"expected 8-bit RGB values, got dtype {raster.dtype}")
    h, w = raster.shape[:2]
    if h == 0 or w == 0:
        raise ConfigurationError(f"raster is empty ({w}x{h})")
    return raster


def build_difference_grids(raster, params: PipelineParams) -> GridPair:
    """
    Builds the column- and row-difference grids of an RGB raster.

    Parameters
    ----------
    raster : np.ndarray
        (H, W, 3) uint8 RGB image.
    params : PipelineParams
        Supplies distance_normalizer.

    Returns
    -------
    GridPair
        column_diff of shape (H, W-1) and row_diff of shape (H-1, W),
        both float32. W == 1 or H == 1 gives an empty grid for that axis.
    """
    raster = validate_raster(raster)

    # converted once and shared by both axes
    lab = raster_to_lab(raster)

    k = np.float32(params.distance_normalizer)
    column_diff = (squared_distance(lab[:, :-1], lab[:, 1:]) / k).astype(np.float32)
    row_diff = (squared_distance(lab[:-1, :], lab[1:, :]) / k).astype(np.float32)

    logger.debug(
        "difference grids: column %s, row %s", column_diff.shape, row_diff.shape
    )
    return GridPair(column_diff=column_diff, row_diff=row_diff)
