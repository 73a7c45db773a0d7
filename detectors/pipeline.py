"""
Edge line extraction pipeline for one raster:

    raster -> difference grids -> thresholded grids -> segments -> filtered segments
"""

import logging
from typing import Callable, List, Optional

from config import PipelineParams, get_active_params
from detectors.difference_grid import build_difference_grids
from detectors.segment_filter import discard_shorter_than
from models.grid_pair import GridPair
from models.segment import Segment

logger = logging.getLogger(__name__)


def detect_segments(
    raster,
    params: Optional[PipelineParams] = None,
    on_thresholded: Optional[Callable[[GridPair], None]] = None,
) -> List[Segment]:
    """
    Runs the complete pipeline for one RGB raster:
      1. Difference grids (Lab distance / normalizer)
      2. Threshold both grids in place
      3. Extract horizontal/vertical runs
      4. Drop segments shorter than params.min_length

    on_thresholded, if given, sees the binarized grids before they are
    discarded (used for debug dumps).
    """
    if params is None:
        params = get_active_params()

    grids = build_difference_grids(raster, params)
    grids.threshold(params.threshold)

    if on_thresholded is not None:
        on_thresholded(grids)

    lines = grids.lines(flush_open_runs=params.flush_open_runs)
    kept = discard_shorter_than(lines, params.min_length)

    logger.info(
        "extracted %d runs, %d kept (min length %d)",
        len(lines), len(kept), params.min_length,
    )
    return kept
