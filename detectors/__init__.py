"""
Detectors Package

Contains the stages of the edge line pipeline:
- Difference grid construction
- Thresholding
- Run (line) extraction
- Length filtering
"""

from .difference_grid import build_difference_grids, validate_raster
from .thresholder import binarize
from .line_detector import find_runs, extract_segments
from .segment_filter import discard_shorter_than
from .pipeline import detect_segments

__all__ = [
    "build_difference_grids",
    "validate_raster",
    "binarize",
    "find_runs",
    "extract_segments",
    "discard_shorter_than",
    "detect_segments",
]
