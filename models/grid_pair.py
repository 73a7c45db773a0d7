from dataclasses import dataclass
from typing import Callable, List

import numpy as np

from models.segment import Segment


@dataclass
class GridPair:
    """
    Owns the two difference grids of one raster.

      • column_diff: (H, W-1), distance between each pixel and its right neighbor
      • row_diff:    (H-1, W), distance between each pixel and its neighbor below

    Both grids are transformed as a unit and dropped once segments are
    extracted; segments never refer back to them.
    """

    column_diff: np.ndarray
    row_diff: np.ndarray

    def apply(self, fn: Callable[[np.ndarray], None]):
        """Run an in-place transform on both grids."""
        fn(self.column_diff)
        fn(self.row_diff)

    def threshold(self, cutoff: float):
        # detectors import models, so import lazily to avoid a cycle
        from detectors.thresholder import binarize

        self.apply(lambda grid: binarize(grid, cutoff))

    def lines(self, flush_open_runs: bool = False) -> List[Segment]:
        from detectors.line_detector import extract_segments

        return extract_segments(self, flush_open_runs=flush_open_runs)
