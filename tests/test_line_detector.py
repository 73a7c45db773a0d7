import numpy as np
import pytest

from detectors.line_detector import find_runs, extract_segments
from models.grid_pair import GridPair
from models.segment import Direction, Segment


def test_find_runs_closed_runs():
    line = [0, 1, 1, 0, 0, 1, 0, 1, 1, 1, 0]
    assert list(find_runs(line)) == [(1, 2), (5, 1), (7, 3)]


def test_open_run_is_dropped_by_default():
    assert list(find_runs([0, 1, 1, 0, 1, 1])) == [(1, 2)]
    assert list(find_runs([1, 1, 1])) == []


def test_open_run_can_be_flushed():
    assert list(find_runs([0, 1, 1, 0, 1, 1], flush_open_run=True)) == [(1, 2), (4, 2)]
    assert list(find_runs([1, 1, 1], flush_open_run=True)) == [(0, 3)]


def test_empty_scan_line():
    assert list(find_runs([], flush_open_run=True)) == []


def test_extract_segments_orientation_and_origin():
    column_diff = np.zeros((6, 3), dtype=np.float32)
    column_diff[1:4, 2] = 1.0            # vertical run at x=2, rows 1..3
    row_diff = np.zeros((5, 4), dtype=np.float32)
    row_diff[3, 0:2] = 1.0               # horizontal run at y=3, cols 0..1

    segments = extract_segments(GridPair(column_diff, row_diff))
    assert segments == [
        Segment(Direction.VERTICAL, 2, 1, 3),
        Segment(Direction.HORIZONTAL, 0, 3, 2),
    ]


def test_segments_lie_within_their_grid():
    rng = np.random.default_rng(0)
    column_diff = (rng.random((25, 14)) > 0.4).astype(np.float32)
    row_diff = (rng.random((24, 15)) > 0.4).astype(np.float32)

    for flush in (False, True):
        segments = extract_segments(GridPair(column_diff, row_diff), flush_open_runs=flush)
        assert segments
        for seg in segments:
            assert seg.length >= 1
            grid = row_diff if seg.is_horizontal else column_diff
            for x, y in seg.cells():
                assert 0 <= y < grid.shape[0]
                assert 0 <= x < grid.shape[1]
                assert grid[y, x] == 1.0


def test_segment_rejects_non_positive_length():
    with pytest.raises(ValueError):
        Segment(Direction.HORIZONTAL, 0, 0, 0)
