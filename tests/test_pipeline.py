import numpy as np
import pytest

from config import get_active_params
from detectors.pipeline import detect_segments
from models.segment import Direction, Segment
from visualization.draw_lines import render_segments
from conftest import solid


def test_square_gives_four_sides(square_raster):
    segments = detect_segments(square_raster, get_active_params())
    assert sorted(segments, key=repr) == sorted([
        Segment(Direction.VERTICAL, 4, 5, 30),
        Segment(Direction.VERTICAL, 34, 5, 30),
        Segment(Direction.HORIZONTAL, 5, 4, 30),
        Segment(Direction.HORIZONTAL, 5, 34, 30),
    ], key=repr)


def test_min_length_drops_short_sides(square_raster):
    assert detect_segments(square_raster, get_active_params(min_length=31)) == []


@pytest.mark.parametrize("threshold", [1e-6, 0.0025, 0.5])
@pytest.mark.parametrize("min_length", [0, 1, 20])
@pytest.mark.parametrize("flush", [False, True])
def test_uniform_raster_has_no_segments(threshold, min_length, flush):
    params = get_active_params(
        threshold=threshold, min_length=min_length, flush_open_runs=flush
    )
    raster = solid(30, 30, (90, 140, 210))
    assert detect_segments(raster, params) == []


def test_grids_all_zero_for_uniform_raster():
    seen = []
    detect_segments(solid(12, 9, (40, 40, 40)), get_active_params(), on_thresholded=seen.append)
    (grids,) = seen
    assert not grids.column_diff.any()
    assert not grids.row_diff.any()


def test_hard_edge_touching_border_is_dropped(split_raster):
    seen = []
    segments = detect_segments(
        split_raster, get_active_params(min_length=1), on_thresholded=seen.append
    )
    # every row has its "on" cell at the boundary index
    np.testing.assert_array_equal(seen[0].column_diff[:, 4], 1.0)
    assert segments == []


def test_hard_edge_with_flush(split_raster):
    params = get_active_params(min_length=20, flush_open_runs=True)
    segments = detect_segments(split_raster, params)
    assert segments == [Segment(Direction.VERTICAL, 4, 0, 30)]


def test_deterministic():
    rng = np.random.default_rng(11)
    raster = rng.integers(0, 256, size=(32, 48, 3), dtype=np.uint8)
    raster[8:24, 10:40] = (255, 0, 0)
    params = get_active_params(min_length=3)

    first = detect_segments(raster, params)
    second = detect_segments(raster.copy(), params)
    assert first == second
    np.testing.assert_array_equal(
        render_segments(first, 48, 32), render_segments(second, 48, 32)
    )


def test_input_raster_not_modified(square_raster):
    before = square_raster.copy()
    detect_segments(square_raster, get_active_params())
    np.testing.assert_array_equal(square_raster, before)
