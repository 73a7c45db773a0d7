import numpy as np
import pytest

from models.segment import Direction, Segment
from utils.errors import RenderBoundsError
from visualization.draw_lines import render_segments


def test_colors_and_overlap():
    segments = [
        Segment(Direction.HORIZONTAL, 1, 2, 4),   # x 1..4 on row 2
        Segment(Direction.VERTICAL, 3, 0, 5),     # y 0..4 on column 3
    ]
    canvas = render_segments(segments, 6, 5)

    assert canvas.shape == (5, 6, 3)
    assert canvas.dtype == np.uint8
    assert tuple(canvas[2, 1]) == (255, 0, 0)
    assert tuple(canvas[0, 3]) == (0, 255, 0)
    assert tuple(canvas[2, 3]) == (255, 255, 0)
    assert tuple(canvas[2, 5]) == (0, 0, 0)
    assert tuple(canvas[4, 0]) == (0, 0, 0)
    assert int((canvas[..., 0] == 255).sum()) == 4
    assert int((canvas[..., 1] == 255).sum()) == 5
    assert not canvas[..., 2].any()


def test_empty_segment_list_is_black():
    assert not render_segments([], 7, 3).any()


def test_segment_touching_last_cell_is_allowed():
    canvas = render_segments([Segment(Direction.HORIZONTAL, 2, 3, 4)], 6, 4)
    assert canvas[3, 5, 0] == 255


@pytest.mark.parametrize("segment", [
    Segment(Direction.HORIZONTAL, 3, 0, 4),
    Segment(Direction.HORIZONTAL, 0, 4, 1),
    Segment(Direction.VERTICAL, 0, 1, 4),
    Segment(Direction.VERTICAL, 6, 0, 1),
    Segment(Direction.VERTICAL, -1, 0, 2),
])
def test_out_of_bounds_is_rejected(segment):
    with pytest.raises(RenderBoundsError):
        render_segments([segment], 6, 4)


def test_empty_canvas_is_rejected():
    with pytest.raises(RenderBoundsError):
        render_segments([], 0, 4)
