from typing import Iterable, Iterator, List, Tuple

from models.segment import Direction, Segment


def find_runs(scan_line: Iterable[float], flush_open_run: bool = False) -> Iterator[Tuple[int, int]]:
    """
    Yields (start, length) for every maximal run of "on" cells (value >= 1.0)
    along one scan line.

    A run is closed by the first cell below 1.0 after it. A run still open
    when the scan line ends is dropped unless flush_open_run is set.
    """
    start = None
    idx = -1

    for idx, value in enumerate(scan_line):
        if start is None:
            if value >= 1.0:
                start = idx
        elif value < 1.0:
            yield start, idx - start
            start = None

    if start is not None and flush_open_run:
        yield start, idx + 1 - start


def extract_segments(grid_pair, flush_open_runs: bool = False) -> List[Segment]:
    """
    Converts a thresholded GridPair into axis-aligned segments.

    Columns of the column-difference grid give vertical segments
    (x = column, y = run start); rows of the row-difference grid give
    horizontal segments (x = run start, y = row).

    Parameters
    ----------
    grid_pair : GridPair
        Grids already binarized to 0.0 / 1.0.
    flush_open_runs : bool
        Emit runs that reach the end of their scan line.

    Returns
    -------
    list[Segment]
        Vertical segments first, then horizontal.
    """
    segments = []

    column_diff = grid_pair.column_diff
    for col in range(column_diff.shape[1]):
        for start, length in find_runs(column_diff[:, col], flush_open_runs):
            segments.append(Segment(Direction.VERTICAL, col, start, length))

    row_diff = grid_pair.row_diff
    for row in range(row_diff.shape[0]):
        for start, length in find_runs(row_diff[row, :], flush_open_runs):
            segments.append(Segment(Direction.HORIZONTAL, start, row, length))

    return segments
