import cv2
import numpy as np
import pytest

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def solid(width, height, color=BLACK):
    raster = np.zeros((height, width, 3), dtype=np.uint8)
    raster[:, :] = color
    return raster


@pytest.fixture
def square_raster():
    """40x40 black raster with a white square covering x, y in [5, 35)."""
    raster = solid(40, 40)
    raster[5:35, 5:35] = WHITE
    return raster


@pytest.fixture
def split_raster():
    """10 wide, 30 tall: black left half, white right half."""
    raster = solid(10, 30)
    raster[:, 5:] = WHITE
    return raster


@pytest.fixture
def png_path(tmp_path, square_raster):
    path = tmp_path / "square.png"
    cv2.imwrite(str(path), cv2.cvtColor(square_raster, cv2.COLOR_RGB2BGR))
    return path
