"""
Perceptual color conversion.

This module provides:
    • rgb_to_lab(rgb)
    • raster_to_lab(raster)
    • squared_distance(lab1, lab2)

Conversion is sRGB -> CIE Lab (D65) done by OpenCV on float32 input, which
yields true Lab coordinates (L in [0, 100]) instead of the 8-bit rescaled
variant cv2 returns for uint8 images.
"""

from typing import Sequence, Tuple

import cv2
import numpy as np


def raster_to_lab(raster: np.ndarray) -> np.ndarray:
    """
    Converts an (H, W, 3) uint8 RGB raster to an (H, W, 3) float32 Lab array.
    """
    rgb = raster.astype(np.float32) / 255.0
    return cv2.cvtColor(rgb, cv2.COLOR_RGB2Lab)


def rgb_to_lab(rgb: Sequence[int]) -> Tuple[float, float, float]:
    """
    Maps a single 8-bit RGB triple to (L, a, b).
    """
    pixel = np.asarray(rgb, dtype=np.uint8).reshape(1, 1, 3)
    L, a, b = raster_to_lab(pixel)[0, 0]
    return float(L), float(a), float(b)


def squared_distance(lab1, lab2):
    """
    Squared Euclidean distance between Lab coordinates, summed over the last
    axis. Works on single triples or whole (..., 3) arrays.
    """
    d = np.asarray(lab1, dtype=np.float32) - np.asarray(lab2, dtype=np.float32)
    return np.sum(d * d, axis=-1)
