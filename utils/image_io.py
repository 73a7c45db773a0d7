"""
Image I/O utilities for the edge line extraction pipeline.

This module provides:
    • load_raster(path)
    • list_frames(directory)
    • extract_numeric_id(filename)
    • ensure_output_dir(path)
    • save_image(path, image)

Rasters handed to the pipeline are RGB; OpenCV reads and writes BGR, so the
channel swap happens here and nowhere else.
"""

import os
import re
import glob
import tempfile
from typing import List

import cv2
import numpy as np

from utils.errors import ConfigurationError, OutputError


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def extract_numeric_id(filename: str) -> int:
    """
    Extract the first integer found in the file's base name.
    ffmpeg numbers frames without padding, so this is the sort key.

    Example:
        'frames/38.png' → 38
    """
    m = re.search(r'\d+', os.path.basename(filename))
    return int(m.group(0)) if m else 0


def list_frames(directory: str, pattern: str = "*.png") -> List[str]:
    """
    Frame files in `directory`, ordered by their numeric id.
    """
    return sorted(
        glob.glob(os.path.join(directory, pattern)),
        key=extract_numeric_id,
    )


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_raster(path: str) -> np.ndarray:
    """
    Decodes an image file into an (H, W, 3) uint8 RGB raster.

    Raises ConfigurationError when the file is missing or cannot be decoded.
    """
    if not os.path.isfile(path):
        raise ConfigurationError(f"input file not found: {path}")

    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise ConfigurationError(f"could not decode image: {path}")

    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an RGB (or single-channel) image to disk.

    The image is encoded to a temporary file next to `path` and renamed into
    place, so `path` is either a complete image or untouched.
    Raises OutputError on failure.
    """
    directory = os.path.dirname(os.path.abspath(path))
    ext = os.path.splitext(path)[1] or ".png"

    if image.ndim == 3:
        image = cv2.cvtColor(image, cv2.COLOR_RGB2BGR)

    try:
        ensure_output_dir(directory)
        ok, encoded = cv2.imencode(ext, image)
        if not ok:
            raise OutputError(f"could not encode image as {ext}: {path}")

        fd, tmp_path = tempfile.mkstemp(suffix=ext, dir=directory)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(encoded.tobytes())
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
    except OSError as e:
        raise OutputError(f"could not write {path}: {e}") from e
    except cv2.error as e:
        raise OutputError(f"could not encode {path}: {e}") from e
