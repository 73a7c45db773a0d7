"""
Frame sources: where rasters come from.

This module provides:
    • FrameSource, StillImageSource, VideoFrameSource
    • open_frame_source(path, scale)
    • ffmpeg_present()
    • create_image_sequence(video, scale, output_dir)

A still image is a single frame. A video is split into numbered PNG frames
by an external ffmpeg call and read back in order.
"""

import logging
import math
import os
import shutil
import subprocess
import tempfile
from typing import Iterator, List

import cv2
import numpy as np

from config import DEFAULT_SCALE
from utils.errors import ConfigurationError, FrameExtractionError
from utils.image_io import list_frames, load_raster

logger = logging.getLogger(__name__)

FFMPEG = "ffmpeg"


# -------------------------------------------------------------------------
#  FFMPEG
# -------------------------------------------------------------------------

def ffmpeg_present() -> bool:
    """Checks that a version of ffmpeg is accessible."""
    try:
        result = subprocess.run(
            [FFMPEG, "-version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return result.returncode == 0


def create_image_sequence(video: str, scale: float, output_dir: str) -> List[str]:
    """
    Uses ffmpeg to split a video into PNG images named 1.png, 2.png, ...

    Returns the frame paths in order. Raises FrameExtractionError if ffmpeg
    is missing, exits non-zero, or produces no frames.
    """
    logger.info("creating image sequence from %s (scale %s)", video, scale)

    cmd = [
        FFMPEG, "-loglevel", "quiet", "-stats",
        "-i", str(video),
        "-vf", f"scale=iw*{scale}:ih*{scale}",
        os.path.join(output_dir, "%d.png"),
    ]
    try:
        result = subprocess.run(cmd)
    except OSError as e:
        raise FrameExtractionError(f"could not run {FFMPEG}: {e}") from e

    if result.returncode != 0:
        raise FrameExtractionError(
            f"{FFMPEG} failed on {video} with exit status {result.returncode}"
        )

    frames = list_frames(output_dir)
    if not frames:
        raise FrameExtractionError(f"{FFMPEG} produced no frames from {video}")

    logger.info("extracted %d frames", len(frames))
    return frames


# -------------------------------------------------------------------------
#  SOURCES
# -------------------------------------------------------------------------

class FrameSource:
    """An ordered sequence of RGB rasters."""

    def __init__(self, path: str):
        self.path = path

    def frames(self) -> Iterator[np.ndarray]:
        raise NotImplementedError

    def select(self, index: int = 0) -> np.ndarray:
        """Returns frame number `index` (0-based)."""
        if index < 0:
            raise ConfigurationError(f"frame index must be >= 0, got {index}")
        frames = self.frames()
        try:
            for i, frame in enumerate(frames):
                if i == index:
                    return frame
        finally:
            frames.close()
        raise ConfigurationError(f"{self.path} has no frame {index}")


class StillImageSource(FrameSource):

    def frames(self) -> Iterator[np.ndarray]:
        yield load_raster(self.path)


class VideoFrameSource(FrameSource):
    """
    Frames of a video, extracted by ffmpeg into a temporary directory which
    is removed once iteration finishes.
    """

    def __init__(self, path: str, scale: float = DEFAULT_SCALE):
        super().__init__(path)
        self.scale = validate_scale(scale)

    def frames(self) -> Iterator[np.ndarray]:
        if not ffmpeg_present():
            raise FrameExtractionError(f"{FFMPEG} not found on PATH")

        tmp_dir = tempfile.mkdtemp(prefix="dsplit-frames-")
        try:
            for frame_path in create_image_sequence(self.path, self.scale, tmp_dir):
                yield load_raster(frame_path)
        finally:
            shutil.rmtree(tmp_dir, ignore_errors=True)


# -------------------------------------------------------------------------
#  SELECTION
# -------------------------------------------------------------------------

def validate_scale(scale) -> float:
    try:
        scale = float(scale)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"invalid scale factor: {scale!r}") from e
    if not math.isfinite(scale) or scale <= 0:
        raise ConfigurationError(f"scale factor must be a positive number, got {scale}")
    return scale


def is_still_image(path: str) -> bool:
    """True when OpenCV has a decoder for the file's contents."""
    return bool(cv2.haveImageReader(path))


def open_frame_source(path: str, scale: float = DEFAULT_SCALE) -> FrameSource:
    """
    Picks the frame source for `path`: a still image when OpenCV can decode
    it directly, otherwise a video split by ffmpeg.
    """
    if not os.path.isfile(path):
        raise ConfigurationError(f"input file not found: {path}")

    if is_still_image(path):
        logger.info("reading still image %s", path)
        return StillImageSource(path)

    logger.info("treating %s as video", path)
    return VideoFrameSource(path, scale)
