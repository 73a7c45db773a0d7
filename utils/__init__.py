"""
Utility Functions

Provides color conversion, image I/O, frame sources and the error types
used across detectors.
"""

from .color import rgb_to_lab, raster_to_lab, squared_distance
from .errors import (
    DsplitError,
    ConfigurationError,
    FrameExtractionError,
    RenderBoundsError,
    OutputError,
)
from .image_io import load_raster, list_frames, extract_numeric_id, ensure_output_dir, save_image
from .frame_source import (
    FrameSource,
    StillImageSource,
    VideoFrameSource,
    open_frame_source,
    ffmpeg_present,
    create_image_sequence,
)

__all__ = [
    "rgb_to_lab",
    "raster_to_lab",
    "squared_distance",
    "DsplitError",
    "ConfigurationError",
    "FrameExtractionError",
    "RenderBoundsError",
    "OutputError",
    "load_raster",
    "list_frames",
    "extract_numeric_id",
    "ensure_output_dir",
    "save_image",
    "FrameSource",
    "StillImageSource",
    "VideoFrameSource",
    "open_frame_source",
    "ffmpeg_present",
    "create_image_sequence",
]
