"""
Exception types raised by the edge line extraction pipeline.

Input problems are reported as ConfigurationError (or a subclass),
broken internal invariants as RenderBoundsError. None of them are retried.
"""


class DsplitError(Exception):
    """Base class for every error the pipeline reports."""


class ConfigurationError(DsplitError):
    """Missing/corrupt input, zero-sized raster, bad scale or frame index."""


class FrameExtractionError(ConfigurationError):
    """ffmpeg is unavailable or failed to split a video into frames."""


class RenderBoundsError(DsplitError):
    """A segment span falls outside the canvas it is rendered on."""


class OutputError(DsplitError):
    """The rendered image could not be written."""
