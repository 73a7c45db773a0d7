"""
dsplit

Finds axis-aligned edge lines in an image (or a video frame) by thresholding
perceptual color differences between neighboring pixels:

- Lab difference grids
- Thresholding
- Horizontal / vertical run extraction
- Length filtering
- Rendering to edges.png
"""
__all__ = [
    "config",
    "main",
    "detectors",
    "models",
    "utils",
    "visualization",
]
