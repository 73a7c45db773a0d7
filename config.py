"""
Configuration file for the edge line extraction system.

Contains the tunable pipeline constants and default CLI values.
Modules should receive values through get_active_params(), which bundles
them into a PipelineParams object passed explicitly into each stage.
"""

from dataclasses import dataclass, replace


# ---------------------------------------------------------------
# I/O DEFAULTS
# ---------------------------------------------------------------

OUTPUT_FILE = "edges.png"

# Debug dumps of the thresholded difference grids
GRID_DUMP_FILES = {
    "column": "edge_x.png",
    "row": "edge_y.png",
}

# Video frames are resized by this factor before extraction (smaller = faster)
DEFAULT_SCALE = 0.1


# ---------------------------------------------------------------
# PIPELINE PARAMETERS
# ---------------------------------------------------------------

THRESHOLD = 0.0025              # cutoff applied to normalised distances
DISTANCE_NORMALIZER = 10000.0   # squared Lab distance is divided by this
MIN_LINE_LENGTH = 20            # shorter segments are discarded
FLUSH_OPEN_RUNS = False         # emit runs still open at a scan line end


# ---------------------------------------------------------------
# VISUALIZATION CHANNELS (RGB order)
# ---------------------------------------------------------------

HORIZONTAL_CHANNEL = 0  # red
VERTICAL_CHANNEL = 1    # green


@dataclass(frozen=True)
class PipelineParams:
    threshold: float = THRESHOLD
    distance_normalizer: float = DISTANCE_NORMALIZER
    min_length: int = MIN_LINE_LENGTH
    flush_open_runs: bool = FLUSH_OPEN_RUNS


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params(**overrides) -> PipelineParams:
    """
    Returns the active set of parameters:
    - The module defaults above.
    - Any keyword overrides whose value is not None (CLI flags left unset
      fall back to the defaults).
    """
    params = PipelineParams()
    changes = {k: v for k, v in overrides.items() if v is not None}
    if changes:
        params = replace(params, **changes)
    return params
