import argparse
import logging
import sys

from config import DEFAULT_SCALE, OUTPUT_FILE, get_active_params
from detectors.pipeline import detect_segments
from utils.errors import DsplitError
from utils.frame_source import open_frame_source
from visualization.save_outputs import prepare_dump_dir, save_edges, save_grid_dumps

logger = logging.getLogger(__name__)


def process_image(raster, output_path: str, params, dump_dir: str = None):
    """
    Runs the complete pipeline for one raster:
      1. Check the dump directory (if any) before anything is written
      2. Difference grids, threshold, run extraction, length filter
      3. Render segments and save to output_path
      4. Optional dump of the thresholded grids
    """
    height, width = raster.shape[:2]
    logger.info("processing %dx%d raster", width, height)

    kept_grids = []
    on_thresholded = None
    if dump_dir is not None:
        prepare_dump_dir(dump_dir)
        on_thresholded = kept_grids.append

    segments = detect_segments(raster, params, on_thresholded=on_thresholded)
    if not segments:
        logger.warning("no segments survived the length filter")

    logger.debug("segments: %s", segments)

    save_edges(output_path, segments, width, height)

    for grids in kept_grids:
        save_grid_dumps(dump_dir, grids)

    return segments


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsplit",
        description="Find horizontal and vertical edge lines in an image or video frame.",
    )
    parser.add_argument("input", metavar="INPUT", help="The input file (image or video)")
    parser.add_argument(
        "-s", "--scale", type=float, default=DEFAULT_SCALE,
        help="The scale factor for the size of each video frame (smaller = faster)",
    )
    parser.add_argument(
        "-o", "--output", default=OUTPUT_FILE,
        help=f"Where to write the rendered lines (default: {OUTPUT_FILE})",
    )
    parser.add_argument(
        "--frame", type=int, default=0,
        help="Index of the video frame to process (default: 0)",
    )
    parser.add_argument("--threshold", type=float, help="Edge cutoff for normalised distances")
    parser.add_argument("--min-length", type=int, help="Discard segments shorter than this")
    parser.add_argument(
        "--flush-open-runs", action="store_true", default=None,
        help="Keep runs that touch the right/bottom border",
    )
    parser.add_argument("--dump-grids", metavar="DIR", help="Also save the thresholded grids to DIR")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every segment")
    return parser


def main(argv=None) -> int:
    """
    Main entry point:
      - Parses arguments
      - Selects the frame source and the frame to process
      - Saves the rendered lines
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    params = get_active_params(
        threshold=args.threshold,
        min_length=args.min_length,
        flush_open_runs=args.flush_open_runs,
    )

    try:
        source = open_frame_source(args.input, args.scale)
        raster = source.select(args.frame)
        process_image(raster, args.output, params, dump_dir=args.dump_grids)
    except DsplitError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
