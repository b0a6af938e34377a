"""
Text Line Cutter — CLI Entry Point

Usage:
    python main.py scan.jpg
    python main.py scan.jpg --fill-gaps --knife-color red -v
"""

import argparse
import logging
import os
import sys
import time

from PIL import ImageColor

from line_cutter.analysis import auto_analysis_width, build_analysis_image
from line_cutter.image_io import derive_output_path, load_image, save_image
from line_cutter.models import (ANALYSIS_WIDTH, BINARY_THRESHOLD, DARK_THRESHOLD,
                                CutterOptions, TextBlock)
from line_cutter.painter import draw_cutting_lines, fill_gaps, scale_blocks
from line_cutter.segmenter import find_text_blocks

DEFAULT_SOURCE_IMAGE = os.path.join("images", "ticket02.jpg")
OUTPUT_SUFFIX = "_output"
RESAMPLED_SUFFIX = "_resampled"


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")


def run_pipeline(input_path: str, options: CutterOptions | None = None) -> list[TextBlock]:
    options = options or CutterOptions()
    logger = logging.getLogger("pipeline")
    total_start = time.time()

    logger.info("=" * 60)
    logger.info("STAGE 1: Loading source image")
    logger.info("=" * 60)
    source = load_image(input_path)
    height, width = source.shape[:2]
    logger.info(f"  Resolution: {width}x{height}")

    logger.info("")
    logger.info("=" * 60)
    logger.info("STAGE 2: Building analysis image")
    logger.info("=" * 60)
    t = time.time()
    analysis_width = auto_analysis_width(width) if options.auto_width else options.analysis_width
    analysis = build_analysis_image(source, width=analysis_width, threshold=options.binary_threshold)
    logger.info(f"  Analysis image: {analysis.shape[1]}x{analysis.shape[0]}")
    logger.info(f"  Completed in {time.time() - t:.1f}s")

    logger.info("")
    logger.info("=" * 60)
    logger.info("STAGE 3: Finding text blocks")
    logger.info("=" * 60)
    t = time.time()
    blocks = find_text_blocks(analysis, options.dark_threshold)
    blocks = scale_blocks(blocks, analysis.shape[0], height)
    for block in blocks:
        logger.debug(f"  Block rows {block.top_y}-{block.bottom_y} ({block.height} rows)")
    if not blocks:
        logger.info("  No text detected")
    logger.info(f"  Found {len(blocks)} text blocks in {time.time() - t:.1f}s")

    logger.info("")
    logger.info("=" * 60)
    logger.info("STAGE 4: Painting cutting lines")
    logger.info("=" * 60)
    if options.fill_gaps:
        fill_gaps(source, blocks, options.gap_color)
    cuts = draw_cutting_lines(source, blocks, options.knife_color)
    logger.info(f"  Cutting lines: {len(cuts)}")

    logger.info("")
    logger.info("=" * 60)
    logger.info("STAGE 5: Saving images")
    logger.info("=" * 60)
    output_path = save_image(source, derive_output_path(input_path, OUTPUT_SUFFIX))
    resampled_path = save_image(analysis, derive_output_path(input_path, RESAMPLED_SUFFIX))

    total_time = time.time() - total_start
    logger.info("")
    logger.info("=" * 60)
    logger.info("CUTTING COMPLETE")
    logger.info("=" * 60)
    logger.info(f"  Text blocks:     {len(blocks)}")
    logger.info(f"  Output file:     {output_path}")
    logger.info(f"  Analysis file:   {resampled_path}")
    logger.info(f"  Total time:      {total_time:.1f}s")
    return blocks


def _color(value: str) -> tuple[int, int, int]:
    try:
        return ImageColor.getrgb(value)[:3]
    except ValueError:
        raise argparse.ArgumentTypeError(f"unknown color: {value}")


def _unit_float(value: str) -> float:
    number = float(value)
    if not 0.0 <= number <= 1.0:
        raise argparse.ArgumentTypeError(f"must be between 0 and 1: {value}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mark cutting lines between text blocks of a scanned document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n  python main.py scan.jpg\n  python main.py scan.jpg --fill-gaps --knife-color red -v")
    parser.add_argument("input", nargs="?", default="", help=f"Path to source image (default: {DEFAULT_SOURCE_IMAGE})")
    parser.add_argument("--fill-gaps", action="store_true", help="Also fill the gaps between text blocks")
    parser.add_argument("--knife-color", type=_color, default="magenta", help="Cutting line color (default: magenta)")
    parser.add_argument("--gap-color", type=_color, default="cyan", help="Gap fill color (default: cyan)")
    width = parser.add_mutually_exclusive_group()
    width.add_argument("--analysis-width", type=_positive_int, default=ANALYSIS_WIDTH,
                       help=f"Analysis image width in pixels (default: {ANALYSIS_WIDTH})")
    width.add_argument("--auto-width", action="store_true", help="Derive the analysis width from the source width")
    parser.add_argument("--dark-threshold", type=_unit_float, default=DARK_THRESHOLD,
                        help=f"Brightness below which a row counts as text (default: {DARK_THRESHOLD})")
    parser.add_argument("--binary-threshold", type=_unit_float, default=BINARY_THRESHOLD,
                        help=f"Brightness used to binarize the analysis image (default: {BINARY_THRESHOLD})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    input_path = args.input if args.input.strip() else DEFAULT_SOURCE_IMAGE
    if not os.path.isfile(input_path):
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)
    options = CutterOptions(fill_gaps=args.fill_gaps, knife_color=args.knife_color, gap_color=args.gap_color,
                            analysis_width=args.analysis_width, dark_threshold=args.dark_threshold,
                            binary_threshold=args.binary_threshold, auto_width=args.auto_width)
    run_pipeline(input_path, options)


if __name__ == "__main__":
    main()
