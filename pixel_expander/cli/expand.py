#!/usr/bin/env python3
"""
Pixel Expander command line.
Reads an image, replicates one column (or row) of pixels across it,
and writes the result.
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..errors import ConfigurationError, PixelExpanderError
from ..models.offset import Offset
from ..pipeline.expand_pixels import expand_file

logger = logging.getLogger(__name__)


def _pixel_offset(value: str) -> int:
    try:
        offset = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid pixel offset: {value!r}")
    if offset < 0:
        raise argparse.ArgumentTypeError(f"pixel offset must be non-negative, got {offset}")
    return offset


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pixel-expand",
        description="Expand a column or row of pixels to the dimensions of the image",
    )
    ap.add_argument("-i", "--input", required=True, metavar="INPUT_PATH",
                    help="The image from which to read pixel data")
    ap.add_argument("-p", "--pixel", required=True, type=_pixel_offset, metavar="PIXEL_OFFSET",
                    help="The column or row offset in pixels")
    ap.add_argument("-r", "--row", action="store_true",
                    help="Expand a row of pixels instead of a column")
    ap.add_argument("-o", "--out", required=True, metavar="OUTPUT_PATH",
                    help="The path to write to")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Log every step at debug level")
    return ap


def _configure_logging(verbose: bool) -> None:
    # --- Centralized Logging Configuration ---
    if verbose:
        level = logging.DEBUG
    else:
        raw = os.getenv("LOG_LEVEL", "WARNING")
        level = logging.getLevelName(raw.upper())
        if not isinstance(level, int):
            raise ConfigurationError("LOG_LEVEL", raw, "DEBUG, INFO, WARNING, ERROR or CRITICAL")
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    offset = Offset.row(args.pixel) if args.row else Offset.col(args.pixel)
    try:
        _configure_logging(args.verbose)
        expand_file(args.input, args.out, offset)
    except PixelExpanderError as err:
        logger.debug("Expansion failed", exc_info=True)
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
