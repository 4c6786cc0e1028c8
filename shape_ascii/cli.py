#!/usr/bin/env python3
"""
Shape-Vector ASCII Art Renderer

A command-line interface for converting images or text to ASCII art by
matching each cell's geometry to a character.

Usage:
    shape-ascii photo.png                    # Render an image
    shape-ascii --text "HELLO" --cols 60     # Render text
    shape-ascii --demo                       # Render the demo sphere
    shape-ascii --help                       # Help
"""

import argparse
import logging
import math
import os
import sys
from typing import List, Optional

from .charsets import list_shape_libraries
from .pipeline import DEFAULT_COLUMNS, DEFAULT_CONTRAST, DEFAULT_ROWS, demo_to_ascii, image_to_ascii, text_to_ascii
from .sources import DEFAULT_FONT


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def positive_float(value: str) -> float:
    number = float(value)
    if not math.isfinite(number) or number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shape-ascii",
        description="Convert images or text to ASCII art using shape vectors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Text examples:
  shape-ascii --text "DUPE.COM"
  shape-ascii --text "HELLO" --cols 60
  shape-ascii --text "WOW" --font "Impact" --cols 40

Image examples:
  shape-ascii photo.png
  shape-ascii photo.jpg --cols 120 --rows 60
  shape-ascii --demo --cols 60 --rows 30

Available fonts are system-dependent, e.g. Arial Black, Impact,
Helvetica Bold, Georgia, Courier New, Verdana.
"""
    )

    parser.add_argument(
        "image",
        nargs="?",
        help="Image to render (omit for the demo sphere)"
    )

    parser.add_argument(
        "--cols", "-c",
        type=positive_int,
        default=DEFAULT_COLUMNS,
        help=f"Output columns (default: {DEFAULT_COLUMNS})"
    )

    parser.add_argument(
        "--rows", "-r",
        type=positive_int,
        default=None,
        help=f"Output rows (auto for text, default {DEFAULT_ROWS} for images)"
    )

    parser.add_argument(
        "--contrast",
        type=positive_float,
        default=DEFAULT_CONTRAST,
        help=f"Contrast exponent, higher = more contrast (default: {DEFAULT_CONTRAST})"
    )

    parser.add_argument(
        "--invert", "-i",
        action="store_true",
        help="Invert colors (for light images on a dark terminal)"
    )

    parser.add_argument(
        "--text", "-t",
        type=str,
        default=None,
        help="Render text instead of an image"
    )

    parser.add_argument(
        "--font", "-f",
        type=str,
        default=DEFAULT_FONT,
        help=f"Font for text rendering (default: \"{DEFAULT_FONT}\")"
    )

    parser.add_argument(
        "--demo", "-d",
        action="store_true",
        help="Render a demo sphere"
    )

    parser.add_argument(
        "--charset",
        choices=list_shape_libraries(),
        default="ascii_shapes",
        help="Shape library to match against (default: ascii_shapes)"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Also save the art to this file (.txt or .html)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug details to stderr"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    common = dict(
        columns=args.cols,
        contrast=args.contrast,
        invert=args.invert,
        library=args.charset,
    )

    try:
        if args.text:
            result = text_to_ascii(args.text, rows=args.rows, font=args.font, **common)
        elif args.demo or not args.image:
            print("Rendering demo sphere...\n")
            result = demo_to_ascii(rows=args.rows or DEFAULT_ROWS, **common)
        else:
            result = image_to_ascii(args.image, rows=args.rows or DEFAULT_ROWS, **common)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result.display()

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        result.save(args.output)
        print(f"✅ Saved to {args.output}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
