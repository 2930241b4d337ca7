#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/blend.py

import argparse
import sys

from scalelab.core import config as c
from scalelab.shared.logger import ScalelabArgumentParser
from scalelab.shared.sanitizer import INPUT_HANDLERS
from scalelab.shared.truecolor import ensure_truecolor
from scalelab.logic.blend.engine import run
from .common import add_log_arguments


def get_blend_parser() -> argparse.ArgumentParser:
    """Create argument parser for blend command."""
    parser = ScalelabArgumentParser(
        prog="scalelab blend",
        description="scalelab blend: composite a translucent color over a background",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-L",
        "--lightness",
        type=INPUT_HANDLERS["lightness_pct"],
        default=50.0,
        help="OKLCH lightness in percent (default: 50)",
    )
    parser.add_argument(
        "-C",
        "--chroma",
        type=INPUT_HANDLERS["chroma"],
        default=0.15,
        help="OKLCH chroma (default: 0.15)",
    )
    parser.add_argument(
        "-H",
        "--hue",
        type=INPUT_HANDLERS["float"],
        default=240.0,
        help="OKLCH hue in degrees (default: 240)",
    )
    parser.add_argument(
        "-b",
        "--background",
        type=INPUT_HANDLERS["hex"],
        default="#ffffff",
        help="background hex color (default: #ffffff)",
    )
    parser.add_argument(
        "-O",
        "--opacity-steps",
        type=INPUT_HANDLERS["opacity_steps"],
        help="comma separated opacity steps in percent",
    )
    parser.add_argument(
        "-S",
        "--steps",
        type=INPUT_HANDLERS["lightness_steps"],
        help="comma separated lightness steps; prints a lightness by opacity matrix",
    )
    parser.add_argument(
        "-bm",
        "--blend-mode",
        default=c.DEFAULT_BLEND_MODE,
        choices=list(c.BLEND_MODES),
        help=f"compositing space (default: {c.DEFAULT_BLEND_MODE})",
    )
    parser.add_argument(
        "--no-lut",
        action="store_true",
        help="use exact transfer functions instead of the lookup table",
    )
    parser.add_argument(
        "--min-wcag",
        type=INPUT_HANDLERS["wcag_ratio"],
        help="find the lowest opacity reaching this WCAG ratio",
    )
    parser.add_argument(
        "--min-apca",
        type=INPUT_HANDLERS["apca_lc"],
        help="find the lowest opacity reaching this APCA Lc",
    )
    parser.add_argument(
        "--match-lightness",
        type=INPUT_HANDLERS["lightness_pct"],
        help="find the opacity step whose result is closest to this CIE L*",
    )
    add_log_arguments(parser)
    return parser


def main() -> None:
    """Main entry point for blend command."""
    parser = get_blend_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args)


if __name__ == "__main__":
    main()
