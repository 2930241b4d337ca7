#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/limits.py

import argparse
import sys

from scalelab.core import config as c
from scalelab.shared.logger import ScalelabArgumentParser
from scalelab.shared.sanitizer import INPUT_HANDLERS
from scalelab.shared.truecolor import ensure_truecolor
from scalelab.logic.limits.engine import run
from .common import add_gamut_argument, add_log_arguments


def get_limits_parser() -> argparse.ArgumentParser:
    """Create argument parser for limits command."""
    parser = ScalelabArgumentParser(
        prog="scalelab limits",
        description="scalelab limits: compare tabulated and measured maximum chroma",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hue",
        type=INPUT_HANDLERS["float"],
        default=240.0,
        help="OKLCH hue in degrees (default: 240)",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="report every hue bucket (see --hue-step)",
    )
    parser.add_argument(
        "-hs",
        "--hue-step",
        type=INPUT_HANDLERS["hue_steps"],
        default=c.CHROMA_HUE_STEP,
        help=f"hue spacing in degrees for --all (default: {c.CHROMA_HUE_STEP})",
    )
    parser.add_argument(
        "-S",
        "--steps",
        type=INPUT_HANDLERS["lightness_steps"],
        help="comma separated lightness steps in percent (default: 10,20,...,90)",
    )
    add_gamut_argument(parser)
    add_log_arguments(parser)
    return parser


def main() -> None:
    """Main entry point for limits command."""
    parser = get_limits_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args)


if __name__ == "__main__":
    main()
