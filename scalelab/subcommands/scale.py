#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/scale.py

import argparse
import sys

from scalelab.core import config as c
from scalelab.core.analysis import CONTRAST_THRESHOLDS
from scalelab.core.autofix import APCA_FIX_PRESETS
from scalelab.shared.logger import ScalelabArgumentParser
from scalelab.shared.sanitizer import INPUT_HANDLERS
from scalelab.shared.truecolor import ensure_truecolor
from scalelab.logic.scale.engine import run
from .common import add_curve_arguments, add_gamut_argument, add_log_arguments, add_mode_arguments


def get_scale_parser() -> argparse.ArgumentParser:
    """Create argument parser for scale command."""
    parser = ScalelabArgumentParser(
        prog="scalelab scale",
        description="scalelab scale: generate a color scale across lightness steps",
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
        "-C",
        "--chroma",
        type=INPUT_HANDLERS["chroma"],
        default=0.15,
        help=f"OKLCH chroma, 0 to {c.MAX_CHROMA:g} (default: 0.15)",
    )
    parser.add_argument(
        "-n",
        "--neutral",
        choices=list(c.NEUTRAL_PROFILES),
        help="use a neutral profile's hue and chroma instead of -H/-C",
    )
    parser.add_argument(
        "-S",
        "--steps",
        type=INPUT_HANDLERS["lightness_steps"],
        help="comma separated lightness steps in percent (default: "
             + ",".join(str(s) for s in c.DEFAULT_LIGHTNESS_STEPS) + ")",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=INPUT_HANDLERS["workers"],
        default=c.BATCH_WORKERS,
        help=f"generation threads (default: {c.BATCH_WORKERS})",
    )
    add_gamut_argument(parser)
    add_curve_arguments(parser)
    add_mode_arguments(parser)

    report_group = parser.add_argument_group("reports")
    report_group.add_argument(
        "--pairs",
        action="store_true",
        help="show APCA and WCAG contrast of every pair of steps",
    )
    report_group.add_argument(
        "-t",
        "--threshold",
        choices=list(CONTRAST_THRESHOLDS),
        help="check every step against a contrast threshold preset",
    )
    report_group.add_argument(
        "--threshold-lc",
        type=INPUT_HANDLERS["apca_lc"],
        help="check every step against an APCA Lc minimum",
    )
    report_group.add_argument(
        "--threshold-wcag",
        type=INPUT_HANDLERS["wcag_ratio"],
        help="check every step against a WCAG ratio minimum",
    )
    report_group.add_argument(
        "--accuracy",
        action="store_true",
        help="compare requested and generated colors",
    )
    report_group.add_argument(
        "--autofix",
        action="store_true",
        help="suggest a scale definition with steadier contrast",
    )
    report_group.add_argument(
        "--fix-apca",
        choices=list(APCA_FIX_PRESETS),
        help="move lightness steps to meet an APCA goal",
    )
    add_log_arguments(parser)
    return parser


def main() -> None:
    """Main entry point for scale command."""
    parser = get_scale_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args)


if __name__ == "__main__":
    main()
