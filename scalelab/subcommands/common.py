#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/subcommands/common.py

import argparse

from scalelab.core import config as c
from scalelab.core.curves import preset_names
from scalelab.shared.sanitizer import INPUT_HANDLERS


def add_log_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show debug messages (solver convergence, cache activity)",
    )
    group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="only show errors",
    )


def add_gamut_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-g",
        "--gamut",
        default=c.DEFAULT_GAMUT,
        choices=list(c.GAMUTS),
        help=f"target gamut (default: {c.DEFAULT_GAMUT})",
    )


def add_curve_arguments(parser: argparse.ArgumentParser) -> None:
    curve_group = parser.add_argument_group("curves")
    curve_group.add_argument(
        "-p",
        "--preset",
        type=INPUT_HANDLERS["name"],
        choices=preset_names(),
        metavar="PRESET",
        help="curve preset: " + ", ".join(preset_names()),
    )
    curve_group.add_argument(
        "-hs",
        "--hue-shift",
        type=INPUT_HANDLERS["hue_shift"],
        help=f"hue rotation in degrees at full darkness, -{c.HUE_SHIFT_MAX:g} to {c.HUE_SHIFT_MAX:g}",
    )
    curve_group.add_argument(
        "-hp",
        "--hue-power",
        type=INPUT_HANDLERS["curve_power"],
        help=f"hue curve exponent ({c.CURVE_POWER_MIN:g} to {c.CURVE_POWER_MAX:g})",
    )
    curve_group.add_argument(
        "-cs",
        "--chroma-shift",
        type=INPUT_HANDLERS["chroma_shift"],
        help="chroma scaling at the midtones, -1 to 1",
    )
    curve_group.add_argument(
        "-cp",
        "--chroma-power",
        type=INPUT_HANDLERS["curve_power"],
        help=f"chroma curve exponent ({c.CURVE_POWER_MIN:g} to {c.CURVE_POWER_MAX:g})",
    )


def add_mode_arguments(parser: argparse.ArgumentParser) -> None:
    mode_group = parser.add_argument_group("contrast")
    mode_group.add_argument(
        "-m",
        "--mode",
        default="standard",
        choices=list(c.CONTRAST_MODE_NAMES) + ["apca-fixed"],
        help="gamut mapping / contrast mode (default: standard)",
    )
    mode_group.add_argument(
        "-tl",
        "--target-lc",
        type=INPUT_HANDLERS["apca_lc"],
        help=f"APCA Lc target for apca-target mode (default: {c.DEFAULT_TARGET_LC:g})",
    )
    mode_group.add_argument(
        "-tr",
        "--target-ratio",
        type=INPUT_HANDLERS["wcag_ratio"],
        help=f"WCAG ratio target for wcag-target mode (default: {c.DEFAULT_TARGET_RATIO:g})",
    )
    mode_group.add_argument(
        "-b",
        "--background",
        default=c.DEFAULT_BACKGROUND,
        help=f"target background: black, white, gray or a preset (default: {c.DEFAULT_BACKGROUND})",
    )
    mode_group.add_argument(
        "-nc",
        "--no-compensation",
        action="store_true",
        help="disable hue-specific chroma compensation",
    )
