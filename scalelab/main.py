#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/main.py

import argparse
import sys

from scalelab import __version__
from scalelab.core import config as c
from scalelab.logic.color import engine
from scalelab.subcommands.command_registry import SUBCOMMANDS
from scalelab.subcommands.common import (
    add_curve_arguments,
    add_gamut_argument,
    add_log_arguments,
    add_mode_arguments,
)
from scalelab.shared.logger import log, ScalelabArgumentParser
from scalelab.shared.sanitizer import INPUT_HANDLERS
from scalelab.shared.truecolor import ensure_truecolor


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main color (generator) command."""
    parser = ScalelabArgumentParser(
        prog="scalelab",
        description="scalelab: perceptual OKLCH color scale generator with contrast targeting",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"scalelab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    # Color Input Group
    color_group = parser.add_argument_group("color")
    color_group.add_argument(
        "-L",
        "--lightness",
        type=INPUT_HANDLERS["lightness_pct"],
        default=60.0,
        help="OKLCH lightness in percent (default: 60)",
    )
    color_group.add_argument(
        "-C",
        "--chroma",
        type=INPUT_HANDLERS["chroma"],
        default=0.15,
        help=f"OKLCH chroma, 0 to {c.MAX_CHROMA:g} (default: 0.15)",
    )
    color_group.add_argument(
        "-H",
        "--hue",
        type=INPUT_HANDLERS["float"],
        default=240.0,
        help="OKLCH hue in degrees (default: 240)",
    )
    add_gamut_argument(color_group)

    add_curve_arguments(parser)
    add_mode_arguments(parser)

    info_group = parser.add_argument_group("display")
    info_group.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual bars",
    )
    add_log_arguments(parser)

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_color_command(args: argparse.Namespace) -> None:
    """Entry point for the core color command."""
    parser = get_color_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    # Execution
    engine.run(args, parser)


def main() -> None:
    """Main entry point for scalelab CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()
