#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/color/resolver.py

import argparse
import sys
from typing import Tuple

from scalelab.core import config as c
from scalelab.core.curves import Curve, LINEAR, get_preset, preset_names
from scalelab.core.types import ContrastMode, contrast_mode_from_name
from scalelab.shared.logger import log, set_log_level


def resolve_log_level(args: argparse.Namespace) -> None:
    """Map -v/--verbose and -q/--quiet onto the logger threshold."""
    if getattr(args, "quiet", False):
        set_log_level("error")
    elif getattr(args, "verbose", False):
        set_log_level("debug")
    else:
        set_log_level(c.DEFAULT_LOG_LEVEL)


def resolve_curves(args: argparse.Namespace) -> Tuple[Curve, Curve]:
    """
    Build the hue and chroma curves.

    A --preset supplies the starting curves; explicit shift/power flags
    override the matching preset value.
    """
    hue_curve, chroma_curve = LINEAR, LINEAR

    preset_name = getattr(args, "preset", None)
    if preset_name:
        preset = get_preset(preset_name)
        if preset is None:
            log("error", f"unknown curve preset: '{preset_name}'")
            log("info", f"available presets: {', '.join(preset_names())}")
            sys.exit(2)
        hue_curve, chroma_curve = preset.hue_curve, preset.chroma_curve
        log("debug", f"using curve preset '{preset.key}' ({preset.title})")

    hue_curve = Curve(
        shift=_pick(args, "hue_shift", hue_curve.shift),
        power=_pick(args, "hue_power", hue_curve.power),
    )
    chroma_curve = Curve(
        shift=_pick(args, "chroma_shift", chroma_curve.shift),
        power=_pick(args, "chroma_power", chroma_curve.power),
    )
    return hue_curve, chroma_curve


def _pick(args: argparse.Namespace, name: str, fallback: float) -> float:
    value = getattr(args, name, None)
    return fallback if value is None else value


def resolve_mode(args: argparse.Namespace) -> ContrastMode:
    try:
        return contrast_mode_from_name(
            getattr(args, "mode", "standard") or "standard",
            target_lc=getattr(args, "target_lc", None) or c.DEFAULT_TARGET_LC,
            target_ratio=getattr(args, "target_ratio", None) or c.DEFAULT_TARGET_RATIO,
        )
    except ValueError as e:
        log("error", str(e))
        sys.exit(2)
