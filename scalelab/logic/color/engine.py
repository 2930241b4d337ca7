#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/color/engine.py

import argparse

from scalelab.core import config as c
from scalelab.core.contrast import apca_compliance, wcag_levels
from scalelab.core.engine import ColorEngine, recommended_contrast_mode
from scalelab.core.solvers import is_known_background
from scalelab.core.types import ColorRequest, Standard
from scalelab.shared.logger import log
from .resolver import resolve_curves, resolve_log_level, resolve_mode
from .renderer import render_color_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the color command"""
    resolve_log_level(args)

    hue_curve, chroma_curve = resolve_curves(args)
    mode = resolve_mode(args)

    if not is_known_background(args.background):
        log("warning", f"unknown background '{args.background}', treating it as white")

    request = ColorRequest(
        lightness=args.lightness / c.PERCENT_TO_FACTOR,
        chroma=args.chroma,
        hue=args.hue,
        hue_curve=hue_curve,
        chroma_curve=chroma_curve,
        contrast_mode=mode,
        target_background=args.background,
        calculate_contrast=True,
        chroma_compensation=not args.no_compensation,
    )

    engine = ColorEngine(gamut=args.gamut)
    result = engine.generate(request)

    if result.gamut_info.was_modified:
        log("info", f"color was mapped into {args.gamut}: {result.gamut_info.chroma_reduction_fraction * 100:.1f}% chroma removed")

    suggestion = recommended_contrast_mode(args.chroma)
    if isinstance(mode, Standard) and not isinstance(suggestion, Standard):
        log("debug", f"'{suggestion.name}' mode usually suits chroma {args.chroma:g} better")

    best_wcag = max(result.contrast.wcag)
    best_apca = max(result.contrast.apca)
    render_color_info(
        result,
        args,
        levels=wcag_levels(best_wcag),
        apca_level=apca_compliance(best_apca),
    )
