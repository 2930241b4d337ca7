#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/scale/engine.py

import argparse
import sys

from scalelab.core import config as c
from scalelab.core.analysis import (
    CONTRAST_THRESHOLDS,
    ContrastThreshold,
    analyze_scale_accuracy,
    analyze_scale_contrast,
    compare_result,
    contrast_pairs,
)
from scalelab.core.autofix import APCA_FIX_PRESETS, ScaleSpec, auto_fix_apca, auto_fix_scale
from scalelab.core.engine import ColorEngine
from scalelab.shared.logger import log
from scalelab.logic.color.resolver import resolve_curves, resolve_log_level, resolve_mode
from . import renderer


def resolve_threshold(args: argparse.Namespace):
    """Threshold preset, overridden by explicit --threshold-lc / --threshold-wcag."""
    threshold = None
    if args.threshold:
        threshold = CONTRAST_THRESHOLDS[args.threshold]
    if args.threshold_lc is not None:
        base = threshold or CONTRAST_THRESHOLDS["body-text"]
        threshold = ContrastThreshold(args.threshold_lc, base.min_wcag, True)
    elif args.threshold_wcag is not None:
        base = threshold or CONTRAST_THRESHOLDS["wcag-aa"]
        threshold = ContrastThreshold(base.min_lc, args.threshold_wcag, False)
    return threshold


def build_scale(args: argparse.Namespace) -> ScaleSpec:
    hue, chroma, name = args.hue, args.chroma, "scale"
    if args.neutral:
        hue, chroma = c.NEUTRAL_PROFILES[args.neutral]
        name = args.neutral
        log("debug", f"neutral profile '{name}': hue {hue:g}, chroma {chroma:g}")

    hue_curve, chroma_curve = resolve_curves(args)
    return ScaleSpec(
        hue=hue,
        chroma=chroma,
        name=name,
        hue_curve=hue_curve,
        chroma_curve=chroma_curve,
        contrast_mode=resolve_mode(args),
        target_background=args.background,
        chroma_compensation=not args.no_compensation,
    )


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the scale command"""
    resolve_log_level(args)

    steps = args.steps or c.DEFAULT_LIGHTNESS_STEPS
    if not steps:
        log("error", "at least one lightness step is required")
        sys.exit(2)

    scale = build_scale(args)
    engine = ColorEngine(gamut=args.gamut)
    requests = [scale.request(step / c.PERCENT_TO_FACTOR) for step in steps]
    results = engine.generate_batch(requests, workers=args.workers)
    log("debug", f"generated {len(results)} swatches, cache {engine.cache_stats()}")

    renderer.render_scale(scale, steps, results)

    if args.accuracy:
        comparisons = [
            compare_result((req.lightness, req.chroma, req.hue), res)
            for req, res in zip(requests, results)
        ]
        renderer.render_accuracy(comparisons, analyze_scale_accuracy(comparisons))

    if args.pairs:
        renderer.render_pairs(steps, contrast_pairs(results))

    threshold = resolve_threshold(args)
    if threshold is not None:
        summary = analyze_scale_contrast(results, args.background, threshold, scale.contrast_mode.name)
        renderer.render_compliance(summary, threshold)

    if args.autofix:
        fixed = auto_fix_scale(scale, steps, engine=engine)
        renderer.render_autofix(fixed)

    if args.fix_apca:
        fixed = auto_fix_apca(scale, steps, APCA_FIX_PRESETS[args.fix_apca], engine=engine)
        renderer.render_apca_fix(fixed)
