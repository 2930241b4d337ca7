#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/logic/scale/renderer.py

from typing import List, Sequence

from scalelab.core import config as c
from scalelab.core.analysis import (
    ColorComparison,
    ContrastThreshold,
    ScaleAccuracy,
    ScaleContrastSummary,
    assess_match_quality,
)
from scalelab.core.autofix import ApcaFixResult, AutoFixResult, ScaleSpec
from scalelab.core.types import ColorResult, ContrastPair
from scalelab.shared.formatting import format_colorspace
from scalelab.shared.preview import label, pass_fail, print_color_block, print_field
from scalelab.shared.truecolor import emit


def _describe(scale: ScaleSpec) -> str:
    return (f"{scale.name}: hue {scale.hue:g}, chroma {scale.chroma:g}, "
            f"{scale.contrast_mode.name}, on {scale.target_background}")


def render_scale(scale: ScaleSpec, steps: Sequence[float], results: Sequence[ColorResult]) -> None:
    emit()
    emit(f"{c.BOLD_WHITE}{_describe(scale)}{c.RESET}")
    emit()
    for step, result in zip(steps, results):
        title = f"{c.MSG_BOLD_COLORS['info']}{step:g}{c.RESET}"
        print_color_block(result.hex, title, end="")
        extra = f"  {result.css_oklch}"
        if result.specific_contrast is not None:
            apca, wcag = result.specific_contrast
            extra += f"  {format_colorspace('lc', apca)}  {format_colorspace('ratio', wcag)}"
        if result.gamut_info.was_modified:
            extra += f"  {c.MSG_BOLD_COLORS['dim']}(mapped){c.RESET}"
        emit(extra)
    emit()


def render_pairs(steps: Sequence[float], pairs: List[ContrastPair]) -> None:
    """All-pairs summary, strongest pair first."""
    emit(f"{label('pairs')}{c.BOLD_WHITE}: {len(pairs)}{c.RESET}")
    if not pairs:
        emit()
        return
    aa = sum(1 for p in pairs if p.wcag >= c.WCAG_AA_NORMAL)
    lc = sum(1 for p in pairs if p.apca >= c.APCA_SILVER)
    print_field("wcag aa pairs", f"{aa} / {len(pairs)}")
    print_field(f"apca lc {c.APCA_SILVER:g} pairs", f"{lc} / {len(pairs)}")
    emit()
    for p in sorted(pairs, key=lambda p: p.wcag, reverse=True):
        first, second = steps[p.first], steps[p.second]
        emit(f"  {first:>5g} / {second:<5g}  {format_colorspace('ratio', p.wcag):>8}  {format_colorspace('lc', p.apca)}")
    emit()


def render_compliance(summary: ScaleContrastSummary, threshold: ContrastThreshold) -> None:
    metric = f"Lc {threshold.min_lc:g}" if threshold.use_apca else f"{threshold.min_wcag:g}:1"
    print_field("threshold", f"{metric} on {summary.target_background}")
    print_field("compliance", f"{summary.compliance_rate * 100:.0f}%")
    recommended = "none" if summary.recommended_step is None else f"{summary.recommended_step}"
    print_field("recommended", recommended)
    emit()
    swatches = sorted(summary.passing + summary.failing, key=lambda s: s.step, reverse=True)
    for s in swatches:
        mark = " *" if s.recommended else ""
        emit(f"  {s.step:>3}  {pass_fail(s.passes)}  {format_colorspace('lc', s.apca)}  "
              f"{format_colorspace('ratio', s.wcag)}  ({s.delta:+.2f}){mark}")
    emit()


def render_accuracy(comparisons: Sequence[ColorComparison], accuracy: ScaleAccuracy) -> None:
    print_field("accuracy", accuracy.overall_quality)
    print_field("avg delta e", f"{accuracy.average_delta_e:.2f}")
    print_field("avg delta l", f"{accuracy.average_lightness_delta:.2f}")
    if accuracy.max_delta_e is not None:
        worst = accuracy.max_delta_e
        print_field("worst step", f"L {worst.intended[0]:g} ({assess_match_quality(worst.delta)}, "
                                  f"delta e {worst.delta.delta_e:.2f})")
    emit()


def render_autofix(fixed: AutoFixResult) -> None:
    m = fixed.metrics
    print_field("auto-fix", _describe(fixed.scale))
    print_field("wcag pairs", f"{m.wcag_pairs} / {m.total_pairs}")
    print_field("apca pairs", f"{m.apca_pairs} / {m.total_pairs}")
    for line in fixed.improvements or ["no changes suggested"]:
        emit(f"  - {line}")
    emit()


def render_apca_fix(fixed: ApcaFixResult) -> None:
    status = pass_fail(fixed.success)
    emit(f"{label('apca fix')}{c.BOLD_WHITE}: {status}{c.RESET}")
    print_field("steps", ", ".join(f"{s:g}" for s in fixed.lightness_steps))
    print_field("targets", f"{fixed.targets_achieved} achieved, {fixed.targets_failed} failed")
    if fixed.targets_achieved:
        print_field("average", format_colorspace('lc', fixed.average_lc))
    for adj in fixed.adjustments:
        emit(f"  step {adj.index}: {adj.before:g} -> {adj.after:g}")
    for line in fixed.improvements:
        emit(f"  - {line}")
    emit()
