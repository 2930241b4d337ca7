#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/autofix.py

from dataclasses import dataclass, field, replace
from typing import List, NamedTuple, Optional, Sequence, Tuple

from scalelab.shared.sanitizer import normalize_hex
from . import config as c
from . import conversions as conv
from .contrast import apca_contrast
from .curves import Curve, LINEAR
from .engine import ColorEngine
from .types import (
    ColorRequest,
    ColorResult,
    ContrastMode,
    FixedLightness,
    LuminanceMatched,
    Standard,
)


@dataclass(frozen=True)
class ScaleSpec:
    """A named hue/chroma scale definition, independent of its lightness steps."""
    hue: float
    chroma: float
    name: str = "scale"
    hue_curve: Curve = LINEAR
    chroma_curve: Curve = LINEAR
    contrast_mode: ContrastMode = field(default_factory=Standard)
    target_background: str = c.DEFAULT_BACKGROUND
    chroma_compensation: bool = True

    def request(self, lightness: float, calculate_contrast: bool = True) -> ColorRequest:
        return ColorRequest(
            lightness=lightness,
            chroma=self.chroma,
            hue=self.hue,
            hue_curve=self.hue_curve,
            chroma_curve=self.chroma_curve,
            contrast_mode=self.contrast_mode,
            target_background=self.target_background,
            calculate_contrast=calculate_contrast,
            chroma_compensation=self.chroma_compensation,
        )

    def generate(self, lightness_steps: Sequence[float], engine: Optional[ColorEngine] = None) -> List[ColorResult]:
        engine = engine or ColorEngine()
        return [engine.generate(self.request(step / c.PERCENT_TO_FACTOR)) for step in lightness_steps]


# ==========================================
# Pair-compliance auto-fix
# ==========================================

class AutoFixMetrics(NamedTuple):
    wcag_pairs: int
    apca_pairs: int
    total_pairs: int
    chroma_adjustment: float
    mode_changed: bool


class AutoFixResult(NamedTuple):
    scale: ScaleSpec
    improvements: List[str]
    metrics: AutoFixMetrics


def _count_passing_pairs(colors: Sequence[ColorResult], min_wcag: float, min_apca: float) -> Tuple[int, int]:
    wcag_pairs = 0
    apca_pairs = 0
    for i, first in enumerate(colors):
        for second in colors[i + 1:]:
            if first.contrast is None or second.contrast is None:
                continue
            # pair strength is taken from the stronger swatch on white
            if max(first.contrast.wcag.on_white, second.contrast.wcag.on_white) >= min_wcag:
                wcag_pairs += 1
            if max(first.contrast.apca.on_white, second.contrast.apca.on_white) >= min_apca:
                apca_pairs += 1
    return wcag_pairs, apca_pairs


def auto_fix_scale(
    scale: ScaleSpec,
    lightness_steps: Sequence[float] = c.DEFAULT_LIGHTNESS_STEPS,
    target_min_wcag: float = c.WCAG_AA_NORMAL,
    target_min_apca: float = c.APCA_SILVER,
    adjust_chroma: bool = True,
    adjust_mode: bool = True,
    engine: Optional[ColorEngine] = None,
) -> AutoFixResult:
    """
    Suggest a scale definition with steadier contrast.

    Standard scales move to a lightness-preserving mode, chroma drops by 20%
    when fewer than half of the swatch pairs reach the WCAG target, and chroma
    compensation is switched on.
    """
    improvements = []
    adjusted = scale
    mode_changed = False
    chroma_adjustment = 0.0

    if adjust_mode and isinstance(scale.contrast_mode, Standard):
        if scale.chroma < c.ACHROMATIC_CHROMA:
            adjusted = replace(adjusted, contrast_mode=LuminanceMatched())
            improvements.append("Switched to luminance-matched mode for grayscale consistency")
        else:
            adjusted = replace(adjusted, contrast_mode=FixedLightness())
            improvements.append("Switched to fixed-lightness mode for consistent contrast across the scale")
        mode_changed = True

    colors = adjusted.generate(lightness_steps, engine)
    wcag_pairs, apca_pairs = _count_passing_pairs(colors, target_min_wcag, target_min_apca)
    total_pairs = len(colors) * (len(colors) - 1) // 2

    if adjust_chroma and scale.chroma > 0.05 and total_pairs:
        if wcag_pairs / total_pairs < 0.5:
            reduction = scale.chroma * 0.2
            adjusted = replace(adjusted, chroma=max(0.05, scale.chroma - reduction))
            chroma_adjustment = -reduction
            improvements.append(f"Reduced chroma by {reduction:.4f} to improve contrast")

    if not adjusted.chroma_compensation:
        adjusted = replace(adjusted, chroma_compensation=True)
        improvements.append("Enabled chroma compensation for perceptual uniformity")

    if adjusted.target_background == c.DEFAULT_BACKGROUND:
        improvements.append("Consider setting a specific target background for accurate contrast")

    return AutoFixResult(
        scale=adjusted,
        improvements=improvements,
        metrics=AutoFixMetrics(wcag_pairs, apca_pairs, total_pairs, chroma_adjustment, mode_changed),
    )


# ==========================================
# APCA auto-fix
# ==========================================

PRIORITY_ORDER = {"must": 3, "should": 2, "nice": 1}


class ApcaGoal(NamedTuple):
    min_lc: float
    background: str                     # hex
    priority: str = "must"
    name: str = ""


class LightnessAdjustment(NamedTuple):
    index: int
    before: float
    after: float


class ApcaFixResult(NamedTuple):
    scale: ScaleSpec
    lightness_steps: List[float]
    improvements: List[str]
    adjustments: List[LightnessAdjustment]
    targets_achieved: int
    targets_failed: int
    average_lc: float
    chroma_adjustment: float
    success: bool


class _StepSearch(NamedTuple):
    lightness: float
    lc: float
    success: bool


APCA_FIX_MIN_L = 0.05
APCA_FIX_MAX_L = 0.98
APCA_FIX_BRACKET = 0.005


def _background_oklch(bg_hex: str) -> Tuple[float, float, float]:
    if not normalize_hex(bg_hex):
        return (1.0, 0.0, 0.0)
    return conv.hex_to_oklch(bg_hex)


def _search_step_lightness(
    engine: ColorEngine,
    target_lc: float,
    hue: float,
    chroma: float,
    bg_hex: str,
    initial_l: float,
    tolerance: float,
) -> _StepSearch:
    bg = _background_oklch(bg_hex)
    low, high = APCA_FIX_MIN_L, APCA_FIX_MAX_L
    best_l, best_lc = initial_l, 0.0
    iterations = 0

    while iterations < c.SOLVER_MAX_ITERATIONS and high - low > APCA_FIX_BRACKET:
        mid = (low + high) / c.DIV_2
        probe = engine.generate(ColorRequest(mid, chroma, hue, target_background="white"))
        lc = apca_contrast(probe.oklch, bg)

        if abs(lc - target_lc) < abs(best_lc - target_lc):
            best_l, best_lc = mid, lc

        # too little contrast moves away from the background
        if (lc < target_lc) == (bg[0] > 0.5):
            high = mid
        else:
            low = mid
        iterations += 1

    return _StepSearch(best_l, best_lc, abs(best_lc - target_lc) <= tolerance)


def auto_fix_apca(
    scale: ScaleSpec,
    lightness_steps: Sequence[float],
    targets: Sequence[ApcaGoal],
    adjust_lightness: bool = True,
    adjust_chroma: bool = True,
    tolerance: float = c.OPACITY_APCA_TOLERANCE,
    preserve_endpoints: bool = True,
    engine: Optional[ColorEngine] = None,
) -> ApcaFixResult:
    """
    Move individual lightness steps so they meet the highest-priority APCA goal.

    Only changes of two or more lightness points that land within tolerance
    are kept. The endpoints 98 and 14 stay put when `preserve_endpoints`.
    """
    engine = engine or ColorEngine()
    improvements = []
    adjusted = scale
    steps = list(lightness_steps)
    adjustments = []
    chroma_adjustment = 0.0
    achieved = 0
    total_lc = 0.0

    ordered = sorted(targets, key=lambda t: PRIORITY_ORDER.get(t.priority, 0), reverse=True)

    if not isinstance(scale.contrast_mode, FixedLightness):
        adjusted = replace(adjusted, contrast_mode=FixedLightness())
        improvements.append("Switched to fixed-lightness mode for consistent contrast")

    if adjust_chroma and scale.chroma > 0.2:
        reduction = min(0.05, scale.chroma * 0.15)
        adjusted = replace(adjusted, chroma=scale.chroma - reduction)
        chroma_adjustment = -reduction
        improvements.append(f"Reduced chroma by {reduction:.4f} to improve APCA compliance")

    if adjust_lightness and ordered:
        primary = ordered[0]
        for i, step in enumerate(lightness_steps):
            if preserve_endpoints and step in (98, 14):
                continue
            found = _search_step_lightness(
                engine, primary.min_lc, adjusted.hue, adjusted.chroma,
                primary.background, step / c.PERCENT_TO_FACTOR, tolerance,
            )
            new_step = int(round(found.lightness * c.PERCENT_TO_FACTOR))
            if abs(new_step - step) >= 2 and found.success:
                adjustments.append(LightnessAdjustment(i, step, new_step))
                steps[i] = new_step
                total_lc += found.lc
                achieved += 1

        if adjustments:
            improvements.append(f"Adjusted {len(adjustments)} lightness values to meet APCA Lc {primary.min_lc:g}")

    if not adjusted.chroma_compensation:
        adjusted = replace(adjusted, chroma_compensation=True)
        improvements.append("Enabled hue-specific chroma compensation")

    failed = max(0, len(ordered) - achieved)
    success = failed == 0 or (bool(ordered) and achieved / len(ordered) >= 0.7)

    return ApcaFixResult(
        scale=adjusted,
        lightness_steps=steps,
        improvements=improvements,
        adjustments=adjustments,
        targets_achieved=achieved,
        targets_failed=failed,
        average_lc=total_lc / achieved if achieved else 0.0,
        chroma_adjustment=chroma_adjustment,
        success=success,
    )


APCA_FIX_PRESETS = {
    "body-text-white": (ApcaGoal(75.0, "#ffffff", "must", "Body Text"),),
    "body-text-black": (ApcaGoal(75.0, "#000000", "must", "Body Text"),),
    "large-text-white": (ApcaGoal(60.0, "#ffffff", "must", "Large Text"),),
}
