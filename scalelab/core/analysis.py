#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/analysis.py

import math
import re
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from scalelab.shared.logger import log
from . import config as c
from .contrast import apca_contrast, wcag_contrast
from .types import ColorResult, ContrastPair


# ==========================================
# Pairwise contrast
# ==========================================

def contrast_pairs(results: Sequence[ColorResult]) -> List[ContrastPair]:
    """APCA and WCAG contrast of every unordered pair in a scale (by index)."""
    pairs = []
    for i, first in enumerate(results):
        for j in range(i + 1, len(results)):
            second = results[j]
            pairs.append(ContrastPair(
                first=i,
                second=j,
                apca=apca_contrast(first.oklch, second.oklch),
                wcag=wcag_contrast(first.oklch, second.oklch),
            ))
    return pairs


# ==========================================
# Threshold checks
# ==========================================

class ContrastThreshold(NamedTuple):
    min_lc: float
    min_wcag: float
    use_apca: bool = True


CONTRAST_THRESHOLDS: Dict[str, ContrastThreshold] = {
    "body-text": ContrastThreshold(c.APCA_TARGETS["body_text"], c.WCAG_AA_NORMAL, True),
    "large-text": ContrastThreshold(c.APCA_TARGETS["large_text"], c.WCAG_AA_LARGE, True),
    "ui-elements": ContrastThreshold(c.APCA_TARGETS["ui_elements"], c.WCAG_UI_COMPONENT, True),
    "wcag-aa": ContrastThreshold(c.APCA_BRONZE, c.WCAG_AA_NORMAL, False),
    "wcag-aaa": ContrastThreshold(c.APCA_SILVER, c.WCAG_AAA_NORMAL, False),
}


class SwatchContrast(NamedTuple):
    step: int
    passes: bool
    apca: float
    wcag: float
    delta: float
    recommended: bool = False


class ScaleContrastSummary(NamedTuple):
    target_background: str
    contrast_mode: str
    passing: List[SwatchContrast]
    failing: List[SwatchContrast]
    recommended_step: Optional[int]
    compliance_rate: float


_REFERENCE_KEYS = {
    "white": "white",
    "canvas-bg": "white",
    "canvas-bg-lv1": "white",
    "canvas-bg-lv2": "gray",
    "canvas-bg (E)": "black",
    "canvas-bg-lv1 (E)": "black",
    "canvas-bg-lv2 (E)": "black",
    "black": "black",
    "gray": "gray",
}


def reference_key(background: str) -> str:
    """Map a background name onto the nearest of the black, white and gray references."""
    if background in _REFERENCE_KEYS:
        return _REFERENCE_KEYS[background]

    match = re.search(r"L(\d+)", background or "", re.IGNORECASE)
    if match:
        lightness = int(match.group(1))
        if lightness < 40:
            return "black"
        if lightness >= 85:
            return "white"
        return "gray"

    lowered = (background or "").lower()
    if any(word in lowered for word in ("dark", "black", "contrast")):
        return "black"
    if any(word in lowered for word in ("light", "canvas")):
        return "white"

    log("debug", f"unknown background '{background}', comparing against gray")
    return "gray"


def evaluate_swatch_contrast(result: ColorResult, target_bg: str, threshold: ContrastThreshold) -> SwatchContrast:
    step = int(round(result.lightness * c.PERCENT_TO_FACTOR))
    if result.contrast is None:
        missing = threshold.min_lc if threshold.use_apca else threshold.min_wcag
        return SwatchContrast(step, False, 0.0, 1.0, -missing)

    if result.specific_contrast is not None and result.target_background == target_bg:
        apca, wcag = result.specific_contrast
    else:
        key = reference_key(target_bg)
        apca = getattr(result.contrast.apca, f"on_{key}")
        wcag = getattr(result.contrast.wcag, f"on_{key}")

    if threshold.use_apca:
        delta = apca - threshold.min_lc
    else:
        delta = wcag - threshold.min_wcag
    return SwatchContrast(step, delta >= 0, apca, wcag, delta)


def analyze_scale_contrast(
    results: Sequence[ColorResult],
    target_bg: str = "white",
    threshold: ContrastThreshold = CONTRAST_THRESHOLDS["body-text"],
    contrast_mode: str = "standard",
) -> ScaleContrastSummary:
    """Split a scale into passing and failing swatches and recommend the mid-most passing step."""
    swatches = [evaluate_swatch_contrast(r, target_bg, threshold) for r in results]
    passing = [s for s in swatches if s.passes]

    recommended_step = None
    if passing:
        best = passing[0]
        for s in passing[1:]:
            if abs(s.step - 50) < abs(best.step - 50):
                best = s
        recommended_step = best.step
        swatches = [s._replace(recommended=True) if s is best else s for s in swatches]

    return ScaleContrastSummary(
        target_background=target_bg,
        contrast_mode=contrast_mode,
        passing=[s for s in swatches if s.passes],
        failing=[s for s in swatches if not s.passes],
        recommended_step=recommended_step,
        compliance_rate=len(passing) / len(results) if results else 0.0,
    )


# ==========================================
# Intended vs. generated
# ==========================================

class DeltaMetrics(NamedTuple):
    delta_l: float
    delta_c: float
    delta_h: float
    delta_e: float
    percent_error: float


class ColorComparison(NamedTuple):
    intended: Tuple[float, float, float]
    actual: Tuple[float, float, float]
    delta: DeltaMetrics


def hue_delta(h1: float, h2: float) -> float:
    """Signed shortest angle from h1 to h2, in (-180, 180]."""
    delta = math.fmod(h2 - h1, c.HUE_MAX)
    if delta > 180:
        delta -= c.HUE_MAX
    elif delta <= -180:
        delta += c.HUE_MAX
    return delta


def color_delta(intended: Tuple[float, float, float], actual: Tuple[float, float, float]) -> DeltaMetrics:
    """
    Coarse difference of two OKLCH colors with lightness in percent.

    deltaE weights chroma x100 and hue /3.6 so all three terms share the
    0-100 lightness scale. Not a CIE deltaE.
    """
    d_l = intended[0] - actual[0]
    d_c = intended[1] - actual[1]
    d_h = hue_delta(actual[2], intended[2])
    d_e = math.sqrt(d_l ** 2 + (d_c * 100) ** 2 + (d_h / 3.6) ** 2)
    percent_error = abs(d_l / intended[0]) * 100 if intended[0] > 0 else 0.0
    return DeltaMetrics(d_l, d_c, d_h, d_e, percent_error)


def compare_colors(intended: Tuple[float, float, float], actual: Tuple[float, float, float]) -> ColorComparison:
    return ColorComparison(intended, actual, color_delta(intended, actual))


def compare_result(intended: Tuple[float, float, float], result: ColorResult) -> ColorComparison:
    """Compare a requested (L 0-1, C, H) with what the engine produced."""
    pct = c.PERCENT_TO_FACTOR
    return compare_colors(
        (intended[0] * pct, intended[1], intended[2]),
        (result.lightness * pct, result.chroma, result.hue),
    )


def _quality(delta_e: float, percent_error: float = 0.0) -> str:
    if delta_e < 1 and percent_error < 1:
        return "excellent"
    if delta_e < 2 and percent_error < 2:
        return "good"
    if delta_e < 5 and percent_error < 5:
        return "fair"
    return "poor"


def assess_match_quality(delta: DeltaMetrics) -> str:
    """excellent / good / fair / poor from deltaE and lightness error."""
    return _quality(delta.delta_e, delta.percent_error)


class ScaleAccuracy(NamedTuple):
    average_delta_e: float
    max_delta_e: Optional[ColorComparison]
    average_lightness_delta: float
    max_lightness_delta: Optional[ColorComparison]
    overall_quality: str


def analyze_scale_accuracy(comparisons: Sequence[ColorComparison]) -> ScaleAccuracy:
    if not comparisons:
        return ScaleAccuracy(0.0, None, 0.0, None, "excellent")

    avg_e = sum(cmp.delta.delta_e for cmp in comparisons) / len(comparisons)
    avg_l = sum(abs(cmp.delta.delta_l) for cmp in comparisons) / len(comparisons)
    return ScaleAccuracy(
        average_delta_e=avg_e,
        max_delta_e=max(comparisons, key=lambda cmp: cmp.delta.delta_e),
        average_lightness_delta=avg_l,
        max_lightness_delta=max(comparisons, key=lambda cmp: abs(cmp.delta.delta_l)),
        overall_quality=_quality(avg_e),
    )
