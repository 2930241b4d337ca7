#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/solvers.py

from typing import Callable, Tuple

from scalelab.shared.logger import log
from . import config as c
from . import conversions as conv
from .contrast import apca_contrast, wcag_ratio_from_luminance
from .gamut import clamp_fixed_lightness
from .luminance import relative_luminance
from .types import SolveResult

Oklch = Tuple[float, float, float]


# ==========================================
# Background lookup
# ==========================================

def preset_lightness(name: str) -> float:
    """OKLCH lightness (0-1) of a background preset; unknown names are white."""
    preset = c.BACKGROUND_PRESETS.get(name)
    if preset is None:
        return c.FALLBACK_BACKGROUND_L
    return preset[1] / c.PERCENT_TO_FACTOR


def background_lightness(name: str) -> float:
    """Keyword backgrounds (black, white, gray) first, then the preset table."""
    key = str(name).strip().lower() if name is not None else ""
    if key in c.KEYWORD_BACKGROUNDS:
        return c.KEYWORD_BACKGROUNDS[key]
    return preset_lightness(name)


def is_known_background(name: str) -> bool:
    key = str(name).strip().lower() if name is not None else ""
    return key in c.KEYWORD_BACKGROUNDS or name in c.BACKGROUND_PRESETS


# ==========================================
# Shared bisection
# ==========================================

def _bisect_lightness(
    metric: Callable[[Oklch], float],
    target: float,
    tolerance: float,
    rises_with_lightness: bool,
    hue: float,
    chroma: float,
    gamut: str,
    label: str,
) -> SolveResult:
    low, high = c.SOLVER_MIN_L, c.SOLVER_MAX_L
    iterations = 0

    while high - low > c.SOLVER_MIN_BRACKET and iterations < c.SOLVER_MAX_ITERATIONS:
        mid = (low + high) / c.DIV_2
        value = metric(clamp_fixed_lightness(mid, chroma, hue, gamut))
        iterations += 1

        if abs(value - target) < tolerance:
            return SolveResult(mid, True, iterations)

        if (value < target) == rises_with_lightness:
            low = mid
        else:
            high = mid

    mid = (low + high) / c.DIV_2
    converged = abs(metric(clamp_fixed_lightness(mid, chroma, hue, gamut)) - target) < tolerance
    if not converged:
        log("debug", f"{label} solver stopped after {iterations} iterations without reaching {target}; using L={mid:.4f}")
    return SolveResult(mid, converged, iterations)


# ==========================================
# APCA
# ==========================================

def find_lightness_for_apca_detailed(
    target_lc: float,
    hue: float,
    chroma: float,
    background: str = "white",
    tolerance: float = c.APCA_TOLERANCE,
    gamut: str = c.DEFAULT_GAMUT,
) -> SolveResult:
    bg_l = background_lightness(background)
    bg = (bg_l, 0.0, 0.0)
    # light text on a dark background gains contrast as it gets lighter
    return _bisect_lightness(
        lambda color: apca_contrast(color, bg),
        target_lc, tolerance, bg_l < c.LIGHT_BACKGROUND_L,
        hue, chroma, gamut, "apca",
    )


def find_lightness_for_apca(
    target_lc: float,
    hue: float,
    chroma: float,
    background: str = "white",
    tolerance: float = c.APCA_TOLERANCE,
    gamut: str = c.DEFAULT_GAMUT,
) -> float:
    """Lightness whose fixed-lightness clamp hits `target_lc` against `background` (best effort)."""
    return find_lightness_for_apca_detailed(target_lc, hue, chroma, background, tolerance, gamut).value


# ==========================================
# Luminance
# ==========================================

def _luminance_of(color: Oklch) -> float:
    return relative_luminance(*conv.clip_rgb(*conv.oklch_to_srgb(*color)))


def find_lightness_for_luminance_detailed(
    target_y: float,
    hue: float,
    chroma: float,
    tolerance: float = c.LUMINANCE_TOLERANCE,
    gamut: str = c.DEFAULT_GAMUT,
) -> SolveResult:
    return _bisect_lightness(_luminance_of, target_y, tolerance, True, hue, chroma, gamut, "luminance")


def find_lightness_for_luminance(
    target_y: float,
    hue: float,
    chroma: float,
    tolerance: float = c.LUMINANCE_TOLERANCE,
    gamut: str = c.DEFAULT_GAMUT,
) -> float:
    """Lightness whose relative luminance matches `target_y` (best effort)."""
    return find_lightness_for_luminance_detailed(target_y, hue, chroma, tolerance, gamut).value


# ==========================================
# WCAG
# ==========================================

def find_lightness_for_wcag_detailed(
    target_ratio: float,
    hue: float,
    chroma: float,
    background: str = c.DEFAULT_BACKGROUND,
    tolerance: float = c.WCAG_TOLERANCE,
    gamut: str = c.DEFAULT_GAMUT,
) -> SolveResult:
    # Background luminance always comes from the preset table, never a live hex.
    bg_y = _luminance_of((preset_lightness(background), 0.0, 0.0))
    dark_background = bg_y <= 0.5
    return _bisect_lightness(
        lambda color: wcag_ratio_from_luminance(_luminance_of(color), bg_y),
        target_ratio, tolerance, dark_background,
        hue, chroma, gamut, "wcag",
    )


def find_lightness_for_wcag(
    target_ratio: float,
    hue: float,
    chroma: float,
    background: str = c.DEFAULT_BACKGROUND,
    tolerance: float = c.WCAG_TOLERANCE,
    gamut: str = c.DEFAULT_GAMUT,
) -> float:
    """Lightness whose WCAG ratio against the preset `background` hits `target_ratio` (best effort)."""
    return find_lightness_for_wcag_detailed(target_ratio, hue, chroma, background, tolerance, gamut).value
