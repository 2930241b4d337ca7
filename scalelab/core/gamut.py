#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/gamut.py

import functools
import math
from typing import Optional, Tuple

from . import config as c
from . import conversions as conv


def _check_gamut(gamut: str) -> None:
    if gamut not in c.GAMUTS:
        raise ValueError(f"unknown gamut: '{gamut}' (expected one of {', '.join(c.GAMUTS)})")


def in_gamut(l: float, chroma: float, hue: float, gamut: str = c.DEFAULT_GAMUT, epsilon: Optional[float] = None) -> bool:
    """True when every channel of the gamut's gamma RGB lies in [0 - eps, 1 + eps]."""
    _check_gamut(gamut)
    eps = c.GAMUT_EPSILON[gamut] if epsilon is None else epsilon
    rgb = conv.oklch_to_gamut_rgb(l, chroma, hue, gamut)
    return all(math.isfinite(v) and -eps <= v <= c.UNIT + eps for v in rgb)


def delta_eok(first: Tuple[float, float, float], second: Tuple[float, float, float]) -> float:
    """Euclidean distance of two OKLCH colors in OKLab."""
    l1, a1, b1 = conv.oklch_to_oklab(*first)
    l2, a2, b2 = conv.oklch_to_oklab(*second)
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def _clip_to_gamut(l: float, chroma: float, hue: float, gamut: str) -> Tuple[float, float, float]:
    r, g, b = conv.clip_rgb(*conv.oklch_to_gamut_rgb(l, chroma, hue, gamut))
    cl, cc, ch = conv.gamut_rgb_to_oklch(r, g, b, gamut)
    if cc < c.GAMUT_CHROMA_RESOLUTION:
        ch = hue
    return (cl, cc, ch)


@functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)
def clamp_fixed_lightness(l: float, chroma: float, hue: float, gamut: str = c.DEFAULT_GAMUT) -> Tuple[float, float, float]:
    """
    Reduce chroma in fixed 0.0005 steps until the color fits the gamut.

    Lightness and hue are never touched, so contrast decided by lightness
    survives the mapping. Falls back to the achromatic color.
    """
    _check_gamut(gamut)
    chroma = max(0.0, chroma)
    if in_gamut(l, chroma, hue, gamut):
        return (l, chroma, hue)

    step = 1
    candidate = chroma - c.CHROMA_STEP
    while candidate >= 0:
        if in_gamut(l, candidate, hue, gamut):
            return (l, candidate, hue)
        step += 1
        candidate = chroma - step * c.CHROMA_STEP
    return (l, 0.0, hue)


@functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)
def clamp_perceptual(l: float, chroma: float, hue: float, gamut: str = c.DEFAULT_GAMUT) -> Tuple[float, float, float]:
    """
    Free-lightness gamut mapping (CSS Color 4).

    Bisects chroma while the channel-clipped candidate stays within one JND
    of the unclipped one, then returns the clipped color; lightness may move.
    """
    _check_gamut(gamut)
    if not all(math.isfinite(v) for v in (l, chroma, hue)):
        return (l, chroma, hue)
    if in_gamut(l, chroma, hue, gamut):
        return (l, chroma, hue)
    if l >= c.UNIT:
        return (c.UNIT, 0.0, hue)
    if l <= 0:
        return (0.0, 0.0, hue)

    clipped = _clip_to_gamut(l, chroma, hue, gamut)
    if delta_eok(clipped, (l, chroma, hue)) < c.GAMUT_JND:
        return _finite_or(clipped, (l, chroma, hue))

    low, high = 0.0, chroma
    low_in_gamut = True
    accepted = None
    while high - low > c.GAMUT_CHROMA_RESOLUTION:
        mid = (low + high) / c.DIV_2
        current = (l, mid, hue)
        if low_in_gamut and in_gamut(l, mid, hue, gamut):
            low = mid
            continue
        clipped = _clip_to_gamut(l, mid, hue, gamut)
        error = delta_eok(clipped, current)
        if error < c.GAMUT_JND:
            accepted = clipped
            if c.GAMUT_JND - error < c.GAMUT_CHROMA_RESOLUTION:
                break
            low_in_gamut = False
            low = mid
        else:
            high = mid

    if accepted is None:
        # every probe below `low` was already in gamut
        accepted = (l, low, hue)
    return _finite_or(accepted, (l, chroma, hue))


def _finite_or(color: Tuple[float, float, float], fallback: Tuple[float, float, float]) -> Tuple[float, float, float]:
    if all(math.isfinite(v) for v in color):
        return color
    return fallback


def clamp_srgb_perceptual(l: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Keep a color that is already sRGB-safe, otherwise clamp it into sRGB at fixed lightness."""
    if in_gamut(l, chroma, hue, c.GAMUT_SRGB):
        return (l, chroma, hue)
    return clamp_fixed_lightness(l, chroma, hue, c.GAMUT_SRGB)
