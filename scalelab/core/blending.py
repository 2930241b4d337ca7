#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/blending.py

"""
Opacity compositing of an OKLCH foreground over a solid hex background.

Two models are offered. `srgb` blends gamma-encoded channels the way CSS
and most design tools do. `linear` linearizes both colors first, which is
physically correct and makes the mid-opacity transition visibly faster.
"""

import math
from typing import List, NamedTuple, Optional, Sequence, Tuple

from scalelab.shared.clamping import _is_finite_number
from scalelab.shared.logger import log
from . import config as c
from . import conversions as conv
from .contrast import apca_from_luminance, wcag_ratio_from_luminance
from .gamut import clamp_perceptual
from .luminance import luminance_to_lightness
from .lut import default_lut
from .types import BlendResult, ContrastValues

RGB = Tuple[float, float, float]

_BLACK_RESULT = BlendResult(rgb=(0.0, 0.0, 0.0), hex="#000000", luminance=0.0, lightness=0.0)


def _check_blend_mode(blend_mode: str) -> None:
    if blend_mode not in c.BLEND_MODES:
        raise ValueError(f"unknown blend mode: '{blend_mode}' (expected one of {', '.join(c.BLEND_MODES)})")


def _to_linear(v: float, use_lut: bool) -> float:
    if use_lut:
        return default_lut().srgb_to_linear(v)
    return conv.srgb_to_linear(v)


def _to_gamma(v: float, use_lut: bool) -> float:
    if use_lut:
        return default_lut().linear_to_srgb(v)
    return conv.linear_to_srgb(v)


def oklch_to_srgb_for_blend(l_pct: float, chroma: float, hue: float) -> RGB:
    """Gamma sRGB of a P3-clamped OKLCH color; lightness in percent. Invalid input is black."""
    if not all(_is_finite_number(v) for v in (l_pct, chroma, hue)):
        return (0.0, 0.0, 0.0)
    l, cc, h = clamp_perceptual(l_pct / c.PERCENT_TO_FACTOR, chroma, hue, c.GAMUT_P3)
    return conv.oklch_to_srgb(l, cc, h)


def mix_srgb(fg: RGB, bg: RGB, alpha: float) -> RGB:
    return tuple(f * alpha + b * (1 - alpha) for f, b in zip(fg, bg))


def mix_linear_rgb(fg: RGB, bg: RGB, alpha: float, use_lut: bool = c.USE_LUT_GAMMA) -> RGB:
    return tuple(
        _to_gamma(_to_linear(f, use_lut) * alpha + _to_linear(b, use_lut) * (1 - alpha), use_lut)
        for f, b in zip(fg, bg)
    )


def blend_luminance(rgb: RGB, use_lut: bool = c.USE_LUT_GAMMA) -> float:
    """Relative luminance with the IEC 0.04045 linearization."""
    r, g, b = (_to_linear(v, use_lut) for v in rgb)
    return c.LUMA_R * r + c.LUMA_G * g + c.LUMA_B * b


def blend_oklch_on_background(
    l_pct: float,
    chroma: float,
    hue: float,
    opacity_pct: float,
    bg_hex: str,
    blend_mode: str = c.DEFAULT_BLEND_MODE,
    use_lut: bool = c.USE_LUT_GAMMA,
) -> BlendResult:
    """
    Composite the color at `opacity_pct` over `bg_hex`.

    Over black or white the result moves monotonically with opacity. Over mid
    grays and chromatic backgrounds the srgb (gamma) blend can overshoot, so
    lightness is not guaranteed to be monotonic there.
    """
    _check_blend_mode(blend_mode)
    if not all(_is_finite_number(v) for v in (l_pct, chroma, hue, opacity_pct)):
        log("warning", f"invalid color values for blending: l={l_pct}, c={chroma}, h={hue}, opacity={opacity_pct}")
        return _BLACK_RESULT

    fg = oklch_to_srgb_for_blend(l_pct, chroma, hue)
    bg = conv.hex_to_srgb(bg_hex)
    alpha = opacity_pct / c.OPACITY_MAX

    if blend_mode == c.BLEND_LINEAR:
        blended = mix_linear_rgb(fg, bg, alpha, use_lut)
    else:
        blended = mix_srgb(fg, bg, alpha)

    luminance = blend_luminance(blended, use_lut)
    return BlendResult(
        rgb=blended,
        hex=conv.srgb_to_hex(*blended),
        luminance=luminance,
        lightness=luminance_to_lightness(luminance),
    )


def contrast_with_opacity(
    l_pct: float,
    chroma: float,
    hue: float,
    opacity_pct: float,
    bg_hex: str,
    blend_mode: str = c.DEFAULT_BLEND_MODE,
    use_lut: bool = c.USE_LUT_GAMMA,
) -> ContrastValues:
    """APCA and WCAG contrast of the composited color against its own background."""
    result = blend_oklch_on_background(l_pct, chroma, hue, opacity_pct, bg_hex, blend_mode, use_lut)
    bg_y = blend_luminance(conv.hex_to_srgb(bg_hex), use_lut)
    return ContrastValues(
        apca=abs(apca_from_luminance(result.luminance, bg_y)),
        wcag=wcag_ratio_from_luminance(result.luminance, bg_y),
    )


def _min_opacity(metric, target: float, tolerance: float) -> Optional[int]:
    if metric(c.OPACITY_MAX) < target - tolerance:
        return None

    low, high = c.OPACITY_MIN, c.OPACITY_MAX
    best = c.OPACITY_MAX
    while high - low > c.OPACITY_MIN_BRACKET:
        mid = (low + high) / c.DIV_2
        if metric(mid) >= target - tolerance:
            best = mid
            high = mid
        else:
            low = mid
    return int(math.ceil(best))


def min_opacity_for_wcag(
    l_pct: float,
    chroma: float,
    hue: float,
    bg_hex: str,
    target_ratio: float,
    tolerance: float = c.OPACITY_WCAG_TOLERANCE,
    blend_mode: str = c.DEFAULT_BLEND_MODE,
    use_lut: bool = c.USE_LUT_GAMMA,
) -> Optional[int]:
    """
    Smallest whole opacity percent reaching `target_ratio`, or None when even
    full opacity falls short.
    """
    return _min_opacity(
        lambda op: contrast_with_opacity(l_pct, chroma, hue, op, bg_hex, blend_mode, use_lut).wcag,
        target_ratio, tolerance,
    )


def min_opacity_for_apca(
    l_pct: float,
    chroma: float,
    hue: float,
    bg_hex: str,
    target_lc: float,
    tolerance: float = c.OPACITY_APCA_TOLERANCE,
    blend_mode: str = c.DEFAULT_BLEND_MODE,
    use_lut: bool = c.USE_LUT_GAMMA,
) -> Optional[int]:
    """APCA counterpart of min_opacity_for_wcag."""
    return _min_opacity(
        lambda op: contrast_with_opacity(l_pct, chroma, hue, op, bg_hex, blend_mode, use_lut).apca,
        target_lc, tolerance,
    )


def generate_blend_matrix(
    hue: float,
    chroma: float,
    lightness_steps: Sequence[float],
    opacity_steps: Sequence[float],
    bg_hex: str,
    blend_mode: str = c.DEFAULT_BLEND_MODE,
    use_lut: bool = c.USE_LUT_GAMMA,
) -> List[List[BlendResult]]:
    """One row per lightness step, one column per opacity step."""
    return [
        [blend_oklch_on_background(l_pct, chroma, hue, op, bg_hex, blend_mode, use_lut) for op in opacity_steps]
        for l_pct in lightness_steps
    ]


class OpacityMatch(NamedTuple):
    opacity: float
    delta: float
    result: BlendResult


def find_closest_opacity(
    target_lightness: float,
    l_pct: float,
    chroma: float,
    hue: float,
    opacity_steps: Sequence[float],
    bg_hex: str,
    blend_mode: str = c.DEFAULT_BLEND_MODE,
) -> OpacityMatch:
    """Opacity step whose composited CIE L* lands closest to `target_lightness`."""
    best = OpacityMatch(
        c.OPACITY_MAX, math.inf,
        blend_oklch_on_background(l_pct, chroma, hue, c.OPACITY_MAX, bg_hex, blend_mode),
    )
    for opacity in opacity_steps:
        result = blend_oklch_on_background(l_pct, chroma, hue, opacity, bg_hex, blend_mode)
        delta = abs(result.lightness - target_lightness)
        if delta < best.delta:
            best = OpacityMatch(opacity, delta, result)
    return best
