#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/conversions.py

import functools
import math
from typing import Tuple

from . import config as c
from scalelab.shared.clamping import _clamp01
from scalelab.shared.sanitizer import normalize_hex


def _mat3(m, x: float, y: float, z: float) -> Tuple[float, float, float]:
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


def normalize_hue(h: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    h = math.fmod(h, c.HUE_MAX)
    if h < 0:
        h += c.HUE_MAX
    # fmod(-1e-17) + 360 rounds to 360.0
    return 0.0 if h >= c.HUE_MAX else h


# ==========================================
# sRGB Transfer Functions
# ==========================================

def srgb_to_linear(v: float) -> float:
    """Decode one gamma sRGB channel, clamped into [0, 1]."""
    v = _clamp01(v)
    if v <= c.SRGB_TO_LINEAR_TH:
        return v / c.SRGB_SLOPE
    return ((v + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def linear_to_srgb(v: float) -> float:
    """Encode one linear channel to gamma sRGB, clamped into [0, 1]."""
    v = _clamp01(v)
    if v <= c.LINEAR_TO_SRGB_TH:
        return v * c.SRGB_SLOPE
    return c.SRGB_DIVISOR * (v ** (1.0 / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def srgb_to_linear_unclamped(v: float) -> float:
    """Sign-preserving decode; values outside [0, 1] pass through the curve."""
    a = abs(v)
    if a <= c.SRGB_TO_LINEAR_TH:
        return v / c.SRGB_SLOPE
    return math.copysign(((a + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA, v)


def linear_to_srgb_unclamped(v: float) -> float:
    """Sign-preserving encode used by the gamut tests."""
    a = abs(v)
    if a <= c.LINEAR_TO_SRGB_TH:
        return v * c.SRGB_SLOPE
    return math.copysign(c.SRGB_DIVISOR * (a ** (1.0 / c.SRGB_GAMMA)) - c.SRGB_OFFSET, v)


# ==========================================
# OKLab / OKLCH
# ==========================================

def oklch_to_oklab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert OKLCH to OKLab."""
    h_rad = math.radians(hue)
    return (L, chroma * math.cos(h_rad), chroma * math.sin(h_rad))


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to OKLCH."""
    chroma = math.hypot(a, b)
    hue = normalize_hue(math.degrees(math.atan2(b, a)))
    return (L, chroma, hue)


def oklab_to_linear_srgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to linear sRGB (unclamped)."""
    l_, m_, s_ = _mat3(c.M_OKLAB_TO_LMS, L, a, b)
    return _mat3(c.M_LMS_TO_LRGB, l_ ** 3, m_ ** 3, s_ ** 3)


def linear_srgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert linear sRGB to OKLab."""
    l, m, s = _mat3(c.M_LRGB_TO_LMS, r, g, b)
    l_ = math.copysign(abs(l) ** c.CUBE_ROOT_EXP, l)
    m_ = math.copysign(abs(m) ** c.CUBE_ROOT_EXP, m)
    s_ = math.copysign(abs(s) ** c.CUBE_ROOT_EXP, s)
    return _mat3(c.M_LMS_TO_OKLAB, l_, m_, s_)


def oklch_to_linear_srgb(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    return oklab_to_linear_srgb(*oklch_to_oklab(L, chroma, hue))


def oklch_to_srgb(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """OKLCH to gamma sRGB in 0-1, unclamped."""
    r, g, b = oklch_to_linear_srgb(L, chroma, hue)
    return (
        linear_to_srgb_unclamped(r),
        linear_to_srgb_unclamped(g),
        linear_to_srgb_unclamped(b),
    )


def srgb_to_oklch(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Gamma sRGB in 0-1 to OKLCH."""
    lin = (
        srgb_to_linear_unclamped(r),
        srgb_to_linear_unclamped(g),
        srgb_to_linear_unclamped(b),
    )
    return oklab_to_oklch(*linear_srgb_to_oklab(*lin))


def linear_srgb_to_linear_p3(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return _mat3(c.M_LRGB_TO_LP3, r, g, b)


def oklch_to_p3(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """OKLCH to gamma-encoded Display P3 in 0-1, unclamped."""
    r, g, b = linear_srgb_to_linear_p3(*oklch_to_linear_srgb(L, chroma, hue))
    # Display P3 shares the sRGB transfer curve
    return (
        linear_to_srgb_unclamped(r),
        linear_to_srgb_unclamped(g),
        linear_to_srgb_unclamped(b),
    )


def p3_to_oklch(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Gamma Display P3 in 0-1 to OKLCH."""
    lin = _mat3(
        c.M_LP3_TO_LRGB,
        srgb_to_linear_unclamped(r),
        srgb_to_linear_unclamped(g),
        srgb_to_linear_unclamped(b),
    )
    return oklab_to_oklch(*linear_srgb_to_oklab(*lin))


def oklch_to_gamut_rgb(L: float, chroma: float, hue: float, gamut: str = c.DEFAULT_GAMUT) -> Tuple[float, float, float]:
    """Gamma RGB of the OKLCH color in the requested gamut's own space."""
    if gamut == c.GAMUT_P3:
        return oklch_to_p3(L, chroma, hue)
    if gamut == c.GAMUT_SRGB:
        return oklch_to_srgb(L, chroma, hue)
    raise ValueError(f"unknown gamut: '{gamut}'")


def gamut_rgb_to_oklch(r: float, g: float, b: float, gamut: str = c.DEFAULT_GAMUT) -> Tuple[float, float, float]:
    """Inverse of oklch_to_gamut_rgb."""
    if gamut == c.GAMUT_P3:
        return p3_to_oklch(r, g, b)
    if gamut == c.GAMUT_SRGB:
        return srgb_to_oklch(r, g, b)
    raise ValueError(f"unknown gamut: '{gamut}'")


# ==========================================
# Hex / HSL
# ==========================================

def clip_rgb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return (_clamp01(r), _clamp01(g), _clamp01(b))


def hex_to_srgb(hex_code: str) -> Tuple[float, float, float]:
    """Convert hex string to gamma sRGB floats. Unparsable input is black."""
    h = normalize_hex(hex_code)
    if not h:
        return (0.0, 0.0, 0.0)
    return tuple(int(h[i : i + 2], 16) / c.RGB_MAX for i in (1, 3, 5))


def srgb_to_hex(r: float, g: float, b: float) -> str:
    """Clip, round to 8 bits and format as '#rrggbb'."""
    r_i, g_i, b_i = (int(round(_clamp01(v) * c.RGB_MAX)) for v in (r, g, b))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


def oklch_to_hex(L: float, chroma: float, hue: float) -> str:
    """Direct OKLCH to Hex (sRGB clipped)."""
    return srgb_to_hex(*oklch_to_srgb(L, chroma, hue))


def hex_to_oklch(hex_code: str) -> Tuple[float, float, float]:
    """Direct Hex to OKLCH."""
    return srgb_to_oklch(*hex_to_srgb(hex_code))


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert gamma sRGB in 0-1 to HSL."""
    r_f, g_f, b_f = _clamp01(r), _clamp01(g), _clamp01(b)
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
        s = 0.0 if abs(denom) < c.EPS else delta / denom
        if cmax == r_f:
            h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
        elif cmax == g_f:
            h = c.HUE_SECTOR * ((b_f - r_f) / delta + c.DIV_2)
        else:
            h = c.HUE_SECTOR * ((r_f - g_f) / delta + 4.0)
        h = (h + c.HUE_MAX) % c.HUE_MAX
    return (h, s, L)


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__ and not _name.startswith("_"):
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
