#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/luminance.py

from scalelab.shared.clamping import _clamp01
from . import config as c


def _wcag_to_linear(v: float) -> float:
    v = _clamp01(v)
    if v <= c.WCAG_TO_LINEAR_TH:
        return v / c.SRGB_SLOPE
    return ((v + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def relative_luminance(r: float, g: float, b: float) -> float:
    """
    WCAG 2.x relative luminance of a gamma sRGB color with channels in 0-1.

    Source: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
    """
    return (
        c.LUMA_R * _wcag_to_linear(r) +
        c.LUMA_G * _wcag_to_linear(g) +
        c.LUMA_B * _wcag_to_linear(b)
    )


def apca_luminance(r: float, g: float, b: float) -> float:
    """Screen luminance estimate used by APCA (simple 2.4 exponent)."""
    return (
        c.APCA_R_CO * _clamp01(r) ** c.APCA_MAIN_TRC +
        c.APCA_G_CO * _clamp01(g) ** c.APCA_MAIN_TRC +
        c.APCA_B_CO * _clamp01(b) ** c.APCA_MAIN_TRC
    )


def luminance_to_lightness(y: float) -> float:
    """CIE L* (0-100) from relative luminance."""
    if y > c.LAB_E:
        return c.LAB_L_MULT * y ** c.CUBE_ROOT_EXP - c.LAB_L_SUB
    return c.LAB_KAPPA * y


def lightness_to_luminance(lstar: float) -> float:
    """Relative luminance from CIE L* (0-100)."""
    if lstar <= c.LAB_L_THR:
        return lstar / c.LAB_KAPPA
    return ((lstar + c.LAB_L_SUB) / c.LAB_L_MULT) ** 3
