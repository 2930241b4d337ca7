#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/contrast.py

import math
from typing import Dict, Tuple

from . import config as c
from . import conversions as conv
from .luminance import apca_luminance, relative_luminance
from .types import ContrastReport, ContrastValues, ReferenceContrast

Oklch = Tuple[float, float, float]


def _srgb_clipped(color: Oklch) -> Tuple[float, float, float]:
    return conv.clip_rgb(*conv.oklch_to_srgb(*color))


def wcag_ratio_from_luminance(y1: float, y2: float) -> float:
    """
    WCAG 2.x contrast ratio of two relative luminances, in [1, 21].

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    lighter, darker = (y1, y2) if y1 > y2 else (y2, y1)
    return (lighter + c.WCAG_LUMINANCE_OFFSET) / (darker + c.WCAG_LUMINANCE_OFFSET)


def wcag_contrast(fg: Oklch, bg: Oklch) -> float:
    """WCAG ratio of two OKLCH colors, measured on their clipped sRGB."""
    return wcag_ratio_from_luminance(
        relative_luminance(*_srgb_clipped(fg)),
        relative_luminance(*_srgb_clipped(bg)),
    )


def _soft_clamp_black(y: float) -> float:
    if y > c.APCA_BLK_THRS:
        return y
    return y + (c.APCA_BLK_THRS - y) ** c.APCA_BLK_CLMP


def apca_from_luminance(txt_y: float, bg_y: float) -> float:
    """
    APCA lightness contrast (Lc) from text and background luminance.

    Positive for dark text on a light background, negative for light text
    on a dark background. Source: APCA-W3 0.0.98G-4g.
    """
    if not (math.isfinite(txt_y) and math.isfinite(bg_y)):
        return 0.0
    if min(txt_y, bg_y) < 0 or max(txt_y, bg_y) > c.APCA_Y_MAX:
        return 0.0

    txt_y = _soft_clamp_black(txt_y)
    bg_y = _soft_clamp_black(bg_y)

    if abs(bg_y - txt_y) < c.APCA_DELTA_Y_MIN:
        return 0.0

    if bg_y > txt_y:
        sapc = (bg_y ** c.APCA_NORM_BG - txt_y ** c.APCA_NORM_TXT) * c.APCA_SCALE_BOW
        output = 0.0 if sapc < c.APCA_LO_CON_THRESH else sapc - c.APCA_LO_CON_OFFSET
    else:
        sapc = (bg_y ** c.APCA_REV_BG - txt_y ** c.APCA_REV_TXT) * c.APCA_SCALE_WOB
        output = 0.0 if sapc > -c.APCA_LO_CON_THRESH else sapc + c.APCA_LO_CON_OFFSET

    return output * 100.0


def apca_contrast_with_polarity(fg: Oklch, bg: Oklch) -> float:
    """Signed Lc of text `fg` on background `bg`."""
    return apca_from_luminance(
        apca_luminance(*_srgb_clipped(fg)),
        apca_luminance(*_srgb_clipped(bg)),
    )


def apca_contrast(fg: Oklch, bg: Oklch) -> float:
    return abs(apca_contrast_with_polarity(fg, bg))


def contrast_values(fg: Oklch, bg: Oklch) -> ContrastValues:
    return ContrastValues(apca=apca_contrast(fg, bg), wcag=wcag_contrast(fg, bg))


def contrast_from_luminance(fg_y: float, bg_y: float) -> ContrastValues:
    """Both metrics from precomputed luminances (compositor path)."""
    return ContrastValues(
        apca=abs(apca_from_luminance(fg_y, bg_y)),
        wcag=wcag_ratio_from_luminance(fg_y, bg_y),
    )


REFERENCE_BACKGROUNDS = {
    "black": (c.REFERENCE_BLACK_L, 0.0, 0.0),
    "white": (c.REFERENCE_WHITE_L, 0.0, 0.0),
    "gray": (c.REFERENCE_GRAY_L, 0.0, 0.0),
}


def validate_contrast(color: Oklch) -> ContrastReport:
    """APCA and WCAG contrast of `color` against the black, white and gray references."""
    black = REFERENCE_BACKGROUNDS["black"]
    white = REFERENCE_BACKGROUNDS["white"]
    gray = REFERENCE_BACKGROUNDS["gray"]

    apca = ReferenceContrast(
        on_black=apca_contrast(color, black),
        on_white=apca_contrast(color, white),
        on_gray=apca_contrast(color, gray),
    )
    wcag = ReferenceContrast(
        on_black=wcag_contrast(color, black),
        on_white=wcag_contrast(color, white),
        on_gray=wcag_contrast(color, gray),
    )
    best = max(wcag)
    return ContrastReport(
        apca=apca,
        wcag=wcag,
        meets_aa=best >= c.WCAG_AA_NORMAL,
        meets_aaa=best >= c.WCAG_AAA_NORMAL,
    )


def meets_wcag_aa(ratio: float, large_text: bool = False) -> bool:
    return ratio >= (c.WCAG_AA_LARGE if large_text else c.WCAG_AA_NORMAL)


def meets_wcag_aaa(ratio: float, large_text: bool = False) -> bool:
    return ratio >= (c.WCAG_AAA_LARGE if large_text else c.WCAG_AAA_NORMAL)


def wcag_levels(ratio: float) -> Dict[str, str]:
    return {
        "AA-Large": "Pass" if ratio >= c.WCAG_AA_LARGE else "Fail",
        "AA": "Pass" if ratio >= c.WCAG_AA_NORMAL else "Fail",
        "AAA-Large": "Pass" if ratio >= c.WCAG_AAA_LARGE else "Fail",
        "AAA": "Pass" if ratio >= c.WCAG_AAA_NORMAL else "Fail",
    }


def apca_compliance(lc: float) -> str:
    """APCA conformance bucket for an Lc magnitude."""
    lc = abs(lc)
    if lc >= c.APCA_GOLD:
        return "gold"
    if lc >= c.APCA_SILVER:
        return "silver"
    if lc >= c.APCA_BRONZE:
        return "bronze"
    return "fail"
