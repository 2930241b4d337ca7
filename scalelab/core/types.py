#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/types.py

import math
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple, Union

from . import config as c
from .conversions import normalize_hue
from .curves import Curve, LINEAR


# ==========================================
# Contrast modes
# ==========================================

@dataclass(frozen=True)
class Standard:
    """Free-lightness gamut mapping; perceptual accuracy over fixed contrast."""
    name = "standard"


@dataclass(frozen=True)
class FixedLightness:
    """Chroma-only gamut mapping so lightness (and contrast) is preserved."""
    name = "fixed-lightness"


@dataclass(frozen=True)
class LuminanceMatched:
    """Match the relative luminance of the achromatic color at the same L."""
    name = "luminance-matched"


@dataclass(frozen=True)
class ApcaTarget:
    lc: float = c.DEFAULT_TARGET_LC
    name = "apca-target"

    def __post_init__(self):
        if not (isinstance(self.lc, (int, float)) and math.isfinite(self.lc) and self.lc > 0):
            raise ValueError(f"APCA target must be a positive number, got {self.lc!r}")


@dataclass(frozen=True)
class WcagTarget:
    ratio: float = c.DEFAULT_TARGET_RATIO
    name = "wcag-target"

    def __post_init__(self):
        if not (isinstance(self.ratio, (int, float)) and math.isfinite(self.ratio) and self.ratio > 0):
            raise ValueError(f"WCAG target must be a positive number, got {self.ratio!r}")


ContrastMode = Union[Standard, FixedLightness, LuminanceMatched, ApcaTarget, WcagTarget]

_MODE_ALIASES = {
    "standard": "standard",
    "fixed-lightness": "fixed-lightness",
    "apca-fixed": "fixed-lightness",
    "luminance-matched": "luminance-matched",
    "apca-target": "apca-target",
    "wcag-target": "wcag-target",
}


def contrast_mode_from_name(
    name: str,
    target_lc: float = c.DEFAULT_TARGET_LC,
    target_ratio: float = c.DEFAULT_TARGET_RATIO,
) -> ContrastMode:
    """Parse a mode name; target values only matter for the target modes."""
    key = _MODE_ALIASES.get(str(name).strip().lower())
    if key is None:
        raise ValueError(f"unknown contrast mode: '{name}'")
    if key == "standard":
        return Standard()
    if key == "fixed-lightness":
        return FixedLightness()
    if key == "luminance-matched":
        return LuminanceMatched()
    if key == "apca-target":
        return ApcaTarget(target_lc)
    return WcagTarget(target_ratio)


# ==========================================
# Request
# ==========================================

def _finite(value, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValueError(f"{label} must be a finite number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class ColorRequest:
    """Everything that determines one generated color. Hashable, so it is the cache key."""
    lightness: float
    chroma: float
    hue: float
    hue_curve: Curve = LINEAR
    chroma_curve: Curve = LINEAR
    contrast_mode: ContrastMode = field(default_factory=Standard)
    target_background: str = c.DEFAULT_BACKGROUND
    calculate_contrast: bool = False
    chroma_compensation: bool = True

    def __post_init__(self):
        lightness = _finite(self.lightness, "lightness")
        chroma = _finite(self.chroma, "chroma")
        hue = _finite(self.hue, "hue")
        if not 0.0 <= lightness <= 1.0:
            raise ValueError(f"lightness must be within [0, 1], got {lightness}")
        if not 0.0 <= chroma <= c.MAX_CHROMA:
            raise ValueError(f"chroma must be within [0, {c.MAX_CHROMA:g}], got {chroma}")
        if not isinstance(self.hue_curve, Curve) or not isinstance(self.chroma_curve, Curve):
            raise ValueError("hue_curve and chroma_curve must be Curve instances")
        if not isinstance(self.contrast_mode, (Standard, FixedLightness, LuminanceMatched, ApcaTarget, WcagTarget)):
            raise ValueError(f"unsupported contrast mode: {self.contrast_mode!r}")
        object.__setattr__(self, "lightness", lightness)
        object.__setattr__(self, "chroma", chroma)
        object.__setattr__(self, "hue", normalize_hue(hue))
        object.__setattr__(self, "target_background", str(self.target_background or c.DEFAULT_BACKGROUND))


# ==========================================
# Results
# ==========================================

class GamutInfo(NamedTuple):
    original_chroma: float
    original_lightness: float
    chroma_reduction_fraction: float
    lightness_shift: float
    was_modified: bool
    original_hue: float = 0.0

    @classmethod
    def measure(cls, original_lightness: float, original_chroma: float,
                final_lightness: float, final_chroma: float, original_hue: float = 0.0) -> "GamutInfo":
        reduction = 0.0
        if original_chroma > 0:
            reduction = max(0.0, (original_chroma - final_chroma) / original_chroma)
        shift = final_lightness - original_lightness
        return cls(
            original_chroma=original_chroma,
            original_lightness=original_lightness,
            chroma_reduction_fraction=reduction,
            lightness_shift=shift,
            was_modified=reduction > 0.01 or abs(shift) > 0.01,
            original_hue=original_hue,
        )


class ReferenceContrast(NamedTuple):
    on_black: float
    on_white: float
    on_gray: float


class ContrastValues(NamedTuple):
    apca: float
    wcag: float


class ContrastReport(NamedTuple):
    apca: ReferenceContrast
    wcag: ReferenceContrast
    meets_aa: bool
    meets_aaa: bool


class BlendResult(NamedTuple):
    rgb: Tuple[float, float, float]     # gamma sRGB, 0-1
    hex: str
    luminance: float
    lightness: float                    # CIE L*, 0-100


class ContrastPair(NamedTuple):
    first: int
    second: int
    apca: float
    wcag: float


class SolveResult(NamedTuple):
    value: float
    converged: bool
    iterations: int


@dataclass(frozen=True)
class ColorResult:
    lightness: float
    chroma: float
    hue: float
    hex: str
    css_oklch: str
    css_p3: str
    css_rgb: str
    css_hsl: str
    rgb: Tuple[float, float, float]         # clipped gamma sRGB, 0-1
    gamut_rgb: Tuple[float, float, float]   # gamma RGB in the engine's gamut
    gamut: str
    gamut_info: GamutInfo
    contrast: Optional[ContrastReport] = None
    specific_contrast: Optional[ContrastValues] = None
    target_background: str = c.DEFAULT_BACKGROUND

    @property
    def oklch(self) -> Tuple[float, float, float]:
        return (self.lightness, self.chroma, self.hue)
