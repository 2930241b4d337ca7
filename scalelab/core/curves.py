#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/curves.py

import math
from dataclasses import dataclass
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from . import config as c
from .conversions import normalize_hue


@dataclass(frozen=True)
class Curve:
    """
    Power curve applied across a scale.

    `shift` is the offset reached at lightness 0 (degrees for hue curves,
    chroma units for chroma curves); `power` bends the progression and must
    lie in [0.5, 2].
    """
    shift: float = 0.0
    power: float = 1.0

    def __post_init__(self):
        if not (isinstance(self.shift, (int, float)) and math.isfinite(self.shift)):
            raise ValueError(f"curve shift must be a finite number, got {self.shift!r}")
        if not (isinstance(self.power, (int, float)) and math.isfinite(self.power)):
            raise ValueError(f"curve power must be a finite number, got {self.power!r}")
        if not (c.CURVE_POWER_MIN <= self.power <= c.CURVE_POWER_MAX):
            raise ValueError(
                f"curve power must be within [{c.CURVE_POWER_MIN}, {c.CURVE_POWER_MAX}], got {self.power}"
            )

    @property
    def is_identity(self) -> bool:
        return self.shift == 0


LINEAR = Curve(0.0, 1.0)


def _distance_from_white(lightness: float) -> float:
    return max(0.0, min(1.0, 1.0 - lightness))


def apply_curve(base: float, lightness: float, shift: float, power: float) -> float:
    """base + shift * (1 - L) ** power"""
    return base + shift * _distance_from_white(lightness) ** power


def _ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - ((-2 * t + 2) ** 3) / 2


def apply_chroma_curve_with_easing(base: float, lightness: float, shift: float, power: float) -> float:
    """Chroma curve with ease-in-out cubic so the mid-tones carry the shift."""
    eased = _ease_in_out_cubic(_distance_from_white(lightness))
    return base + shift * eased ** power


def apply_curves(
    lightness: float,
    chroma: float,
    hue: float,
    hue_curve: Curve = LINEAR,
    chroma_curve: Curve = LINEAR,
    compensation: Optional[Callable[[float, float], float]] = None,
) -> Tuple[float, float]:
    """
    Effective (chroma, hue) at `lightness`.

    Chroma never goes negative and near-achromatic results keep the base hue.
    `compensation(hue, lightness)` scales the curved chroma before the hue
    lock is decided.
    """
    eff_h = normalize_hue(apply_curve(hue, lightness, hue_curve.shift, hue_curve.power))
    eff_c = max(0.0, apply_chroma_curve_with_easing(chroma, lightness, chroma_curve.shift, chroma_curve.power))
    if compensation is not None:
        eff_c *= compensation(eff_h, lightness)
    if eff_c < c.ACHROMATIC_CHROMA:
        eff_h = normalize_hue(hue)
    return eff_c, eff_h


# ==========================================
# Presets
# ==========================================

class CurvePreset(NamedTuple):
    key: str
    title: str
    description: str
    hue_curve: Curve
    chroma_curve: Curve
    inspiration: str


CURVE_PRESETS: Dict[str, CurvePreset] = {
    p.key: p for p in (
        CurvePreset("linear", "Linear", "No curve adjustment, pure linear progression",
                    Curve(0.0, 1.0), Curve(0.0, 1.0), "Mathematical baseline"),
        CurvePreset("material-3", "Material Design 3", "Vibrant midtones with smooth transitions",
                    Curve(0.1, 1.2), Curve(0.2, 1.4), "Google Material Design 3"),
        CurvePreset("tailwind", "Tailwind CSS", "Balanced progression with slightly enhanced midtones",
                    Curve(0.0, 1.1), Curve(0.15, 1.2), "Tailwind CSS color system"),
        CurvePreset("radix", "Radix Colors", "Balanced for perceptual uniformity and accessibility",
                    Curve(-0.05, 1.15), Curve(0.1, 1.1), "Radix Colors"),
        CurvePreset("apple-hig", "Apple HIG", "Refined progression with natural-looking transitions",
                    Curve(0.05, 1.3), Curve(0.25, 1.5), "Apple Human Interface Guidelines"),
        CurvePreset("carbon", "IBM Carbon", "Strong contrast for enterprise use",
                    Curve(-0.1, 0.9), Curve(0.05, 1.0), "IBM Carbon Design System"),
        CurvePreset("vibrant", "Vibrant Brand", "Maximum chroma in midtones for bold colors",
                    Curve(0.2, 1.5), Curve(0.4, 1.8), "High-energy brand guidelines"),
        CurvePreset("muted", "Muted Sophistication", "Reduced chroma for an understated look",
                    Curve(-0.1, 0.95), Curve(-0.2, 0.8), "Luxury and fashion design"),
        CurvePreset("pastel", "Pastel Soft", "Reduced chroma with emphasis on light tones",
                    Curve(0.15, 1.4), Curve(-0.15, 0.85), "Pastel color theory"),
        CurvePreset("dark-mode", "Dark Mode Optimized", "Enhanced lighter tones with accessible dark endpoint",
                    Curve(0.25, 1.6), Curve(0.3, 1.5), "Dark mode practice"),
        CurvePreset("high-contrast", "High Contrast", "Maximized contrast for accessibility compliance",
                    Curve(-0.2, 0.85), Curve(-0.1, 0.9), "WCAG AAA guidelines"),
        CurvePreset("monochrome", "Monochrome", "Minimal chroma with a subtle hue",
                    Curve(0.0, 1.0), Curve(-0.4, 0.6), "Grayscale color theory"),
        CurvePreset("natural", "Natural Tones", "Curves found in organic materials",
                    Curve(0.08, 1.25), Curve(0.18, 1.35), "Nature photography"),
        CurvePreset("neon", "Neon Electric", "Extreme chroma in bright tones",
                    Curve(0.35, 1.8), Curve(0.5, 2.0), "Neon lighting and digital displays"),
        CurvePreset("retro-70s", "Retro 70s", "Warm, earthy tones",
                    Curve(-0.15, 1.05), Curve(0.12, 1.25), "1970s color palettes"),
        CurvePreset("soft-ui", "Soft UI", "Subtle chroma variation for dimensional UI",
                    Curve(0.05, 1.1), Curve(0.08, 1.15), "Neumorphism"),
    )
}

PRESET_CATEGORIES: Dict[str, List[str]] = {
    "Design Systems": ["material-3", "tailwind", "radix", "apple-hig", "carbon"],
    "Aesthetics": ["vibrant", "muted", "pastel", "natural", "retro-70s"],
    "Accessibility": ["high-contrast", "dark-mode"],
    "Special Effects": ["neon", "soft-ui", "monochrome"],
    "Baseline": ["linear"],
}


def get_preset(name: str) -> Optional[CurvePreset]:
    if not name or not isinstance(name, str):
        return None
    return CURVE_PRESETS.get(name.strip().lower())


def preset_names() -> List[str]:
    return list(CURVE_PRESETS)


def presets_by_category(category: str) -> List[CurvePreset]:
    return [CURVE_PRESETS[n] for n in PRESET_CATEGORIES.get(category, []) if n in CURVE_PRESETS]


def recommend_preset(chroma: float, background: str = "white", mode: str = "standard") -> str:
    """Pick a preset name from the scale's chroma, background and contrast mode."""
    if chroma > 0.2:
        return "vibrant"
    if chroma < 0.05:
        return "monochrome"
    if background in ("black", "dark-gray"):
        return "dark-mode"
    if mode in ("apca-fixed", "fixed-lightness", "wcag-target"):
        return "high-contrast"
    return "tailwind"


def blend_presets(first: str, second: str, ratio: float = 0.5) -> Tuple[Curve, Curve]:
    """
    Interpolate hue and chroma curves of two presets.

    Unknown preset names yield the identity curves.
    """
    p1 = get_preset(first)
    p2 = get_preset(second)
    if p1 is None or p2 is None:
        return LINEAR, LINEAR

    t = max(0.0, min(1.0, ratio))

    def lerp(a: Curve, b: Curve) -> Curve:
        return Curve(a.shift * (1 - t) + b.shift * t, a.power * (1 - t) + b.power * t)

    return lerp(p1.hue_curve, p2.hue_curve), lerp(p1.chroma_curve, p2.chroma_curve)
