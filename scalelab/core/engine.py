#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/engine.py

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from . import config as c
from . import conversions as conv
from scalelab.shared.formatting import format_display_p3, format_hsl, format_oklch, format_rgb
from .cache import GenerationCache
from .chroma_limits import chroma_compensation_multiplier
from .contrast import contrast_values, validate_contrast
from .curves import Curve, LINEAR, apply_curves
from .gamut import clamp_fixed_lightness, clamp_perceptual
from .luminance import relative_luminance
from .solvers import (
    background_lightness,
    find_lightness_for_apca,
    find_lightness_for_luminance,
    find_lightness_for_wcag,
    is_known_background,
)
from .types import (
    ApcaTarget,
    ColorRequest,
    ColorResult,
    ContrastMode,
    FixedLightness,
    GamutInfo,
    LuminanceMatched,
    Standard,
    WcagTarget,
    contrast_mode_from_name,
)

Oklch = Tuple[float, float, float]


class ColorEngine:
    """
    Turns a ColorRequest into a gamut-safe ColorResult.

    The engine itself is stateless apart from the injected generation cache,
    which is keyed by (request, gamut) and safe to share between threads.
    """

    def __init__(self, gamut: str = c.DEFAULT_GAMUT, cache: Optional[GenerationCache] = None,
                 use_cache: bool = c.USE_COLOR_CACHE):
        if gamut not in c.GAMUTS:
            raise ValueError(f"unknown gamut: '{gamut}' (expected one of {', '.join(c.GAMUTS)})")
        self.gamut = gamut
        self.cache = cache if cache is not None else GenerationCache()
        self.use_cache = use_cache

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self, request: ColorRequest) -> ColorResult:
        key = (request, self.gamut)
        if self.use_cache:
            cached = self.cache.get(key)
            if cached is not None:
                return cached

        lightness = request.lightness
        compensation = chroma_compensation_multiplier if request.chroma_compensation else None
        eff_c, eff_h = apply_curves(
            lightness, request.chroma, request.hue,
            request.hue_curve, request.chroma_curve, compensation,
        )

        final = self._map_to_gamut(request, lightness, eff_c, eff_h)
        result = self._build_result(request, final, lightness, eff_c, eff_h)

        if self.use_cache:
            self.cache.set(key, result)
        return result

    def _map_to_gamut(self, request: ColorRequest, lightness: float, chroma: float, hue: float) -> Oklch:
        mode = request.contrast_mode
        gamut = self.gamut

        if isinstance(mode, FixedLightness):
            return clamp_fixed_lightness(lightness, chroma, hue, gamut)

        if isinstance(mode, LuminanceMatched):
            # target comes from the achromatic color so chroma cannot move it
            target_y = relative_luminance(*conv.clip_rgb(*conv.oklch_to_srgb(lightness, 0.0, hue)))
            solved = find_lightness_for_luminance(target_y, hue, chroma, gamut=gamut)
            return clamp_fixed_lightness(solved, chroma, hue, gamut)

        if isinstance(mode, ApcaTarget):
            solved = find_lightness_for_apca(mode.lc, hue, chroma, request.target_background, gamut=gamut)
            return clamp_fixed_lightness(solved, chroma, hue, gamut)

        if isinstance(mode, WcagTarget):
            solved = find_lightness_for_wcag(mode.ratio, hue, chroma, request.target_background, gamut=gamut)
            return clamp_fixed_lightness(solved, chroma, hue, gamut)

        return clamp_perceptual(lightness, chroma, hue, gamut)

    def _build_result(self, request: ColorRequest, final: Oklch,
                      original_l: float, original_c: float, original_h: float) -> ColorResult:
        l, ch, h = final
        srgb = conv.oklch_to_srgb(l, ch, h)
        rgb = conv.clip_rgb(*srgb)

        contrast = None
        specific = None
        if request.calculate_contrast:
            contrast = validate_contrast(final)
            if is_known_background(request.target_background):
                bg = (background_lightness(request.target_background), 0.0, 0.0)
                specific = contrast_values(final, bg)

        return ColorResult(
            lightness=l,
            chroma=ch,
            hue=h,
            hex=conv.srgb_to_hex(*srgb),
            css_oklch=format_oklch(l, ch, h),
            css_p3=format_display_p3(*conv.oklch_to_p3(l, ch, h)),
            css_rgb=format_rgb(*rgb),
            css_hsl=format_hsl(*conv.rgb_to_hsl(*rgb)),
            rgb=rgb,
            gamut_rgb=conv.oklch_to_gamut_rgb(l, ch, h, self.gamut),
            gamut=self.gamut,
            gamut_info=GamutInfo.measure(original_l, original_c, l, ch, original_h),
            contrast=contrast,
            specific_contrast=specific,
            target_background=request.target_background,
        )

    # ------------------------------------------------------------------
    # Convenience wrappers
    # ------------------------------------------------------------------

    def generate_color(
        self,
        lightness: float,
        chroma: float,
        hue: float,
        hue_curve: Curve = LINEAR,
        chroma_curve: Curve = LINEAR,
        contrast_mode: Union[ContrastMode, str] = Standard(),
        target_background: str = c.DEFAULT_BACKGROUND,
        calculate_contrast: bool = False,
        chroma_compensation: bool = True,
    ) -> ColorResult:
        if isinstance(contrast_mode, str):
            contrast_mode = contrast_mode_from_name(contrast_mode)
        return self.generate(ColorRequest(
            lightness=lightness,
            chroma=chroma,
            hue=hue,
            hue_curve=hue_curve,
            chroma_curve=chroma_curve,
            contrast_mode=contrast_mode,
            target_background=target_background,
            calculate_contrast=calculate_contrast,
            chroma_compensation=chroma_compensation,
        ))

    def generate_scale(
        self,
        hue: float,
        chroma: float,
        lightness_steps: Sequence[float] = c.DEFAULT_LIGHTNESS_STEPS,
        **options,
    ) -> List[ColorResult]:
        """One result per lightness step (percent), in step order."""
        return [
            self.generate_color(step / c.PERCENT_TO_FACTOR, chroma, hue, **options)
            for step in lightness_steps
        ]

    def generate_batch(self, requests: Iterable[ColorRequest], workers: int = c.BATCH_WORKERS) -> List[ColorResult]:
        """Generate on a thread pool; results come back in request order."""
        requests = list(requests)
        if workers <= 1 or len(requests) <= 1:
            return [self.generate(r) for r in requests]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.generate, requests))

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_stats(self) -> Dict[str, float]:
        return self.cache.stats()


# ==========================================
# Advisory helpers
# ==========================================

def recommended_contrast_mode(chroma: float) -> ContrastMode:
    """Grays match luminance, vibrant colors keep perceptual mapping, the rest fix lightness."""
    if chroma < c.ACHROMATIC_CHROMA:
        return LuminanceMatched()
    if chroma > 0.15:
        return Standard()
    return FixedLightness()


def accessible_chroma(lightness: float, chroma: float, target_bg: str = "white") -> float:
    """
    Reduce chroma for colors within 0.3 lightness of the background, where
    saturated tints read poorly.
    """
    bg_l = {"black": 0.0, "white": 1.0}.get(target_bg, 0.5)
    distance = abs(lightness - bg_l)
    if distance < 0.3:
        return chroma * max(0.3, 1 - (0.3 - distance) * 2)
    return chroma
