import pytest

from scalelab.core import config as c
from scalelab.core.cache import GenerationCache
from scalelab.core.contrast import apca_contrast, validate_contrast
from scalelab.core.curves import Curve
from scalelab.core.engine import ColorEngine, accessible_chroma, recommended_contrast_mode
from scalelab.core.gamut import in_gamut
from scalelab.core.types import (
    ApcaTarget,
    ColorRequest,
    FixedLightness,
    LuminanceMatched,
    Standard,
    WcagTarget,
)

MODES = [Standard(), FixedLightness(), LuminanceMatched(), ApcaTarget(60), WcagTarget(4.5)]


def test_generate_is_idempotent(engine):
    request = ColorRequest(0.55, 0.2, 30, hue_curve=Curve(15, 1.2), chroma_curve=Curve(0.05, 0.8),
                           calculate_contrast=True)
    first = engine.generate(request)
    second = engine.generate(request)
    uncached = ColorEngine(use_cache=False).generate(request)
    assert first == second
    assert first == uncached


def test_cache_is_used(engine):
    request = ColorRequest(0.5, 0.1, 200)
    engine.generate(request)
    engine.generate(request)
    stats = engine.cache_stats()
    assert stats["hits"] == 1
    assert stats["size"] == 1
    engine.clear_cache()
    assert engine.cache_stats()["size"] == 0


def test_cache_key_includes_gamut():
    cache = GenerationCache()
    request = ColorRequest(0.8, 0.3, 145)
    p3 = ColorEngine(gamut=c.GAMUT_P3, cache=cache).generate(request)
    srgb = ColorEngine(gamut=c.GAMUT_SRGB, cache=cache).generate(request)
    assert p3.gamut == c.GAMUT_P3
    assert srgb.gamut == c.GAMUT_SRGB
    assert len(cache) == 2


def test_unknown_gamut_is_rejected():
    with pytest.raises(ValueError):
        ColorEngine(gamut="rec2020")


@pytest.mark.parametrize("gamut", [c.GAMUT_SRGB, c.GAMUT_P3])
@pytest.mark.parametrize("mode", MODES, ids=lambda m: m.name)
@pytest.mark.parametrize("lightness, chroma, hue", [(0.95, 0.3, 100), (0.5, 0.35, 30), (0.2, 0.25, 270)])
def test_results_are_inside_the_gamut(gamut, mode, lightness, chroma, hue):
    engine = ColorEngine(gamut=gamut, use_cache=False)
    result = engine.generate(ColorRequest(lightness, chroma, hue, contrast_mode=mode))
    eps = c.GAMUT_EPSILON[gamut] + 1e-6
    assert all(-eps <= v <= 1 + eps for v in result.gamut_rgb)
    assert in_gamut(result.lightness, result.chroma, result.hue, gamut, epsilon=eps)


@pytest.mark.parametrize("chroma", [0.05, 0.2, 0.37])
def test_fixed_lightness_keeps_requested_lightness(engine, chroma):
    result = engine.generate(ColorRequest(0.73, chroma, 60, contrast_mode=FixedLightness()))
    assert result.lightness == pytest.approx(0.73, abs=1e-12)


def test_apca_target_on_black(engine):
    result = engine.generate(ColorRequest(0.5, 0.2, 240, contrast_mode=ApcaTarget(75),
                                          target_background="black", calculate_contrast=True))
    assert abs(apca_contrast(result.oklch, (0.0, 0.0, 0.0)) - 75) < c.APCA_TOLERANCE
    assert result.specific_contrast is not None
    assert abs(result.specific_contrast.apca - 75) < c.APCA_TOLERANCE


def test_wcag_on_white_rises_as_steps_darken(engine):
    steps = [98, 90, 70, 50, 30, 14]
    results = engine.generate_scale(240, 0.21, steps, target_background="white", calculate_contrast=True)
    assert len(results) == 6
    on_white = [r.contrast.wcag.on_white for r in results]
    assert all(b > a for a, b in zip(on_white, on_white[1:]))


def test_chroma_curve_gives_darks_more_chroma(engine):
    curve = Curve(0.05, 0.8)
    dark = engine.generate_color(0.1, 0.02, 240, chroma_curve=curve, contrast_mode="fixed-lightness")
    light = engine.generate_color(0.9, 0.02, 240, chroma_curve=curve, contrast_mode="fixed-lightness")
    assert dark.gamut_info.original_chroma > light.gamut_info.original_chroma


def test_luminance_matched_tracks_gray(engine):
    gray = validate_contrast((0.6, 0.0, 0.0))
    matched = engine.generate(ColorRequest(0.6, 0.12, 90, contrast_mode=LuminanceMatched(),
                                           calculate_contrast=True))
    assert matched.contrast.wcag.on_white == pytest.approx(gray.wcag.on_white, abs=0.15)


def test_result_strings(engine):
    result = engine.generate(ColorRequest(0.62, 0.1, 240))
    assert result.css_oklch.startswith("oklch(62.0%")
    assert result.css_p3.startswith("color(display-p3 ")
    assert result.css_rgb.startswith("rgb(")
    assert result.css_hsl.startswith("hsl(")
    assert result.hex.startswith("#") and len(result.hex) == 7
    assert result.contrast is None


def test_unknown_background_has_no_specific_contrast(engine):
    result = engine.generate(ColorRequest(0.5, 0.1, 0, target_background="sky", calculate_contrast=True))
    assert result.contrast is not None
    assert result.specific_contrast is None


def test_generate_batch_keeps_order(engine):
    requests = [ColorRequest(step / 100, 0.15, 150) for step in c.DEFAULT_LIGHTNESS_STEPS]
    parallel = engine.generate_batch(requests, workers=4)
    serial = ColorEngine(use_cache=False).generate_batch(requests, workers=1)
    assert [r.hex for r in parallel] == [r.hex for r in serial]


def test_mode_string_is_parsed(engine):
    result = engine.generate_color(0.6, 0.3, 30, contrast_mode="apca-fixed")
    assert result.lightness == pytest.approx(0.6)
    with pytest.raises(ValueError):
        engine.generate_color(0.6, 0.3, 30, contrast_mode="vivid")


def test_recommended_mode():
    assert isinstance(recommended_contrast_mode(0.01), LuminanceMatched)
    assert isinstance(recommended_contrast_mode(0.1), FixedLightness)
    assert isinstance(recommended_contrast_mode(0.2), Standard)


def test_accessible_chroma():
    assert accessible_chroma(0.5, 0.2, "white") == 0.2
    assert accessible_chroma(0.9, 0.2, "white") < 0.2
    assert accessible_chroma(1.0, 0.2, "white") == pytest.approx(0.2 * 0.4)


def test_gamut_info_reports_curve_adjusted_hue(engine):
    request = ColorRequest(0.3, 0.1, 240, hue_curve=Curve(20, 1.0),
                           contrast_mode=FixedLightness(), chroma_compensation=False)
    result = engine.generate(request)
    assert result.gamut_info.original_hue == pytest.approx(254.0)
    assert result.hue == pytest.approx(254.0)
