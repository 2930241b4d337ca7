import pytest

from scalelab.core import config as c
from scalelab.core.gamut import (
    clamp_fixed_lightness,
    clamp_perceptual,
    clamp_srgb_perceptual,
    delta_eok,
    in_gamut,
)


def test_grays_are_in_every_gamut():
    for gamut in c.GAMUTS:
        assert in_gamut(0.5, 0.0, 0.0, gamut)


def test_extreme_chroma_is_out_of_gamut():
    assert not in_gamut(0.5, 0.4, 240.0, c.GAMUT_SRGB)
    assert not in_gamut(0.5, 0.4, 240.0, c.GAMUT_P3)


def test_non_finite_channels_are_out_of_gamut():
    assert not in_gamut(float("nan"), 0.1, 0.0, c.GAMUT_SRGB)


def test_unknown_gamut_raises():
    with pytest.raises(ValueError):
        in_gamut(0.5, 0.1, 0.0, "rec2020")
    with pytest.raises(ValueError):
        clamp_fixed_lightness(0.5, 0.1, 0.0, "rec2020")


@pytest.mark.parametrize("gamut", [c.GAMUT_SRGB, c.GAMUT_P3])
@pytest.mark.parametrize("hue", [0.0, 90.0, 145.0, 240.0, 300.0])
def test_fixed_lightness_keeps_lightness_and_hue(gamut, hue):
    l, ch, h = clamp_fixed_lightness(0.7, 0.35, hue, gamut)
    assert l == 0.7
    assert h == hue
    assert ch <= 0.35
    assert in_gamut(l, ch, h, gamut)


def test_fixed_lightness_is_maximal_to_one_step():
    l, ch, h = clamp_fixed_lightness(0.6, 0.3, 30.0, c.GAMUT_SRGB)
    assert ch < 0.3
    assert not in_gamut(l, ch + c.CHROMA_STEP, h, c.GAMUT_SRGB)


def test_fixed_lightness_returns_in_gamut_input_unchanged():
    assert clamp_fixed_lightness(0.5, 0.05, 200.0, c.GAMUT_SRGB) == (0.5, 0.05, 200.0)


def test_perceptual_returns_in_gamut_input_unchanged():
    assert clamp_perceptual(0.5, 0.05, 200.0, c.GAMUT_P3) == (0.5, 0.05, 200.0)


@pytest.mark.parametrize("color", [(0.7, 0.3, 30.0), (0.9, 0.25, 240.0), (0.3, 0.3, 145.0), (0.98, 0.21, 240.0)])
def test_perceptual_result_is_in_srgb(color):
    l, ch, h = clamp_perceptual(*color, c.GAMUT_SRGB)
    assert in_gamut(l, ch, h, c.GAMUT_SRGB, epsilon=1e-6)


def test_perceptual_endpoints():
    assert clamp_perceptual(1.0, 0.2, 100.0, c.GAMUT_SRGB) == (1.0, 0.0, 100.0)
    assert clamp_perceptual(0.0, 0.2, 100.0, c.GAMUT_SRGB) == (0.0, 0.0, 100.0)


def test_perceptual_stays_close_to_request():
    # free-lightness mapping keeps more chroma than the fixed-lightness clamp
    fixed = clamp_fixed_lightness(0.7, 0.3, 30.0, c.GAMUT_SRGB)
    free = clamp_perceptual(0.7, 0.3, 30.0, c.GAMUT_SRGB)
    assert delta_eok(free, (0.7, 0.3, 30.0)) <= delta_eok(fixed, (0.7, 0.3, 30.0)) + 0.02


def test_srgb_perceptual_helper():
    assert clamp_srgb_perceptual(0.5, 0.05, 10.0) == (0.5, 0.05, 10.0)
    l, ch, h = clamp_srgb_perceptual(0.5, 0.35, 10.0)
    assert l == 0.5
    assert in_gamut(l, ch, h, c.GAMUT_SRGB)


def test_delta_eok_identity():
    assert delta_eok((0.5, 0.1, 20.0), (0.5, 0.1, 20.0)) == 0.0
    assert delta_eok((0.5, 0.0, 0.0), (0.6, 0.0, 0.0)) == pytest.approx(0.1)
