import pytest

from scalelab.core import config as c
from scalelab.core import conversions as conv
from scalelab.core.contrast import apca_contrast, wcag_ratio_from_luminance
from scalelab.core.gamut import clamp_fixed_lightness
from scalelab.core.luminance import relative_luminance
from scalelab.core.solvers import (
    background_lightness,
    find_lightness_for_apca,
    find_lightness_for_apca_detailed,
    find_lightness_for_luminance_detailed,
    find_lightness_for_wcag_detailed,
    is_known_background,
    preset_lightness,
)


def _luminance(color):
    return relative_luminance(*conv.clip_rgb(*conv.oklch_to_srgb(*color)))


def test_background_lookup():
    assert background_lightness("black") == 0.0
    assert background_lightness("White") == 1.0
    assert background_lightness("gray") == 0.8
    assert background_lightness("canvas-bg (E)") == pytest.approx(0.14)
    assert preset_lightness("no-such-background") == c.FALLBACK_BACKGROUND_L
    assert is_known_background("canvas-bg-lv2")
    assert not is_known_background("no-such-background")


def test_apca_on_black_converges():
    solved = find_lightness_for_apca_detailed(75, 240, 0.2, "black")
    assert solved.converged
    assert solved.iterations <= c.SOLVER_MAX_ITERATIONS
    color = clamp_fixed_lightness(solved.value, 0.2, 240, c.DEFAULT_GAMUT)
    assert abs(apca_contrast(color, (0.0, 0.0, 0.0)) - 75) < c.APCA_TOLERANCE


def test_apca_polarity_depends_on_background():
    on_black = find_lightness_for_apca(60, 30, 0.1, "black")
    on_white = find_lightness_for_apca(60, 30, 0.1, "white")
    assert on_black > on_white


def test_apca_on_white_converges():
    solved = find_lightness_for_apca_detailed(60, 150, 0.1, "white")
    assert solved.converged
    color = clamp_fixed_lightness(solved.value, 0.1, 150, c.DEFAULT_GAMUT)
    assert abs(apca_contrast(color, (1.0, 0.0, 0.0)) - 60) < c.APCA_TOLERANCE


def test_unreachable_apca_target_is_best_effort():
    solved = find_lightness_for_apca_detailed(200, 240, 0.1, "white")
    assert not solved.converged
    assert c.SOLVER_MIN_L <= solved.value <= c.SOLVER_MAX_L


@pytest.mark.parametrize("background", ["canvas-bg", "canvas-bg (E)"])
def test_wcag_solver_both_polarities(background):
    solved = find_lightness_for_wcag_detailed(4.5, 240, 0.1, background)
    assert solved.converged
    bg_y = _luminance((preset_lightness(background), 0.0, 0.0))
    color = clamp_fixed_lightness(solved.value, 0.1, 240, c.DEFAULT_GAMUT)
    assert abs(wcag_ratio_from_luminance(_luminance(color), bg_y) - 4.5) < c.WCAG_TOLERANCE


def test_wcag_solver_ignores_keyword_backgrounds():
    # only the preset table is consulted; unknown names fall back to white
    assert find_lightness_for_wcag_detailed(4.5, 240, 0.1, "black").value == pytest.approx(
        find_lightness_for_wcag_detailed(4.5, 240, 0.1, "canvas-bg").value
    )


def test_luminance_solver():
    solved = find_lightness_for_luminance_detailed(0.2, 60, 0.1)
    assert solved.converged
    color = clamp_fixed_lightness(solved.value, 0.1, 60, c.DEFAULT_GAMUT)
    assert abs(_luminance(color) - 0.2) < c.LUMINANCE_TOLERANCE
