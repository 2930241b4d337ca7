import pytest

from scalelab.core import config as c
from scalelab.core.blending import (
    blend_oklch_on_background,
    contrast_with_opacity,
    find_closest_opacity,
    generate_blend_matrix,
    min_opacity_for_apca,
    min_opacity_for_wcag,
    mix_linear_rgb,
    mix_srgb,
)

OPACITIES = [0, 5, 10, 20, 35, 50, 65, 80, 90, 100]


def test_zero_opacity_is_the_background():
    result = blend_oklch_on_background(50, 0.15, 240, 0, "#336699")
    assert result.hex == "#336699"


def test_full_opacity_is_the_color():
    result = blend_oklch_on_background(50, 0.0, 0, 100, "#ffffff")
    solid = blend_oklch_on_background(50, 0.0, 0, 100, "#000000")
    assert result.hex == solid.hex


@pytest.mark.parametrize("blend_mode", list(c.BLEND_MODES))
@pytest.mark.parametrize("bg_hex, falling", [("#ffffff", True), ("#000000", False)])
def test_lightness_is_monotonic_in_opacity(blend_mode, bg_hex, falling):
    row = [blend_oklch_on_background(50, 0.12, 240, op, bg_hex, blend_mode).lightness for op in OPACITIES]
    pairs = list(zip(row, row[1:]))
    if falling:
        assert all(b <= a + 1e-9 for a, b in pairs)
    else:
        assert all(b >= a - 1e-9 for a, b in pairs)


def test_linear_blend_moves_faster_than_srgb():
    # half-transparent black over white: linear light is brighter mid-way
    srgb = blend_oklch_on_background(0, 0.0, 0, 50, "#ffffff", c.BLEND_SRGB)
    linear = blend_oklch_on_background(0, 0.0, 0, 50, "#ffffff", c.BLEND_LINEAR)
    assert linear.luminance > srgb.luminance


def test_mix_helpers():
    assert mix_srgb((1.0, 1.0, 1.0), (0.0, 0.0, 0.0), 0.25) == pytest.approx((0.25, 0.25, 0.25))
    mixed = mix_linear_rgb((1.0, 1.0, 1.0), (0.0, 0.0, 0.0), 0.5, use_lut=False)
    assert mixed[0] == pytest.approx(0.7354, abs=1e-3)


def test_invalid_input_is_black():
    result = blend_oklch_on_background(float("nan"), 0.1, 0, 50, "#ffffff")
    assert result.hex == "#000000"
    assert result.luminance == 0.0
    assert blend_oklch_on_background(None, 0.1, 0, 50, "#ffffff").lightness == 0.0


def test_unknown_blend_mode_raises():
    with pytest.raises(ValueError):
        blend_oklch_on_background(50, 0.1, 0, 50, "#ffffff", "multiply")


def test_lut_and_exact_paths_agree():
    fast = blend_oklch_on_background(40, 0.1, 120, 60, "#f0f0f0", c.BLEND_LINEAR, use_lut=True)
    exact = blend_oklch_on_background(40, 0.1, 120, 60, "#f0f0f0", c.BLEND_LINEAR, use_lut=False)
    assert fast.luminance == pytest.approx(exact.luminance, abs=2e-3)


def test_min_opacity_for_apca_is_feasible():
    found = min_opacity_for_apca(30, 0.1, 240, "#ffffff", 60)
    assert found is not None
    assert contrast_with_opacity(30, 0.1, 240, found, "#ffffff").apca >= 60 - c.OPACITY_APCA_TOLERANCE


def test_min_opacity_for_apca_unreachable():
    assert min_opacity_for_apca(95, 0.02, 240, "#ffffff", 75) is None
    assert contrast_with_opacity(95, 0.02, 240, 100, "#ffffff").apca < 75 - c.OPACITY_APCA_TOLERANCE


def test_min_opacity_for_wcag_unreachable():
    assert min_opacity_for_wcag(95, 0.02, 240, "#ffffff", 4.5) is None
    assert contrast_with_opacity(95, 0.02, 240, 100, "#ffffff").wcag < 4.5 - c.OPACITY_WCAG_TOLERANCE


def test_min_opacity_for_wcag():
    found = min_opacity_for_wcag(20, 0.05, 240, "#ffffff", 4.5)
    assert found is not None and 0 < found <= 100
    assert contrast_with_opacity(20, 0.05, 240, found, "#ffffff").wcag >= 4.5 - c.OPACITY_WCAG_TOLERANCE
    assert min_opacity_for_wcag(20, 0.05, 240, "#ffffff", 4.5, blend_mode=c.BLEND_LINEAR) is not None


def test_blend_matrix_shape():
    matrix = generate_blend_matrix(240, 0.1, [90, 50, 20], [100, 50, 0], "#ffffff")
    assert len(matrix) == 3
    assert all(len(row) == 3 for row in matrix)
    assert all(row[2].hex == "#ffffff" for row in matrix)


def test_find_closest_opacity():
    match = find_closest_opacity(100.0, 20, 0.05, 240, OPACITIES, "#ffffff")
    assert match.opacity == 0
    assert match.delta == pytest.approx(0.0, abs=1e-6)
