import pytest

from scalelab.core import config as c
from scalelab.core.curves import (
    CURVE_PRESETS,
    LINEAR,
    PRESET_CATEGORIES,
    Curve,
    apply_chroma_curve_with_easing,
    apply_curve,
    apply_curves,
    blend_presets,
    get_preset,
    preset_names,
    presets_by_category,
    recommend_preset,
)


def test_curve_power_bounds():
    Curve(0.1, 0.5)
    Curve(0.1, 2.0)
    with pytest.raises(ValueError):
        Curve(0.1, 0.4)
    with pytest.raises(ValueError):
        Curve(0.1, 2.5)
    with pytest.raises(ValueError):
        Curve(float("nan"), 1.0)


def test_identity_curve():
    assert LINEAR.is_identity
    assert apply_curve(240.0, 0.3, 0.0, 1.5) == 240.0


def test_hue_curve_reaches_full_shift_at_black():
    assert apply_curve(240.0, 0.0, 20.0, 1.0) == pytest.approx(260.0)
    assert apply_curve(240.0, 1.0, 20.0, 1.0) == pytest.approx(240.0)


def test_positive_chroma_shift_favours_darks():
    dark = apply_chroma_curve_with_easing(0.1, 0.1, 0.05, 0.8)
    light = apply_chroma_curve_with_easing(0.1, 0.9, 0.05, 0.8)
    assert dark > light


def test_out_of_range_lightness_is_clamped():
    assert apply_curve(0.1, 1.5, 0.05, 1.0) == pytest.approx(0.1)
    assert apply_curve(0.1, -0.5, 0.05, 1.0) == pytest.approx(0.15)


def test_apply_curves_never_negative():
    eff_c, _ = apply_curves(0.2, 0.05, 100.0, LINEAR, Curve(-0.3, 1.0))
    assert eff_c == 0.0


def test_apply_curves_locks_hue_of_grays():
    eff_c, eff_h = apply_curves(0.2, 0.01, 100.0, Curve(40.0, 1.0), LINEAR)
    assert eff_c < c.ACHROMATIC_CHROMA
    assert eff_h == 100.0


def test_apply_curves_rotates_chromatic_hue():
    _, eff_h = apply_curves(0.5, 0.15, 350.0, Curve(20.0, 1.0), LINEAR)
    assert eff_h == pytest.approx(0.0)


def test_apply_curves_compensation():
    eff_c, _ = apply_curves(0.5, 0.2, 240.0, compensation=lambda hue, lightness: 0.5)
    assert eff_c == pytest.approx(0.1)


def test_presets_catalogue():
    assert len(CURVE_PRESETS) == 16
    assert preset_names()[0] == "linear"
    for names in PRESET_CATEGORIES.values():
        for name in names:
            assert name in CURVE_PRESETS


def test_get_preset():
    assert get_preset("  Tailwind ").key == "tailwind"
    assert get_preset("missing") is None
    assert get_preset(None) is None
    assert [p.key for p in presets_by_category("Accessibility")] == ["high-contrast", "dark-mode"]


def test_recommend_preset():
    assert recommend_preset(0.25) == "vibrant"
    assert recommend_preset(0.02) == "monochrome"
    assert recommend_preset(0.1, background="black") == "dark-mode"
    assert recommend_preset(0.1, mode="wcag-target") == "high-contrast"
    assert recommend_preset(0.1) == "tailwind"


def test_blend_presets():
    hue_curve, chroma_curve = blend_presets("linear", "tailwind", 0.5)
    assert hue_curve.power == pytest.approx(1.05)
    assert chroma_curve.shift == pytest.approx(0.075)
    assert blend_presets("linear", "nope") == (LINEAR, LINEAR)
