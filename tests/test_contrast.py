import pytest

from scalelab.core import config as c
from scalelab.core.contrast import (
    apca_compliance,
    apca_contrast,
    apca_contrast_with_polarity,
    apca_from_luminance,
    contrast_from_luminance,
    contrast_values,
    meets_wcag_aa,
    meets_wcag_aaa,
    validate_contrast,
    wcag_contrast,
    wcag_levels,
    wcag_ratio_from_luminance,
)

BLACK = (0.0, 0.0, 0.0)
WHITE = (1.0, 0.0, 0.0)


def test_wcag_black_on_white_is_21():
    assert wcag_contrast(BLACK, WHITE) == pytest.approx(21.0, abs=0.01)
    assert wcag_contrast(WHITE, BLACK) == pytest.approx(21.0, abs=0.01)


def test_wcag_is_symmetric_and_bounded():
    assert wcag_ratio_from_luminance(0.2, 0.7) == wcag_ratio_from_luminance(0.7, 0.2)
    assert wcag_ratio_from_luminance(0.4, 0.4) == 1.0


def test_apca_black_text_on_white():
    assert apca_contrast_with_polarity(BLACK, WHITE) == pytest.approx(106.0, abs=0.5)


def test_apca_white_text_on_black_is_negative():
    lc = apca_contrast_with_polarity(WHITE, BLACK)
    assert lc == pytest.approx(-107.9, abs=0.5)
    assert apca_contrast(WHITE, BLACK) == pytest.approx(-lc)


def test_apca_identical_colors_have_no_contrast():
    assert apca_from_luminance(0.5, 0.5) == 0.0
    assert apca_from_luminance(0.5, 0.5002) == 0.0


def test_apca_guards_invalid_luminance():
    assert apca_from_luminance(float("nan"), 0.5) == 0.0
    assert apca_from_luminance(-0.1, 0.5) == 0.0
    assert apca_from_luminance(0.1, 1.5) == 0.0


def test_apca_low_contrast_clamps_to_zero():
    # very close luminances fall under the 0.1 low-contrast threshold
    assert apca_from_luminance(0.9, 0.95) == 0.0


def test_contrast_values_pair():
    values = contrast_values(BLACK, WHITE)
    assert values.wcag == pytest.approx(21.0, abs=0.01)
    assert values.apca > 100
    assert contrast_from_luminance(0.0, 1.0).wcag == pytest.approx(21.0)


def test_validate_contrast_report():
    report = validate_contrast((0.3, 0.05, 250.0))
    assert report.wcag.on_white > report.wcag.on_black
    assert report.apca.on_white > report.apca.on_gray
    assert report.meets_aa
    assert report.meets_aa == (max(report.wcag) >= c.WCAG_AA_NORMAL)


def test_mid_gray_misses_aaa():
    report = validate_contrast((0.55, 0.0, 0.0))
    assert max(report.wcag) < c.WCAG_AAA_NORMAL
    assert not report.meets_aaa


def test_wcag_thresholds():
    assert meets_wcag_aa(4.5)
    assert not meets_wcag_aa(4.4)
    assert meets_wcag_aa(3.0, large_text=True)
    assert not meets_wcag_aaa(6.9)
    assert meets_wcag_aaa(4.5, large_text=True)


def test_wcag_levels():
    assert wcag_levels(4.6) == {"AA-Large": "Pass", "AA": "Pass", "AAA-Large": "Pass", "AAA": "Fail"}
    assert set(wcag_levels(1.0).values()) == {"Fail"}


@pytest.mark.parametrize("lc, level", [(95, "gold"), (-80, "silver"), (60, "bronze"), (59.9, "fail")])
def test_apca_compliance(lc, level):
    assert apca_compliance(lc) == level
