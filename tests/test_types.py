import pytest

from scalelab.core import config as c
from scalelab.core.curves import Curve
from scalelab.core.types import (
    ApcaTarget,
    ColorRequest,
    FixedLightness,
    GamutInfo,
    LuminanceMatched,
    Standard,
    WcagTarget,
    contrast_mode_from_name,
)


def test_request_normalizes_hue():
    assert ColorRequest(0.5, 0.1, -90).hue == pytest.approx(270.0)
    assert ColorRequest(0.5, 0.1, 360).hue == 0.0


def test_request_is_hashable_and_comparable():
    a = ColorRequest(0.5, 0.1, 30, hue_curve=Curve(10, 1.2))
    b = ColorRequest(0.5, 0.1, 30, hue_curve=Curve(10, 1.2))
    assert a == b
    assert hash(a) == hash(b)
    assert a != ColorRequest(0.5, 0.1, 30)


@pytest.mark.parametrize("kwargs", [
    dict(lightness=1.2, chroma=0.1, hue=0),
    dict(lightness=0.5, chroma=-0.1, hue=0),
    dict(lightness=0.5, chroma=0.41, hue=0),
    dict(lightness=0.5, chroma=5.0, hue=30, contrast_mode=ApcaTarget(75)),
    dict(lightness=float("nan"), chroma=0.1, hue=0),
    dict(lightness=0.5, chroma=0.1, hue=float("inf")),
    dict(lightness=0.5, chroma=0.1, hue=0, contrast_mode="standard"),
])
def test_request_validation(kwargs):
    with pytest.raises(ValueError):
        ColorRequest(**kwargs)


def test_request_defaults():
    request = ColorRequest(0.5, 0.1, 0)
    assert request.contrast_mode == Standard()
    assert request.target_background == c.DEFAULT_BACKGROUND
    assert request.calculate_contrast is False
    assert request.chroma_compensation is True


def test_mode_names():
    assert isinstance(contrast_mode_from_name("apca-fixed"), FixedLightness)
    assert isinstance(contrast_mode_from_name(" Luminance-Matched "), LuminanceMatched)
    assert contrast_mode_from_name("apca-target", target_lc=60) == ApcaTarget(60)
    assert contrast_mode_from_name("wcag-target", target_ratio=7) == WcagTarget(7)
    with pytest.raises(ValueError):
        contrast_mode_from_name("vivid")


def test_targets_must_be_positive():
    with pytest.raises(ValueError):
        ApcaTarget(0)
    with pytest.raises(ValueError):
        WcagTarget(-1)


def test_gamut_info_measure():
    info = GamutInfo.measure(0.6, 0.2, 0.6, 0.15)
    assert info.chroma_reduction_fraction == pytest.approx(0.25)
    assert info.lightness_shift == 0.0
    assert info.was_modified
    assert not GamutInfo.measure(0.6, 0.0, 0.6, 0.0).was_modified


def test_request_accepts_chroma_ceiling():
    assert ColorRequest(0.5, c.MAX_CHROMA, 0).chroma == c.MAX_CHROMA


def test_gamut_info_keeps_requested_hue():
    assert GamutInfo.measure(0.3, 0.1, 0.3, 0.1, 254.0).original_hue == 254.0
