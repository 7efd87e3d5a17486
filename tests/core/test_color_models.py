import pytest
from pydantic import ValidationError

from utilbelt.core.data_models import Color, HSLColor


@pytest.fixture
def red():
    return Color.from_rgb(255, 0, 0)


def test_from_rgb_scales_to_unit_floats(red):
    assert red.r == 1.0
    assert red.g == 0.0
    assert red.b == 0.0
    assert red.a == 1.0
    assert (red.red, red.green, red.blue, red.alpha) == (255, 0, 0, 255)


def test_from_rgb_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color.from_rgb(256, 0, 0)


def test_channels_are_validated():
    with pytest.raises(ValidationError):
        Color(r=1.5, g=0.0, b=0.0)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#FF0000", 0xFFFF0000),
        ("00ff00", 0xFF00FF00),
        ("#00F", 0xFF0000FF),
        ("#80FF0000", 0x80FF0000),
    ],
)
def test_from_hex(value, expected):
    assert Color.from_hex(value).to_argb() == expected


@pytest.mark.parametrize("value", ["", "#12", "#GGGGGG", "#12345"])
def test_from_hex_rejects_invalid(value):
    with pytest.raises(ValueError):
        Color.from_hex(value)


def test_argb_round_trip():
    assert Color.from_argb(0x7F123456).to_argb() == 0x7F123456


def test_from_argb_rejects_values_over_32_bits():
    with pytest.raises(ValueError):
        Color.from_argb(0x1FFFFFFFF)


def test_hsl_conversion(red):
    hsl = HSLColor.from_color(red)
    assert hsl.hue == pytest.approx(0.0)
    assert hsl.saturation == pytest.approx(1.0)
    assert hsl.lightness == pytest.approx(0.5)
    assert hsl.to_color().to_argb() == red.to_argb()


def test_hsl_with_hue_wraps_on_conversion(red):
    cyan = HSLColor.from_color(red).with_hue(180.0).to_color()
    assert (cyan.red, cyan.green, cyan.blue) == (0, 255, 255)
    assert HSLColor.from_color(red).with_hue(360.0).to_color().to_argb() == red.to_argb()


def test_models_are_frozen(red):
    with pytest.raises(ValidationError):
        red.r = 0.5
