import pytest
from hypothesis import given, strategies as st

from wcag_palette import Color, InvalidColorFormat, hue_distance, is_valid_hex


channel = st.integers(0, 255)
rgb_colors = st.builds(Color.from_rgb, channel, channel, channel)


def test_from_hex_accepts_case_and_optional_hash():
    assert Color.from_hex("#5500AA").hex == "#5500AA"
    assert Color.from_hex("5500aa").hex == "#5500AA"
    assert Color.from_hex("#5500aa").rgb == (85, 0, 170)


def test_from_hex_derives_hsl():
    h, s, l = Color.from_hex("#FF0000").hsl
    assert (h, s, l) == pytest.approx((0.0, 100.0, 50.0))
    h, s, l = Color.from_hex("#5500AA").hsl
    assert (h, s, l) == pytest.approx((270.0, 100.0, 100 / 3))


def test_from_hex_achromatic_has_zero_hue_and_saturation():
    h, s, l = Color.from_hex("#808080").hsl
    assert h == 0
    assert s == 0
    assert l == pytest.approx(50.196, abs=1e-3)


@pytest.mark.parametrize("value", ["#12345", "#1234567", "#GGGGGG", "", "##123456", "12 456", None, 0x123456])
def test_from_hex_rejects_malformed(value):
    with pytest.raises(InvalidColorFormat):
        Color.from_hex(value)
    assert not is_valid_hex(value)


def test_invalid_color_format_is_value_error():
    with pytest.raises(ValueError):
        Color.from_hex("nope")


def test_from_hsl_primaries():
    assert Color.from_hsl(0, 100, 50).hex == "#FF0000"
    assert Color.from_hsl(120, 100, 50).hex == "#00FF00"
    assert Color.from_hsl(240, 100, 50).hex == "#0000FF"


def test_from_hsl_rounds_half_up_and_keeps_fractional_rgb():
    navy = Color.from_hsl(240, 100, 25)
    assert navy.rgb.b == pytest.approx(127.5)
    assert navy.hex == "#000080"


def test_from_hsl_wraps_hue():
    assert Color.from_hsl(360, 100, 50).hsl.h == 0
    assert Color.from_hsl(-120, 100, 50).hex == Color.from_hsl(240, 100, 50).hex


def test_color_is_immutable():
    color = Color.from_hex("#5500AA")
    with pytest.raises(AttributeError):
        color.hex = "#000000"
    changed = color.with_hsl(l=60)
    assert changed is not color
    assert color.hex == "#5500AA"
    assert changed.hsl.h == color.hsl.h


def test_luminance_extremes():
    assert Color.from_hex("#FFFFFF").luminance() == pytest.approx(1.0)
    assert Color.from_hex("#000000").luminance() == 0.0


def test_contrast_black_on_white():
    white = Color.from_hex("#FFFFFF")
    black = Color.from_hex("#000000")
    assert black.contrast_ratio(white) == pytest.approx(21.0)
    assert white.contrast_ratio(white) == pytest.approx(1.0)


def test_meets_contrast_levels():
    white = Color.from_hex("#FFFFFF")
    gray = Color.from_hex("#767676")
    assert gray.contrast_ratio(white) == pytest.approx(4.54, abs=0.01)
    assert gray.meets_contrast(white, "AA")
    assert not gray.meets_contrast(white, "AAA")
    assert Color.from_hex("#000000").meets_contrast(white, "AAA")


@given(rgb_colors, rgb_colors)
def test_contrast_ratio_symmetric_and_bounded(a, b):
    ratio = a.contrast_ratio(b)
    assert ratio == b.contrast_ratio(a)
    assert 1.0 <= ratio <= 21.0 + 1e-9


@given(
    h=st.floats(0, 360, exclude_max=True, allow_nan=False),
    s=st.floats(0, 100, allow_nan=False),
    l=st.floats(0, 100, allow_nan=False),
)
def test_hsl_round_trip(h, s, l):
    color = Color.from_hsl(h, s, l)
    assert color.hsl.h == pytest.approx(h, abs=1)
    assert color.hsl.s == pytest.approx(s, abs=1)
    assert color.hsl.l == pytest.approx(l, abs=1)
    assert Color.from_hex(color.hex).hex == color.hex


@given(rgb_colors)
def test_hex_round_trip(color):
    assert Color.from_hex(color.hex) == color


def test_hue_distance_is_circular():
    assert hue_distance(350, 10) == 20
    assert hue_distance(10, 350) == 20
    assert hue_distance(0, 180) == 180
    assert hue_distance(-10, 10) == 20
