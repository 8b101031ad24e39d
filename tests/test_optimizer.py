import pytest
from hypothesis import given, settings, strategies as st

from wcag_palette import DARK_BACKGROUND, WHITE, Color, HarmonyType, optimize_color, optimize_palette
from wcag_palette.optimizer import is_light_background, target_lightness_range, upper_bound_for


hsl_colors = st.builds(
    Color.from_hsl,
    st.floats(0, 360, exclude_max=True, allow_nan=False),
    st.floats(0, 100, allow_nan=False),
    st.floats(0, 100, allow_nan=False),
)


def test_background_classification():
    assert is_light_background(WHITE)
    assert not is_light_background(DARK_BACKGROUND)
    assert DARK_BACKGROUND.hex == "#2C3E50"


def test_upper_bounds():
    assert upper_bound_for(4.5) == 6.0
    assert upper_bound_for(7.0) == 8.5


@pytest.mark.parametrize(
    "light, index, size, harmony, expected",
    [
        (True, 0, 5, HarmonyType.TRIADIC, (15, 35)),
        (True, 7, 5, HarmonyType.TRIADIC, (35, 55)),
        (True, 2, 5, HarmonyType.MONOCHROMATIC, (40, 55)),
        (True, 4, 5, HarmonyType.MONOCHROMATIC, (70, 85)),
        (True, 2, 3, HarmonyType.MONOCHROMATIC, (50, 65)),
        (False, 1, 3, HarmonyType.TRIADIC, (60, 80)),
        (False, 4, 5, HarmonyType.MONOCHROMATIC, (75, 95)),
    ],
)
def test_target_lightness_range(light, index, size, harmony, expected):
    assert target_lightness_range(light, index, size, harmony) == expected


def test_compliant_color_is_returned_unchanged():
    black = Color.from_hex("#000000")
    assert optimize_color(black, WHITE, 4.5, 0, 5) is black


def test_scan_lands_inside_contrast_band():
    yellow = Color.from_hex("#FFFF66")
    result = optimize_color(yellow, WHITE, 4.5, 0, 5)
    assert 4.5 <= result.contrast_ratio(WHITE) <= 6.0
    assert result.hsl.l == 21
    assert result.hsl.h == pytest.approx(yellow.hsl.h)
    assert result.hsl.s == pytest.approx(yellow.hsl.s)


def test_unreachable_target_returns_closest_attempt():
    gray = Color.from_hex("#333333")
    background = Color.from_hex("#777777")
    result = optimize_color(gray, background, 4.5, 0, 5)
    assert gray.contrast_ratio(background) < result.contrast_ratio(background) < 4.5


def test_clamp_upper_bound_is_opt_in():
    black = Color.from_hex("#000000")
    clamped = optimize_color(black, WHITE, 4.5, 0, 5, clamp_upper_bound=True)
    assert clamped.hex != black.hex
    assert 4.5 <= clamped.contrast_ratio(WHITE) < 21


@settings(max_examples=50, deadline=None)
@given(hsl_colors, st.integers(0, 4), st.sampled_from([4.5, 7.0]))
def test_light_background_target_always_reached(color, index, ratio):
    result = optimize_color(color, WHITE, ratio, index, 5)
    assert result.contrast_ratio(WHITE) >= ratio


@settings(max_examples=50, deadline=None)
@given(hsl_colors, st.integers(0, 4), st.sampled_from([4.5, 7.0]))
def test_dark_background_target_always_reached(color, index, ratio):
    result = optimize_color(color, DARK_BACKGROUND, ratio, index, 5)
    assert result.contrast_ratio(DARK_BACKGROUND) >= ratio


def test_optimize_palette_keeps_order_and_length():
    palette = tuple(Color.from_hsl(h, 70, 50) for h in (0, 72, 144, 216, 288))
    result = optimize_palette(palette, WHITE, 4.5)
    assert len(result) == 5
    for before, after in zip(palette, result):
        assert after.hsl.h == pytest.approx(before.hsl.h)
        assert after.contrast_ratio(WHITE) >= 4.5
