import logging

import pytest

from wcag_palette import HarmonyType, InvalidColorFormat, InvalidSize, build_base_palette, validate_size


def hsl_of(color):
    return tuple(color.hsl)


@pytest.mark.parametrize("size, expected", [(3, 3), (5, 5), ("3", 3), (4, 5), (0, 5), (7, 5), (3.7, 5), ("x", 5), (None, 5)])
def test_validate_size_coerces_to_five(size, expected):
    assert validate_size(size) == expected


def test_validate_size_strict():
    with pytest.raises(InvalidSize):
        validate_size(4, strict=True)
    assert validate_size(3, strict=True) == 3


@pytest.mark.parametrize("harmony", list(HarmonyType))
@pytest.mark.parametrize("size", [3, 5])
def test_first_slot_is_base_color(harmony, size):
    palette = build_base_palette("#5500AA", harmony, size)
    assert len(palette) == size
    assert palette[0].hex == "#5500AA"


@pytest.mark.parametrize("harmony", list(HarmonyType))
def test_palette_is_deterministic(harmony):
    first = build_base_palette("#1A73E8", harmony, 5)
    second = build_base_palette("#1A73E8", harmony, 5)
    assert [c.hex for c in first] == [c.hex for c in second]


@pytest.mark.parametrize("harmony", list(HarmonyType))
@pytest.mark.parametrize("base", ["#5500AA", "#000000", "#FFFFFF", "#FFFF00"])
def test_generated_slots_are_clamped(harmony, base):
    for color in build_base_palette(base, harmony, 5)[1:]:
        assert 20 <= color.hsl.s <= 95
        assert 10 <= color.hsl.l <= 90


def test_triadic_hues_follow_harmony():
    palette = build_base_palette("#FF0000", "triadic", 5)
    assert [c.hsl.h for c in palette] == pytest.approx([0, 120, 240, 0, 120])


def test_triadic_tables_size_5():
    palette = build_base_palette("#FF0000", "triadic", 5)
    assert [hsl_of(c)[1:] for c in palette[1:]] == [(75, 50), (60, 35), (85, 70), (50, 20)]


def test_triadic_tables_size_3():
    palette = build_base_palette("#FF0000", "triadic", 3)
    assert [hsl_of(c)[1:] for c in palette[1:]] == [(75, 50), (60, 35)]


def test_complementary_bias_on_first_generated_slot():
    palette = build_base_palette("#FF0000", "complementary", 5)
    assert hsl_of(palette[1]) == pytest.approx((180, 85, 45))
    assert hsl_of(palette[2]) == pytest.approx((0, 60, 35))


def test_analogous_bias():
    palette = build_base_palette("#FF0000", "analogous", 5)
    assert [hsl_of(c) for c in palette[1:]] == pytest.approx([
        (25, 70, 50), (50, 55, 45), (335, 80, 70), (310, 50, 20),
    ])


def test_tetradic_alternates_lightness():
    palette = build_base_palette("#FF0000", "tetradic", 5)
    assert [c.hsl.l for c in palette[1:]] == [40, 45, 60, 30]
    assert [c.hsl.h for c in palette[1:]] == pytest.approx([90, 180, 270, 0])


def test_monochromatic_ladder_size_5():
    palette = build_base_palette("#5500AA", "monochromatic", 5)
    assert [hsl_of(c) for c in palette[1:]] == pytest.approx([
        (270, 85, 15), (280, 90, 35), (290, 90, 55), (300, 90, 75),
    ])


def test_monochromatic_ladder_size_3():
    palette = build_base_palette("#5500AA", "monochromatic", 3)
    assert [hsl_of(c) for c in palette[1:]] == pytest.approx([(270, 85, 30), (280, 90, 50)])


def test_monochromatic_saturation_floor():
    palette = build_base_palette("#808080", "monochromatic", 5)
    assert [c.hsl.s for c in palette[1:]] == [30, 30, 30, 30]


def test_invalid_base_color_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="wcag_palette.base_palette"):
        palette = build_base_palette("not-a-color", "triadic", 3)
    assert palette[0].hex == "#5500AA"
    assert "Invalid base color" in caplog.text


def test_invalid_base_color_without_fallback_raises():
    with pytest.raises(InvalidColorFormat):
        build_base_palette("#12345", "triadic", 3, fallback=None)
