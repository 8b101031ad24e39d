"""
Color harmony schemes: hue relationships on the HSL color wheel.
"""

from enum import Enum

from .errors import InvalidSettings


class HarmonyType(str, Enum):
    """Harmony schemes supported by the base palette builder."""

    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    ANALOGOUS = "analogous"
    MONOCHROMATIC = "monochromatic"
    TETRADIC = "tetradic"

    @classmethod
    def from_value(cls, value):
        if isinstance(value, cls):
            return value
        for harmony in cls:
            if harmony.value == str(value).strip().lower():
                return harmony
        raise InvalidSettings(f"Unknown harmony type: {value!r}")


# Hue offsets in degrees relative to the base hue, in slot order
HUE_OFFSETS = {
    HarmonyType.COMPLEMENTARY: (0, 180),
    HarmonyType.TRIADIC: (0, 120, 240),
    HarmonyType.ANALOGOUS: (0, 25, 50, -25, -50),
    HarmonyType.MONOCHROMATIC: (0, 0, 0, 0, 0),
    HarmonyType.TETRADIC: (0, 90, 180, 270),
}

HARMONY_DESCRIPTIONS = {
    HarmonyType.COMPLEMENTARY: (
        "Colors opposite each other on the color wheel, creating high "
        "contrast and vibrant looks."
    ),
    HarmonyType.TRIADIC: (
        "Three colors evenly spaced around the color wheel (120° apart), "
        "offering strong visual contrast while retaining balance."
    ),
    HarmonyType.ANALOGOUS: (
        "Colors adjacent on the color wheel (25-50° apart), creating "
        "serene designs with subtle variations."
    ),
    HarmonyType.MONOCHROMATIC: (
        "Variations of a single hue using different lightness and saturation "
        "levels, creating cohesive designs."
    ),
    HarmonyType.TETRADIC: (
        "Four colors forming a rectangle on the color wheel (90° apart), "
        "offering rich contrasts for complex color schemes."
    ),
}


def harmony_hues(harmony_type, base_hue):
    """Return the harmony's hues for a base hue, each wrapped into [0, 360)."""
    offsets = HUE_OFFSETS[HarmonyType.from_value(harmony_type)]
    return [(base_hue + offset) % 360 for offset in offsets]


def hue_for_slot(hues, index):
    """Hue used by palette slot ``index``; wraps around short hue lists."""
    return hues[index % len(hues)]


def describe_harmony(harmony_type):
    return HARMONY_DESCRIPTIONS[HarmonyType.from_value(harmony_type)]


def available_harmony_types():
    return [harmony.value for harmony in HarmonyType]
