"""
Base palette builder: expands a base color and harmony scheme into a
deterministic sequence of colors.
"""

import logging

from . import tables
from .color import Color
from .errors import InvalidColorFormat, InvalidSize
from .harmony import HarmonyType, harmony_hues, hue_for_slot

logger = logging.getLogger(__name__)

DEFAULT_BASE_COLOR = "#5500AA"


def validate_size(size, strict=False):
    """Return a supported palette size, coercing anything else to 5."""
    try:
        value = int(size)
    except (TypeError, ValueError):
        value = None
    if value != size and str(value) != str(size).strip():
        # 3.7 must not truncate to 3
        value = None
    if value in tables.SUPPORTED_SIZES:
        return value
    if strict:
        raise InvalidSize(size)
    logger.warning("Invalid palette size %r, defaulting to %d", size, tables.DEFAULT_SIZE)
    return tables.DEFAULT_SIZE


def parse_base_color(base_color, fallback=DEFAULT_BASE_COLOR):
    """Parse the base color, substituting ``fallback`` when it is malformed.

    With ``fallback=None`` the :class:`InvalidColorFormat` propagates.
    """
    try:
        return Color.from_hex(base_color)
    except InvalidColorFormat:
        if fallback is None:
            raise
        logger.warning("Invalid base color %r, using default %s", base_color, fallback)
        return Color.from_hex(fallback)


def _clamp(value, bounds):
    low, high = bounds
    return max(low, min(high, value))


def harmony_slot_hsl(base, hues, harmony_type, index, size):
    """HSL for generated slot ``index`` (>= 1) before the final clamp."""
    key = tables.size_key(size)

    if harmony_type == HarmonyType.MONOCHROMATIC:
        hue = (base.hsl.h + (index - 1) * tables.MONOCHROMATIC_HUE_STEP) % 360
        saturation = _clamp(
            base.hsl.s + (index - 2) * tables.MONOCHROMATIC_SATURATION_STEP,
            tables.MONOCHROMATIC_SATURATION_RANGE,
        )
        lightness = tables.MONOCHROMATIC_LIGHTNESS[key][index - 1]
        return hue, saturation, lightness

    hue = hue_for_slot(hues, index)
    saturation = tables.BASE_SATURATION[key][index - 1]
    lightness = tables.BASE_LIGHTNESS[key][index - 1]

    if harmony_type == HarmonyType.COMPLEMENTARY:
        if index == 1:
            saturation = min(85, saturation + 10)
            lightness = max(20, lightness - 5)
    elif harmony_type == HarmonyType.ANALOGOUS:
        saturation = max(50, saturation - 5)
        if index == 2:
            lightness = min(80, lightness + 10)
    elif harmony_type == HarmonyType.TETRADIC:
        if index % 2 == 1:
            lightness = max(15, lightness - 10)
        else:
            lightness = min(85, lightness + 10)

    return hue, saturation, lightness


def build_base_palette(base_color, harmony_type, size, fallback=DEFAULT_BASE_COLOR):
    """Build the unoptimized palette for a base color and harmony.

    Slot 0 is the parsed base color exactly as given; the remaining slots
    take their hue from the harmony and their saturation/lightness from the
    fixed tables, clamped to the generated-color ranges.
    """
    harmony_type = HarmonyType.from_value(harmony_type)
    size = validate_size(size)
    base = parse_base_color(base_color, fallback=fallback)
    hues = harmony_hues(harmony_type, base.hsl.h)

    colors = [base]
    for index in range(1, size):
        hue, saturation, lightness = harmony_slot_hsl(base, hues, harmony_type, index, size)
        colors.append(Color.from_hsl(
            hue,
            _clamp(saturation, tables.SATURATION_RANGE),
            _clamp(lightness, tables.LIGHTNESS_RANGE),
        ))

    logger.debug("Base palette (%s, %d): %s", harmony_type.value, size, [c.hex for c in colors])
    return tuple(colors)
