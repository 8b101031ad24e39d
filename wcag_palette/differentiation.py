"""
Differentiation engine: increases pairwise separation between the colors of
an optimized palette while keeping them within contrast compliance.

General palettes go through three stages, each a pure function returning a
new palette:

1. ``redistribute_lightness`` moves every slot onto a fixed lightness ladder.
2. ``adjust_saturation`` pushes apart pairs that are still similar.
3. ``adjust_hue`` nudges hue by a bounded amount for pairs that remain
   nearly identical.

In every stage the later slot of a pair absorbs the correction. Palettes
whose hues all sit within a few degrees of the first slot take the
dedicated monochromatic route instead.
"""

import logging
from itertools import combinations

from . import tables
from .color import Color, hue_distance
from .harmony import HarmonyType
from .optimizer import find_optimal_color, is_light_background

logger = logging.getLogger(__name__)

DEFAULT_MIN_HUE_DIFFERENCE = 15
DEFAULT_MIN_LUMINANCE_DIFFERENCE = 10


def is_monochromatic(palette):
    """True when every hue is within 5 degrees of the first slot's hue."""
    first_hue = palette[0].hsl.h
    return all(
        hue_distance(color.hsl.h, first_hue) < tables.MONOCHROMATIC_DETECTION_HUE
        for color in palette
    )


def lightness_ladder(size, light_background):
    key = tables.size_key(size)
    if light_background:
        return tables.LIGHT_BACKGROUND_LADDER[key]
    return tables.DARK_BACKGROUND_LADDER[key]


def _move_to_lightness(color, background, min_ratio, target):
    """Slot color at ``target`` lightness, or the nearest step away from the
    background that meets ``min_ratio``; the input color if none does."""
    h, s, _ = color.hsl
    candidate = Color.from_hsl(h, s, target)
    if candidate.contrast_ratio(background) >= min_ratio:
        return candidate

    direction = -1 if is_light_background(background) else 1
    lower, upper = tables.EXPANDED_SEARCH_LIMITS
    for adjustment in range(tables.LADDER_SEARCH_STEP, tables.LADDER_SEARCH_MAX + 1,
                            tables.LADDER_SEARCH_STEP):
        lightness = max(lower, min(upper, target + direction * adjustment))
        candidate = Color.from_hsl(h, s, lightness)
        if candidate.contrast_ratio(background) >= min_ratio:
            return candidate
    return color


def redistribute_lightness(palette, background, min_ratio):
    """Stage 1: spread slots over the per-background lightness ladder."""
    ladder = lightness_ladder(len(palette), is_light_background(background))
    result = []
    for index, color in enumerate(palette):
        adjusted = _move_to_lightness(color, background, min_ratio, ladder[index % len(ladder)])
        if adjusted is not color:
            logger.debug("Lightness adjusted slot %d: %s -> %s", index, color.hex, adjusted.hex)
        result.append(adjusted)
    return tuple(result)


def _keeps_compliance(candidate, current, background, min_ratio):
    contrast = candidate.contrast_ratio(background)
    return contrast >= min_ratio or contrast >= current.contrast_ratio(background)


def adjust_saturation(palette, background, min_ratio):
    """Stage 2: separate pairs with close saturation and lightness."""
    pairs = [
        (i, j) for i, j in combinations(range(len(palette)), 2)
        if abs(palette[i].hsl.s - palette[j].hsl.s) < tables.SATURATION_SIMILARITY
        and abs(palette[i].hsl.l - palette[j].hsl.l) < tables.SATURATION_PAIR_LIGHTNESS
    ]
    logger.debug("Found %d similar saturation pairs", len(pairs))

    result = list(palette)
    low, high = tables.SATURATION_RANGE
    for i, j in pairs:
        first, second = result[i], result[j]
        if second.hsl.s > first.hsl.s:
            saturation = min(high, second.hsl.s + tables.SATURATION_PUSH)
        else:
            saturation = max(low, second.hsl.s - tables.SATURATION_PUSH)
        candidate = second.with_hsl(s=saturation)
        if _keeps_compliance(candidate, second, background, min_ratio):
            logger.debug("Saturation adjusted slot %d: %s -> %s", j, second.hex, candidate.hex)
            result[j] = candidate
    return tuple(result)


def adjust_hue(palette, background, min_ratio,
               min_hue_difference=DEFAULT_MIN_HUE_DIFFERENCE,
               min_luminance_difference=DEFAULT_MIN_LUMINANCE_DIFFERENCE):
    """Stage 3: bounded hue nudge for pairs still alike in every channel."""
    pairs = []
    for i, j in combinations(range(len(palette)), 2):
        a, b = palette[i].hsl, palette[j].hsl
        if (hue_distance(a.h, b.h) < min_hue_difference
                and abs(a.l - b.l) < min_luminance_difference
                and abs(a.s - b.s) < tables.HUE_PAIR_SATURATION):
            pairs.append((i, j))
    logger.debug("Found %d pairs needing hue adjustment", len(pairs))

    result = list(palette)
    for _, j in pairs:
        color = result[j]
        for direction in (1, -1):
            candidate = color.with_hsl(h=(color.hsl.h + direction * tables.HUE_ADJUSTMENT) % 360)
            if candidate.contrast_ratio(background) >= min_ratio:
                logger.debug("Hue adjusted slot %d: %s -> %s", j, color.hex, candidate.hex)
                result[j] = candidate
                break
    return tuple(result)


def differentiate_monochromatic(palette, background, min_ratio,
                                harmony_type=HarmonyType.MONOCHROMATIC):
    """Spread a single-hue palette over a wide lightness ladder.

    Slots that end up below ``min_ratio`` are repaired with the contrast
    optimizer; a slot the repair cannot bring back to its previous
    compliance reverts to its input color.
    """
    light_background = is_light_background(background)
    ladder = tables.MONOCHROMATIC_LADDER[tables.size_key(len(palette))]
    base_hue = palette[0].hsl.h

    spread = []
    for index, color in enumerate(palette):
        # Longer palettes wrap around the ladder
        lightness = ladder[index % len(ladder)]
        if not light_background:
            lightness = 100 - lightness
        spread.append(Color.from_hsl(
            (base_hue + index * tables.MONOCHROMATIC_SLOT_HUE_OFFSET) % 360,
            max(tables.MONOCHROMATIC_MIN_SATURATION, color.hsl.s),
            lightness,
        ))

    upper_bound = min_ratio * tables.REPAIR_UPPER_BOUND_FACTOR
    result = []
    for index, (original, color) in enumerate(zip(palette, spread)):
        if color.contrast_ratio(background) < min_ratio:
            color = find_optimal_color(
                color, background, min_ratio, upper_bound, index, len(palette), harmony_type
            )
            floor = min(min_ratio, original.contrast_ratio(background))
            if color.contrast_ratio(background) < floor:
                logger.debug("Slot %d could not be repaired, keeping %s", index, original.hex)
                color = original
        result.append(color)
    return tuple(result)


def differentiate(palette, background, min_ratio,
                  min_hue_difference=DEFAULT_MIN_HUE_DIFFERENCE,
                  min_luminance_difference=DEFAULT_MIN_LUMINANCE_DIFFERENCE,
                  harmony_type=HarmonyType.TRIADIC):
    """Run the differentiation pipeline on an optimized palette.

    Parameters
    ----------
    palette:
        Contrast-optimized palette (sequence of :class:`Color`).
    background:
        Background the palette was optimized for.
    min_ratio:
        Minimum contrast ratio every accepted move must keep.
    min_hue_difference, min_luminance_difference:
        Similarity thresholds for the hue stage.
    harmony_type:
        Harmony the palette was built from; selects the optimizer ranges
        used by the monochromatic contrast repair.

    Returns
    -------
    tuple of Color
        New palette; the input is left untouched.
    """
    palette = tuple(palette)
    if not palette:
        return palette

    if is_monochromatic(palette):
        logger.debug("Monochromatic palette detected, using dedicated routine")
        return differentiate_monochromatic(palette, background, min_ratio, harmony_type)

    palette = redistribute_lightness(palette, background, min_ratio)
    palette = adjust_saturation(palette, background, min_ratio)
    return adjust_hue(
        palette, background, min_ratio,
        min_hue_difference=min_hue_difference,
        min_luminance_difference=min_luminance_difference,
    )
