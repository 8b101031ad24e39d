"""
Contrast optimizer: moves palette colors along the lightness axis until
they reach a target WCAG contrast band against a background.

The search is bounded and heuristic. When the band cannot be reached the
closest attainable color is returned, so callers must re-check contrast if
compliance has to be certain.
"""

import logging

from . import tables
from .color import Color
from .harmony import HarmonyType

logger = logging.getLogger(__name__)

WHITE = Color.from_hex("#FFFFFF")
DARK_BACKGROUND = Color.from_hex("#2C3E50")


def is_light_background(background):
    return background.luminance() > 0.5


def upper_bound_for(target_ratio):
    """Upper end of the acceptable contrast band for a target ratio."""
    return tables.UPPER_BOUNDS.get(target_ratio, tables.DEFAULT_UPPER_BOUND)


def target_lightness_range(light_background, index, size, harmony_type):
    """Initial [min, max] lightness range searched for palette slot ``index``."""
    if light_background:
        if harmony_type == HarmonyType.MONOCHROMATIC:
            step = tables.MONOCHROMATIC_RANGE_STEP[tables.size_key(size)]
            start = tables.MONOCHROMATIC_RANGE_OFFSET + index * step
            return (start, start + tables.MONOCHROMATIC_RANGE_WIDTH)
        ranges = tables.LIGHT_BACKGROUND_RANGES
    else:
        ranges = tables.DARK_BACKGROUND_RANGES[tables.size_key(size)]
    return ranges[index % len(ranges)]


def _scan_range(color, background, target_ratio, upper_bound, lightness_range):
    """Scan the range in fixed steps.

    Returns ``(match, best)``: the first candidate inside the band (or None)
    and the candidate whose contrast is closest to the target.
    """
    h, s, _ = color.hsl
    best = color
    best_gap = abs(color.contrast_ratio(background) - target_ratio)

    low, high = lightness_range
    for lightness in range(low, high + 1, tables.SCAN_STEP):
        candidate = Color.from_hsl(h, s, lightness)
        contrast = candidate.contrast_ratio(background)
        if target_ratio <= contrast <= upper_bound:
            return candidate, best
        gap = abs(contrast - target_ratio)
        if gap < best_gap:
            best, best_gap = candidate, gap
    return None, best


def _expanded_search(color, background, target_ratio, light_background, lightness_range, best):
    """Walk from the middle of the range toward higher contrast."""
    h, s, _ = color.hsl
    step = 1 if target_ratio >= 7 else 2
    direction = -1 if light_background else 1
    lower, upper = tables.EXPANDED_SEARCH_LIMITS
    lightness = sum(lightness_range) / 2
    best_contrast = best.contrast_ratio(background)

    for _ in range(tables.EXPANDED_SEARCH_STEPS):
        lightness += direction * step
        if lightness < lower or lightness > upper:
            break
        candidate = Color.from_hsl(h, s, lightness)
        contrast = candidate.contrast_ratio(background)
        if contrast >= target_ratio:
            return candidate
        if contrast > best_contrast:
            best, best_contrast = candidate, contrast
    return best


def find_optimal_color(color, background, target_ratio, upper_bound, index, size,
                       harmony_type=HarmonyType.TRIADIC):
    """Search lightness space for a color meeting the contrast band."""
    light_background = is_light_background(background)
    lightness_range = target_lightness_range(light_background, index, size, harmony_type)

    match, best = _scan_range(color, background, target_ratio, upper_bound, lightness_range)
    if match is not None:
        return match

    result = _expanded_search(
        color, background, target_ratio, light_background, lightness_range, best
    )
    if result.contrast_ratio(background) < target_ratio:
        logger.debug(
            "Slot %d: best attainable contrast %.2f for %s is below %.1f",
            index, result.contrast_ratio(background), color.hex, target_ratio,
        )
    return result


def optimize_color(color, background, target_ratio, index, size,
                   harmony_type=HarmonyType.TRIADIC, upper_bound=None,
                   clamp_upper_bound=False):
    """Return a color meeting ``target_ratio`` against ``background``.

    A color that already meets the target is returned unchanged, even above
    the upper bound, unless ``clamp_upper_bound`` is set.
    """
    if upper_bound is None:
        upper_bound = upper_bound_for(target_ratio)

    contrast = color.contrast_ratio(background)
    if contrast >= target_ratio and (not clamp_upper_bound or contrast <= upper_bound):
        return color

    optimized = find_optimal_color(
        color, background, target_ratio, upper_bound, index, size, harmony_type
    )
    if clamp_upper_bound and contrast >= target_ratio \
            and optimized.contrast_ratio(background) < target_ratio:
        # Clamping must never trade a compliant color for a failing one
        return color
    logger.debug("Slot %d optimized %s -> %s", index, color.hex, optimized.hex)
    return optimized


def optimize_palette(palette, background, target_ratio,
                     harmony_type=HarmonyType.TRIADIC, clamp_upper_bound=False):
    """Optimize every slot of a palette for one background."""
    size = len(palette)
    return tuple(
        optimize_color(
            color, background, target_ratio, index, size,
            harmony_type=harmony_type, clamp_upper_bound=clamp_upper_bound,
        )
        for index, color in enumerate(palette)
    )
