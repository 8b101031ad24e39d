"""
Accessibility reporting for generated palettes.

Contrast compliance is best effort in the generator, so front ends read it
from here and show a FAIL badge rather than treating a shortfall as an error.
"""

from collections import namedtuple
from dataclasses import dataclass
from typing import Tuple

from .color import WCAG_RATIOS
from .distance import min_pairwise_distance
from .settings import WcagLevel

ContrastInfo = namedtuple("ContrastInfo", ["ratio", "level", "compliant"])


def accessibility_level(ratio):
    """Badge for a contrast ratio: 'AAA', 'AA' or 'FAIL'."""
    if ratio >= WCAG_RATIOS["AAA"]:
        return "AAA"
    if ratio >= WCAG_RATIOS["AA"]:
        return "AA"
    return "FAIL"


def contrast_info(color, background, wcag_level=WcagLevel.AA):
    ratio = color.contrast_ratio(background)
    required = WcagLevel.from_value(wcag_level).ratio
    return ContrastInfo(ratio=ratio, level=accessibility_level(ratio), compliant=ratio >= required)


@dataclass(frozen=True)
class AccessibilityReport:
    """Per-slot contrast against both backgrounds plus palette distinctness."""

    wcag_level: WcagLevel
    light: Tuple[ContrastInfo, ...]
    dark: Tuple[ContrastInfo, ...]
    light_min_distance: float
    dark_min_distance: float
    differentiation_applied: bool

    @property
    def light_compliant(self):
        return all(info.compliant for info in self.light)

    @property
    def dark_compliant(self):
        return all(info.compliant for info in self.dark)

    @property
    def compliant(self):
        return self.light_compliant and self.dark_compliant


def accessibility_report(palettes, light_background=None, dark_background=None):
    """Build the accessibility report for a :class:`GeneratedPalettes`.

    Contrast is measured against the backgrounds the palettes were generated
    for unless others are given.
    """
    if light_background is None:
        light_background = palettes.light_background
    if dark_background is None:
        dark_background = palettes.dark_background
    level = palettes.settings.wcag_level
    return AccessibilityReport(
        wcag_level=level,
        light=tuple(contrast_info(c, light_background, level) for c in palettes.light_optimized),
        dark=tuple(contrast_info(c, dark_background, level) for c in palettes.dark_optimized),
        light_min_distance=min_pairwise_distance(palettes.light_optimized),
        dark_min_distance=min_pairwise_distance(palettes.dark_optimized),
        differentiation_applied=palettes.settings.differentiation.enabled,
    )
