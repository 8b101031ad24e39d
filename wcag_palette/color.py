"""
Immutable color value with hex, RGB and HSL views plus WCAG metrics.
"""

import colorsys
import math
import re
from collections import namedtuple
from dataclasses import dataclass

import numpy as np

from .errors import InvalidColorFormat


RGB = namedtuple("RGB", ["r", "g", "b"])
HSL = namedtuple("HSL", ["h", "s", "l"])

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

# Minimum contrast ratio per WCAG level (normal text)
WCAG_RATIOS = {"AA": 4.5, "AAA": 7.0}


def relative_luminance(rgb):
    """Calculate WCAG relative luminance for RGB (0-255).

    Accepts a single (r, g, b) triple or an (N, 3) array and returns a float
    or an array of N luminances respectively.
    """
    channels = np.asarray(rgb, dtype=float) / 255.0
    linear = np.where(
        channels <= 0.03928,
        channels / 12.92,
        ((channels + 0.055) / 1.055) ** 2.4,
    )
    luminance = linear @ np.array([0.2126, 0.7152, 0.0722])
    if np.ndim(luminance) == 0:
        return float(luminance)
    return luminance


def contrast_from_luminance(l1, l2):
    """Contrast ratio between two relative luminances."""
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def hue_distance(h1, h2):
    """Circular distance between two hues in degrees, in [0, 180]."""
    diff = abs(h1 % 360.0 - h2 % 360.0)
    return min(diff, 360.0 - diff)


def is_valid_hex(value):
    return isinstance(value, str) and HEX_PATTERN.match(value) is not None


def _round_channel(value):
    # Half-up rounding; Python's round() would send 127.5 to 128 but 126.5 to 126
    return int(math.floor(value + 0.5))


def _clamp(value, low, high):
    return max(low, min(high, value))


def rgb_to_hex(r, g, b):
    """Format RGB (0-255, possibly fractional) as canonical #RRGGBB."""
    r_i, g_i, b_i = (_clamp(_round_channel(c), 0, 255) for c in (r, g, b))
    return f"#{r_i:02X}{g_i:02X}{b_i:02X}"


def rgb_to_hsl(r, g, b):
    """Convert RGB (0-255) to HSL with h in [0, 360) and s, l in [0, 100]."""
    h, l, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return HSL(h * 360.0 % 360.0, s * 100.0, l * 100.0)


def hsl_to_rgb(h, s, l):
    """Convert HSL (degrees, percent, percent) to fractional RGB (0-255)."""
    r, g, b = colorsys.hls_to_rgb(h / 360.0, l / 100.0, s / 100.0)
    return RGB(r * 255.0, g * 255.0, b * 255.0)


@dataclass(frozen=True)
class Color:
    """A single sRGB color.

    Build instances with :meth:`from_hex`, :meth:`from_hsl` or
    :meth:`from_rgb`; every constructor derives all three views at once.

    Attributes
    ----------
    hex:
        Canonical ``#RRGGBB`` string.
    rgb:
        ``RGB(r, g, b)`` in [0, 255]. Colors built from HSL keep fractional
        channels, which feed the luminance computation.
    hsl:
        ``HSL(h, s, l)`` with h in [0, 360) and s, l in [0, 100].
    """

    hex: str
    rgb: RGB
    hsl: HSL

    @classmethod
    def from_hex(cls, value):
        match = HEX_PATTERN.match(value) if isinstance(value, str) else None
        if match is None:
            raise InvalidColorFormat(value)
        rgb = RGB(*(int(byte, 16) for byte in match.groups()))
        return cls(hex=rgb_to_hex(*rgb), rgb=rgb, hsl=rgb_to_hsl(*rgb))

    @classmethod
    def from_hsl(cls, h, s, l):
        hsl = HSL(h % 360.0, _clamp(s, 0.0, 100.0), _clamp(l, 0.0, 100.0))
        rgb = hsl_to_rgb(*hsl)
        return cls(hex=rgb_to_hex(*rgb), rgb=rgb, hsl=hsl)

    @classmethod
    def from_rgb(cls, r, g, b):
        rgb = RGB(*(_clamp(float(c), 0.0, 255.0) for c in (r, g, b)))
        return cls(hex=rgb_to_hex(*rgb), rgb=rgb, hsl=rgb_to_hsl(*rgb))

    def luminance(self):
        """WCAG relative luminance in [0, 1]."""
        return relative_luminance(self.rgb)

    def contrast_ratio(self, other):
        """WCAG contrast ratio against another color, in [1, 21]."""
        return contrast_from_luminance(self.luminance(), other.luminance())

    def meets_contrast(self, background, level="AA"):
        level = getattr(level, "value", level)
        return self.contrast_ratio(background) >= WCAG_RATIOS[level]

    def with_hsl(self, h=None, s=None, l=None):
        """Return a new color with some HSL components replaced."""
        return Color.from_hsl(
            self.hsl.h if h is None else h,
            self.hsl.s if s is None else s,
            self.hsl.l if l is None else l,
        )

    def __str__(self):
        return self.hex
