"""
Palette generation entry point.

:func:`generate` builds the base palette from the harmony, optimizes it once
per background and, when enabled, runs the differentiation engine on each
optimized palette.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from .base_palette import DEFAULT_BASE_COLOR, build_base_palette, validate_size
from .color import Color, is_valid_hex
from .differentiation import differentiate
from .errors import InvalidColorFormat
from .optimizer import DARK_BACKGROUND, WHITE, optimize_palette
from .settings import Settings

logger = logging.getLogger(__name__)

Palette = Tuple[Color, ...]


@dataclass(frozen=True)
class GeneratedPalettes:
    """Result of one generation.

    Attributes
    ----------
    base:
        Harmony output before contrast optimization.
    light_optimized, dark_optimized:
        Palettes optimized for the light and dark background, positionally
        aligned with ``base``.
    settings:
        Settings after normalization (coerced size, substituted base color).
    warnings:
        Human-readable notes about inputs that were normalized.
    light_background, dark_background:
        Backgrounds the two palettes were optimized against.
    """

    base: Palette
    light_optimized: Palette
    dark_optimized: Palette
    settings: Settings
    warnings: Tuple[str, ...] = ()
    light_background: Color = WHITE
    dark_background: Color = DARK_BACKGROUND

    def __iter__(self):
        yield from (self.base, self.light_optimized, self.dark_optimized)


def normalize_settings(settings, strict=False):
    """Coerce size and base color into their supported domains.

    Returns ``(settings, warnings)``. In strict mode the first invalid value
    raises :class:`InvalidSize` or :class:`InvalidColorFormat` instead.
    """
    if not isinstance(settings, Settings):
        settings = Settings.from_dict(settings)

    warnings = []
    size = validate_size(settings.palette_size, strict=strict)
    try:
        substituted = float(settings.palette_size) != size
    except (TypeError, ValueError):
        substituted = True
    if substituted:
        warnings.append(f"Palette size {settings.palette_size!r} is not supported, using {size}")

    base_color = settings.base_color
    if not is_valid_hex(base_color):
        if strict:
            raise InvalidColorFormat(base_color)
        logger.warning("Invalid base color %r, using default %s", base_color, DEFAULT_BASE_COLOR)
        warnings.append(f"Invalid base color {base_color!r}, using {DEFAULT_BASE_COLOR}")
        base_color = DEFAULT_BASE_COLOR

    return settings.with_changes(palette_size=size, base_color=base_color), tuple(warnings)


def generate(settings=None, strict=False, light_background=WHITE,
             dark_background=DARK_BACKGROUND, clamp_upper_bound=False):
    """Generate base, light-optimized and dark-optimized palettes.

    ``settings`` may be a :class:`Settings` or a mapping accepted by
    :meth:`Settings.from_dict`; None uses the defaults. Invalid size and
    base color are normalized and reported in ``warnings`` unless ``strict``
    is set.
    """
    if settings is None:
        settings = Settings()
    settings, warnings = normalize_settings(settings, strict=strict)
    logger.info(
        "Generating palette: size=%d harmony=%s wcag=%s base=%s",
        settings.palette_size, settings.harmony_type.value,
        settings.wcag_level.value, settings.base_color,
    )

    min_ratio = settings.min_contrast_ratio
    harmony = settings.harmony_type
    base = build_base_palette(settings.base_color, harmony, settings.palette_size)

    light = optimize_palette(
        base, light_background, min_ratio,
        harmony_type=harmony, clamp_upper_bound=clamp_upper_bound,
    )
    dark = optimize_palette(
        base, dark_background, min_ratio,
        harmony_type=harmony, clamp_upper_bound=clamp_upper_bound,
    )

    options = settings.differentiation
    if options.enabled:
        logger.debug("Applying differentiation: %s", options)
        light, dark = (
            differentiate(
                palette, background, min_ratio,
                min_hue_difference=options.min_hue_difference,
                min_luminance_difference=options.min_luminance_difference,
                harmony_type=harmony,
            )
            for palette, background in ((light, light_background), (dark, dark_background))
        )
    else:
        logger.debug("Color differentiation disabled")

    return GeneratedPalettes(
        base=base,
        light_optimized=light,
        dark_optimized=dark,
        settings=settings,
        warnings=warnings,
        light_background=light_background,
        dark_background=dark_background,
    )
