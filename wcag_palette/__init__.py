"""Public entrypoint for the WCAG palette generator.

Re-exports the user-facing types and functions so that front ends can
import from ``wcag_palette`` instead of individual submodules.
"""

from .base_palette import DEFAULT_BASE_COLOR, build_base_palette, validate_size
from .color import Color, hue_distance, is_valid_hex
from .differentiation import differentiate, is_monochromatic
from .distance import delta_e_cie2000, distance_matrix, min_pairwise_distance
from .errors import InvalidColorFormat, InvalidSettings, InvalidSize, PaletteError
from .export import ExportFormat, export_palettes, to_css, to_json
from .generator import GeneratedPalettes, generate
from .harmony import HarmonyType, available_harmony_types, describe_harmony, harmony_hues
from .optimizer import DARK_BACKGROUND, WHITE, optimize_color, optimize_palette
from .report import AccessibilityReport, ContrastInfo, accessibility_level, accessibility_report
from .settings import DifferentiationSettings, Settings, WcagLevel

__all__ = [
    "Color",
    "hue_distance",
    "is_valid_hex",
    "HarmonyType",
    "harmony_hues",
    "describe_harmony",
    "available_harmony_types",
    "DEFAULT_BASE_COLOR",
    "build_base_palette",
    "validate_size",
    "WHITE",
    "DARK_BACKGROUND",
    "optimize_color",
    "optimize_palette",
    "differentiate",
    "is_monochromatic",
    "Settings",
    "DifferentiationSettings",
    "WcagLevel",
    "GeneratedPalettes",
    "generate",
    "AccessibilityReport",
    "ContrastInfo",
    "accessibility_level",
    "accessibility_report",
    "delta_e_cie2000",
    "distance_matrix",
    "min_pairwise_distance",
    "ExportFormat",
    "export_palettes",
    "to_css",
    "to_json",
    "PaletteError",
    "InvalidColorFormat",
    "InvalidSize",
    "InvalidSettings",
]
