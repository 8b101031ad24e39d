"""
CSS custom-property and JSON design-token export of generated palettes.
"""

import json
import math
from datetime import datetime, timezone
from enum import Enum

from .errors import InvalidSettings
from .report import accessibility_report

GENERATOR_NAME = "WCAG Color Palette Generator v0.6"


class ExportFormat(str, Enum):
    """Supported export formats."""

    CSS = "css"
    JSON = "json"

    @classmethod
    def from_value(cls, value):
        if isinstance(value, cls):
            return value
        for fmt in cls:
            if fmt.value == str(value).strip().lower():
                return fmt
        raise InvalidSettings(f"Unknown export format: {value!r}")

    @property
    def filename(self):
        return f"color-palette.{self.value}"

    @property
    def mime_type(self):
        return "text/css" if self is ExportFormat.CSS else "application/json"


def _timestamp(generated_at):
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)
    return generated_at.isoformat()


def _round(value):
    return int(math.floor(value + 0.5))


def _differentiation_dict(options):
    return {
        "enabled": options.enabled,
        "minHueDifference": options.min_hue_difference,
        "minLuminanceDifference": options.min_luminance_difference,
    }


def _css_usage(palettes):
    light_bg = palettes.light_background.hex.lower()
    dark_bg = palettes.dark_background.hex.lower()
    return f"""/* Usage Examples */

/* Basic color usage */
.text-primary {{ color: var(--color-1); }}
.bg-primary {{ background-color: var(--color-1); }}

/* Light theme (light backgrounds) */
.light-theme {{
  background-color: {light_bg};
  color: var(--color-1-light);
}}

.light-theme .accent {{ color: var(--color-2-light); }}
.light-theme .secondary {{ color: var(--color-3-light); }}

/* Dark theme (dark backgrounds) */
.dark-theme {{
  background-color: {dark_bg};
  color: var(--color-1-dark);
}}

.dark-theme .accent {{ color: var(--color-2-dark); }}
.dark-theme .secondary {{ color: var(--color-3-dark); }}

@media (prefers-color-scheme: dark) {{
  :root {{
    --text-primary: var(--color-1-dark);
    --text-secondary: var(--color-2-dark);
    --bg-primary: {dark_bg};
  }}
}}

@media (prefers-color-scheme: light) {{
  :root {{
    --text-primary: var(--color-1-light);
    --text-secondary: var(--color-2-light);
    --bg-primary: {light_bg};
  }}
}}
"""


def to_css(palettes, generated_at=None):
    """Render the palettes as CSS custom properties on ``:root``.

    Slot ``i`` (1-based) becomes ``--color-i``, ``--color-i-light`` and
    ``--color-i-dark``.
    """
    settings = palettes.settings
    options = settings.differentiation
    lines = [
        "/* WCAG Accessible Color Palette */",
        f"/* Generated: {_timestamp(generated_at)} */",
        f"/* Settings: {settings.wcag_level.value} level, "
        f"{settings.harmony_type.value} harmony */",
        f"/* Color Differentiation: {'Enabled' if options.enabled else 'Disabled'} */",
    ]
    if options.enabled:
        lines.append(f"/* Hue Difference: {options.min_hue_difference:g}°, "
                     f"Luminance: {options.min_luminance_difference:g}% */")
    lines += ["", ":root {", "  /* Base Palette (Original Harmony) */"]
    lines += [f"  --color-{i}: {c.hex};" for i, c in enumerate(palettes.base, 1)]
    lines += ["", "  /* Light Background Optimized */"]
    lines += [f"  --color-{i}-light: {c.hex};" for i, c in enumerate(palettes.light_optimized, 1)]
    lines += ["", "  /* Dark Background Optimized */"]
    lines += [f"  --color-{i}-dark: {c.hex};" for i, c in enumerate(palettes.dark_optimized, 1)]
    lines += ["}", "", ""]
    return "\n".join(lines) + _css_usage(palettes)


def palette_to_json(palette, kind):
    """Per-color records of one palette, named ``color-<i>-<kind>``."""
    return [
        {
            "index": i,
            "name": f"color-{i}-{kind}",
            "hex": color.hex,
            "rgb": dict(zip("rgb", (_round(c) for c in color.rgb))),
            "hsl": dict(zip("hsl", (_round(c) for c in color.hsl))),
            "luminance": color.luminance(),
        }
        for i, color in enumerate(palette, 1)
    ]


def _compliance_json(infos):
    return [
        {"colorIndex": i, "compliant": info.compliant, "ratio": info.ratio, "level": info.level}
        for i, info in enumerate(infos, 1)
    ]


def to_json_data(palettes, generated_at=None):
    """Design-token document: metadata, palettes, accessibility and usage."""
    settings = palettes.settings
    report = accessibility_report(palettes)
    differentiation = _differentiation_dict(settings.differentiation)
    count = len(palettes.base)
    return {
        "metadata": {
            "generated": _timestamp(generated_at),
            "generator": GENERATOR_NAME,
            "wcagLevel": settings.wcag_level.value,
            "harmonyType": settings.harmony_type.value,
            "baseColor": palettes.base[0].hex,
            "paletteSize": count,
            "differentiationSettings": differentiation,
            "backgrounds": {
                "light": palettes.light_background.hex,
                "dark": palettes.dark_background.hex,
            },
        },
        "palettes": {
            "base": palette_to_json(palettes.base, "base"),
            "lightOptimized": palette_to_json(palettes.light_optimized, "light-optimized"),
            "darkOptimized": palette_to_json(palettes.dark_optimized, "dark-optimized"),
        },
        "accessibility": {
            "contrastRatios": {
                "lightBackground": [
                    {"colorIndex": i, "ratio": info.ratio} for i, info in enumerate(report.light, 1)
                ],
                "darkBackground": [
                    {"colorIndex": i, "ratio": info.ratio} for i, info in enumerate(report.dark, 1)
                ],
            },
            "wcagCompliance": {
                "lightBackground": _compliance_json(report.light),
                "darkBackground": _compliance_json(report.dark),
                "overallCompliant": {
                    "light": report.light_compliant,
                    "dark": report.dark_compliant,
                },
            },
            "differentiationApplied": report.differentiation_applied,
            "differentiationSettings": differentiation,
        },
        "usage": {
            "css": {
                f"color{i}": {"base": f"--color-{i}", "light": f"--color-{i}-light",
                              "dark": f"--color-{i}-dark"}
                for i in range(1, count + 1)
            },
            "sassVariables": {
                f"color{i}": {"base": f"$color-{i}", "light": f"$color-{i}-light",
                              "dark": f"$color-{i}-dark"}
                for i in range(1, count + 1)
            },
            "designTokens": {
                f"color-{i}": {"base": {"value": base.hex}, "light": {"value": light.hex},
                               "dark": {"value": dark.hex}}
                for i, (base, light, dark) in enumerate(zip(*palettes), 1)
            },
        },
    }


def to_json(palettes, generated_at=None):
    return json.dumps(to_json_data(palettes, generated_at), indent=2, ensure_ascii=False)


def export_palettes(palettes, fmt, generated_at=None):
    """Render the palettes in ``fmt`` ('css' or 'json')."""
    export_fmt = ExportFormat.from_value(fmt)
    if export_fmt is ExportFormat.CSS:
        return to_css(palettes, generated_at)
    return to_json(palettes, generated_at)
