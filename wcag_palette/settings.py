"""
Generation settings and their parsing from UI-style mappings.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

from .base_palette import DEFAULT_BASE_COLOR
from .color import WCAG_RATIOS
from .differentiation import DEFAULT_MIN_HUE_DIFFERENCE, DEFAULT_MIN_LUMINANCE_DIFFERENCE
from .errors import InvalidSettings
from .harmony import HarmonyType
from .tables import DEFAULT_SIZE


class WcagLevel(str, Enum):
    """WCAG conformance level for normal text."""

    AA = "AA"
    AAA = "AAA"

    @property
    def ratio(self):
        return WCAG_RATIOS[self.value]

    @classmethod
    def from_value(cls, value):
        if isinstance(value, cls):
            return value
        for level in cls:
            if level.value == str(value).strip().upper():
                return level
        raise InvalidSettings(f"Unknown WCAG level: {value!r}")


@dataclass(frozen=True)
class DifferentiationSettings:
    """Switch and thresholds for the differentiation engine."""

    enabled: bool = True
    min_hue_difference: float = DEFAULT_MIN_HUE_DIFFERENCE
    min_luminance_difference: float = DEFAULT_MIN_LUMINANCE_DIFFERENCE

    @classmethod
    def from_dict(cls, data):
        if isinstance(data, cls):
            return data
        if data is None:
            return cls()
        if isinstance(data, bool):
            return cls(enabled=data)
        try:
            return cls(
                enabled=bool(data.get("enabled", True)),
                min_hue_difference=float(data.get(
                    "min_hue_difference",
                    data.get("minHueDifference", DEFAULT_MIN_HUE_DIFFERENCE),
                )),
                min_luminance_difference=float(data.get(
                    "min_luminance_difference",
                    data.get("minLuminanceDifference", DEFAULT_MIN_LUMINANCE_DIFFERENCE),
                )),
            )
        except (AttributeError, TypeError, ValueError) as exc:
            raise InvalidSettings(f"Invalid differentiation settings: {data!r}") from exc


# Keys accepted by Settings.from_dict, snake_case first
_KEYS = {
    "palette_size": ("palette_size", "paletteSize", "size"),
    "wcag_level": ("wcag_level", "wcagLevel"),
    "harmony_type": ("harmony_type", "harmonyType"),
    "base_color": ("base_color", "baseColor"),
    "differentiation": ("differentiation", "differentiationSettings"),
}


@dataclass(frozen=True)
class Settings:
    """Inputs of one palette generation.

    ``palette_size`` and ``base_color`` are kept as supplied; the generator
    normalizes them (see :func:`wcag_palette.generator.generate`).
    """

    palette_size: int = DEFAULT_SIZE
    wcag_level: WcagLevel = WcagLevel.AA
    harmony_type: HarmonyType = HarmonyType.TRIADIC
    base_color: str = DEFAULT_BASE_COLOR
    differentiation: DifferentiationSettings = field(default_factory=DifferentiationSettings)

    def __post_init__(self):
        # Accept plain strings/dicts for the typed fields
        object.__setattr__(self, "wcag_level", WcagLevel.from_value(self.wcag_level))
        object.__setattr__(self, "harmony_type", HarmonyType.from_value(self.harmony_type))
        object.__setattr__(
            self, "differentiation", DifferentiationSettings.from_dict(self.differentiation)
        )

    @property
    def min_contrast_ratio(self):
        return self.wcag_level.ratio

    @classmethod
    def from_dict(cls, data):
        """Build settings from a mapping with snake_case or camelCase keys."""
        values = {}
        for name, aliases in _KEYS.items():
            for alias in aliases:
                if alias in data:
                    values[name] = data[alias]
                    break
        return cls(**values)

    def with_changes(self, **changes):
        return replace(self, **changes)
