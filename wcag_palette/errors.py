"""
Exception types raised at the input boundary of the palette generator.
"""


class PaletteError(ValueError):
    """Base class for invalid palette generator input."""


class InvalidColorFormat(PaletteError):
    """Raised when a hex color string is not exactly 6 hex digits."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r} (expected #RRGGBB)")


class InvalidSize(PaletteError):
    """Raised in strict mode when the palette size is not 3 or 5."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid palette size: {value!r} (expected 3 or 5)")


class InvalidSettings(PaletteError):
    """Raised when a settings value falls outside its enumerated domain."""
