"""
Fixed lookup tables for the base palette builder, the contrast optimizer
and the differentiation engine.

Tables keyed by palette size hold one entry per slot. Base palette tables
are indexed by ``slot - 1`` since slot 0 is always the user's base color.
"""

from types import MappingProxyType


def _frozen(mapping):
    return MappingProxyType(dict(mapping))


SUPPORTED_SIZES = (3, 5)
DEFAULT_SIZE = 5

# Base palette builder: saturation/lightness for generated slots
BASE_SATURATION = _frozen({
    3: (75, 60, 85),
    5: (75, 60, 85, 50, 80),
})
BASE_LIGHTNESS = _frozen({
    3: (50, 35, 70),
    5: (50, 35, 70, 20, 80),
})
MONOCHROMATIC_LIGHTNESS = _frozen({
    3: (30, 50, 70),
    5: (15, 35, 55, 75, 90),
})
MONOCHROMATIC_HUE_STEP = 10
MONOCHROMATIC_SATURATION_STEP = 15
MONOCHROMATIC_SATURATION_RANGE = (30, 90)

# Final clamp applied to every generated slot
SATURATION_RANGE = (20, 95)
LIGHTNESS_RANGE = (10, 90)

# Contrast optimizer: initial lightness search ranges per slot
LIGHT_BACKGROUND_RANGES = (
    (15, 35), (25, 45), (35, 55), (20, 40), (10, 30),
)
DARK_BACKGROUND_RANGES = _frozen({
    3: ((70, 95), (60, 80), (75, 90)),
    5: ((70, 90), (60, 80), (50, 70), (65, 85), (75, 95)),
})
# Monochromatic on light backgrounds: [start, start + width] with
# start = offset + slot * step
MONOCHROMATIC_RANGE_OFFSET = 10
MONOCHROMATIC_RANGE_WIDTH = 15
MONOCHROMATIC_RANGE_STEP = _frozen({3: 20, 5: 15})

# Upper contrast bound per target ratio, used to avoid harsh over-correction
UPPER_BOUNDS = _frozen({4.5: 6.0})
DEFAULT_UPPER_BOUND = 8.5

SCAN_STEP = 2
EXPANDED_SEARCH_STEPS = 45
EXPANDED_SEARCH_LIMITS = (5, 95)

# Differentiation stage 1: target lightness per slot
LIGHT_BACKGROUND_LADDER = _frozen({
    3: (15, 35, 55),
    5: (10, 25, 40, 55, 70),
})
DARK_BACKGROUND_LADDER = _frozen({
    3: (60, 75, 90),
    5: (50, 65, 80, 90, 95),
})
LADDER_SEARCH_STEP = 5
LADDER_SEARCH_MAX = 25

# Differentiation stage 2
SATURATION_SIMILARITY = 20
SATURATION_PAIR_LIGHTNESS = 15
SATURATION_PUSH = SATURATION_SIMILARITY + 10

# Differentiation stage 3
HUE_PAIR_SATURATION = 10
HUE_ADJUSTMENT = 10

# Monochromatic differentiation
MONOCHROMATIC_DETECTION_HUE = 5
MONOCHROMATIC_LADDER = _frozen({
    3: (15, 50, 85),
    5: (10, 30, 50, 70, 90),
})
MONOCHROMATIC_SLOT_HUE_OFFSET = 5
MONOCHROMATIC_MIN_SATURATION = 40
REPAIR_UPPER_BOUND_FACTOR = 1.5


def size_key(size):
    """Table key for a palette length; anything but 3 uses the 5-slot table."""
    return 3 if size == 3 else 5
