"""Numeric constants and small helpers shared by the math modules."""

import math

# Angle conversion
DEGREES_TO_RADIANS = math.pi / 180.0
RADIANS_TO_DEGREES = 180.0 / math.pi

# Frequently used angles (radians)
HALF_PI = math.pi / 2.0
TWO_PI = math.pi * 2.0
QUARTER_PI = math.pi / 4.0

# Tolerances for floating point comparison
EPSILON = 1e-10
EPSILON_NORMAL = 1e-6
EPSILON_HIGH = 1e-12

# Threshold below which a length counts as zero
ZERO_THRESHOLD = 1e-8

# Limits for scale values
MIN_SCALE = 1e-6
MAX_SCALE = 1e6

# Animation defaults
DEFAULT_ROTATION_SPEED = 1.0  # radians per second
DEFAULT_MOVE_SPEED = 50.0  # pixels per second
DEFAULT_SCALE_SPEED = 0.5

MIN_ANIMATION_SCALE = 0.1
MAX_ANIMATION_SCALE = 5.0
SCALE_OSCILLATION = 0.3

DEFAULT_RADIUS = 100.0
CIRCULAR_SPEED_DIVISOR = 100.0

# Window defaults
DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 600
DEFAULT_ASPECT_RATIO = DEFAULT_WINDOW_WIDTH / DEFAULT_WINDOW_HEIGHT


def is_zero(value: float) -> bool:
    """Return True if ``value`` is closer to zero than ZERO_THRESHOLD."""
    return abs(value) < ZERO_THRESHOLD


def is_equal(a: float, b: float) -> bool:
    """Return True if ``a`` and ``b`` differ by less than EPSILON."""
    return abs(a - b) < EPSILON


def is_equal_with_tolerance(a: float, b: float, tolerance: float) -> bool:
    """Return True if ``a`` and ``b`` differ by less than ``tolerance``."""
    return abs(a - b) < tolerance


def clamp_scale(scale: float) -> float:
    """Clamp a scale value to [MIN_SCALE, MAX_SCALE]."""
    return min(max(scale, MIN_SCALE), MAX_SCALE)


def clamp_animation_scale(scale: float) -> float:
    """Clamp an animation scale value to [MIN_ANIMATION_SCALE, MAX_ANIMATION_SCALE]."""
    return min(max(scale, MIN_ANIMATION_SCALE), MAX_ANIMATION_SCALE)


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians into the range [0, 2π)."""
    result = angle % TWO_PI
    if result >= TWO_PI:
        result -= TWO_PI
    return result


def degrees_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * DEGREES_TO_RADIANS


def rad_to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * RADIANS_TO_DEGREES