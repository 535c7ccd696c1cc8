"""
Angle and time normalization helpers.

Python's ``%`` already floors for a positive modulus, so negative inputs
(dates before an epoch, hour angles west of Greenwich) land in ``[0, n)``.
The one wrinkle is floating point: ``-1e-17 % 360`` evaluates to ``360.0``,
so results equal to the modulus are folded back to zero.
"""

import math

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi
TWO_PI = 2.0 * math.pi


def floored_mod(x: float, n: float) -> float:
    """Return ``x mod n`` in ``[0, n)`` for positive ``n``."""
    r = x % n
    if r >= n:
        return 0.0
    return r


def normalize_degrees(angle: float) -> float:
    """Normalize an angle to ``[0, 360)``."""
    return floored_mod(angle, 360.0)


def normalize_hours(hours: float) -> float:
    """Normalize a clock time to ``[0, 24)``."""
    return floored_mod(hours, 24.0)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def safe_asin(x: float) -> float:
    """asin with the argument clamped to [-1, 1] against rounding overshoot."""
    return math.asin(clamp(x, -1.0, 1.0))


def round_half_up(value: float, ndigits: int = 0):
    """Round with halves going up, matching JavaScript's ``Math.round``.

    Returns an int when ``ndigits`` is 0. The builtin ``round`` uses
    banker's rounding, which would turn 12.5% illumination into 12.
    """
    if ndigits == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor
