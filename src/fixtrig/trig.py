from __future__ import annotations

from typing import Sequence, Tuple

from .angles import (
    INTERP_WIDTH,
    PI_OVER_TWO,
    SCALE,
    TWO_PI,
    QuadrantSplit,
    _require_int,
    _turn_units,
    normalize_angle,
    resolve_quadrant,
)
from .tables import AMPLITUDE, SINE_TABLE


def interpolate(split: QuadrantSplit, table: Sequence[int] = SINE_TABLE) -> int:
    """
    Linear blend between table[index] and table[index+1], in table units.

    The table is non-decreasing, so the step is never negative, and the result
    magnitude stays within AMPLITUDE.
    """
    x1 = table[split.index]
    x2 = table[split.index + 1]
    approx = ((x2 - x1) * split.fraction) >> INTERP_WIDTH

    if split.is_odd_quadrant:
        value = x1 + approx
    else:
        value = x2 - approx

    return -value if split.is_negative_quadrant else value


def rescale(value: int) -> int:
    """Table units [-AMPLITUDE, AMPLITUDE] -> 10^18 fixed point, truncating toward zero."""
    q = abs(value) * SCALE // AMPLITUDE
    return -q if value < 0 else q


def sin_units(angle_units: int) -> int:
    """Sine of an angle already expressed in 30-bit turn units, scaled by 10^18."""
    return rescale(interpolate(resolve_quadrant(angle_units)))


def sin(angle: int) -> int:
    """
    sin(angle) for angle in radians * 10^18; result in [-10^18, 10^18].

    >>> sin(0)
    0
    >>> sin(PI_OVER_TWO)
    1000000000000000000
    """
    return sin_units(normalize_angle(angle))


def cos(angle: int) -> int:
    """
    cos(angle) = sin(angle + PI_OVER_TWO).

    The phase shift is added to the angle reduced mod TWO_PI, so the sum never
    grows past one and a half turns however large `angle` is. sin() reduces mod
    TWO_PI again, which makes the result identical to sin(angle + PI_OVER_TWO).
    """
    angle = _require_int(angle)
    return sin(angle % TWO_PI + PI_OVER_TWO)


def sincos(angle: int) -> Tuple[int, int]:
    """(sin(angle), cos(angle)) from a single type check and reduction."""
    reduced = _require_int(angle) % TWO_PI
    return sin_units(_turn_units(reduced)), sin_units(_turn_units(reduced + PI_OVER_TWO))
