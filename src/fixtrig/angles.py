from __future__ import annotations

from dataclasses import dataclass

from .tables import TABLE_SIZE

# Fixed-point convention at the boundary: value * 10^18
SCALE = 10**18
PI = 3141592653589793238
TWO_PI = 2 * PI
PI_OVER_TWO = PI // 2

# Internal angle space: 2^30 units per full turn
ANGLES_IN_CYCLE = 1 << 30
QUADRANT_HIGH_MASK = 1 << 29
QUADRANT_LOW_MASK = 1 << 28

INDEX_WIDTH = 8
INTERP_WIDTH = 16
INDEX_OFFSET = 28 - INDEX_WIDTH
INTERP_OFFSET = INDEX_OFFSET - INTERP_WIDTH

INDEX_MASK = (1 << INDEX_WIDTH) - 1
INTERP_MASK = (1 << INTERP_WIDTH) - 1


def _require_int(angle) -> int:
    # bool is an int subclass but never a meaningful angle
    if not isinstance(angle, int) or isinstance(angle, bool):
        raise TypeError(f"angle must be an int (radians * 10^18), got {type(angle).__name__}")
    return angle


def normalize_angle(angle: int) -> int:
    """
    Map a fixed-point radian value onto the 30-bit turn space [0, 2^30).

    Any integer is accepted: the value is first reduced mod TWO_PI (floor modulo,
    so negative angles land on the same circle), then rescaled proportionally.
    """
    return _turn_units(_require_int(angle))


def _turn_units(angle: int) -> int:
    return (ANGLES_IN_CYCLE * (angle % TWO_PI)) // TWO_PI


@dataclass(frozen=True)
class QuadrantSplit:
    """Bit fields of a 30-bit angle: table slot, 16-bit blend, quadrant flags."""
    index: int
    fraction: int
    is_odd_quadrant: bool
    is_negative_quadrant: bool


def resolve_quadrant(angle_units: int) -> QuadrantSplit:
    """
    Split a 30-bit angle into (index, fraction, is_odd_quadrant, is_negative_quadrant).

    Quadrants 1 and 3 read the table forwards ("odd"), quadrants 2 and 4 read it
    mirrored via sin(pi - x) = sin(x). Quadrants 3 and 4 flip the sign.
    """
    index = (angle_units >> INDEX_OFFSET) & INDEX_MASK
    fraction = (angle_units >> INTERP_OFFSET) & INTERP_MASK
    is_odd = (angle_units & QUADRANT_LOW_MASK) == 0
    is_negative = (angle_units & QUADRANT_HIGH_MASK) != 0

    if not is_odd:
        index = TABLE_SIZE - 1 - index

    return QuadrantSplit(index, fraction, is_odd, is_negative)
