"""fixtrig public API.

Integer-only sine and cosine on 10^18 fixed-point radians. Keep this surface
small: users should mostly interact with the names re-exported here.
"""

from .angles import PI, PI_OVER_TWO, SCALE, TWO_PI
from .trig import cos, sin, sincos

__all__ = [
    "sin",
    "cos",
    "sincos",
    "PI",
    "TWO_PI",
    "PI_OVER_TWO",
    "SCALE",
]
