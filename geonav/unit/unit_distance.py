"""Length units for travelled and remaining distances.

All lengths are stored in meters.

Example:
    >>> Kilometer(5).to(Meter)
    5000.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: meter (SI base unit, family root)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length unit: kilometer (1000 m)."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


Length = Meter | Kilometer
