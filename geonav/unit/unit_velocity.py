"""Speed units for agents.

Speeds are stored in meters per second, the unit in which the navigation
engine integrates motion (``distance = speed * dt``). Knots are accepted
for configuring ships and aircraft the way their speeds are usually quoted.

Example:
    >>> round(float(Knot(10)), 4)
    5.1444
    >>> round(MeterPerSecond(5.1444).to(Knot), 2)
    10.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class MeterPerSecond(UnitFloat):
    """Speed unit: meters per second (SI base unit, family root)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m/s"


class Knot(MeterPerSecond):
    """Speed unit: knot, one nautical mile (1852 m) per hour."""

    SCALE_TO_SI = 1852.0 / 3600.0
    SYMBOL = "kn"


Velocity = MeterPerSecond | Knot
