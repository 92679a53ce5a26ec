"""Angular units for headings and coordinates.

Angles are stored in radians. :class:`Degree` is the display scale used
for courses, bearings and geographic coordinates.

Example:
    >>> heading = Degree(90)
    >>> print(heading)
    90 °
    >>> round(float(heading), 4)
    1.5708
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: radian (SI base unit, family root)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: degree, 360 to a full turn.

    Example:
        >>> Degree(180).to(Radian)
        3.141592653589793
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
