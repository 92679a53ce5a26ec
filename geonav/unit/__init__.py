"""Type-safe units for the navigation engine.

Values are ``float`` subclasses stored in SI units. Operations across unit
families (adding a distance to a duration, comparing a bearing with a
length) raise ``TypeError``.

Modules:
    - unit_base: family bookkeeping
    - unit_float: float-backed units with SI storage
    - unit_angle: Radian, Degree
    - unit_distance: Meter, Kilometer
    - unit_time: Second, ClockTime
    - unit_velocity: MeterPerSecond, Knot

Example:
    >>> from geonav.unit import Kilometer, Meter, Second, MeterPerSecond
    >>> leg = Kilometer(100)
    >>> speed = MeterPerSecond(200)
    >>> float(leg) / float(speed)
    500.0
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter
from .unit_float import UnitFloat
from .unit_time import ClockTime, Second, Time
from .unit_velocity import Knot, MeterPerSecond, Velocity

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Length units
    "Meter",
    "Kilometer",
    "Length",
    # Time units
    "Second",
    "ClockTime",
    "Time",
    # Speed units
    "MeterPerSecond",
    "Knot",
    "Velocity",
]
