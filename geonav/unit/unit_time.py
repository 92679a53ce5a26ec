"""Time units for tick periods and elapsed simulation time.

Durations are stored in seconds. :class:`ClockTime` is what the live view
shows as "Simulated Time": an elapsed number of seconds printed as
``HH:MM:SS.sss``.

Example:
    >>> str(ClockTime(3725.5))
    '01:02:05.500'
"""

from __future__ import annotations

from math import isfinite

from .unit_float import UnitFloat


class Second(UnitFloat):
    """Time unit: second (SI base unit, family root)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "s"


class ClockTime(Second):
    """Elapsed simulation time shown on a clock face.

    Hours are not wrapped at 24, so a long run reads ``27:00:00.000``.
    Non-finite values print as ``--:--:--``.
    """

    def __str__(self) -> str:
        seconds = float(self)
        if not isfinite(seconds):
            return "--:--:--"
        minutes, seconds = divmod(seconds, 60)
        hours, minutes = divmod(int(minutes), 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:06.3f}"

    def __repr__(self) -> str:
        return f"ClockTime({str(self)})"


Time = Second | ClockTime
