"""Float-backed units with SI storage.

:class:`UnitFloat` is a ``float`` subclass whose stored value is always in
SI units (radians, meters, seconds, meters per second). Constructing a unit
converts from the unit's native scale, ``to()`` converts back out.

Arithmetic keeps the left operand's unit type. Addition, subtraction and
comparison require both operands to be in the same family; multiplication
and division accept plain scalars only.

Example:
    >>> from geonav.unit import Kilometer, Meter
    >>> leg = Kilometer(5)
    >>> float(leg)
    5000.0
    >>> leg.to(Meter)
    5000.0
"""
from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Base class for type-safe float units with automatic SI conversion.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Multiplier from native scale to SI.
        IS_FAMILY_ROOT (ClassVar[bool]): Defaults to True so that stand-alone
            units form their own family.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance from a value that is already in SI units."""
        return float.__new__(cls, float(si_value))

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to the native scale of another unit of the same family.

        Args:
            unit_type: Target unit type.

        Returns:
            float: Value expressed in ``unit_type``'s scale.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        if isinstance(k, Unit):
            raise TypeError("units can only be scaled by plain numbers")
        if isinstance(k, Number):
            return type(self).from_si(float(self) * float(k))
        return NotImplemented

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        if isinstance(k, Unit):
            raise TypeError("units can only be divided by plain numbers")
        if isinstance(k, Number):
            return type(self).from_si(float(self) / float(k))
        return NotImplemented

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __abs__(self) -> UnitFloat:
        return type(self).from_si(abs(float(self)))

    # -------------------------------- Comparison Operations --------------------------------
    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) != float(other)

    # Units live inside frozen dataclasses (GeoPoint), which need hashing.
    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Value in the unit's native scale followed by its symbol."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
