"""Unit family bookkeeping for navigation quantities.

Every physical quantity handled by the engine (angles, lengths, durations,
speeds) belongs to a unit *family*. Members of one family can be combined,
members of different families cannot: adding a bearing to a distance is a
programming error and is rejected at runtime.

A family is declared by setting ``IS_FAMILY_ROOT = True`` on its base class.
Subclasses find their root automatically through the MRO.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class NauticalMile(Length):
    ...     pass
    >>> NauticalMile.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units derive from :class:`~geonav.unit.unit_float.UnitFloat`;
    this class only carries the family metadata.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the unit family.
        SYMBOL (ClassVar[str]): Display symbol.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the class that defines a family.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Reject operations between different unit families.

        Plain numbers have no family and are rejected as well; callers that
        want to mix units with bare floats must convert explicitly.

        Raises:
            TypeError: If ``unit_type`` is not in this unit's family.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            msg = f"incompatible units: {cls.ROOT.__name__} and {getattr(other_root, '__name__', unit_type.__name__)}"
            raise TypeError(msg)
