"""Unit family foundation for typed physical quantities.

Every quantity that crosses the telemetry boundary (a distance, an angle)
belongs to exactly one *unit family*. A family is rooted at the class that
sets ``IS_FAMILY_ROOT = True`` and every subclass inherits that root through
``__init_subclass__``. Quantities of the same family can be converted into
each other; mixing families is a ``TypeError``.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Meter(Length):
    ...     pass
    >>> Meter.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units inherit from ``UnitFloat`` rather than from this class
    directly.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the base unit of a family.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve the family root of a new unit class.

        The root is the first ancestor (or the class itself) that declares
        ``IS_FAMILY_ROOT = True`` in its own namespace.
        """
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
    def _check_same_root(cls, unit_type: type[Unit]):
        """Check that ``unit_type`` measures the same physical quantity.

        Args:
            unit_type: The other unit type to check compatibility with.

        Raises:
            TypeError: If the units belong to different families.
        """
        root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not root:
            other = root.__name__ if root is not None else unit_type.__name__
            msg = f"cannot combine {cls.ROOT.__name__} units with {other}"
            raise TypeError(msg)
