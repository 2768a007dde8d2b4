"""Float-based units with automatic SI conversion and family checks.

``UnitFloat`` is a ``float`` whose stored value is always the SI magnitude of
the quantity. The class of the instance only remembers which unit the value
was written in, so ``Inch(1.0)`` and ``Meter(0.0254)`` hold the same float.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SCALE_TO_SI = 1.0
    ...     SYMBOL = "m"
    ...
    >>> class Inch(Meter):
    ...     SCALE_TO_SI = 0.0254
    ...     SYMBOL = "in"
    ...
    >>> float(Inch(1))
    0.0254
    >>> Meter(1).to(Inch)
    39.37007874015748
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Base class for type-safe quantities stored in SI units.

    Operations are only allowed between units of the same family. Plain
    numbers are treated as SI magnitudes when compared.

    Attributes:
        ROOT (ClassVar[type[UnitFloat]]): Root class defining the unit family.
        SCALE_TO_SI (ClassVar[float]): Conversion factor to SI units.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a new instance from a value expressed in this unit.

        Args:
            value: Numeric value in the unit's native scale.

        Returns:
            UnitFloat: New instance with value stored in SI units.
        """
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance directly from an SI magnitude.

        Args:
            si_value: Value already in SI units.

        Returns:
            UnitFloat: New instance holding ``si_value`` unchanged.
        """
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Express this quantity in another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Magnitude in the target unit's scale.

        Raises:
            TypeError: If ``unit_type`` belongs to another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Re-type this quantity as another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            UnitFloat: New instance of the target unit type.
        """
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    def base_magnitude(self) -> float:
        """Return the magnitude in the family's SI base unit."""
        return float(self)

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        """Add two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        """Subtract two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Scale by a plain number.

        Raises:
            TypeError: If ``k`` is another quantity or not numeric.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        msg = f"cannot multiply {type(self).__name__} by {type(k).__name__}"
        raise TypeError(msg)

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        """Divide by a plain number.

        Raises:
            TypeError: If ``k`` is another quantity or not numeric.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        msg = f"cannot divide {type(self).__name__} by {type(k).__name__}"
        raise TypeError(msg)

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __abs__(self) -> UnitFloat:
        return type(self).from_si(abs(float(self)))

    # -------------------------------- Comparisons --------------------------------
    def _coerce(self, other) -> float | None:
        """Return ``other`` as an SI float, or None if it is not comparable."""
        if isinstance(other, Unit):
            self._check_same_root(type(other))
            return float(other)
        if isinstance(other, Number):
            return float(other)
        return None

    def __lt__(self, other: UnitFloat) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return float(self) < value

    def __le__(self, other: UnitFloat) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return float(self) <= value

    def __gt__(self, other: UnitFloat) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return float(self) > value

    def __ge__(self, other: UnitFloat) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return float(self) >= value

    def __eq__(self, other: object) -> bool:
        """Compare SI magnitudes.

        Raises:
            TypeError: If ``other`` is a unit of another family.
        """
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return float(self) == value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Value and symbol in the unit's own scale (e.g. ``"90.0 °"``)."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Native value with its SI equivalent (e.g. ``"90 ° (= 1.5708 SI)"``)."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
