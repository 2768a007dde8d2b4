"""Length units.

All lengths are stored in meters, the SI base unit. The imperial units are
what robot mechanisms and field drawings are usually measured in, so they
sit beside the metric ones.

Classes:
    Meter: Base length unit (SI).
    Kilometer: 1000 meters.
    Foot: 0.3048 meters.
    Inch: 0.0254 meters.

Type Aliases:
    Length: Union of all length units.

Example:
    >>> wheel_diameter = Inch(4)
    >>> print(float(wheel_diameter))  # 0.1016 (meters)
    >>> print(wheel_diameter.to(Meter))  # 0.1016
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: Meter (SI base unit for length).

    Attributes:
        IS_FAMILY_ROOT (bool): True, this is the root length unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "m".
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length unit: Kilometer (1000 meters)."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class Foot(Meter):
    """Length unit: international foot (0.3048 meters)."""

    SCALE_TO_SI = 0.3048
    SYMBOL = "ft"


class Inch(Meter):
    """Length unit: international inch (0.0254 meters, 1/12 foot)."""

    SCALE_TO_SI = 0.0254
    SYMBOL = "in"


Length = Meter | Kilometer | Foot | Inch  # Type alias for any length unit

ZERO_LENGTH = Meter(0.0)
