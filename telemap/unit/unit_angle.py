"""Angular units.

Angles are stored in radians, the SI unit. Degrees are what operators read
on dashboards and turns ("rotations") are what motor encoders count, so all
three are first-class units of the same family.

Classes:
    Radian: Base angular unit (SI).
    Degree: 1/360 of a full rotation.
    Turn: One full rotation (2π radians).

Type Aliases:
    Angle: Union of all angular units.

Example:
    >>> heading = Degree(90)
    >>> print(float(heading))  # 1.5707963267948966 (radians)
    >>> print(heading.to(Turn))  # 0.25
"""

from __future__ import annotations

from math import pi, tau

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles).

    Attributes:
        IS_FAMILY_ROOT (bool): True, this is the root angular unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "rad".
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: Degree (360 degrees per full rotation).

    Attributes:
        SCALE_TO_SI (float): π/180, conversion factor from degrees to radians.
        SYMBOL (str): "°".
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


class Turn(Radian):
    """Angular unit: one full rotation, as counted by encoders and gear ratios."""

    SCALE_TO_SI = tau
    SYMBOL = "rot"


Angle = Radian | Degree | Turn  # Type alias for any angle unit

ZERO_ANGLE = Radian(0.0)
