"""Type-safe unit system for the quantities published on the telemetry bus.

Architecture:
    - unit_base: ``Unit`` and the unit family mechanism
    - unit_float: ``UnitFloat``, float-backed quantities stored in SI units
    - unit_distance: length units (Meter, Kilometer, Foot, Inch)
    - unit_angle: angular units (Radian, Degree, Turn)

Unit Families:
    - Length Family: Meter (root), Kilometer, Foot, Inch
    - Angle Family: Radian (root), Degree, Turn

Example:
    >>> from telemap.unit import Degree, Inch, Meter, Radian
    >>> Inch(12).to(Meter)  # 0.3048
    >>> Degree(180).to(Radian)  # 3.14159...
    >>> Degree(10) + Inch(1)  # TypeError: different families
"""

from .unit_angle import ZERO_ANGLE, Angle, Degree, Radian, Turn
from .unit_base import Unit
from .unit_distance import ZERO_LENGTH, Foot, Inch, Kilometer, Length, Meter
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Turn",
    "Angle",
    "ZERO_ANGLE",
    # Length units
    "Meter",
    "Kilometer",
    "Foot",
    "Inch",
    "Length",
    "ZERO_LENGTH",
]
