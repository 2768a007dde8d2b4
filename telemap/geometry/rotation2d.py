"""Planar rotation value type.

A ``Rotation2d`` wraps a single ``Radian`` angle. The angle is not wrapped
into [-π, π), so a rotation built from 450° reads back as 450°; two
rotations are nevertheless *equal* when they point the same way, which is
decided on the unit circle.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from telemap.config import EQUALITY_TOLERANCE
from telemap.unit import ZERO_ANGLE, Angle, Degree, Radian, Turn, Unit


@dataclass(frozen=True, eq=False)
class Rotation2d:
    """Counter-clockwise rotation in the plane.

    Attributes:
        angle (Radian): Rotation angle. Any angle unit or a plain float in
            radians is accepted and normalized to ``Radian``.

    Example:
        >>> quarter = Rotation2d.from_degrees(90)
        >>> quarter.radians  # 1.5707963267948966
        >>> quarter.rotations  # 0.25
        >>> quarter + Rotation2d.from_degrees(90) == Rotation2d.from_rotations(0.5)
        True
    """

    angle: Radian = ZERO_ANGLE

    def __post_init__(self) -> None:
        if isinstance(self.angle, Unit):
            Radian._check_same_root(type(self.angle))
        if not isinstance(self.angle, Radian):
            object.__setattr__(self, "angle", Radian(self.angle))

    @classmethod
    def from_radians(cls, radians: float) -> Rotation2d:
        return cls(Radian(radians))

    @classmethod
    def from_degrees(cls, degrees: float) -> Rotation2d:
        return cls(Degree(degrees))

    @classmethod
    def from_rotations(cls, rotations: float) -> Rotation2d:
        """Create a rotation from a number of full turns."""
        return cls(Turn(rotations))

    @classmethod
    def from_angle(cls, angle: Angle) -> Rotation2d:
        return cls(angle)

    @property
    def radians(self) -> float:
        return self.angle.to(Radian)

    @property
    def degrees(self) -> float:
        return self.angle.to(Degree)

    @property
    def rotations(self) -> float:
        return self.angle.to(Turn)

    @property
    def cos(self) -> float:
        return math.cos(self.radians)

    @property
    def sin(self) -> float:
        return math.sin(self.radians)

    def measure(self) -> Radian:
        """Return the angle as a ``Radian`` quantity."""
        return self.angle.as_unit(Radian)

    def rotate_by(self, other: Rotation2d) -> Rotation2d:
        """Apply ``other`` after this rotation."""
        return Rotation2d(Radian(self.radians + other.radians))

    def __add__(self, other: Rotation2d) -> Rotation2d:
        return self.rotate_by(other)

    def __sub__(self, other: Rotation2d) -> Rotation2d:
        return self.rotate_by(-other)

    def __neg__(self) -> Rotation2d:
        return Rotation2d(Radian(-self.radians))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rotation2d):
            return NotImplemented
        return math.hypot(self.cos - other.cos, self.sin - other.sin) < EQUALITY_TOLERANCE

    __hash__ = None

    def __repr__(self) -> str:
        return f"Rotation2d(degrees={self.degrees:g})"
