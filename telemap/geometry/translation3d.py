"""Three-dimensional translation value type."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from telemap.config import EQUALITY_TOLERANCE, WIRE_DTYPE, XYZ_LENGTH
from telemap.unit import ZERO_LENGTH, Meter, Unit

Number = int | float


def as_xyz_array(values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Return ``values`` as a float64 array of exactly three elements.

    Args:
        values: Any sequence of numbers ordered (x, y, z).

    Returns:
        np.ndarray: A new one-dimensional array of shape (3,).

    Raises:
        IndexError: If ``values`` does not hold exactly three elements.
    """
    array = np.array(values, dtype=WIRE_DTYPE)
    if array.shape != (XYZ_LENGTH,):
        msg = f"expected {XYZ_LENGTH} elements ordered (x, y, z), got shape {array.shape}"
        raise IndexError(msg)
    return array


def _to_meter(value) -> Meter:
    if isinstance(value, Unit):
        Meter._check_same_root(type(value))
        return value
    return Meter(value)


@dataclass(frozen=True, eq=False)
class Translation3d:
    """Position offset along the x, y and z axes.

    Components are ``Meter`` quantities; plain floats are read as meters and
    other length units keep their SI magnitude.

    Attributes:
        x (Meter): Offset along the x axis.
        y (Meter): Offset along the y axis.
        z (Meter): Offset along the z axis.

    Example:
        >>> t = Translation3d(1.0, 2.0, 3.0)
        >>> t.to_array()
        array([1., 2., 3.])
        >>> t.norm().to(Meter)  # 3.7416...
    """

    x: Meter = ZERO_LENGTH
    y: Meter = ZERO_LENGTH
    z: Meter = ZERO_LENGTH

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, _to_meter(getattr(self, name)))

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> Translation3d:
        """Build a translation from an (x, y, z) sequence in meters.

        Raises:
            IndexError: If ``values`` does not hold exactly three elements.
        """
        x, y, z = as_xyz_array(values)
        return cls(Meter(x), Meter(y), Meter(z))

    def to_array(self) -> np.ndarray:
        """Return ``[x, y, z]`` in meters."""
        return np.array([float(self.x), float(self.y), float(self.z)], dtype=WIRE_DTYPE)

    def norm(self) -> Meter:
        """Distance from the origin."""
        return Meter(float(np.linalg.norm(self.to_array())))

    def distance(self, other: Translation3d) -> Meter:
        return (self - other).norm()

    def __add__(self, other: Translation3d) -> Translation3d:
        return Translation3d.from_array(self.to_array() + other.to_array())

    def __sub__(self, other: Translation3d) -> Translation3d:
        return Translation3d.from_array(self.to_array() - other.to_array())

    def __neg__(self) -> Translation3d:
        return Translation3d.from_array(-self.to_array())

    def __mul__(self, scalar: Number) -> Translation3d:
        return Translation3d.from_array(self.to_array() * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: Number) -> Translation3d:
        return Translation3d.from_array(self.to_array() / float(scalar))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Translation3d):
            return NotImplemented
        return all(
            math.isclose(a, b, rel_tol=0.0, abs_tol=EQUALITY_TOLERANCE)
            for a, b in zip(self.to_array(), other.to_array())
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Translation3d(x={float(self.x):g} m, y={float(self.y):g} m, z={float(self.z):g} m)"
