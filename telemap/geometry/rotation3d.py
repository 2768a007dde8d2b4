"""Three-dimensional rotation value type backed by scipy's ``Rotation``.

The constructor takes roll, pitch and yaw in radians applied as extrinsic
rotations about the fixed X, Y and Z axes, in that order. The per-axis
read-outs (``x``, ``y``, ``z``) invert that decomposition: ``x`` and ``z``
lie in [-π, π] and ``y`` in [-π/2, π/2]. At ±90° pitch the decomposition is
not unique (gimbal lock). Roll then reads as the whole X/Z angle and yaw
as zero, silently; the rotation itself stays exact.
"""

from __future__ import annotations

import warnings
from collections.abc import Sequence

import numpy as np
from scipy.spatial.transform import Rotation

from telemap.config import EQUALITY_TOLERANCE, WIRE_DTYPE
from telemap.unit import Radian

from .translation3d import as_xyz_array


class Rotation3d:
    """Immutable rotation in space.

    Args:
        roll: Counter-clockwise rotation about the X axis, in radians.
        pitch: Counter-clockwise rotation about the Y axis, in radians.
        yaw: Counter-clockwise rotation about the Z axis, in radians.

    Example:
        >>> from math import pi
        >>> r = Rotation3d(0.0, 0.0, pi / 2)
        >>> r.z  # 1.5707963267948966
        >>> r.quaternion  # array([0.7071..., 0., 0., 0.7071...])
    """

    __slots__ = ("_rotation", "_euler")

    def __init__(self, roll: float = 0.0, pitch: float = 0.0, yaw: float = 0.0) -> None:
        rotation = Rotation.from_euler("xyz", [float(roll), float(pitch), float(yaw)])
        self._set(rotation)

    def _set(self, rotation: Rotation) -> None:
        object.__setattr__(self, "_rotation", rotation)
        with warnings.catch_warnings():
            # gimbal lock at ±90° pitch
            warnings.simplefilter("ignore", UserWarning)
            euler = rotation.as_euler("xyz")
        object.__setattr__(self, "_euler", euler)

    def __setattr__(self, name, value):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @classmethod
    def _from_scipy(cls, rotation: Rotation) -> Rotation3d:
        instance = cls.__new__(cls)
        instance._set(rotation)
        return instance

    @classmethod
    def from_quaternion(cls, w: float, x: float, y: float, z: float) -> Rotation3d:
        """Build from a quaternion given scalar part first. It is normalized."""
        return cls._from_scipy(Rotation.from_quat([x, y, z, w]))

    @classmethod
    def from_axis_angle(cls, axis: Sequence[float] | np.ndarray, angle: float) -> Rotation3d:
        """Rotate ``angle`` radians about ``axis`` (need not be unit length).

        Raises:
            IndexError: If ``axis`` does not hold exactly three elements.
            ValueError: If ``axis`` has zero length.
        """
        vector = as_xyz_array(axis)
        length = np.linalg.norm(vector)
        if length == 0.0:
            msg = "rotation axis must be non-zero"
            raise ValueError(msg)
        return cls._from_scipy(Rotation.from_rotvec(vector / length * float(angle)))

    # -------------------------------- Read-outs --------------------------------
    @property
    def x(self) -> float:
        """Roll about the X axis, in radians."""
        return float(self._euler[0])

    @property
    def y(self) -> float:
        """Pitch about the Y axis, in radians."""
        return float(self._euler[1])

    @property
    def z(self) -> float:
        """Yaw about the Z axis, in radians."""
        return float(self._euler[2])

    @property
    def measure_x(self) -> Radian:
        return Radian(self.x)

    @property
    def measure_y(self) -> Radian:
        return Radian(self.y)

    @property
    def measure_z(self) -> Radian:
        return Radian(self.z)

    @property
    def angle(self) -> float:
        """Total rotation angle about the rotation axis, in radians."""
        return float(self._rotation.magnitude())

    @property
    def quaternion(self) -> np.ndarray:
        """Unit quaternion ordered (w, x, y, z)."""
        x, y, z, w = self._rotation.as_quat()
        return np.array([w, x, y, z], dtype=WIRE_DTYPE)

    # -------------------------------- Composition --------------------------------
    def rotate_by(self, other: Rotation3d) -> Rotation3d:
        """Apply ``other`` after this rotation, in the fixed frame."""
        return Rotation3d._from_scipy(other._rotation * self._rotation)

    def apply(self, vector: Sequence[float] | np.ndarray) -> np.ndarray:
        """Rotate an (x, y, z) vector."""
        return self._rotation.apply(as_xyz_array(vector))

    def __add__(self, other: Rotation3d) -> Rotation3d:
        return self.rotate_by(other)

    def __sub__(self, other: Rotation3d) -> Rotation3d:
        return self.rotate_by(-other)

    def __neg__(self) -> Rotation3d:
        return Rotation3d._from_scipy(self._rotation.inv())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rotation3d):
            return NotImplemented
        # q and -q describe the same rotation
        dot = float(np.dot(self.quaternion, other.quaternion))
        return abs(dot) > 1.0 - EQUALITY_TOLERANCE

    __hash__ = None

    def __repr__(self) -> str:
        return f"Rotation3d(x={self.x:g} rad, y={self.y:g} rad, z={self.z:g} rad)"
