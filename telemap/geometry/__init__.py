"""Geometry value types published on the telemetry bus.

Components:
    Rotation2d: Planar rotation held as a ``Radian`` angle
    Translation3d: (x, y, z) offset in meters
    Rotation3d: Spatial rotation with roll/pitch/yaw read-outs

All three are immutable and compare with a small absolute tolerance, so a
value that went to the wire and came back compares equal to the original.

Typical Usage:
    >>> from telemap.geometry import Rotation2d, Rotation3d, Translation3d
    >>> heading = Rotation2d.from_degrees(45)
    >>> camera_offset = Translation3d(0.3, 0.0, 0.5)
    >>> camera_tilt = Rotation3d(0.0, -0.35, 0.0)
"""

from .rotation2d import Rotation2d
from .rotation3d import Rotation3d
from .translation3d import Translation3d, as_xyz_array

__all__ = ["Rotation2d", "Rotation3d", "Translation3d", "as_xyz_array"]
