"""Unit-aware conversion between typed quantities and telemetry bus values.

A control application models distances and orientations as typed
quantities; the telemetry bus only carries unit-less doubles and double
arrays. ``telemap`` bridges the two: each quantity kind has one stateless
``Mapping`` whose ``to_wire`` and ``to_field`` take an optional config
string choosing the unit used on the wire.

Package Components:
    Unit System (telemap.unit):
        • Length and angle families stored in SI units
        • Conversion with ``to`` / ``as_unit``, family-checked arithmetic

    Geometry (telemap.geometry):
        • Rotation2d, Translation3d, Rotation3d value types

    Mappings (telemap.mapping):
        • Mapping contract with declared wire type tags
        • Distance, 2-D rotation, 3-D translation and 3-D rotation mappings
        • Immutable registry keyed by field type

Config Literals:
    | Quantity        | Literals                | Default             |
    |-----------------|-------------------------|---------------------|
    | Distance        | "inches", "meters"      | base unit (meters)  |
    | 2-D rotation    | "rotations", "radians"  | degrees             |
    | 3-D rotation    | "rotations", "radians"  | degrees             |
    | 3-D translation | (none)                  | meters, always      |

    Unrecognized or missing configs fall back to the default; they are
    never rejected.

Usage:
    >>> from telemap import DISTANCE_MAPPING, ROTATION3D_MAPPING, mapping_for
    >>> from telemap.geometry import Rotation3d, Translation3d
    >>> from telemap.unit import Meter
    >>>
    >>> DISTANCE_MAPPING.to_wire(Meter(1.0), "inches")  # 39.3700...
    >>> DISTANCE_MAPPING.to_field(12.0, "inches")  # 0.3048 m
    >>>
    >>> offset = Translation3d(1.0, 2.0, 3.0)
    >>> mapping_for(offset).to_wire(offset)  # array([1., 2., 3.])
    >>>
    >>> ROTATION3D_MAPPING.to_field([0.0, 0.0, 0.25], "rotations")  # yaw 90°
"""

from telemap.mapping import (
    DISTANCE_MAPPING,
    MAPPINGS,
    ROTATION2D_MAPPING,
    ROTATION3D_MAPPING,
    TRANSLATION3D_MAPPING,
    DistanceConfiguration,
    Mapping,
    RotationConfiguration,
    find_mapping,
    mapping_for,
)

__version__ = "0.1.0"

__all__ = [
    "Mapping",
    "DistanceConfiguration",
    "RotationConfiguration",
    "DISTANCE_MAPPING",
    "ROTATION2D_MAPPING",
    "TRANSLATION3D_MAPPING",
    "ROTATION3D_MAPPING",
    "MAPPINGS",
    "find_mapping",
    "mapping_for",
]
