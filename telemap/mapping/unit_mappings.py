"""Mappings for the unit-typed quantities.

Four singletons are provided:

    DISTANCE_MAPPING        Length        <-> double     (DistanceConfiguration)
    ROTATION2D_MAPPING      Rotation2d    <-> double     (RotationConfiguration)
    TRANSLATION3D_MAPPING   Translation3d <-> double[3]  (no config)
    ROTATION3D_MAPPING      Rotation3d    <-> double[3]  (RotationConfiguration)

Array values are always ordered (x, y, z). Reading an array that does not
hold exactly three elements raises ``IndexError``.

Example:
    >>> DISTANCE_MAPPING.to_wire(Meter(1), "inches")  # 39.3700...
    >>> ROTATION2D_MAPPING.to_field(0.25, "rotations")
    Rotation2d(degrees=90)
"""

from __future__ import annotations

import numpy as np

from telemap.config import WIRE_DTYPE, WireArray, WireScalar, WireType
from telemap.geometry import Rotation2d, Rotation3d, Translation3d, as_xyz_array
from telemap.unit import Length, Meter, Radian

from .configuration import DistanceConfiguration, RotationConfiguration
from .mapping_base import Mapping


class DistanceMapping(
    Mapping[Length, WireScalar],
    field_type=Meter,
    wire_type=WireScalar,
    wire_type_tag=WireType.DOUBLE,
):
    """Length as a single double.

    See ``DistanceConfiguration``: ``"inches"``, ``"meters"``, otherwise the
    base-unit magnitude.
    """

    __slots__ = ()

    def to_wire(self, field_value: Length, config: str | None = None) -> WireScalar:
        unit = DistanceConfiguration.resolve(config).unit
        return field_value.to(unit)

    def to_field(self, wire_value: WireScalar, config: str | None = None) -> Length:
        unit = DistanceConfiguration.resolve(config).unit
        return unit(wire_value)


class Rotation2dMapping(
    Mapping[Rotation2d, WireScalar],
    field_type=Rotation2d,
    wire_type=WireScalar,
    wire_type_tag=WireType.DOUBLE,
):
    """Planar rotation as a single double, in degrees unless configured."""

    __slots__ = ()

    def to_wire(self, field_value: Rotation2d, config: str | None = None) -> WireScalar:
        unit = RotationConfiguration.resolve(config).unit
        return field_value.measure().to(unit)

    def to_field(self, wire_value: WireScalar, config: str | None = None) -> Rotation2d:
        unit = RotationConfiguration.resolve(config).unit
        return Rotation2d(unit(wire_value))


class Translation3dMapping(
    Mapping[Translation3d, WireArray],
    field_type=Translation3d,
    wire_type=WireArray,
    wire_type_tag=WireType.DOUBLE_ARRAY,
):
    """Translation as ``[x, y, z]`` in meters. The config is ignored."""

    __slots__ = ()

    def to_wire(self, field_value: Translation3d, config: str | None = None) -> WireArray:
        return field_value.to_array()

    def to_field(self, wire_value: WireArray, config: str | None = None) -> Translation3d:
        return Translation3d.from_array(wire_value)


class Rotation3dMapping(
    Mapping[Rotation3d, WireArray],
    field_type=Rotation3d,
    wire_type=WireArray,
    wire_type_tag=WireType.DOUBLE_ARRAY,
):
    """Spatial rotation as ``[x, y, z]`` per-axis angles.

    All three elements use the unit selected by ``RotationConfiguration``.
    Reading goes through radians: each element is converted on its own and
    the rotation is rebuilt from the three radian values.
    """

    __slots__ = ()

    def to_wire(self, field_value: Rotation3d, config: str | None = None) -> WireArray:
        unit = RotationConfiguration.resolve(config).unit
        measures = (field_value.measure_x, field_value.measure_y, field_value.measure_z)
        return np.array([measure.to(unit) for measure in measures], dtype=WIRE_DTYPE)

    def to_field(self, wire_value: WireArray, config: str | None = None) -> Rotation3d:
        unit = RotationConfiguration.resolve(config).unit
        radian_x, radian_y, radian_z = (unit(value).to(Radian) for value in as_xyz_array(wire_value))
        return Rotation3d(radian_x, radian_y, radian_z)


DISTANCE_MAPPING = DistanceMapping()
ROTATION2D_MAPPING = Rotation2dMapping()
TRANSLATION3D_MAPPING = Translation3dMapping()
ROTATION3D_MAPPING = Rotation3dMapping()

UNIT_MAPPINGS = (
    DISTANCE_MAPPING,
    ROTATION2D_MAPPING,
    TRANSLATION3D_MAPPING,
    ROTATION3D_MAPPING,
)
