"""Field ↔ wire mappings for the telemetry bus.

Exports:
    Mapping: Abstract bidirectional converter
    DistanceConfiguration, RotationConfiguration: Config literals per quantity
    DISTANCE_MAPPING, ROTATION2D_MAPPING, TRANSLATION3D_MAPPING,
    ROTATION3D_MAPPING: The unit mapping singletons
    MAPPINGS, find_mapping, mapping_for, build_registry: Field-type registry
"""

from .configuration import DistanceConfiguration, RotationConfiguration
from .mapping_base import Mapping
from .registry import MAPPINGS, build_registry, find_mapping, mapping_for
from .unit_mappings import (
    DISTANCE_MAPPING,
    ROTATION2D_MAPPING,
    ROTATION3D_MAPPING,
    TRANSLATION3D_MAPPING,
    UNIT_MAPPINGS,
    DistanceMapping,
    Rotation2dMapping,
    Rotation3dMapping,
    Translation3dMapping,
)

__all__ = [
    "Mapping",
    "DistanceConfiguration",
    "RotationConfiguration",
    "DistanceMapping",
    "Rotation2dMapping",
    "Translation3dMapping",
    "Rotation3dMapping",
    "DISTANCE_MAPPING",
    "ROTATION2D_MAPPING",
    "TRANSLATION3D_MAPPING",
    "ROTATION3D_MAPPING",
    "UNIT_MAPPINGS",
    "MAPPINGS",
    "build_registry",
    "find_mapping",
    "mapping_for",
]
