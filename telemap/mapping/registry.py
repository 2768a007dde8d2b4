"""Process-wide table of mappings keyed by the field type they convert.

The table is built once at import from ``UNIT_MAPPINGS`` and exposed
read-only. Lookups walk the MRO of the requested type, so a value typed as
``Inch`` finds the mapping registered for ``Meter``.

Example:
    >>> find_mapping(Inch) is DISTANCE_MAPPING
    True
    >>> heading = Rotation2d.from_degrees(30)
    >>> mapping_for(heading).to_wire(heading, "radians")  # 0.5235...
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from .mapping_base import Mapping
from .unit_mappings import UNIT_MAPPINGS

logger = logging.getLogger(__name__)


def build_registry(mappings: Iterable[Mapping]) -> MappingProxyType[type, Mapping]:
    """Build an immutable field-type → mapping table.

    Args:
        mappings: Mapping instances, each with a distinct ``field_type``.

    Returns:
        MappingProxyType: Read-only view keyed by field type.

    Raises:
        ValueError: If two mappings declare the same field type.
    """
    table: dict[type, Mapping] = {}
    for mapping in mappings:
        existing = table.get(mapping.field_type)
        if existing is not None:
            msg = (
                f"{mapping!r} and {existing!r} both convert "
                f"{mapping.field_type.__name__}"
            )
            raise ValueError(msg)
        table[mapping.field_type] = mapping
    logger.debug("Registered mappings for %s", ", ".join(t.__name__ for t in table))
    return MappingProxyType(table)


MAPPINGS = build_registry(UNIT_MAPPINGS)


def find_mapping(field_type: type, registry=MAPPINGS) -> Mapping | None:
    """Return the mapping for ``field_type`` or one of its bases, or None."""
    for candidate in field_type.__mro__:
        mapping = registry.get(candidate)
        if mapping is not None:
            return mapping
    return None


def mapping_for(value: object, registry=MAPPINGS) -> Mapping:
    """Return the mapping that converts ``value``.

    Raises:
        KeyError: If no registered mapping handles ``type(value)``.
    """
    mapping = find_mapping(type(value), registry)
    if mapping is None:
        msg = f"no mapping registered for {type(value).__name__}"
        raise KeyError(msg)
    return mapping
