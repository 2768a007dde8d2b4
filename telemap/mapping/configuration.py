"""Config strings recognized by the unit mappings.

Each quantity has a closed set of config literals, modelled as a
``StrEnum`` whose members carry the unit they select. ``resolve`` turns the
raw, caller-supplied string into a member. Anything it does not recognize
(``None``, ``""``, a typo) resolves to the documented default rather than
raising.

Example:
    >>> RotationConfiguration.resolve("radians")
    <RotationConfiguration.RADIANS: 'radians'>
    >>> RotationConfiguration.resolve(None).unit
    <class 'telemap.unit.unit_angle.Degree'>
"""

from __future__ import annotations

import logging
from enum import StrEnum

from telemap.unit import Degree, Inch, Meter, Radian, Turn, UnitFloat

logger = logging.getLogger(__name__)


class _UnitConfiguration(StrEnum):
    """A config literal bound to the unit it selects.

    The first member declared by a subclass is its default.
    """

    @classmethod
    def default(cls) -> _UnitConfiguration:
        return next(iter(cls))

    @property
    def unit(self) -> type[UnitFloat]:
        return _UNITS[self]

    @classmethod
    def resolve(cls, config: str | None) -> _UnitConfiguration:
        """Map a raw config string to a member, falling back to the default.

        Args:
            config: Config string as given by the caller, or None.

        Returns:
            The matching member, or ``cls.default()`` when nothing matches.
        """
        if config is None:
            return cls.default()
        try:
            return cls(config)
        except ValueError:
            fallback = cls.default()
            if config:
                logger.debug(
                    "Unrecognized %s %r, using %r", cls.__name__, config, fallback.value
                )
            return fallback


class DistanceConfiguration(_UnitConfiguration):
    """Config options for the distance mapping.

    ``BASE_UNIT`` is the implicit default: the magnitude in the length
    family's base unit, with no unit named on the wire.
    """

    BASE_UNIT = ""
    INCHES = "inches"
    METERS = "meters"


class RotationConfiguration(_UnitConfiguration):
    """Config options for the 2-D and 3-D rotation mappings. Defaults to degrees."""

    DEGREES = "degrees"
    RADIANS = "radians"
    ROTATIONS = "rotations"


_UNITS: dict[_UnitConfiguration, type[UnitFloat]] = {
    DistanceConfiguration.BASE_UNIT: Meter,
    DistanceConfiguration.INCHES: Inch,
    DistanceConfiguration.METERS: Meter,
    RotationConfiguration.DEGREES: Degree,
    RotationConfiguration.RADIANS: Radian,
    RotationConfiguration.ROTATIONS: Turn,
}
