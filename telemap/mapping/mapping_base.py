"""Bidirectional mapping contract between field values and wire values.

A mapping converts one field-side type (a typed quantity used by the
application) to one wire-side primitive type (what the telemetry bus
carries) and back. Subclasses declare their types as class keywords:

    >>> class HeadingMapping(Mapping[Degree, float],
    ...                      field_type=Degree,
    ...                      wire_type=float,
    ...                      wire_type_tag=WireType.DOUBLE):
    ...     def to_wire(self, field_value, config=None):
    ...         return field_value.to(Degree)
    ...     def to_field(self, wire_value, config=None):
    ...         return Degree(wire_value)

Mappings hold no state. Both conversions are pure, so one instance per
quantity is shared by every caller and thread.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from telemap.config import WireType, WireValue

FieldT = TypeVar("FieldT")
WireT = TypeVar("WireT", bound=WireValue)


class Mapping(ABC, Generic[FieldT, WireT]):
    """Abstract converter between ``FieldT`` and ``WireT``.

    Attributes:
        field_type (ClassVar[type]): Type of the application-side value.
        wire_type (ClassVar[type]): Python type returned by ``to_wire``.
        wire_type_tag (ClassVar[WireType]): How the transport encodes it.
    """

    __slots__ = ()

    field_type: ClassVar[type]
    wire_type: ClassVar[type]
    wire_type_tag: ClassVar[WireType]

    def __init_subclass__(
        cls,
        *,
        field_type: type | None = None,
        wire_type: type | None = None,
        wire_type_tag: WireType | None = None,
        **kwargs,
    ):
        """Record the declared types of a concrete mapping.

        Raises:
            TypeError: If ``wire_type`` is not what ``wire_type_tag`` encodes.
        """
        super().__init_subclass__(**kwargs)
        declared = (field_type, wire_type, wire_type_tag)
        if all(item is None for item in declared):
            return
        if any(item is None for item in declared):
            msg = f"{cls.__name__} must declare field_type, wire_type and wire_type_tag together"
            raise TypeError(msg)
        if not issubclass(wire_type, wire_type_tag.python_type):
            msg = (
                f"{cls.__name__}: wire type {wire_type.__name__} cannot be sent "
                f"as {wire_type_tag.value!r}"
            )
            raise TypeError(msg)
        cls.field_type = field_type
        cls.wire_type = wire_type
        cls.wire_type_tag = wire_type_tag

    @abstractmethod
    def to_wire(self, field_value: FieldT, config: str | None = None) -> WireT:
        """Convert an application value to its wire representation.

        Args:
            field_value: Value to publish.
            config: Optional unit selector; unknown values select the default.
        """

    @abstractmethod
    def to_field(self, wire_value: WireT, config: str | None = None) -> FieldT:
        """Convert a wire value back to an application value.

        Args:
            wire_value: Value read from the bus.
            config: Optional unit selector; must match the one used to publish.
        """

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.field_type.__name__} <-> "
            f"{self.wire_type_tag.value})"
        )
