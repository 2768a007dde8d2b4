"""Wire-side type definitions and numeric constants.

This module centralizes the primitive types exchanged with the telemetry
bus and the constants shared by the geometry and mapping layers, so every
component agrees on what a wire value looks like.

Type Definitions:
    WireScalar: A single double-precision value.
    WireArray: A one-dimensional ``numpy.ndarray`` of float64.
    WireValue: Either of the above.

Constants:
    XYZ_LENGTH: Number of elements in an (x, y, z) wire array.
    EQUALITY_TOLERANCE: Absolute tolerance used by geometry equality.
    WIRE_DTYPE: dtype of every array produced for the bus.

Example:
    >>> from telemap.config import WireType
    >>> WireType.DOUBLE_ARRAY.value
    'double[]'
    >>> WireType.DOUBLE_ARRAY.python_type
    <class 'numpy.ndarray'>
"""

from enum import Enum

import numpy as np
from numpy import ndarray

WireScalar = float
WireArray = ndarray
WireValue = float | ndarray

XYZ_LENGTH = 3
EQUALITY_TOLERANCE = 1e-9
WIRE_DTYPE = np.float64


class WireType(Enum):
    """Value type tags understood by the bus transport.

    The values are the type strings the bus uses when announcing a topic.
    A mapping declares one of these so the transport knows how to encode
    what ``to_wire`` returns.
    """

    BOOLEAN = "boolean"
    DOUBLE = "double"
    INTEGER = "int"
    FLOAT = "float"
    STRING = "string"
    RAW = "raw"
    BOOLEAN_ARRAY = "boolean[]"
    DOUBLE_ARRAY = "double[]"
    INTEGER_ARRAY = "int[]"
    FLOAT_ARRAY = "float[]"
    STRING_ARRAY = "string[]"

    @property
    def is_array(self) -> bool:
        return self.value.endswith("[]")

    @property
    def python_type(self) -> type:
        """Python type a mapping must produce for this tag."""
        if self.is_array:
            return ndarray if self is not WireType.STRING_ARRAY else list
        return _SCALAR_TYPES[self]


_SCALAR_TYPES = {
    WireType.BOOLEAN: bool,
    WireType.DOUBLE: float,
    WireType.INTEGER: int,
    WireType.FLOAT: float,
    WireType.STRING: str,
    WireType.RAW: bytes,
}
