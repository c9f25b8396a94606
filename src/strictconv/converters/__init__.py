"""Type-specific converters for strictconv."""

from .boolean import BoolConverter, atob
from .floats import DoubleConverter, FloatConverter, atod, atof
from .integers import (
    Int32Converter, Int64Converter, UInt32Converter, UInt64Converter,
    atoi32, atoi64, atou32, atou64,
)
