from __future__ import annotations

import math
import re
import struct
from decimal import Decimal, InvalidOperation
from typing import ClassVar

from ..core.converter_base import Converter
from ..core.model import Conversion, ParseError
from ..core.text import Text

_DIGIT = re.compile(rb"[0-9]")
_NONZERO_DIGIT = re.compile(rb"[1-9]")

_F32_TINY = struct.unpack("<f", struct.pack("<I", 1))[0]
_F32_MAX = struct.unpack("<f", struct.pack("<I", 0x7F7FFFFF))[0]
_F32_OVERFLOW_EDGE = math.ldexp(2**25 - 1, 103)    # halfway between FLT_MAX and 2**128


def _exact(raw: bytes) -> Decimal:
    try:
        return Decimal(raw.decode("ascii"))
    except InvalidOperation:                        # exponent beyond libmpdec limits
        raise ParseError(f"{raw!r} is out of range") from None


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _f32_neighbour(single: float, toward: float) -> float:
    """The float32 next to ``single`` in the direction of ``toward``."""
    if single == 0.0:
        return math.copysign(_F32_TINY, toward)
    (bits,) = struct.unpack("<I", struct.pack("<f", single))
    bits += 1 if (toward > single) == (single > 0) else -1
    return struct.unpack("<f", struct.pack("<I", bits))[0]


class DoubleConverter(Converter):
    """Strict IEEE-754 double conversion on top of the ``float()`` grammar.

    ``inf``, ``infinity`` and ``nan`` are accepted in any case. A finite
    literal that overflows to infinity, or a non-zero one that underflows
    to zero, is rejected rather than saturated.
    """

    type_name: ClassVar = "double"
    aliases: ClassVar = ("float64", "f64")

    @classmethod
    def _parse_double(cls, raw: bytes) -> float:
        try:
            value = float(raw)
        except ValueError as e:
            raise ParseError(str(e)) from None
        if math.isinf(value) and _DIGIT.search(raw):
            raise ParseError(f"{raw!r} overflows {cls.type_name}")
        if value == 0.0 and _NONZERO_DIGIT.search(raw.lower().split(b"e", 1)[0]):
            raise ParseError(f"{raw!r} underflows {cls.type_name}")
        return value

    @classmethod
    def parse(cls, raw: bytes, **_options) -> float:
        return cls._parse_double(raw)


class FloatConverter(DoubleConverter):
    """Single precision, correctly rounded from the literal itself.

    Rounding goes through a double first. When that double lands exactly on
    a float32 midpoint, the literal decides which neighbour wins.
    """

    type_name: ClassVar = "float"
    aliases: ClassVar = ("float32", "f32")

    @classmethod
    def parse(cls, raw: bytes, **_options) -> float:
        value = cls._parse_double(raw)
        try:
            single = _f32(value)
        except OverflowError:
            if abs(value) == _F32_OVERFLOW_EDGE and abs(_exact(raw)) < Decimal(_F32_OVERFLOW_EDGE):
                return math.copysign(_F32_MAX, value)
            raise ParseError(f"{raw!r} overflows {cls.type_name}") from None

        if single != value and not math.isnan(value):
            other = _f32_neighbour(single, value)
            if (single + other) / 2 == value:
                exact = _exact(raw)
                if exact > Decimal(value):
                    single = max(single, other)
                elif exact < Decimal(value):
                    single = min(single, other)

        if single == 0.0 and value != 0.0:
            raise ParseError(f"{raw!r} underflows {cls.type_name}")
        return single


def atof(text: Text) -> Conversion:
    """Single precision; the value is rounded to the nearest float32."""
    return FloatConverter.convert(text)


def atod(text: Text) -> Conversion:
    return DoubleConverter.convert(text)
