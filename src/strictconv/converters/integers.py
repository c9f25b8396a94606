from __future__ import annotations

from typing import ClassVar

from ..core.converter_base import Converter
from ..core.model import Conversion, ParseError
from ..core.text import Text


class IntegerConverter(Converter):
    """Strict integer conversion on top of the ``int()`` literal grammar.

    The whole text must be one literal in the given base (0 auto-detects the
    ``0x``/``0o``/``0b`` prefixes). Surrounding ASCII whitespace and single
    underscores between digits are accepted, as ``int()`` does. Every value
    is first parsed at 64 bits; narrower subclasses then range-check it.
    """

    bits: ClassVar[int] = 64
    signed: ClassVar[bool] = True

    @classmethod
    def _bounds(cls, bits: int) -> tuple[int, int]:
        if cls.signed:
            return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        return 0, (1 << bits) - 1

    @classmethod
    def _parse_wide(cls, raw: bytes, base: int) -> int:
        try:
            value = int(raw, base)
        except ValueError as e:       # bad digits, trailing junk or bad base
            raise ParseError(str(e)) from None
        lo, hi = cls._bounds(64)
        if not lo <= value <= hi:
            raise ParseError(f"{value} out of 64-bit range")
        return value

    @classmethod
    def parse(cls, raw: bytes, *, base: int = 10, **_options) -> int:
        value = cls._parse_wide(raw, base)
        if cls.bits < 64:
            lo, hi = cls._bounds(cls.bits)
            if not lo <= value <= hi:
                raise ParseError(f"{value} does not fit in {cls.type_name}")
        return value


class Int32Converter(IntegerConverter):
    type_name: ClassVar = "int32"
    aliases: ClassVar = ("int", "i32")
    bits: ClassVar = 32


class UInt32Converter(IntegerConverter):
    type_name: ClassVar = "uint32"
    aliases: ClassVar = ("uint", "u32")
    bits: ClassVar = 32
    signed: ClassVar = False


class Int64Converter(IntegerConverter):
    type_name: ClassVar = "int64"
    aliases: ClassVar = ("i64",)


class UInt64Converter(IntegerConverter):
    type_name: ClassVar = "uint64"
    aliases: ClassVar = ("u64",)
    signed: ClassVar = False


def atoi32(text: Text, base: int = 10) -> Conversion:
    return Int32Converter.convert(text, base=base)


def atou32(text: Text, base: int = 10) -> Conversion:
    return UInt32Converter.convert(text, base=base)


def atoi64(text: Text, base: int = 10) -> Conversion:
    return Int64Converter.convert(text, base=base)


def atou64(text: Text, base: int = 10) -> Conversion:
    return UInt64Converter.convert(text, base=base)
