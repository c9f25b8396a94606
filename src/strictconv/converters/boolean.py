from __future__ import annotations

from typing import ClassVar

from ..core.converter_base import Converter
from ..core.model import Conversion
from ..core.text import Text, streq


def atob(text: Text) -> bool:
    """True for exactly ``"true"`` or ``"1"``; anything else, absent included, is False."""
    return streq(text, "true") or streq(text, "1")


class BoolConverter(Converter):
    """Never fails: unrecognised text is simply False."""

    type_name: ClassVar = "bool"
    aliases: ClassVar = ("boolean",)

    @classmethod
    def parse(cls, raw: bytes, **_options) -> bool:
        return atob(raw)

    @classmethod
    def convert(cls, text: Text, **options) -> Conversion:
        return Conversion(True, atob(text), cls.type_name)
