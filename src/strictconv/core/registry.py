from __future__ import annotations
from typing import Dict, List, Type

from .converter_base import Converter
from .model import Conversion, UnknownConverterError
from .text import Text


class ConverterRegistry:
    def __init__(self) -> None:
        self._by_name: Dict[str, Type[Converter]] = {}

    # called from Converter.__init_subclass__
    def register(self, converter_cls: Type[Converter]) -> None:
        for name in (converter_cls.type_name, *converter_cls.aliases):
            self._by_name[name.lower()] = converter_cls

    def names(self) -> List[str]:
        return sorted(self._by_name)

    def get(self, type_name: str) -> Type[Converter]:
        converter = self._by_name.get(type_name.lower())
        if converter is None:
            raise UnknownConverterError(f"No converter for {type_name!r}")
        return converter

    def convert(self, type_name: str, text: Text, **options) -> Conversion:
        return self.get(type_name).convert(text, **options)


# singleton used project-wide
_REGISTRY = ConverterRegistry()
