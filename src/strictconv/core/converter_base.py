from abc import ABC, abstractmethod
from typing import Any, ClassVar
from .model import Conversion, ParseError
from .text import Text, as_bytes


class Converter(ABC):
    # --- required by subclasses ---
    type_name: ClassVar[str]                 # registry key, e.g. "int32"
    aliases: ClassVar[tuple[str, ...]] = ()  # extra registry keys

    @classmethod
    @abstractmethod
    def parse(cls, raw: bytes, **options) -> Any:
        """Convert non-empty, NUL-free bytes or raise ParseError."""
        ...

    @classmethod
    def convert(cls, text: Text, **options) -> Conversion:
        raw = as_bytes(text)
        if not raw:
            return Conversion(False, None, cls.type_name)
        try:
            value = cls.parse(raw, **options)
        except ParseError:
            return Conversion(False, None, cls.type_name)
        return Conversion(True, value, cls.type_name)

    # --- registry hook ---
    def __init_subclass__(cls, **kw):
        super().__init_subclass__(**kw)
        if "type_name" not in cls.__dict__:
            return                        # intermediate base class
        from .registry import _REGISTRY
        _REGISTRY.register(cls)           # noqa: E402
