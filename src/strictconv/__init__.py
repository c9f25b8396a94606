"""strictconv - strict text to number conversions and bounded formatting."""

from .core.model import Conversion, UnknownConverterError, ParseError   # re-export
from .core.registry import _REGISTRY                                    # singleton
from .core.text import streq, strneq
from .core.bounded import scnprintf, vscnprintf

# Import converters to trigger registration
from .converters import atob, atoi32, atou32, atoi64, atou64, atof, atod
from .settings import apply_properties


def convert(type_name: str, text, **options) -> Conversion:
    """Convert ``text`` with the converter registered as ``type_name``."""
    return _REGISTRY.convert(type_name, text, **options)


__all__ = [
    "streq", "strneq",
    "atob", "atoi32", "atou32", "atoi64", "atou64", "atof", "atod",
    "scnprintf", "vscnprintf",
    "convert", "apply_properties",
    "Conversion", "UnknownConverterError", "ParseError",
]
