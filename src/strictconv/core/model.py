from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class Conversion:
    success: bool
    value: Any | None          # only meaningful when success is True
    type_name: str

    def value_or(self, previous: Any) -> Any:
        """Return the converted value, or ``previous`` if the conversion failed."""
        return self.value if self.success else previous

    def __bool__(self) -> bool:
        return self.success


class UnknownConverterError(RuntimeError):
    """Raised when no converter is registered under a given type name."""
    pass


class ParseError(RuntimeError):
    """Raised by a converter when the text is not a valid literal for its type."""
    pass
