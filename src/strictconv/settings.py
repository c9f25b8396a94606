"""Apply raw text properties onto typed settings."""

from __future__ import annotations

import warnings
from typing import Any, List, Mapping, MutableMapping

from .core.registry import _REGISTRY
from .core.text import Text


def apply_properties(values: MutableMapping[str, Any], props: Mapping[str, Text],
                     types: Mapping[str, str], *, base: int = 10) -> List[str]:
    """Update ``values`` in place from the raw texts in ``props``.

    ``types`` maps each setting key to a converter name ("int32", "bool", ...).
    A key missing from ``props`` is skipped. A key whose text does not convert
    keeps its current value in ``values``, triggers a warning and is returned
    in the list of rejected keys.
    """
    rejected: List[str] = []
    for key, type_name in types.items():
        if key not in props:
            continue
        res = _REGISTRY.convert(type_name, props[key], base=base)
        if res.success:
            values[key] = res.value
        else:
            warnings.warn(f"Ignoring invalid {type_name} value {props[key]!r} for {key!r}")
            rejected.append(key)
    return rejected
