from __future__ import annotations
import math
from typing import Dict, Any, Iterable
from .model import Conversion


def conversion_asdict(res: Conversion, text: str | None = None, *,
                      fields: Iterable[str] | None = None) -> Dict[str, Any]:
    """Return a JSON-serialisable dict, optionally filtered to ``fields``."""
    payload: Dict[str, Any] = {"type": res.type_name}
    if text is not None:
        payload["input"] = text
    if res.success:
        value = res.value
        # inf and nan have no JSON literal
        if isinstance(value, float) and not math.isfinite(value):
            value = str(value)
        payload["value"] = value
    if fields:
        wanted = set(fields)
        payload = {k: v for k, v in payload.items() if k in wanted}
    payload["success"] = res.success
    return payload
