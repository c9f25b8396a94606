"""Text values and the NULL-aware equality predicates."""

from __future__ import annotations

from typing import Union

Text = Union[str, bytes, bytearray, memoryview, None]


def as_bytes(text: Text) -> bytes | None:
    """Return the logical bytes of ``text``: everything before the first NUL.

    ``None`` stays ``None`` so callers can tell an absent value from ``b""``.
    """
    if text is None:
        return None
    if isinstance(text, str):
        raw = text.encode("utf-8")
    else:
        raw = bytes(text)
    nul = raw.find(b"\0")
    return raw if nul < 0 else raw[:nul]


def streq(a: Text, b: Text) -> bool:
    """True if both are absent, or both present with identical bytes."""
    a_b, b_b = as_bytes(a), as_bytes(b)
    if a_b is None or b_b is None:
        return a_b is b_b
    return a_b == b_b


def strneq(a: Text, b: Text, n: int) -> bool:
    """Like :func:`streq`, but only the first ``n`` bytes are compared."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    a_b, b_b = as_bytes(a), as_bytes(b)
    if a_b is None or b_b is None:
        return a_b is b_b
    return a_b[:n] == b_b[:n]
