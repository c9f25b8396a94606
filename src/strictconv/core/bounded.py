"""Bounded printf-style formatting into caller-owned buffers."""

from __future__ import annotations

import errno
import os
import sys
import warnings
from typing import Any, Mapping, Sequence, Union

FormatArgs = Union[Sequence[Any], Mapping[str, Any]]


def _abort(message: str) -> None:
    """Report a broken precondition and abort the process."""
    sys.stderr.write(f"strictconv: '{message}' failed\n")
    sys.stderr.flush()
    os.abort()


def _render(fmt: str | bytes, args: FormatArgs) -> bytes:
    if not isinstance(args, Mapping):
        args = tuple(args)
    if isinstance(fmt, str):
        return (fmt % args).encode("utf-8")
    return bytes(fmt) % args


def vscnprintf(buffer: bytearray, size: int, fmt: str | bytes, args: FormatArgs) -> int:
    """Format ``fmt % args`` into the first ``size`` bytes of ``buffer``.

    The output is always NUL-terminated and never longer than ``size`` bytes.
    Returns the number of bytes written before the terminator, which is
    clamped to ``size - 1`` when the output was truncated, or a negative
    errno value when formatting fails (``buffer`` then holds an empty string).

    ``size`` must be positive and no larger than ``buffer``; anything else
    aborts the process.
    """
    if not 0 < size <= len(buffer):
        _abort(f"0 < size <= len(buffer) (size={size}, len={len(buffer)})")

    try:
        out = _render(fmt, args)
    except (TypeError, ValueError, KeyError, OverflowError) as e:
        warnings.warn(f"Formatting {fmt!r} failed: {e}", RuntimeWarning, stacklevel=2)
        buffer[0] = 0
        return -errno.EINVAL

    n = min(len(out), size - 1)
    buffer[:n] = out[:n]
    buffer[n] = 0
    if len(out) < size:
        return len(out)
    return size - 1


def scnprintf(buffer: bytearray, size: int, fmt: str | bytes, *args: Any) -> int:
    """Variadic form of :func:`vscnprintf`.

    A single mapping argument is passed through as the mapping, the same way
    the ``%`` operator treats it, so ``%(name)s`` keys work here too.
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        return vscnprintf(buffer, size, fmt, args[0])
    return vscnprintf(buffer, size, fmt, args)
