"""CLI implementation for strictconv."""

import json
import re
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from . import atod, atoi64, scnprintf
from .core.model import Conversion, UnknownConverterError
from .core.registry import _REGISTRY
from .core.util import conversion_asdict

app = typer.Typer(add_completion=False, help="Strictly convert text values and format into bounded buffers.")


def iter_values(values: list[str]) -> list[str]:
    """Get list of values from the values argument or stdin."""
    if "-" in values:
        # stdin mode, one value per line
        stdin_lines = [ln.rstrip("\r\n") for ln in sys.stdin]
        return [ln for ln in stdin_lines if ln]
    elif values:
        return list(values)
    return []


# %[flags][width][.precision][length]type; '*' width/precision consume an int argument
_CONVERSION = re.compile(r"%(?:\([^)]*\))?[#0\- +]*(\*|\d+)?(?:\.(\*|\d*))?[hlL]?([diouxXeEfFgGcrsa%])")


def coerce_arg(text: str) -> Any:
    """Parse a numeric format argument as a number, falling back to the text."""
    for conv in (atoi64, atod):
        res = conv(text)
        if res.success:
            return res.value
    return text


def coerce_args(fmt: str, args: list[str]) -> list[Any]:
    """Turn only the arguments that feed numeric conversions into numbers."""
    numeric: list[bool] = []
    for width, precision, kind in _CONVERSION.findall(fmt):
        if kind == "%":
            continue
        numeric.extend(True for star in (width, precision) if star == "*")
        numeric.append(kind in "diouxXeEfFgG")
    return [coerce_arg(a) if i < len(numeric) and numeric[i] else a for i, a in enumerate(args)]


@app.command("parse")
def parse(
    type_name: str = typer.Argument(..., metavar="TYPE", help="Converter name, e.g. int32, uint64, double, bool"),
    values: list[str] = typer.Argument(None, help="Values to convert, or '-' for stdin"),
    base: int = typer.Option(10, "--base", help="Integer base, 0 to auto-detect 0x/0o/0b prefixes"),
    fields: Optional[str] = typer.Option(None, "--fields", help="Comma-separated subset of keys to emit"),
    jsonl: bool = typer.Option(False, "--jsonl", help="Force JSON-lines output"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to PATH instead of stdout"),
):
    """Strictly convert one or many text values."""
    try:
        converter = _REGISTRY.get(type_name)
    except UnknownConverterError as e:
        typer.echo(f"{e}. Known types: {', '.join(_REGISTRY.names())}", err=True)
        raise typer.Exit(code=2)

    sel_fields = set(fields.split(",")) if fields else None
    inputs = iter_values(values or [])

    if not inputs:
        typer.echo("No input values given.", err=True)
        raise typer.Exit(code=1)

    results: list[Conversion] = [converter.convert(text, base=base) for text in inputs]

    # open output sink
    sink = open(output, "w", encoding="utf-8") if output else sys.stdout
    try:
        # choose output style
        if len(inputs) == 1 and not jsonl:
            obj = conversion_asdict(results[0], inputs[0], fields=sel_fields)
            json.dump(obj, sink, indent=2, allow_nan=False)
            sink.write("\n")
        else:
            for text, res in zip(inputs, results):
                obj = conversion_asdict(res, text, fields=sel_fields)
                sink.write(json.dumps(obj, allow_nan=False))
                sink.write("\n")
    finally:
        if output:
            sink.close()

    # exit code
    if any(not r.success for r in results):
        raise typer.Exit(code=1)


@app.command("format")
def format_(
    size: int = typer.Argument(..., min=1, help="Buffer capacity in bytes, terminator included"),
    fmt: str = typer.Argument(..., help="printf-style format string"),
    args: list[str] = typer.Argument(None, help="Format arguments; those used by numeric conversions are parsed as numbers"),
):
    """Format FMT % ARGS into a SIZE-byte buffer."""
    buffer = bytearray(size)
    length = scnprintf(buffer, size, fmt, *coerce_args(fmt, args or []))
    if length < 0:
        typer.echo(f"Could not format {fmt!r} with {len(args or [])} argument(s).", err=True)
        raise typer.Exit(code=1)

    obj = {
        "length": length,
        "at_capacity": length == size - 1,
        "text": bytes(buffer[:length]).decode("utf-8", errors="replace"),
    }
    typer.echo(json.dumps(obj, indent=2))


if __name__ == "__main__":
    app()
