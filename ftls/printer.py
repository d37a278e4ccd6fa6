"""A printf work-alike: literal text, colour tags and conversion specifications."""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, Iterable, Iterator, Optional, TextIO, Tuple

from ftls.floatfmt import format_float
from ftls.spec import (
    Spec,
    colour_escape,
    format_char,
    format_integer,
    format_percent,
    format_pointer,
    format_string,
    parse_spec,
)

# A piece of output and whether it counts towards the number of characters
# printed; None marks a malformed specification that ends the output.
Piece = Optional[Tuple[str, bool]]

_LITERAL = re.compile(r"[^%{]+")


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"missing argument for %{conversion}") from None


def _convert(spec: Spec, args: Iterator[Any]) -> str:
    conversion = spec.conversion
    if conversion == "%":
        return format_percent(spec)
    value = _next_arg(args, conversion)
    if conversion == "c":
        return format_char(value, spec)
    if conversion == "s":
        return format_string(value, spec)
    if conversion == "p":
        return format_pointer(value, spec)
    if conversion == "f":
        return format_float(value, spec)
    return format_integer(operator.index(value), spec)


def _render(fmt: str, args: Iterable[Any]) -> Iterator[Piece]:
    """Yield the output of fmt piece by piece."""
    remaining = iter(args)
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        if ch == "%":
            parsed = parse_spec(fmt, pos + 1, remaining)
            if parsed is None:
                yield None
                return
            spec, pos = parsed
            yield _convert(spec, remaining), True
        elif ch == "{":
            escape, used = colour_escape(fmt[pos:])
            yield escape, False
            pos += used
        else:
            match = _LITERAL.match(fmt, pos)
            yield match.group(), True
            pos = match.end()


def sprintf(fmt: str, *args: Any) -> str:
    """Return what printf would write for fmt and args.

    Output stops at the first malformed conversion specification.
    """
    parts = []
    for piece in _render(fmt, args):
        if piece is None:
            break
        parts.append(piece[0])
    return "".join(parts)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write fmt formatted with args to stream.

    Returns the number of characters written, colour escapes not counted, or
    0 when a malformed specification cut the output short.
    """
    count = 0
    for piece in _render(fmt, args):
        if piece is None:
            return 0
        text, counted = piece
        stream.write(text)
        if counted:
            count += len(text)
    return count


def printf(fmt: str, *args: Any) -> int:
    """Write fmt formatted with args to standard output."""
    return fprintf(sys.stdout, fmt, *args)