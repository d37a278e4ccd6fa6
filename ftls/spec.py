"""Conversion specifications and the formatting of single printf-style arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from ftls.numbers import int_to_base, parse_int

_FLAGS = {"#": "sharp", "0": "zero", "-": "minus", "+": "plus", " ": "space"}
_CONVERSIONS = frozenset("cdifosuxXp%")
_INTEGER_CONVERSIONS = frozenset("diuxXo")
_UNSIGNED_CONVERSIONS = frozenset("uxXo")
_BASES = {"x": 16, "X": 16, "o": 8}
_SIGN_CHARS = "-+ "

_COLOURS = (
    ("{red}", "\x1B[31m"),
    ("{green}", "\x1B[32m"),
    ("{yellow}", "\x1B[33m"),
    ("{blue}", "\x1B[34m"),
    ("{magnetic}", "\x1B[35m"),
    ("{cyan}", "\x1B[36m"),
    ("{white}", "\x1B[37m"),
    ("{eoc}", "\x1B[0m"),
)


class UnknownColour(ValueError):
    """Raised for a colour tag that is not recognised."""


@dataclass
class Spec:
    """One parsed conversion specification."""

    sharp: bool = False
    zero: bool = False
    minus: bool = False
    plus: bool = False
    space: bool = False
    width: int = 0
    precision: int = -1
    size: str = ""
    conversion: str = ""


def _peek(fmt: str, pos: int) -> str:
    return fmt[pos] if pos < len(fmt) else ""


def _is_digit(ch: str) -> bool:
    return ch != "" and "0" <= ch <= "9"


def _skip_digits(fmt: str, pos: int) -> int:
    while _is_digit(_peek(fmt, pos)):
        pos += 1
    return pos


def _next_int(args: Iterator) -> int:
    try:
        return int(next(args))
    except StopIteration:
        raise ValueError("missing argument for '*'") from None


def parse_spec(fmt: str, pos: int, args: Iterator) -> Optional[Tuple[Spec, int]]:
    """Parse the specification that starts at fmt[pos], just after the '%'.

    Arguments for '*' widths and precisions are taken from the iterator args.
    Returns the spec and the position after it, or None when the format ends
    or the conversion character is not recognised.
    """
    spec = Spec()
    if pos >= len(fmt):
        return None

    while _peek(fmt, pos) in _FLAGS and _peek(fmt, pos) != "":
        setattr(spec, _FLAGS[fmt[pos]], True)
        pos += 1
    if spec.plus:
        spec.space = False
    if spec.minus:
        spec.zero = False

    if _peek(fmt, pos) == "*":
        width = _next_int(args)
        if width < 0:
            spec.width = -width
            spec.minus = True
            spec.zero = False
        else:
            spec.width = width
        pos += 1
    if _is_digit(_peek(fmt, pos)):
        spec.width = parse_int(fmt[pos:])
        pos = _skip_digits(fmt, pos)

    if _peek(fmt, pos) == ".":
        pos += 1
        spec.precision = 0
        if _peek(fmt, pos) == "*":
            spec.precision = _next_int(args)
            pos += 1
        if _is_digit(_peek(fmt, pos)):
            spec.precision = max(parse_int(fmt[pos:]), -1)
            pos = _skip_digits(fmt, pos)

    ch = _peek(fmt, pos)
    if ch == "L":
        spec.size = "L"
        pos += 1
    elif ch in ("l", "h") and ch != "":
        spec.size = ch
        pos += 1
        if _peek(fmt, pos) == ch:
            spec.size += ch
            pos += 1

    ch = _peek(fmt, pos)
    if ch == "" or ch not in _CONVERSIONS:
        return None
    spec.conversion = ch
    pos += 1

    if spec.conversion == "u":
        spec.space = False
        spec.plus = False
    return spec, pos


def pad_right(text: str, width: int, fill: str) -> str:
    """Right-justify text in width characters using fill.

    With '0' as fill, a leading sign or space, or an 'x' in a hexadecimal
    prefix, is kept in front of the inserted zeros.
    """
    count = width - len(text)
    if count <= 0:
        return text
    chars = list(fill * count + text)
    if fill == "0" and text:
        if text[0] in _SIGN_CHARS:
            chars[count] = "0"
            chars[0] = text[0]
        elif len(text) > 1 and text[1] == "x":
            chars[count + 1] = "0"
            chars[1] = "x"
    return "".join(chars)


def pad_left(text: str, width: int, fill: str) -> str:
    """Left-justify text in width characters using fill."""
    if width <= len(text):
        return text
    return text + fill * (width - len(text))


def format_char(value: Union[str, int], spec: Spec) -> str:
    """Format one character, padded with spaces to the spec's width."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        ch = value
    else:
        ch = chr(value & 0xFF)
    if spec.width == 0:
        return ch
    padding = " " * max(0, spec.width - 1)
    return ch + padding if spec.minus else padding + ch


def format_string(value: Optional[str], spec: Spec) -> str:
    """Format a string, honouring precision and width; None prints as (null)."""
    if value is None:
        text = "(null)"
        if -1 < spec.precision < len(text):
            text = ""
    else:
        text = value
    if -1 < spec.precision < len(text):
        text = text[:spec.precision]
    if spec.width != 0 and spec.width > len(text):
        text = pad_left(text, spec.width, " ") if spec.minus else pad_right(text, spec.width, " ")
    return text


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def format_integer(value: int, spec: Spec) -> str:
    """Format an integer for the conversions d, i, u, x, X and o."""
    conversion = spec.conversion
    if conversion not in _INTEGER_CONVERSIONS:
        raise ValueError(f"not an integer conversion: {conversion!r}")
    signed = conversion not in _UNSIGNED_CONVERSIONS
    value = _wrap(value, 64 if spec.size[:1] == "l" else 32, signed)
    if spec.size == "h":
        value = _wrap(value, 16, signed)
    elif spec.size == "hh":
        value = _wrap(value, 8, signed)

    base = _BASES.get(conversion, 10)
    zero = spec.zero and not (base == 16 and spec.minus)
    precision = spec.precision
    if precision > 0 and (spec.space or spec.plus or value < 0):
        precision += 1

    text = "" if precision == 0 and value == 0 else int_to_base(value, base)
    if spec.plus and value >= 0:
        text = "+" + text
    if spec.space and value >= 0:
        text = " " + text
    if spec.sharp and base == 8:
        text = pad_right(text, precision - 1, "0")
    else:
        text = pad_right(text, precision, "0")

    if spec.sharp and value != 0 and base == 16:
        text = "0x" + text
    elif spec.sharp and value != 0 and base == 8:
        text = "0" + text
    elif spec.sharp and base == 8 and precision != -1:
        text = "0" + text

    if spec.width != 0:
        fill = "0" if zero and precision == -1 else " "
        text = pad_left(text, spec.width, fill) if spec.minus else pad_right(text, spec.width, fill)

    if conversion == "X":
        text = text.upper()
    return text


def format_percent(spec: Spec) -> str:
    """Format a literal percent sign padded to the spec's width."""
    text = "%"
    if spec.width != 0:
        if spec.minus:
            text = pad_left(text, spec.width, " ")
        else:
            text = pad_right(text, spec.width, "0" if spec.zero else " ")
    return text


def format_pointer(address: Optional[int], spec: Spec) -> str:
    """Format an address as 0x-prefixed hexadecimal; None or 0 prints as (nil)."""
    if address is not None and address < 0:
        raise ValueError(f"address must not be negative, got {address}")
    if not address:
        text = "(nil)"
    else:
        text = "0x" + int_to_base(address, 16)
    if spec.precision == 0:
        text = text[:2]
    elif spec.precision > 0:
        text = pad_right(text, spec.precision + 2, "0")
    if spec.width != 0:
        text = pad_left(text, spec.width, " ") if spec.minus else pad_right(text, spec.width, " ")
    return text


def colour_escape(text: str) -> Tuple[str, int]:
    """Terminal escape for the colour tag that text starts with.

    Returns the escape sequence and the number of characters of text that the
    tag takes, up to and including its closing brace.
    """
    for tag, escape in _COLOURS:
        if text.startswith(tag):
            return escape, text.index("}") + 1
    raise UnknownColour(f"unknown colour tag at {text[:16]!r}")