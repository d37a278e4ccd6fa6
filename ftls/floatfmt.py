"""Exact decimal expansion and printf-style formatting of floating-point numbers."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Tuple, Union

from ftls.spec import Spec, pad_left, pad_right

DEFAULT_PRECISION = 6

Number = Union[float, int]


def _expand(value: float) -> Tuple[int, str]:
    """Integer part and the exact fractional digits of abs(value).

    The fractional digits are the shortest exact expansion; "0" when there is
    no fractional part.
    """
    numerator, denominator = abs(value).as_integer_ratio()
    integer, remainder = divmod(numerator, denominator)
    if not remainder:
        return integer, "0"
    power = denominator.bit_length() - 1
    return integer, str(remainder * 5**power).zfill(power)


def _round(integer: int, fraction: str, precision: int) -> Tuple[int, str]:
    """Cut the fractional digits to precision places, rounding on the next digit."""
    if precision == 0:
        if len(fraction) > 1 and fraction[0] >= "5":
            integer += 1
        return integer, ""

    if (
        len(fraction) > precision
        and fraction[:precision] == "9" * precision
        and fraction[precision] > "5"
    ):
        return integer + 1, "0" * precision

    kept = fraction[:precision]
    if len(fraction) > precision and fraction[precision] >= "5":
        # The carry stays inside the kept digits; an overflowing carry
        # lengthens them and only the leading places survive the cut.
        kept = str(int(kept) + 1).zfill(len(kept))[:precision]
    return integer, kept.ljust(precision, "0")


def float_digits(value: Number, precision: int) -> str:
    """Fixed-point text of value with precision digits after the point.

    NaN and the infinities give "nan", "inf" and "-inf". A negative zero
    keeps its sign. Rounding looks only at the first dropped digit.
    """
    value = float(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    if precision < 0:
        raise ValueError(f"precision must not be negative, got {precision}")

    negative = math.copysign(1.0, value) < 0
    integer, fraction = _round(*_expand(value), precision)
    text = str(integer)
    if precision:
        text += "." + fraction
    return "-" + text if negative else text


def format_float(value: Number, spec: Spec) -> str:
    """Format value for the 'f' conversion described by spec.

    A negative precision means the default of six places. The spec passed in
    is left unchanged.
    """
    value = float(value)
    spec = replace(spec)
    precision = DEFAULT_PRECISION if spec.precision < 0 else spec.precision
    text = float_digits(value, precision)

    if math.isnan(value) or math.isinf(value):
        spec.zero = False
        spec.sharp = False
        spec.precision = 0
    if spec.precision == 0 and spec.sharp:
        text += "."
    if spec.plus:
        if value >= 0 and not text.startswith("-"):
            text = "+" + text
        spec.space = False
    if spec.space and value >= 0 and not text.startswith("-"):
        text = " " + text
    if spec.minus:
        spec.zero = False

    text = pad_right(text, spec.precision, "0")
    if spec.width != 0:
        fill = "0" if spec.zero else " "
        if spec.minus:
            text = pad_left(text, spec.width, fill)
        else:
            text = pad_right(text, spec.width, fill)
    return text