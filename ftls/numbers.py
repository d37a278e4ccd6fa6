"""Integer parsing and formatting with the limits of 64-bit and 32-bit C integers."""

from __future__ import annotations

LONG_MAX = 9223372036854775807
LONG_MIN = -9223372036854775807 - 1
_SATURATION_POINT = 922337203685477580
_DIGITS = "0123456789abcdef"
_WHITESPACE = frozenset(chr(c) for c in range(9, 14)) | {" "}


def parse_long(text: str) -> int:
    """Parse a leading decimal integer, saturating at the 64-bit limits.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Once the value reaches the saturation point, at most one more
    digit is considered and the rest is ignored.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = pos < len(text) and text[pos] == "-"
    if pos < len(text) and text[pos] in "+-":
        pos += 1

    result = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if result >= _SATURATION_POINT:
            if result == _SATURATION_POINT and digit <= 7:
                value = result * 10 + digit
                return -value if negative else value
            return LONG_MIN if negative else LONG_MAX
        result = result * 10 + digit
    return -result if negative else result


def parse_int(text: str) -> int:
    """Parse like parse_long and truncate the result to a signed 32-bit integer."""
    value = parse_long(text) & 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def count_digits(n: int, base: int = 10) -> int:
    """Number of digits of n in the given base, the sign not counted."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    n = abs(n)
    if n == 0:
        return 1
    count = 0
    while n:
        count += 1
        n //= base
    return count


def int_to_str(n: int) -> str:
    """Decimal representation of n."""
    return int_to_base(n, 10)


def int_to_base(n: int, base: int) -> str:
    """Representation of n in a base from 2 to 16, lower-case digits, '-' for negatives."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    if n == LONG_MIN:
        # The most negative 64-bit value is always spelt in decimal.
        return "-9223372036854775808"
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    n = abs(n)
    digits = []
    while n:
        n, rem = divmod(n, base)
        digits.append(_DIGITS[rem])
    return sign + "".join(reversed(digits))