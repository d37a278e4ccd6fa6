"""Character classification, case mapping and string comparison."""

from __future__ import annotations

from typing import Optional, Union

Char = Union[str, int]


def _code(c: Char) -> int:
    """Return the code point of a one-character string or an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """True for the decimal digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def _at(s: str, i: int) -> int:
    """Code at position i, with 0 standing for the end of the string."""
    return ord(s[i]) if i < len(s) else 0


def compare(s1: str, s2: str) -> int:
    """Compare two strings; the result is the difference of the first differing codes."""
    i = 0
    while _at(s1, i) == _at(s2, i) and _at(s1, i) != 0:
        i += 1
    return _at(s1, i) - _at(s2, i)


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of two strings."""
    if n == 0:
        return 0
    i = 0
    while _at(s1, i) == _at(s2, i) and _at(s1, i) != 0 and i != n:
        i += 1
    if i == n:
        return _at(s1, i - 1) - _at(s2, i - 1)
    return _at(s1, i) - _at(s2, i)


def equal(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are present and identical."""
    if s1 is None or s2 is None:
        return False
    return compare(s1, s2) == 0


def equal_n(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when both strings are present and agree in their first n characters."""
    if s1 is None or s2 is None:
        return False
    return compare_n(s1, s2, n) == 0