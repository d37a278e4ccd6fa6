"""Searching, slicing, joining, splitting and bounded copying of strings."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

_TRIM_CHARS = " \n\t"
_TERMINATOR = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def find_char(s: str, c: str) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Searching for the terminator character '\\0' yields the length of s.
    """
    _check_char(c)
    if c == _TERMINATOR:
        return len(s)
    index = s.find(c)
    return index if index >= 0 else None


def rfind_char(s: str, c: str) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Searching for the terminator character '\\0' yields the length of s.
    """
    _check_char(c)
    if c == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def find_sub(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of needle in haystack, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack.find(needle)
    return index if index >= 0 else None


def find_sub_n(haystack: Optional[str], needle: str, length: int) -> Optional[int]:
    """Like find_sub, but the match must lie within the first length characters."""
    if haystack is None and length == 0:
        return None
    if not needle:
        return 0
    if haystack is None:
        raise ValueError("haystack is missing")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def length_until(s: Optional[str], c: str) -> int:
    """Number of characters before the first c, or the whole length; 0 for None."""
    if s is None:
        return 0
    _check_char(c)
    index = s.find(c)
    return index if index >= 0 else len(s)


def substring(s: Optional[str], start: int, length: int) -> Optional[str]:
    """The length characters of s beginning at start; None when s is None."""
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + length > len(s):
        raise IndexError(
            f"substring [{start}, {start + length}) runs past the end of a "
            f"string of length {len(s)}"
        )
    return s[start:start + length]


def join(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenation of s1 and s2; None when either is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def trim(s: Optional[str]) -> Optional[str]:
    """s without leading and trailing spaces, newlines and tabs."""
    if s is None:
        return None
    return s.strip(_TRIM_CHARS)


def split(s: Optional[str], c: str) -> Optional[List[str]]:
    """The non-empty words of s separated by runs of c."""
    if s is None:
        return None
    _check_char(c)
    return [word for word in s.split(c) if word]


def word_count(s: str, c: str) -> int:
    """Number of non-empty words of s separated by runs of c."""
    _check_char(c)
    return sum(1 for word in s.split(c) if word)


def map_chars(s: Optional[str], f: Optional[Callable[[str], str]]) -> Optional[str]:
    """New string made of f applied to every character of s."""
    if s is None or f is None:
        return None
    return "".join(f(ch) for ch in s)


def map_chars_indexed(
    s: Optional[str], f: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """New string made of f(index, character) for every character of s."""
    if s is None or f is None:
        return None
    return "".join(f(i, ch) for i, ch in enumerate(s))


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting string and the length the full concatenation would
    have needed; a result at least size means the copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dst, len(src)
    if len(dst) > size:
        return dst, size + len(src)
    room = max(0, size - 1 - len(dst))
    return dst + src[:room], len(src) + len(dst)


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied string and the length of src.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)