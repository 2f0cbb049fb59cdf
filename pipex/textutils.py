"""String helpers used to parse command lines and environment values."""

from __future__ import annotations

from itertools import zip_longest

INT_MAX = 2_147_483_647
INT_MIN = -2_147_483_648

_WHITESPACE = frozenset(" \n\t\v\f\r")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one optional sign are accepted and parsing stops
    at the first non-digit. A positive value above INT_MAX yields -1 and a
    negative value below INT_MIN yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
        if not negative and value > INT_MAX:
            return -1
        if negative and value > -INT_MIN:
            return 0
    return -value if negative else value


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError("itoa expects an int")
    return f"{number:d}"


def strtrim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start beyond the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly inside the first ``limit`` characters of ``haystack``.

    Returns the index of the first match, or None. An empty needle matches
    at index 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters, stopping at the end of either string.

    Returns the difference of the first differing code points, 0 if equal.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    for a, b in zip_longest(first[:limit], second[:limit], fillvalue="\0"):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0