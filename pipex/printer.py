"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any, TextIO

_UINT_MASK = 0xFFFF_FFFF
_ULLONG_MASK = 0xFFFF_FFFF_FFFF_FFFF


def _as_int(value: Any, conversion: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{conversion} expects an integer, got {type(value).__name__}"
        ) from None


def _signed_int(value: int) -> int:
    """Wrap an integer to the range of a 32-bit signed int."""
    return ((value + 0x8000_0000) & _UINT_MASK) - 0x8000_0000


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_one(conversion: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for %{conversion}"
            ) from None

    if conversion in ("d", "i"):
        return str(_signed_int(_as_int(take(), conversion)))
    if conversion == "u":
        return str(_as_int(take(), conversion) & _UINT_MASK)
    if conversion == "c":
        return _format_char(take())
    if conversion == "s":
        value = take()
        return "(null)" if value is None else str(value)
    if conversion == "p":
        return f"0x{_as_int(take(), conversion) & _ULLONG_MASK:x}"
    if conversion == "x":
        return f"{_as_int(take(), conversion) & _UINT_MASK:x}"
    if conversion == "X":
        return f"{_as_int(take(), conversion) & _UINT_MASK:X}"
    # "%%" and any unknown conversion both print the character itself.
    return conversion


def _render(template: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(enumerate(template))
    last = len(template) - 1
    for position, char in chars:
        if char == "%" and position < last:
            _, conversion = next(chars)
            yield _format_one(conversion, remaining)
        else:
            yield char


def format_message(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text.

    A ``%`` at the very end of the template is kept as is. Unknown
    conversions print their own character without using an argument.
    Raises TypeError when an argument is missing or of the wrong kind.
    """
    return "".join(_render(template, args))


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expanded template to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_message(template, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)