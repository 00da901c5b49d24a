"""Number parsing and formatting, splitting, trimming and per-character mapping of text."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence
from typing import Any

__all__ = [
    "parse_int",
    "int_to_str",
    "split",
    "trim",
    "substring",
    "map_indexed",
    "each_indexed",
]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_LONG_MAX = 2**63 - 1


def _to_int32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text with no digits gives 0. A magnitude
    beyond the 64-bit range gives -1 (positive) or 0 (negative); otherwise the
    result is wrapped to a signed 32-bit integer.
    """
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    magnitude = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        magnitude = magnitude * 10 + ord(ch) - ord("0")
        if magnitude > _LONG_MAX:
            return -1 if sign > 0 else 0
    return _to_int32(sign * magnitude)


def int_to_str(n: int) -> str:
    """Decimal representation of an integer, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("n must be an integer")
    return str(n)


def _single_char(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on runs of ``sep``, dropping empty words."""
    sep = _single_char(sep)
    return [word for word in text.split(sep) if word]


def trim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    if not isinstance(text, str) or not isinstance(charset, str):
        raise TypeError("text and charset must be strings")
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def each_indexed(text: Sequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` for every item of ``text``.

    When ``text`` is mutable (a list or bytearray, say) and ``func`` returns
    something other than None, that value replaces the item in place.
    """
    mutable = isinstance(text, MutableSequence)
    for index, item in enumerate(list(text)):
        result = func(index, item)
        if mutable and result is not None:
            text[index] = result