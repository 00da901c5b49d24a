"""printf-style formatting and simple writers for characters, strings and numbers."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

__all__ = [
    "format_string",
    "printf",
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
]

_NUL = "\0"
_NULL_TEXT = "(null)"
_MASK32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    value &= _MASK32
    return value - 2**32 if value >= 2**31 else value


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _conv_string(value: Any) -> str:
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string or None, got {type(value).__name__}")
    return value.split(_NUL, 1)[0]


def _conv_int(value: Any) -> str:
    return str(_to_int32(_require_int(value, "d")))


def _conv_unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _MASK32)


def _conv_hex(value: Any) -> str:
    return format(_require_int(value, "x") & _MASK32, "x")


def _conv_hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") & _MASK32, "X")


def _conv_pointer(value: Any) -> str:
    if value is None:
        return "0x0"
    if isinstance(value, int) and not isinstance(value, bool):
        address = value & 0xFFFFFFFFFFFFFFFF
    else:
        address = id(value)
    return "0x" + format(address, "x")


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_string,
    "d": _conv_int,
    "i": _conv_int,
    "u": _conv_unsigned,
    "p": _conv_pointer,
    "x": _conv_hex,
    "X": _conv_hex_upper,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    chars = iter(fmt.split(_NUL, 1)[0])
    remaining = iter(args)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        converter = _CONVERTERS.get(spec)
        if converter is None:
            # "%%" gives a literal percent; an unknown specifier is written as is.
            yield spec
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format string {fmt!r}") from None
        yield converter(value)


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with the conversions %c %s %d %i %u %p %x %X and %%.

    Integers are taken as 32-bit values (signed for %d and %i, unsigned for
    %u %x %X). A None string gives "(null)" and a None pointer gives "0x0".
    An unknown specifier is written without its '%', and a trailing lone
    '%' is dropped. Surplus arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError("fmt must be a string")
    return "".join(_pieces(fmt, args))


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    _target(stream).write(text)
    return len(text)


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write one character."""
    _target(stream).write(_conv_char(c))


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write ``n`` in decimal, taken as a signed 32-bit integer."""
    _target(stream).write(str(_to_int32(_require_int(n, "d"))))