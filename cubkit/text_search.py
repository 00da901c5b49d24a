"""Character classification, case mapping and bounded searching over text and bytes."""

from __future__ import annotations

from itertools import zip_longest

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
    "find_char",
    "rfind_char",
    "find_bounded",
    "compare_n",
    "compare_bytes",
    "find_byte",
]

_NUL = "\0"


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError("expected a character or an integer code")


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string."""
    code = _code(c)
    if code < 0:
        raise ValueError(f"negative character code: {code}")
    return chr(code)


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_upper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; other values pass through.

    A string argument gives a string, an integer gives an integer.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; other values pass through.

    A string argument gives a string, an integer gives an integer.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def find_char(text: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the NUL character gives the position just past the end.
    """
    ch = _char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    if ch == _NUL:
        return len(text)
    return None


def rfind_char(text: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``text``, or None.

    Searching for the NUL character gives the position just past the end.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def find_bounded(haystack: str, needle: str, n: int) -> int | None:
    """Index of the first ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index 0; None when there is no match.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return index if index >= 0 else None


def compare_n(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the code difference at the first mismatch, or 0 when they agree.
    A shorter string compares as if padded with NUL, and comparison stops
    where both strings end.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for x, y in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if x == _NUL and y == _NUL:
            break
        if x != y:
            return ord(x) - ord(y)
    return 0


def _check_span(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if any(n > len(buf) for buf in buffers):
        raise ValueError("n exceeds the length of the buffer")


def compare_bytes(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing pair, or 0.
    """
    _check_span(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def find_byte(data: bytes, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` (taken modulo 256) in the first ``n`` bytes."""
    _check_span(n, data)
    index = bytes(data).find(value & 0xFF, 0, n)
    return index if index >= 0 else None