"""Building new strings from existing ones.

Strings follow the NUL-terminated convention: a string ends at its first
``"\\0"`` character, or at its end if there is none. Every function
returns a new string and leaves its arguments untouched, except
:func:`striteri`, which edits a list of characters in place.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from .search import strlen

CharLike = Union[int, str]

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _text(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s[:strlen(s)]


def _separator(c: CharLike) -> str:
    """Return ``c`` as a one-character string; codes are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def strdup(s: str) -> str:
    """A copy of ``s`` up to its first NUL."""
    return _text(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from index ``start``.

    A start beyond the end of the string gives the empty string.
    """
    if start < 0:
        raise ValueError(f"negative start {start}")
    if length < 0:
        raise ValueError(f"negative length {length}")
    return _text(s)[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """``s1`` followed by ``s2``; ``None`` counts as the empty string."""
    first = "" if s1 is None else _text(s1)
    second = "" if s2 is None else _text(s2)
    return first + second


def strtrim(s: str, charset: str) -> str:
    """``s`` with every character of ``charset`` removed from both ends."""
    return _text(s).strip(_text(charset))


def split(s: str, sep: CharLike) -> List[str]:
    """The non-empty runs of ``s`` between occurrences of ``sep``."""
    return [part for part in _text(s).split(_separator(sep)) if part]


def itoa(n: int) -> str:
    """Decimal form of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string built from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(_text(s)))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` on each character of ``chars`` in place.

    Iteration stops at the first NUL element. When ``f`` returns a
    character it replaces the one at that index; ``None`` leaves it as is.
    """
    for index, ch in enumerate(list(chars)):
        if ch == "\0":
            break
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement