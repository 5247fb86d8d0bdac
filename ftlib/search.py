"""String length, search, comparison and integer parsing.

Strings follow the NUL-terminated convention: a string ends at its first
``"\\0"`` character, or at its end if there is none. Positions are
returned as indices into the string, or ``None`` where nothing is found.
A character argument may be a one-character string or a character code;
a code is reduced modulo 256, as a C ``char`` would be.
"""

from __future__ import annotations

import re
from typing import Optional, Union

CharLike = Union[int, str]

_SPACES = "\t\n\v\f\r "
_DIGITS = re.compile(r"[0-9]*")
_INT_BITS = 32


def _terminated(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    end = s.find("\0")
    return s if end == -1 else s[:end]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")


def _compare(a: str, b: str) -> int:
    """Difference of the first differing characters; the end counts as code 0."""
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) == len(b):
        return 0
    if len(a) < len(b):
        return -ord(b[len(a)])
    return ord(a[len(b)])


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a 32-bit signed integer."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def strlen(s: Optional[str]) -> int:
    """Length of ``s`` up to its first NUL; ``None`` has length 0."""
    if s is None:
        return 0
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index == -1 else index


def strchrind(s: str, c: CharLike) -> int:
    """Index of the first occurrence of ``c`` in ``s``, or -1.

    Searching for the NUL character gives 0.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return 0
    return text.find(ch)


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index == -1 else index


def strcmp(s1: Optional[str], s2: Optional[str]) -> int:
    """Compare two strings.

    Returns the difference of the first differing character codes, 0 when
    equal. ``None`` sorts before any string and equals ``None``.
    """
    if s1 is None and s2 is None:
        return 0
    if s1 is None:
        return -1
    if s2 is None:
        return 1
    return _compare(_terminated(s1), _terminated(s2))


def strncmp(s1: Optional[str], s2: Optional[str], n: int) -> int:
    """Compare at most the first ``n`` characters of two strings.

    ``None`` is handled as in :func:`strcmp`.
    """
    _check_count(n)
    if s1 is None and s2 is None:
        return 0
    if s1 is None:
        return -1
    if s2 is None:
        return 1
    return _compare(_terminated(s1)[:n], _terminated(s2)[:n])


def strstr(haystack: str, needle: Optional[str]) -> Optional[int]:
    """Index of the first occurrence of ``needle`` in ``haystack``, or ``None``.

    An empty or missing needle is found at index 0.
    """
    text = _terminated(haystack)
    if needle is None:
        return 0
    pattern = _terminated(needle)
    if not pattern:
        return 0
    index = text.find(pattern)
    return None if index == -1 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``.

    Returns ``None`` when it does not occur there; an empty ``little`` is
    found at index 0.
    """
    _check_count(length)
    pattern = _terminated(little)
    if not pattern:
        return 0
    index = _terminated(big)[:length].find(pattern)
    return None if index == -1 else index


def atoi(s: str) -> int:
    """Parse a decimal integer at the start of ``s``.

    Leading whitespace is skipped and one optional sign is accepted;
    parsing stops at the first non-digit. A string with no digits gives 0.
    The result wraps to the range of a 32-bit signed integer.
    """
    rest = _terminated(s).lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)