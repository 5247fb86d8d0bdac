"""ASCII character classification and case conversion.

Every function takes a character code (an ``int``) or a one-character
string. Only the ASCII ranges are recognised: any other code is neither
a letter nor a digit, and case conversion leaves it unchanged.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the character code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; other values pass through.

    The result has the same kind as the argument: a code for a code, a
    string for a string.
    """
    code = _code(c)
    result = code - _CASE_OFFSET if _is_lower(code) else code
    return chr(result) if isinstance(c, str) else result


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; other values pass through.

    The result has the same kind as the argument: a code for a code, a
    string for a string.
    """
    code = _code(c)
    result = code + _CASE_OFFSET if _is_upper(code) else code
    return chr(result) if isinstance(c, str) else result