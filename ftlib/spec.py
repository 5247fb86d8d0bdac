"""Conversion specifications: the flags, width and precision after a ``%``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

_FLAGS = {
    "-": "left_align",
    "0": "zero_pad",
    "+": "plus",
    " ": "space",
    "#": "alternate",
}
_WIDTH = re.compile(r"[1-9][0-9]*")
_DIGITS = re.compile(r"[0-9]*")


@dataclass(frozen=True)
class FormatSpec:
    """Flags, field width and precision of one conversion.

    ``width`` is 0 when no width is given. ``precision`` is ``None`` when
    it is omitted, or when it is written as a negative number.
    """

    left_align: bool = False
    zero_pad: bool = False
    plus: bool = False
    space: bool = False
    alternate: bool = False
    width: int = 0
    precision: Optional[int] = None


def parse_spec(fmt: str, pos: int = 0) -> Tuple[FormatSpec, int]:
    """Read flags, width and precision from ``fmt`` starting at ``pos``.

    ``pos`` is the index just after the ``%``. Returns the specification
    and the index of the first character not consumed, which is where
    the conversion character is expected.
    """
    if not 0 <= pos <= len(fmt):
        raise IndexError(f"position {pos} is outside a format of length {len(fmt)}")
    flags = {}
    while pos < len(fmt) and fmt[pos] in _FLAGS:
        flags[_FLAGS[fmt[pos]]] = True
        pos += 1

    width = 0
    match = _WIDTH.match(fmt, pos)
    if match:
        width = int(match.group())
        pos = match.end()

    precision: Optional[int] = None
    if fmt.startswith(".", pos):
        pos += 1
        if fmt.startswith("-", pos):
            pos = _DIGITS.match(fmt, pos + 1).end()
        else:
            match = _DIGITS.match(fmt, pos)
            digits = match.group()
            precision = int(digits) if digits else 0
            pos = match.end()

    return FormatSpec(width=width, precision=precision, **flags), pos