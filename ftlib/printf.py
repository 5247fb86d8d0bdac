"""Formatted output in the style of ``printf``.

Supported conversions are ``c``, ``s``, ``p``, ``d``, ``i``, ``u``,
``x``, ``X``, ``f`` and ``%``, with the flags ``-``, ``0``, ``+``,
space and ``#``, a field width and a precision. A ``%`` followed by an
unknown conversion character writes nothing for the specification; the
character itself is then written as ordinary text.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, Iterator

from .numconv import convert_decimal, convert_hex, convert_unsigned
from .search import strlen
from .spec import FormatSpec, parse_spec
from .textconv import (
    convert_char,
    convert_float,
    convert_percent,
    convert_pointer,
    convert_string,
)

_STDOUT = 1

ArgSource = Callable[[], Any]

_CONVERSIONS: Dict[str, Callable[[ArgSource, FormatSpec], str]] = {
    "c": lambda arg, spec: convert_char(arg(), spec),
    "s": lambda arg, spec: convert_string(arg(), spec),
    "p": lambda arg, spec: convert_pointer(arg(), spec),
    "d": lambda arg, spec: convert_decimal(arg(), spec),
    "i": lambda arg, spec: convert_decimal(arg(), spec),
    "u": lambda arg, spec: convert_unsigned(arg(), spec),
    "x": lambda arg, spec: convert_hex(arg(), spec, False),
    "X": lambda arg, spec: convert_hex(arg(), spec, True),
    "%": lambda arg, spec: convert_percent(spec),
    "f": lambda arg, spec: convert_float(arg(), spec),
}


def _argument_source(args: tuple) -> ArgSource:
    remaining: Iterator[Any] = iter(args)

    def take() -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    return take


def format_string(fmt: str, *args: Any) -> str:
    """Return the text ``fmt`` produces with ``args``.

    The format ends at its first NUL character. Extra arguments are
    ignored; missing ones raise ``TypeError``.
    """
    if fmt is None:
        raise TypeError("format must be a str, not None")
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, not {type(fmt).__name__}")
    text = fmt[:strlen(fmt)]
    take = _argument_source(args)
    pieces = []
    pos = 0
    while pos < len(text):
        if text[pos] != "%":
            end = text.find("%", pos)
            if end == -1:
                end = len(text)
            pieces.append(text[pos:end])
            pos = end
            continue
        spec, pos = parse_spec(text, pos + 1)
        convert = _CONVERSIONS.get(text[pos:pos + 1])
        if convert is not None:
            pieces.append(convert(take, spec))
            pos += 1
    return "".join(pieces)


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        view = view[os.write(fd, view):]


def dprintf(fd: int, fmt: str, *args: Any) -> int:
    """Write the formatted text to file descriptor ``fd``.

    The text is written UTF-8 encoded; returns the number of bytes written.
    """
    data = format_string(fmt, *args).encode("utf-8")
    _write_all(fd, data)
    return len(data)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; returns the bytes written."""
    return dprintf(_STDOUT, fmt, *args)