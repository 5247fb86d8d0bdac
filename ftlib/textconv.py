"""Rendering of the ``c``, ``s``, ``p``, ``%`` and ``f`` conversions.

Each function returns the text the conversion produces, padding
included.
"""

from __future__ import annotations

import math
from typing import Optional, Union

from .search import strlen
from .spec import FormatSpec

_POINTER_MASK = (1 << 64) - 1
_FLOAT_LIMIT = 1_000_000_000
_MAX_DECIMALS = 6


def _pad(body: str, spec: FormatSpec) -> str:
    """Pad ``body`` with spaces to the field width, on the side the flags ask."""
    fill = " " * max(spec.width - len(body), 0)
    return body + fill if spec.left_align else fill + body


def convert_char(value: Union[int, str], spec: FormatSpec) -> str:
    """One character, padded with spaces to the field width.

    A code is reduced modulo 256.
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        ch = value
    elif isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int or a one-character str, got {type(value).__name__}")
    else:
        ch = chr(value & 0xFF)
    return _pad(ch, spec)


def convert_string(value: Optional[str], spec: FormatSpec) -> str:
    """A string cut to the precision and padded to the field width.

    ``None`` is shown as ``(null)`` when the precision allows all six
    characters of it, and as nothing otherwise.
    """
    if value is None:
        text = "(null)" if spec.precision is None or spec.precision > 5 else ""
    elif isinstance(value, str):
        text = value[:strlen(value)]
    else:
        raise TypeError(f"expected a str or None, got {type(value).__name__}")
    if spec.precision is not None:
        text = text[:spec.precision]
    return _pad(text, spec)


def convert_pointer(value: Optional[int], spec: FormatSpec) -> str:
    """An address in lower-case hexadecimal with a ``0x`` prefix.

    A null address (``None`` or 0) is shown as ``(nil)``. Addresses are
    taken as 64-bit unsigned values.
    """
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise TypeError(f"expected an int or None, got {type(value).__name__}")
    address = (value or 0) & _POINTER_MASK
    body = "(nil)" if address == 0 else f"0x{address:x}"
    return _pad(body, spec)


def convert_percent(spec: FormatSpec) -> str:
    """A literal percent sign; flags and width are ignored.

    Raises ``TypeError`` when ``spec`` is not a ``FormatSpec``.
    """
    if not isinstance(spec, FormatSpec):
        raise TypeError(f"expected a FormatSpec, got {type(spec).__name__}")
    return "%"


def convert_float(value: float, spec: FormatSpec) -> str:
    """A simple decimal rendering of ``value``; flags and width are ignored.

    Values beyond one thousand million in magnitude, and NaN, are shown
    as ``Nan``. At most six decimals are written, and trailing zero
    decimals are not.
    """
    d = float(value)
    if math.isnan(d) or d < -_FLOAT_LIMIT or d > _FLOAT_LIMIT:
        return "Nan"
    parts = []
    if d < 0:
        parts.append("-")
        d = -d
    parts.append(_integer_digits(d))
    parts.append(".")
    parts.append(_decimal_digits(d))
    return "".join(parts)


def _integer_digits(d: float) -> str:
    """Digits of the integer part, found by repeated division by ten."""
    digits = []
    while True:
        digits.append(str(int(d) % 10))
        if d <= 9:
            break
        d /= 10
    return "".join(reversed(digits))


def _decimal_digits(d: float) -> str:
    """Up to six digits of the fractional part, stopping once it is exhausted."""
    d = (d - int(d)) * 10
    digits = []
    while d != 0 and len(digits) < _MAX_DECIMALS:
        digit = int(d) % 10
        digits.append(str(digit))
        d = (d - digit) * 10
    return "".join(digits)