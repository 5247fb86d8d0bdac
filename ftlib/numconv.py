"""Rendering of the integer conversions ``d``, ``i``, ``u``, ``x`` and ``X``.

Values are taken as 32-bit integers: ``d`` and ``i`` wrap to the signed
range, ``u``, ``x`` and ``X`` to the unsigned range. Each function
returns the text the conversion produces, padding included.
"""

from __future__ import annotations

from .spec import FormatSpec

_UINT_MASK = (1 << 32) - 1
_INT_HALF = 1 << 31


def _check_int(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")


def _as_int(value: int) -> int:
    """``value`` wrapped to a 32-bit signed integer."""
    _check_int(value)
    return ((value + _INT_HALF) & _UINT_MASK) - _INT_HALF


def _as_uint(value: int) -> int:
    """``value`` wrapped to a 32-bit unsigned integer."""
    _check_int(value)
    return value & _UINT_MASK


def _body(digits: str, magnitude: int, spec: FormatSpec) -> str:
    """The digits, left-filled with zeros up to the precision.

    A zero value with a precision of 0 produces no digits at all.
    """
    if magnitude == 0 and spec.precision == 0:
        return ""
    return digits.zfill(spec.precision or 0)


def _lay_out(prefix: str, body: str, size: int, spec: FormatSpec) -> str:
    """Place ``prefix`` and ``body`` in the field.

    ``size`` is the width the conversion claims for itself; the field is
    filled up to ``spec.width`` from it. Zero filling applies only when
    no precision is given, and goes between the prefix and the body.
    """
    fill = max(spec.width - size, 0)
    if spec.left_align:
        return prefix + body + " " * fill
    if spec.zero_pad and spec.precision is None:
        return prefix + "0" * fill + body
    return " " * fill + prefix + body


def convert_decimal(value: int, spec: FormatSpec) -> str:
    """A signed decimal integer, as the ``d`` and ``i`` conversions show it.

    A sign is written for negative values, or as ``+`` or a space when
    those flags are set. With a precision of 0 a zero value writes no
    digits; its sign, if any, is still written but takes no room in the
    field width.
    """
    d = _as_int(value)
    magnitude = abs(d)
    if d < 0:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""
    body = _body(str(magnitude), magnitude, spec)
    size = len(sign) + len(body) if body else 0
    return _lay_out(sign, body, size, spec)


def convert_unsigned(value: int, spec: FormatSpec) -> str:
    """An unsigned decimal integer, as the ``u`` conversion shows it."""
    nb = _as_uint(value)
    body = _body(str(nb), nb, spec)
    return _lay_out("", body, len(body), spec)


def convert_hex(value: int, spec: FormatSpec, upper: bool = False) -> str:
    """An unsigned hexadecimal integer, as ``x`` (or ``X`` when ``upper``) shows it.

    The alternate flag adds a ``0x`` or ``0X`` prefix to non-zero values.
    The prefix counts towards the precision when the field width is
    worked out, and zero filling from the ``0`` flag comes before it.
    """
    nb = _as_uint(value)
    digits = format(nb, "X" if upper else "x")
    prefix = ("0X" if upper else "0x") if spec.alternate and nb != 0 else ""
    body = _body(digits, nb, spec)
    if not body:
        size = 0
    else:
        size = max(len(prefix) + len(digits), spec.precision or 0)
    fill = max(spec.width - size, 0)
    if spec.left_align:
        return prefix + body + " " * fill
    if spec.zero_pad and spec.precision is None:
        return "0" * fill + prefix + body
    return " " * fill + prefix + body