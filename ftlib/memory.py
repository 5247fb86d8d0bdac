"""Byte-buffer operations on mutable buffers.

Buffers are ``bytearray`` objects or writable ``memoryview`` slices of
them; sources may be any bytes-like object. String buffers follow the
NUL-terminated convention: the string ends at the first zero byte, or at
the end of the buffer if there is none.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_span(buf: BytesLike, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(buf):
        raise IndexError(f"{name} holds {len(buf)} bytes, {n} requested")


def _c_strlen(buf: BytesLike) -> int:
    """Length of the NUL-terminated string held in ``buf``."""
    data = bytes(buf)
    end = data.find(0)
    return len(data) if end == -1 else end


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _check_span(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def memcpy(dest: Optional[Buffer], src: Optional[BytesLike], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` to ``dest`` and return ``dest``.

    When both ``dest`` and ``src`` are ``None`` nothing happens and
    ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_span(src, n, "source")
    _check_span(dest, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Optional[Buffer], src: Optional[BytesLike], n: int) -> Optional[Buffer]:
    """Copy ``n`` bytes from ``src`` to ``dest``, correct even when they overlap.

    When both ``dest`` and ``src`` are ``None`` nothing happens and
    ``None`` is returned.
    """
    # The source bytes are snapshotted before writing, so overlap is harmless.
    return memcpy(dest, src, n)


def memchr(buf: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (modulo 256) among the first ``n``.

    Returns ``None`` when no such byte exists.
    """
    _check_span(buf, n, "buffer")
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index == -1 else index


def memcmp(s1: BytesLike, s2: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned values.

    Returns the difference of the first differing pair of bytes, or 0
    when the spans are equal.
    """
    _check_span(s1, n, "first buffer")
    _check_span(s2, n, "second buffer")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``nmemb`` elements of ``size`` bytes.

    Raises ``MemoryError`` when the total size would overflow ``SIZE_MAX``.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb and SIZE_MAX // nmemb < size:
        raise MemoryError(f"{nmemb} * {size} bytes overflows the addressable size")
    return bytearray(nmemb * size)


def strlcpy(dst: Buffer, src: BytesLike, size: int) -> int:
    """Copy the string in ``src`` into ``dst``, writing at most ``size`` bytes.

    The copy is always NUL-terminated when ``size`` is positive. Returns
    the length of the source string, so a result ``>= size`` means the
    copy was truncated.
    """
    _check_span(dst, size, "destination")
    src_len = _c_strlen(src)
    if size == 0:
        return src_len
    count = min(src_len, size - 1)
    dst[:count] = bytes(src[:count])
    dst[count] = 0
    return src_len


def strlcat(dst: Buffer, src: BytesLike, size: int) -> int:
    """Append the string in ``src`` to the string in ``dst``.

    ``size`` is the full size of the destination; the result is
    NUL-terminated and never longer than ``size - 1`` bytes. Returns the
    length of the string it tried to create. When the destination string
    already fills ``size`` bytes, nothing is written and the result is
    ``len(src) + size``.
    """
    _check_span(dst, size, "destination")
    src_len = _c_strlen(src)
    dst_len = _c_strlen(dst)
    if dst_len >= size:
        return src_len + size
    count = min(src_len, size - 1 - dst_len)
    dst[dst_len:dst_len + count] = bytes(src[:count])
    dst[dst_len + count] = 0
    return dst_len + src_len