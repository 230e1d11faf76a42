"""Byte-buffer operations on bytearray and bytes-like objects."""

from __future__ import annotations

_CALLOC_LIMIT = 4294967295


def _check_span(buf, start: int, length: int, name: str) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start < 0 or start + length > len(buf):
        raise IndexError(
            f"{name}: span [{start}, {start + length}) outside buffer of size {len(buf)}"
        )


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken mod 256)."""
    _check_span(buf, 0, length, "memset")
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buf``."""
    return memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the product would exceed 4294967295.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > _CALLOC_LIMIT // size:
        raise OverflowError(f"allocation of {count} x {size} bytes is too large")
    return bytearray(count * size)


def memchr(buf, value: int, length: int) -> int | None:
    """Index of the first byte equal to ``value`` (mod 256) in the first ``length`` bytes."""
    _check_span(buf, 0, length, "memchr")
    index = bytes(buf[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first, second, length: int) -> int:
    """Compare the first ``length`` bytes; return the difference at the first mismatch."""
    if length == 0:
        return 0
    _check_span(first, 0, length, "memcmp")
    _check_span(second, 0, length, "memcmp")
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dest``."""
    _check_span(dest, 0, length, "memcpy")
    _check_span(src, 0, length, "memcpy")
    dest[:length] = bytes(src[:length])
    return dest


def memmove(buf: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buf`` from offset ``src`` to ``dest``; overlap is safe."""
    _check_span(buf, src, length, "memmove")
    _check_span(buf, dest, length, "memmove")
    buf[dest:dest + length] = bytes(buf[src:src + length])
    return buf