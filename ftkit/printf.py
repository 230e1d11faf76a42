"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

NIL_STRING = "(nil)"
NULL_STRING = "(null)"

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _hex_digits(n: int, digits: str) -> str:
    if n == 0:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal form of ``n`` taken as a 32-bit unsigned value."""
    value = _require_int(n, "X" if upper else "x") & _UINT32_MASK
    return _hex_digits(value, _HEX_UPPER if upper else _HEX_LOWER)


def format_pointer(n: int | None) -> str:
    """Address form of ``n``: '0x' and lower-case hex, or '(nil)' for zero."""
    if n is None:
        return NIL_STRING
    value = _require_int(n, "p") & _UINT64_MASK
    if value == 0:
        return NIL_STRING
    return "0x" + _hex_digits(value, _HEX_LOWER)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_str(value)
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return str(_to_int32(_require_int(value, spec)))
    if spec == "u":
        return str(_require_int(value, spec) & _UINT32_MASK)
    return format_hex(value, upper=spec == "X")


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    Unknown conversions and a trailing lone '%' produce nothing and consume
    no argument.
    """
    values = iter(args)
    parts = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)