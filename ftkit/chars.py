"""Character classification, case conversion and integer/string conversion."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(ch: str | int) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected a character or an int, got {type(ch).__name__}")
    return ch


def is_alpha(ch: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(ch)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(ch: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(ch) <= ord("9")


def is_alnum(ch: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(ch) or is_digit(ch)


def is_ascii(ch: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(ch) <= 127


def is_print(ch: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(ch) <= 126


def to_lower(ch: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; other values are returned unchanged."""
    code = _code(ch)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(ch, str) else code


def to_upper(ch: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; other values are returned unchanged."""
    code = _code(ch)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(ch, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text with no digits yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return sign * value


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n == 0:
        return "0"
    digits = []
    magnitude = -n if n < 0 else n
    while magnitude > 0:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))