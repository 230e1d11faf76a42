"""String helpers: splitting, searching, bounded copying and comparison."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _single_char(ch: str, name: str) -> str:
    if not isinstance(ch, str):
        raise TypeError(f"{name} must be a str, got {type(ch).__name__}")
    if len(ch) != 1:
        raise ValueError(f"{name} must be a single character, got {ch!r}")
    return ch


def _non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _single_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def strchr(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(ch, "ch")
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == _NUL else None


def strrchr(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``.

    Searching for the NUL character finds the end of the string.
    """
    _single_char(ch, "ch")
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the resulting buffer contents and the full length of ``src``;
    with a size of 0 nothing is written and ``dest`` is returned unchanged.
    """
    _non_negative(size, "size")
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting buffer contents and the length the result would
    have had without truncation.
    """
    _non_negative(size, "size")
    dest_len = len(dest)
    src_len = len(src)
    if size == 0:
        return dest, src_len
    if dest_len >= size:
        return dest, size + src_len
    room = size - dest_len - 1
    return dest + src[:room], dest_len + src_len


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: str | MutableSequence[str],
    func: Callable[[int, str], str | None],
) -> str | MutableSequence[str]:
    """Call ``func(index, char)`` on every character.

    A string returned by ``func`` replaces the character; ``None`` keeps it.
    A mutable sequence is updated in place and returned; a ``str`` yields a
    new string.
    """
    if isinstance(text, str):
        chars = list(text)
        striteri(chars, func)
        return "".join(chars)
    for index, ch in enumerate(list(text)):
        replacement = func(index, ch)
        if replacement is not None:
            text[index] = replacement
    return text


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    _non_negative(n, "n")
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters of ``haystack``."""
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty when ``start`` is past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]