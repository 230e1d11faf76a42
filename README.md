# ftkit

A small toolkit of everyday helpers with no dependencies:

- `ftkit.chars`: ASCII character classification (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`) and case conversion (`to_lower`, `to_upper`). Each takes a one-character string or an int code and returns the same kind. Also `atoi`, which parses a leading decimal integer after whitespace and an optional sign, and `itoa`, which renders an int in decimal.
- `ftkit.memory`: byte-buffer helpers. `memset`, `bzero` and `memcpy` write into a `bytearray`. `calloc(count, size)` returns a zeroed `bytearray`, and raises `OverflowError` when the size would exceed 4294967295 bytes. `memchr` returns an index or `None`. `memcmp` returns the byte difference at the first mismatch. `memmove(buf, dest, src, length)` copies within one buffer, and overlapping spans are safe. A span outside the buffer raises `IndexError`.
- `ftkit.text`: string helpers.
  - `split(text, sep)` splits on a single character and drops empty words.
  - `strchr` and `strrchr` return an index or `None`.
  - `strjoin` joins two strings.
  - `strlcpy` and `strlcat` return a `(result, length)` tuple.
  - `strmapi` maps `func(index, char)` over a string.
  - `striteri` applies `func(index, char)`; a returned string replaces the character.
  - `strncmp` compares at most `n` characters.
  - `strnstr` returns an index or `None`.
  - `strtrim` strips a set of characters from both ends.
  - `substr` returns part of a string.
- `ftkit.llist`: a singly linked list. `LinkedList` is built from an optional iterable and holds `Node` objects. It offers:
  - `add_front` and `add_back`
  - `last()`, the final node or `None`
  - `clear(delete)`, with an optional callback for each value
  - `iterate(func)` and `map(func)`
  - `len()` and iteration over its values
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream, standard output by default. `put_str` and `put_endl` write nothing for `None`.
- `ftkit.linereader`: `LineReader(stream, buffer_size=3)` reads a text or binary stream in chunks of `buffer_size`. `read_line()` returns the next line with its newline kept, or `None` at the end. The reader is also an iterator over the lines.
- `ftkit.printf`: formatting for `%c %s %p %d %i %u %x %X %%`.
  - `format_string(fmt, *args)` returns the expanded text.
  - `printf(fmt, *args)` writes the text to standard output and returns its length.
  - `format_hex(n, upper=False)` gives the hex form of a 32-bit unsigned value.
  - `format_pointer(n)` gives `0x…`, or `(nil)` for zero or `None`.
  - A `None` passed to `%s` prints `(null)`.
  - Unknown conversions produce nothing.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
import io

from ftkit.chars import atoi, itoa
from ftkit.text import split, strtrim
from ftkit.printf import format_string
from ftkit.llist import LinkedList
from ftkit.linereader import LineReader

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
split("  a  b c ", " ")   # ["a", "b", "c"]
strtrim("xxhixx", "x")    # "hi"
format_string("%d items, %x hex", 3, 255)   # "3 items, ff hex"

items = LinkedList()
items.add_back(1)
items.add_back(2)
items.add_front(0)
list(items)               # [0, 1, 2]

reader = LineReader(io.StringIO("one\ntwo\n"), 3)
list(reader)              # ["one\n", "two\n"]
```

## What it does not do

ftkit is a library only. It installs no command-line program. It has no window, no game or map handling of its own, and no other application built on it.