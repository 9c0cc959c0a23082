# ftkit

A small toolkit of text, byte-buffer and container helpers. Each one
behaves precisely at the edges, including truncating copies, bounded
comparisons, bounded searches and 32-bit integer wrap-around.

## Installation

```
pip install .
```

To run the tests, install with the `test` extra and then run `pytest`:

```
pip install .[test]
pytest
```

## Modules

### `ftkit.chars`

ASCII character classification and case mapping: `is_alpha`, `is_digit`,
`is_alnum`, `is_ascii`, `is_print`, `to_upper` and `to_lower`.

- Each function accepts either a one-character string or an integer code.
- The predicates return `bool`.
- The converters return the same kind of value they were given.

### `ftkit.numbers`

- `atoi(text)` parses a leading decimal integer.
  - Leading whitespace is skipped and one optional sign is accepted.
  - Parsing stops at the first non-digit.
  - Text with no digits gives `0`.
  - The result wraps like a 32-bit signed integer.
- `itoa(n)` renders a 32-bit signed integer in decimal. It raises
  `OverflowError` for values outside that range.

### `ftkit.memory`

Operations on bytes-like buffers: `memset`, `bzero`, `memcpy`, `memmove`,
`memchr`, `memcmp` and `calloc`.

- The mutating functions work in place on a `bytearray` or writable
  `memoryview`. All of them except `bzero` return the buffer.
- A count that reaches past a buffer raises `IndexError`.
- `memchr` returns an index, or `None` if the byte is not found.
- `calloc(count, size)` returns a zero-filled `bytearray`.

### `ftkit.strings`

`substr`, `strjoin`, `strtrim`, `split`, `strchr`, `strrchr`, `strncmp`,
`strnstr`, `strlcpy`, `strlcat`, `strmapi` and `striteri`.

- The search functions return indices, or `None` when nothing is found.
- Searching for `"\0"` with `strchr` or `strrchr` returns `len(text)`.
- `strlcpy(src, size)` and `strlcat(dest, src, size)` return a pair: the
  resulting text and the length the bounded copy reports.
- `striteri` works on a mutable sequence such as a list or `bytearray`. A
  non-`None` result from the callback replaces the item in place.

### `ftkit.linked`

A singly linked `LinkedList` of `Node`s. It supports:

- `push_front`
- `push_back`
- `last`
- `len()`
- iteration
- `for_each`
- `map`, which returns a new list
- `clear`, which takes an optional `release` callback that receives each
  item

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream. The
default stream is standard output.

### `ftkit.printf`

A minimal formatter that supports `%c %s %p %d %i %u %x %X %%`.

- `format_string(fmt, *args)` returns the formatted text.
- An unknown conversion is dropped together with its `%`.
- Too few arguments raise `TypeError`.
- `printf(fmt, *args)` writes the text to standard output and returns its
  length.
- `to_hex(n, upper)` formats `n` as 32-bit unsigned hexadecimal.
- `to_pointer(n)` formats `n` as 64-bit hexadecimal.

### `ftkit.lines`

- `LineReader(fd, buffer_size=100)` reads lines from a file descriptor or
  a binary file object.
  - Each line keeps its trailing newline.
  - `read_line()` returns `None` at the end of input.
  - Iterating over the reader yields every line.
- `get_next_line(fd)` keeps a separate reader for each descriptor from 0 to
  4096. Any other descriptor raises `ValueError`.

## Example

```python
from ftkit.strings import split, strtrim
from ftkit.printf import format_string
from ftkit.linked import LinkedList

split("  hello  world ", " ")        # ['hello', 'world']
strtrim("xxhixx", "x")               # 'hi'
format_string("%d is %x", 255, 255)  # '255 is ff'

items = LinkedList([1, 2, 3])
doubled = items.map(lambda v: v * 2)
list(doubled)                        # [2, 4, 6]
```

## What it does not do

ftkit is a library only. It has no command-line program, no window or
graphics layer and no game of its own.