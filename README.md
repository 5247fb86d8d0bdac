# ftlib

Helpers that follow the conventions of the C standard library: ASCII
character classification, operations on byte buffers, searching and
building strings, a singly linked list and a compact `printf`-style
formatter.

Strings are handled as NUL-terminated: a string ends at its first `"\0"`
character, or at its end if there is none. Searches return indices, or
`None` where nothing is found.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `ftlib.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`. Each takes a character code or a one-character
  string and recognises only ASCII; `to_upper` and `to_lower` return the
  same kind they were given.
- `ftlib.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`,
  `calloc`, `strlcpy`, `strlcat`. They work on `bytearray` buffers or
  writable `memoryview` slices. `memchr` returns an index or `None`;
  `calloc` returns a zeroed `bytearray` and raises `MemoryError` when the
  size would overflow.
- `ftlib.search`: `strlen`, `strchr`, `strchrind`, `strrchr`, `strcmp`,
  `strncmp`, `strstr`, `strnstr`, `atoi`. `atoi` skips leading whitespace,
  accepts one sign and wraps its result to a 32-bit signed integer.
- `ftlib.strings`: `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `itoa`,
  `strmapi`, `striteri`. All return new strings except `striteri`, which
  edits a list of characters in place.
- `ftlib.linkedlist`: `Node` and `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each` and
  `map`. It supports `len()` and iteration.
- `ftlib.spec`: `FormatSpec` and `parse_spec`, which read the flags, field
  width and precision that follow a `%`.
- `ftlib.textconv`: `convert_char`, `convert_string`, `convert_pointer`,
  `convert_percent`, `convert_float`.
- `ftlib.numconv`: `convert_decimal`, `convert_unsigned`, `convert_hex`.
- `ftlib.printf`: `format_string`, `printf`, `dprintf`.

## Formatting

`format_string` supports the conversions `%c %s %p %d %i %u %x %X %f %%`,
with the flags `-`, `0`, `+`, space and `#`, a field width and a precision.
Integers are taken as 32-bit values; `%p` shows `(nil)` for `None` or 0;
`%s` shows `(null)` for `None` when the precision allows it.

`%f` is deliberately simple: it ignores flags and width, writes at most six
decimals and drops trailing zero decimals (`2.0` gives `2.`), and shows
`Nan` for NaN or values beyond one thousand million in magnitude.

A `%` followed by an unknown conversion character writes nothing for the
specification; the character itself is then written as ordinary text.
Missing arguments raise `TypeError`; extra ones are ignored.

```python
from ftlib.printf import format_string, printf

format_string("[%5d|%-4s|%#x]", 42, "ab", 255)
# '[   42|ab  |0xff]'

count = printf("%s has %u items\n", "cart", 3)
```

`printf` writes to standard output and `dprintf` to the file descriptor you
give it. Both write the text UTF-8 encoded and return the number of bytes
written.

## Linked list

```python
from ftlib.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2)
list(doubled)  # [0, 2, 4, 6]
```

If the function given to `map` returns `None` or raises, the elements
already produced are passed to the optional `delete` callback and the
failure is raised (`ValueError` for `None`).

## What is not included

Apart from `printf` and `dprintf`, the package has no functions that write
characters, strings or numbers to a file descriptor; use `dprintf` with
`%c`, `%s` or `%d` for that.