# libft

libft is a small toolkit of helpers for characters, strings, byte buffers,
number conversion and singly linked lists. The helpers keep the behaviour of
the classic C library routines, including their edge cases, truncation rules
and return values. Positions are returned as indexes, and a search that finds
nothing returns `None`.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.chars`

Classification and case conversion of single ASCII characters. Every function
takes either a one-character string or an integer code. A string of any other
length raises `ValueError`.

- Classification: `is_space`, `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_lower` and `is_upper`. Each returns a `bool`.
- Conversion: `to_upper` and `to_lower` change only ASCII letters. They return
  a string when given a string and an integer when given an integer.

```python
from libft.chars import is_alnum, to_upper

is_alnum("a")    # True
to_upper("q")    # "Q"
to_upper(113)    # 81
```

### `libft.convert`

- `atoi(s)` skips leading whitespace and accepts one optional sign. It reads
  digits until the first non-digit. If there are no digits it returns 0.
- `itoa(n)` returns the decimal text of an integer.
- `dec_to_hex(number, stream=None)` writes the value in upper-case
  hexadecimal to `stream`, or to standard output when no stream is given. A
  negative value is written as its unsigned 32-bit form. The function returns
  the number of characters written.

```python
import io
from libft.convert import atoi, itoa, dec_to_hex

atoi("  -42abc")      # -42
itoa(-2147483648)     # "-2147483648"
out = io.StringIO()
dec_to_hex(255, out)  # 2; out.getvalue() == "FF"
```

### `libft.memory`

Operations on byte buffers.

- Functions that write need a `bytearray` or a writable `memoryview`:
  `memset`, `bzero`, `memcpy` and `memmove`. Each returns the buffer it wrote
  to, except `bzero`.
- Functions that only read also accept `bytes`: `memchr` and `memcmp`.
  `memchr` returns an index or `None`. `memcmp` returns the difference of the
  first unequal pair of bytes.
- `calloc(count, size)` returns a zero-filled `bytearray`.

A negative count, or a count larger than a buffer, raises `ValueError`.

```python
from libft.memory import calloc, memset, memcmp, memchr

buf = calloc(2, 4)            # bytearray(8) of zeros
memset(buf, ord("d"), 7)
memchr(buf, 0, 8)             # 7
memcmp(b"abc", b"abd", 3)     # -1
```

### `libft.output`

Writers that send output to a text stream, or to standard output when no
stream is given:

- `put_char(c, stream=None)`
- `put_str(s, stream=None)`
- `put_endl(s, stream=None)` writes the string and then a newline.
- `put_nbr(n, stream=None)` writes the integer in decimal.

### `libft.text`

String helpers:

- Length: `strlen` and `strnlen` count up to the first NUL.
- Search: `strchr` and `strrchr` return an index or `None`. Searching for
  `"\0"` returns the length of the string.
- Comparison: `strncmp`.
- Substring search: `strnstr` looks only within the first `length`
  characters. An empty needle is found at index 0.
- Copies and slices: `strdup`, `strndup`, `substr` and `strjoin`.
- Trimming and splitting: `strtrim` and `split`. `split` drops empty words.
- Mapping: `strmapi(s, func)` builds a new string from `func(index, char)`.
  `striteri(buffer, func)` calls `func(index, item)` on each item of a mutable
  sequence, and a result other than `None` replaces the item.
- Bounded copies: `strlcpy` and `strlcat` write NUL-terminated text into a
  `bytearray`. They return the length they tried to create, so a result of
  `size` or more means the text was truncated.

```python
from libft.text import split, strtrim, strlcpy

split("hello!zzzzzzzz", "z")   # ["hello!"]
strtrim("xxhixx", "x")         # "hi"
buf = bytearray(15)
strlcpy(buf, "String to copy", 15)   # 14
```

### `libft.linked_list`

`LinkedList` is a singly linked list of `Node` objects. Each node has
`content` and `next` attributes, and the list's first node is `head`. The
list supports `len()` and iteration over its contents, along with these
methods:

- `add_front(content)` and `add_back(content)` insert a value and return the
  new node.
- `last()` returns the final node, or `None` when the list is empty.
- `clear(delete=None)` passes each content to `delete`, if one is given, and
  then empties the list.
- `for_each(func)` calls `func` on each content.
- `map(func, delete=None)` returns a new list. If `func` raises, the contents
  already produced are passed to `delete` and the error propagates.

```python
from libft.linked_list import LinkedList

items = LinkedList([42, 43])
items.add_front(41)
list(items)                             # [41, 42, 43]
list(items.map(lambda x: x * 2, None))  # [82, 84, 86]
```

## What it does not do

libft is a library only. It installs no command-line programs.