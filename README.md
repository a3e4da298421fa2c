# strkit

A small library of low-level helpers with exact, well-defined behaviour.

## Modules

- `strkit.chars`: ASCII classification and case mapping. Every function takes
  an integer character code or a one-character string (`is_alnum`, `is_alpha`,
  `is_ascii`, `is_digit`, `is_print`, `to_lower`, `to_upper`). Predicates
  return a `bool`; `to_lower` and `to_upper` return the same kind of value
  they were given and leave anything outside `A`-`Z` / `a`-`z` unchanged.
- `strkit.memory`: operations on `bytearray`, `bytes` and `memoryview`
  (`mem_set`, `bzero`, `calloc`, `mem_chr`, `mem_cmp`, `mem_copy`,
  `mem_move`). A byte count larger than a buffer raises `IndexError`; a
  negative one raises `ValueError`. `mem_chr` returns an index or `None`;
  `mem_move` copies between two offsets of one buffer, overlap allowed.
- `strkit.strings`: string routines with their edge cases kept
  (`atoi`, `itoa`, `split`, `str_chr`, `str_rchr`, `str_cmp`, `str_ncmp`,
  `str_nstr`, `str_lcpy`, `str_lcat`, `str_mapi`, `str_iteri`, `str_trim`,
  `substr`). Searches return an index or `None`. `atoi` skips leading
  whitespace, takes one optional sign, stops at the first non-digit and wraps
  to a signed 32-bit value. `str_lcpy` and `str_lcat` return a pair of the
  resulting text and the length the full result would have had.
- `strkit.linked`: a singly linked list (`Node`, `LinkedList`) with
  `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`, plus
  `len()` and iteration over the contents.
- `strkit.printf`: a minimal formatter that writes to any object with a
  `write(str)` method and returns the number of characters written
  (`printf`, `put_char`, `put_str`, `put_nbr`, `put_unsigned`, `put_hex`,
  `put_pointer`).

## Installation

```
pip install .
```

## Examples

```python
import io

from strkit.chars import to_upper
from strkit.strings import atoi, split, str_trim, str_lcpy
from strkit.linked import LinkedList
from strkit.printf import printf

to_upper(ord("a"))                     # 65
to_upper("a")                          # 'A'
atoi("   -42abc")                      # -42
split("  hello  world ", " ")          # ['hello', 'world']
str_trim("xxhixx", "x")                # 'hi'
str_lcpy("hello", 3)                   # ('he', 5)

items = LinkedList([1, 2, 3])
doubled = items.map(lambda x: x * 2, lambda x: None)
list(doubled)                          # [2, 4, 6]

out = io.StringIO()
count = printf(out, "%s has %d items (%x)\n", "list", 255, 255)
out.getvalue()                         # 'list has 255 items (ff)\n'
```

## printf conversions

`%c`, `%s`, `%d`, `%i`, `%u`, `%x`, `%X`, `%p` and `%%`. `%d`/`%i` print a
signed 32-bit value, `%u`/`%x`/`%X` an unsigned 32-bit value, `%p` prints
`0x` and lower-case hex (or `(nil)` for zero), and `%s` prints `(null)` for
`None`. An unknown conversion is dropped; a `%` at the very end is written
as is; too few arguments raise `TypeError`.

## What it does not do

There is no command-line program. `printf` has no field widths, precision
or flags, and no floating-point conversions.

## Running the tests

```
pip install -e ".[test]"
pytest
```