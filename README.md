# ftprintf

A small, dependency-free printf-style formatter.

## Conversions

| Conversion | Argument | Output |
|------------|----------|--------|
| `%c` | a one-character string, or an integer (taken modulo 256) | the character |
| `%s` | a string, or `None` | the text; `(null)` for `None` |
| `%p` | an integer address, or `None` | `0x` followed by lowercase hex; `(nil)` for `None` or `0` when no precision is given |
| `%d`, `%i` | an integer, wrapped to signed 32 bits | a signed decimal |
| `%u` | an integer, wrapped to unsigned 32 bits | an unsigned decimal |
| `%x`, `%X` | an integer, wrapped to unsigned 32 bits | lowercase or uppercase hex |
| `%%` | none | a literal `%` |

Each conversion accepts:

- the flags `-` (left-justify), `0` (pad with zeros instead of spaces),
  `#` (`0x`/`0X` prefix for non-zero hex), `+` and space (sign shown for
  non-negative `%d`/`%i`);
- a field width;
- a `.precision`: the minimum number of digits for numbers (a zero value with
  precision 0 prints no digits), the maximum number of characters for `%s`.
  When a precision is given, the `0` flag does not pad numbers.

Unknown specifiers produce no output and consume no argument. A `%` at the very
end of the format produces nothing. Extra arguments are ignored; too few
arguments raise `TypeError`.

## Installation

```
pip install ftprintf
```

## Usage

```python
from ftprintf.printf import sprintf, printf

sprintf("%5d|%-5s|%#x", 42, "ab", 255)   # '   42|ab   |0xff'
sprintf("%.3s", "abcdef")                 # 'abc'
sprintf("%+05d", 7)                       # '+0007'
sprintf("%d", 2**31)                      # '-2147483648'

count = printf("hello %s\n", "world")     # writes to standard output, returns 12
```

`printf` writes to standard output by default; pass `file=` to send the output
to any text stream. It returns the number of characters written.

The building blocks are also available on their own:

- `ftprintf.spec.parse_spec(fmt, pos)` reads the conversion starting at the `%`
  at `fmt[pos]` and returns a frozen `FormatSpec` together with the index just
  past it. It raises `ValueError` if there is no `%` at `pos`.
- `ftprintf.handlers` renders one value for a given `FormatSpec`:
  `render_char`, `render_str`, `render_int`, `render_uint`, `render_hex`
  (digit case follows the specifier unless `digits` is passed) and
  `render_ptr`.
- `ftprintf.convert` provides `to_base(num, digits)`, which writes a
  non-negative integer in the given digit alphabet, and `repeat(char, count)`,
  which returns an empty string for a non-positive count.

## What it does not do

There are no floating-point conversions (`%f`, `%e`, `%g`), no length
modifiers (`l`, `h`, ...), no `*` width or precision taken from the arguments,
and no positional arguments. Integers are always treated as 32-bit values and
addresses as 64-bit values. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```