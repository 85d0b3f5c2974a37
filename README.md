# lexconv

Building blocks for strict conversions between text and numbers. Each piece
either gives back an exact result or raises an error. Nothing is silently
truncated, and input must be well formed throughout.

## Installation

```
pip install lexconv
```

To run the test suite:

```
pip install "lexconv[test]"
pytest
```

## Modules

### `lexconv.errors`

`BadLexicalCast(source_type=None, target_type=None)` is the error raised when
a value cannot be read as the target type. It is a subclass of `ValueError`.
The two types are kept as `source_type` and `target_type`. Its message is
always `bad lexical cast: source type value could not be interpreted as target`.

### `lexconv.inf_nan`

- `parse_inf_nan(text)` returns NaN or infinity when `text` spells one of
  them, and `None` otherwise. The accepted spellings are `nan`, `nan(...)`,
  `inf` and `infinity`, in any letter case. Each may start with a `+` or `-`
  sign. A leading `-` gives a negative infinity or a NaN with its sign bit set.
- `format_inf_nan(value)` returns `"nan"` or `"inf"` for a non-finite value,
  with a leading `-` when the sign bit is set. For a finite value it returns
  `None`.

```python
from lexconv.inf_nan import parse_inf_nan, format_inf_nan

parse_inf_nan("-Infinity")       # -inf
parse_inf_nan("NaN(123)")        # nan
parse_inf_nan("12")              # None
format_inf_nan(float("-inf"))    # "-inf"
format_inf_nan(1.5)              # None
```

### `lexconv.pointerbuf`

`PointerBuffer(data)` is a read-only, seekable position over an existing
string, bytes object or other sequence. It provides:

- `read(size=-1)` returns up to `size` items and advances the position. With a
  negative `size` it returns everything that is left.
- `tell()` returns the current position.
- `seek(offset, whence=io.SEEK_SET)` moves the position and returns the new
  one. With `io.SEEK_END` the offset counts backwards from the end, so
  `seek(n, io.SEEK_END)` moves to `len(data) - n`. A position outside
  `0..len(data)` raises `ValueError`.
- `remaining()` returns the unread part without moving the position.

### `lexconv.unsigned`

- `Numpunct(grouping=(), thousands_sep=",", decimal_point=".")` describes
  how digits are grouped. `grouping` lists group sizes from the rightmost
  group leftwards, and the last size repeats. A size of zero or less ends the
  grouping. An empty `grouping` turns separators off.
  `Numpunct.from_locale()` builds the rules from the current `LC_NUMERIC`
  locale.
- `to_unsigned(value, bits)` returns the magnitude of `value` as an unsigned
  integer of `bits` bits.
- `format_unsigned(value, numpunct=None)` writes a non-negative integer and
  places separators as `numpunct` asks. A negative value raises `ValueError`.
- `parse_unsigned(text, max_value, numpunct=None)` reads an unsigned integer
  no greater than `max_value`. Separators are accepted only where the grouping
  puts them. Text with no separators at all is always accepted. Malformed
  input and overflow raise `BadLexicalCast`.

```python
from lexconv.unsigned import Numpunct, format_unsigned, parse_unsigned

rules = Numpunct(grouping=(3,))
format_unsigned(1234567, rules)          # "1,234,567"
parse_unsigned("1,234", 65535, rules)    # 1234
parse_unsigned("70000", 65535)           # raises BadLexicalCast
```

### `lexconv.numeric`

`NumericType` lists the arithmetic types, from `BOOL`, `CHAR` and `INT`
through `UNSIGNED_LONG_LONG`, `FLOAT`, `DOUBLE` and `LONG_DOUBLE`. Each member
has these attributes:

- `label`, `bits`
- `is_float`, `is_integral`
- `min_value`, `max_value`, `epsilon`
- `in_range(value)`

`convert_number(value, source, target)` converts a value of type `source` to
type `target`. It raises `BadLexicalCast` if the value overflows the target.
It also raises when a floating value would lose precision on the way to an
integral type. A negative value given for an unsigned target is negated,
converted, and then wrapped to its two's-complement value.

```python
from lexconv.numeric import NumericType, convert_number

convert_number(-1, NumericType.INT, NumericType.UNSIGNED_INT)   # 4294967295
convert_number(1.0, NumericType.DOUBLE, NumericType.INT)        # 1
convert_number(1.5, NumericType.DOUBLE, NumericType.INT)        # raises BadLexicalCast
```

### `lexconv.traits`

This module works out the character type and the buffer size that a
conversion needs.

- `CharType` lists the character types: `CHAR`, `SIGNED_CHAR`,
  `UNSIGNED_CHAR`, `WCHAR`, `CHAR16` and `CHAR32`.
- `TypeSpec` describes one side of a conversion. Its fields are:
  - `kind`
  - `char`
  - `numeric`
  - `traits`
  - `is_const`
  - the stream flags `ostreamable`, `istreamable`, `wostreamable` and
    `wistreamable`
- `is_character(spec)` reports whether `spec` is a character type.
- `deduce_source_char(spec)` and `deduce_target_char(spec)` return the stream
  character type for each side. They raise `TypeError` when the type cannot
  be streamed at all.
- `src_length(spec)` returns the longest text a value of `spec` may produce.
- `stream_traits(source, target)` returns a `StreamTraits`. It reports the
  source, target and common character types, and the character traits name.
  It also reports whether string widening is needed, whether the source lacks
  an optimised path, the source length, and `requires_stringbuf`.

```python
from lexconv.numeric import NumericType
from lexconv.traits import CharType, TypeSpec, stream_traits

st = stream_traits(
    TypeSpec("integer", numeric=NumericType.INT),
    TypeSpec("string", char=CharType.WCHAR),
)
st.char_type                      # CharType.WCHAR
st.is_string_widening_required    # True
```

## What the package does not do

There is no single entry point that converts any value to any type. The
package has no general routine for reading decimal or floating-point numbers
from text. It also has no command-line tool. The modules above are the pieces
such a conversion is built from: error reporting, infinity/NaN spelling,
unsigned digit handling with grouping, checked numeric conversion, and
character-type deduction. Combining them is left to the caller.