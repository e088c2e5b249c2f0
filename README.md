# jsonvalue

A small library for building and manipulating JSON values in memory.
It has objects that keep insertion order and arrays. It has strings that hold
raw bytes and are checked as valid UTF-8, and integers in the signed 64-bit
range. It has reals that refuse NaN and infinity, and the shared `true`,
`false` and `null` constants. It has no dependencies outside the standard
library.

## Installing

```
pip install jsonvalue
```

## Building values

```python
from jsonvalue.value import (
    JsonArray, JsonObject, json_string, json_integer, json_real,
    json_null, json_equal, json_copy, json_deep_copy,
)

obj = JsonObject()
obj.set("name", json_string("foo"))
obj.set("count", json_integer(3))
obj.set("ratio", json_real(0.5))

tags = JsonArray()
tags.append(json_string("a"))
tags.append(json_null())
obj.set("tags", tags)

obj.get("count").value          # 3
obj.get("missing")              # None
for key, item in obj.items():   # keys in insertion order
    ...
```

### Values

Every value is a `JsonValue` with a `type` from the `JsonType` enum. The
enum has the members `OBJECT`, `ARRAY`, `STRING`, `INTEGER`, `REAL`, `TRUE`,
`FALSE` and `NULL`. `is_number()` and `is_boolean()` test the kind of a value.

- `json_string(value)` takes `str` or `bytes` and raises `ValueError` if the
  text is not valid UTF-8. `json_string_nocheck(value)` skips that check.
  `JsonString.value` is the stored `bytes`, and NUL bytes are allowed.
  `JsonString.set` and `JsonString.set_nocheck` replace the contents.
- `json_integer(value)` raises `OverflowError` outside the signed 64-bit
  range. `JsonInteger.set` replaces the value.
- `json_real(value)` raises `ValueError` for NaN or infinity. `JsonReal.set`
  does the same check.
- `json_true()`, `json_false()`, `json_null()` return shared constants.
  `json_boolean(value)` picks true or false from the truth of `value`.
- `json_sprintf(fmt, *args)` builds a string with `%`-style formatting. It
  raises `ValueError` if the result is not valid UTF-8.
- `json_number_value(value)` returns an integer or a real as a `float`, and
  `0.0` for anything else.

### Objects

`JsonObject` has the methods `get`, `set`, `set_nocheck`, `delete`, `clear`,
`update`, `update_existing`, `update_missing` and `items`. It also supports
`len()`, iteration over keys and `in`.

- `set` checks that the key is valid UTF-8. `set_nocheck` does not check it.
- `delete` raises `KeyError` for a missing key.

### Arrays

`JsonArray` has the methods `get`, `set`, `append`, `insert`, `remove`,
`clear` and `extend`. It also supports `len()` and iteration.

- An index out of range raises `IndexError`.
- `insert` accepts an index equal to the length.

### Errors common to both containers

- A member that is not a `JsonValue` raises `TypeError`.
- A container given to itself raises `ValueError`.

## Equality and copies

`json_equal(a, b)` compares two values structurally, and `None` equals
nothing. The `==` operator on values does the same comparison.

`json_copy` (or `value.copy()`) makes a shallow copy: containers are new and
their members are shared. `json_deep_copy` (or `value.deep_copy()`) copies
the whole tree. The constants copy to themselves. Both functions return
`None` for `None`.

## Lower-level helpers

### `jsonvalue.utf`

This module holds the UTF-8 routines on raw bytes:

- `utf8_encode(codepoint)` returns `bytes`.
- `utf8_check_first(byte)` returns the length of the sequence that starts
  with this byte, or 0.
- `utf8_check_full(buffer)` returns the code point, or `None`.
- `utf8_iterate(buffer)` yields code points. It raises `Utf8Error` on
  invalid input.
- `utf8_check_string(data)` returns `True` or `False`.

### `jsonvalue.strconv`

This module holds the number conversions:

- `strtod(text)` converts number text to a `float`. It raises
  `OverflowError` when the value is out of range.
- `dtostr(value, precision=0)` formats a float so that it reads back as a
  real. The default is 17 significant digits. The result always contains
  `.` or `e`, and the exponent has no `+` sign and no leading zeros.

## What this package does not do

It does not parse JSON text into values. It does not serialise values back
to JSON text, and it has no file or stream input or output. It has no
pack/unpack format language. It provides no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```