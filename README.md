# jsonparse

A small JSON parser. It has one parsing function for each kind of JSON value. Each
function takes a string and returns a `(rest, value)` pair. `rest` is the input that was
not consumed. A command-line tool uses the parser to check JSON documents.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Command line

Check a file:

```
jsonparse path/to/document.json
```

Check standard input:

```
echo '{"a": [1, 2, true]}' | jsonparse
```

For a valid document, the tool prints `Valid JSON:` and then the parsed value. It exits
with status 0.

If non-whitespace input is left after the value, the tool also prints a warning to
standard error. The exit status is still 0.

If the input cannot be parsed, or the file cannot be read, the tool prints an error to
standard error and exits with status 1.

## Library

```python
from jsonparse.json import parse_json_value, ParseError

rest, value = parse_json_value('{"a": 1, "b": false}')
print(value)       # {"a": 1, "b": false}
print(repr(rest))  # ''

try:
    parse_json_value("nope")
except ParseError as err:
    print("invalid:", err)
```

Every parser raises `ParseError` when its input does not match. `ParseError` is a
subclass of `ValueError`, and it carries these attributes:

- `expected`: what the parser was looking for.
- `remaining`: the input at the point of failure.

### Values

Parsed values are frozen dataclasses that derive from `JSONObject`:

- `Null()`
- `Bool(value)`
- `Number(value)`: the value is held as a `float`.
- `String(value)`: escape sequences are checked but not decoded. For example, `"a\nb"`
  becomes `String('a\\nb')`.
- `Array(items)`: `items` is a tuple of values.
- `Map(items)`: `items` is a tuple of `(key, value)` pairs, in the order they appear in
  the document. Duplicate keys are kept.

Calling `str()` on a value renders it back as JSON-like text:

- Array elements and map pairs are separated by `", "`.
- Numbers are written in plain decimal notation, so `1e3` prints as `1000`.

### Parsers

Each kind of value has its own parser, and each can be called on its own:

- `parse_json_null`
- `parse_json_bool`
- `parse_json_number`
- `parse_json_string`
- `parse_json_array`
- `parse_json_map`

`parse_json_value` tries these parsers in that order. It skips whitespace before and
after the value.

The single parsers match at the very start of the input and leave everything after the
match in `rest`. For example, `parse_json_number("12a")` returns `("a", Number(12.0))`.

## What it does not do

- It does not decode string escapes into characters.
- It does not convert parsed values into Python `dict`, `list` or `str` objects.
- It has no serializer beyond the `str()` rendering described above.
- The number parser is more lenient than strict JSON: it accepts a leading `+`,
  a leading `.` and a trailing `.`.