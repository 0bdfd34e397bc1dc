"""A small JSON parser that keeps string contents exactly as written.

Every parser takes the text to read and returns a ``(rest, value)`` pair,
where ``rest`` is the unconsumed input. A parser that cannot match raises
:class:`ParseError`.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, TypeVar

__all__ = [
    "ParseError",
    "JSONObject",
    "Null",
    "Bool",
    "Number",
    "String",
    "Array",
    "Map",
    "parse_json_null",
    "parse_json_bool",
    "parse_json_number",
    "parse_json_string",
    "parse_json_array",
    "parse_json_map",
    "parse_json_value",
]

_WHITESPACE = " \t\r\n"
_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_EXPONENT = re.compile(r"[eE][+-]?([0-9]+)?")
_STRING = re.compile(r'"((?:[^\\"]|\\["\\/bfnrt]|\\u[0-9a-fA-F]{4})*)"')

T = TypeVar("T")


class ParseError(ValueError):
    """Raised when the input does not match the expected JSON element."""

    def __init__(self, expected: str, remaining: str) -> None:
        self.expected = expected
        self.remaining = remaining
        snippet = remaining[:30]
        super().__init__(f"expected {expected} at {snippet!r}")


class JSONObject:
    """Base class of all parsed JSON values."""

    __slots__ = ()


@dataclass(frozen=True)
class Null(JSONObject):
    """The JSON ``null`` value."""

    def __str__(self) -> str:
        return "null"


@dataclass(frozen=True)
class Bool(JSONObject):
    """A JSON boolean."""

    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Number(JSONObject):
    """A JSON number, held as a float."""

    value: float

    def __str__(self) -> str:
        return _format_number(self.value)


@dataclass(frozen=True)
class String(JSONObject):
    """A JSON string; escape sequences are kept as they appear in the input."""

    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class Array(JSONObject):
    """A JSON array."""

    items: tuple[JSONObject, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self.items) + "]"


@dataclass(frozen=True)
class Map(JSONObject):
    """A JSON object as an ordered sequence of key/value pairs."""

    items: tuple[tuple[str, JSONObject], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "items", tuple((key, value) for key, value in self.items)
        )

    def __str__(self) -> str:
        pairs = (f'"{key}": {value}' for key, value in self.items)
        return "{" + ", ".join(pairs) + "}"


def _format_number(value: float) -> str:
    """Render a float in plain decimal notation with the shortest digits."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _skip_ws(text: str) -> str:
    return text.lstrip(_WHITESPACE)


def _expect(text: str, char: str) -> str:
    """Match ``char`` with optional whitespace on both sides."""
    text = _skip_ws(text)
    if not text.startswith(char):
        raise ParseError(repr(char), text)
    return _skip_ws(text[len(char):])


def _separated_list(
    text: str, element: Callable[[str], tuple[str, T]]
) -> tuple[str, list[T]]:
    """Parse zero or more elements separated by commas."""
    try:
        rest, first = element(text)
    except ParseError:
        return text, []
    items = [first]
    while True:
        try:
            after_sep = _expect(rest, ",")
            next_rest, item = element(after_sep)
        except ParseError:
            return rest, items
        items.append(item)
        rest = next_rest


def parse_json_null(text: str) -> tuple[str, Null]:
    """Parse the literal ``null``."""
    if not text.startswith("null"):
        raise ParseError("'null'", text)
    return text[4:], Null()


def parse_json_bool(text: str) -> tuple[str, Bool]:
    """Parse the literal ``true`` or ``false``."""
    for literal, value in (("true", True), ("false", False)):
        if text.startswith(literal):
            return text[len(literal):], Bool(value)
    raise ParseError("'true' or 'false'", text)


def parse_json_number(text: str) -> tuple[str, Number]:
    """Parse a floating-point number, with optional sign, fraction and exponent."""
    match = _NUMBER.match(text)
    if match is None:
        raise ParseError("a number", text)
    end = match.end()
    exponent = _EXPONENT.match(text, end)
    if exponent is not None:
        if exponent.group(1) is None:
            raise ParseError("exponent digits", text[exponent.end():])
        end = exponent.end()
    return text[end:], Number(float(text[:end]))


def parse_json_string(text: str) -> tuple[str, String]:
    """Parse a double-quoted string, validating but not decoding escapes."""
    match = _STRING.match(text)
    if match is None:
        raise ParseError("a string", text)
    return text[match.end():], String(match.group(1))


def parse_json_array(text: str) -> tuple[str, Array]:
    """Parse a bracketed, comma-separated list of values."""
    rest = _expect(text, "[")
    rest, items = _separated_list(rest, parse_json_value)
    rest = _expect(rest, "]")
    return rest, Array(items)


def _parse_key_value(text: str) -> tuple[str, tuple[str, JSONObject]]:
    rest, key = parse_json_string(_skip_ws(text))
    rest = _expect(rest, ":")
    rest, value = parse_json_value(rest)
    return rest, (key.value, value)


def parse_json_map(text: str) -> tuple[str, Map]:
    """Parse a braced, comma-separated list of ``"key": value`` pairs."""
    rest = _expect(text, "{")
    rest, pairs = _separated_list(rest, _parse_key_value)
    rest = _expect(rest, "}")
    return rest, Map(pairs)


_VALUE_PARSERS: tuple[Callable[[str], tuple[str, JSONObject]], ...] = (
    parse_json_null,
    parse_json_bool,
    parse_json_number,
    parse_json_string,
    parse_json_array,
    parse_json_map,
)


def parse_json_value(text: str) -> tuple[str, JSONObject]:
    """Parse any JSON value surrounded by optional whitespace."""
    stripped = _skip_ws(text)
    for parser in _VALUE_PARSERS:
        try:
            rest, value = parser(stripped)
        except ParseError:
            continue
        return _skip_ws(rest), value
    raise ParseError("a JSON value", stripped)