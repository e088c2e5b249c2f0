"""In-memory JSON values: objects, arrays, strings, numbers and constants."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterator

from jsonvalue.utf import utf8_check_string

__all__ = [
    "JsonType",
    "JsonValue",
    "JsonObject",
    "JsonArray",
    "JsonString",
    "JsonInteger",
    "JsonReal",
    "json_string",
    "json_string_nocheck",
    "json_integer",
    "json_real",
    "json_true",
    "json_false",
    "json_null",
    "json_boolean",
    "json_sprintf",
    "json_number_value",
    "json_equal",
    "json_copy",
    "json_deep_copy",
]

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class JsonType(enum.Enum):
    """The kind of a JSON value."""

    OBJECT = 0
    ARRAY = 1
    STRING = 2
    INTEGER = 3
    REAL = 4
    TRUE = 5
    FALSE = 6
    NULL = 7


class JsonValue:
    """Base class of every JSON value."""

    type: JsonType

    def copy(self) -> JsonValue:
        """Return a shallow copy; constants are returned as they are."""
        return self

    def deep_copy(self) -> JsonValue:
        """Return a copy that shares no mutable value with this one."""
        return self.copy()

    def is_number(self) -> bool:
        return self.type in (JsonType.INTEGER, JsonType.REAL)

    def is_boolean(self) -> bool:
        return self.type in (JsonType.TRUE, JsonType.FALSE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return json_equal(self, other)

    __hash__ = None  # type: ignore[assignment]


class _JsonConstant(JsonValue):
    """One of the shared constants true, false and null."""

    def __init__(self, kind: JsonType) -> None:
        self.type = kind

    def __eq__(self, other: object) -> bool:
        return self is other

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"<json {self.type.name.lower()}>"


_TRUE = _JsonConstant(JsonType.TRUE)
_FALSE = _JsonConstant(JsonType.FALSE)
_NULL = _JsonConstant(JsonType.NULL)


def _check_member(container: JsonValue, value: object) -> JsonValue:
    if not isinstance(value, JsonValue):
        raise TypeError(f"expected a JSON value, got {type(value).__name__}")
    if value is container:
        raise ValueError("a container cannot hold itself")
    return value


def _key(key: object, check: bool) -> str:
    if isinstance(key, (bytes, bytearray)):
        raw = bytes(key)
        if check:
            if not utf8_check_string(raw):
                raise ValueError("object key is not valid UTF-8")
            return raw.decode("utf-8")
        return raw.decode("utf-8", "surrogateescape")
    if isinstance(key, str):
        if check:
            try:
                key.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise ValueError("object key is not valid UTF-8") from exc
        return key
    raise TypeError(f"object key must be str or bytes, not {type(key).__name__}")


class JsonObject(JsonValue):
    """A JSON object; keys keep their insertion order."""

    type = JsonType.OBJECT

    def __init__(self) -> None:
        self._items: dict[str, JsonValue] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __contains__(self, key: object) -> bool:
        try:
            return _key(key, False) in self._items
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"JsonObject({self._items!r})"

    def get(self, key: str | bytes) -> JsonValue | None:
        """Return the value stored under key, or None."""
        return self._items.get(_key(key, False))

    def set(self, key: str | bytes, value: JsonValue) -> None:
        """Store value under key; the key must be valid UTF-8."""
        self.set_nocheck(_key(key, True), value)

    def set_nocheck(self, key: str | bytes, value: JsonValue) -> None:
        """Store value under key without checking the key's encoding."""
        self._items[_key(key, False)] = _check_member(self, value)

    def delete(self, key: str | bytes) -> None:
        """Remove key; raises KeyError if it is absent."""
        name = _key(key, False)
        if name not in self._items:
            raise KeyError(name)
        del self._items[name]

    def clear(self) -> None:
        self._items.clear()

    def _other(self, other: object) -> JsonObject:
        if not isinstance(other, JsonObject):
            raise TypeError("expected a JSON object")
        return other

    def update(self, other: JsonObject) -> None:
        """Set every item of other in this object."""
        for key, value in list(self._other(other).items()):
            self.set_nocheck(key, value)

    def update_existing(self, other: JsonObject) -> None:
        """Set the items of other whose keys this object already has."""
        for key, value in list(self._other(other).items()):
            if key in self._items:
                self.set_nocheck(key, value)

    def update_missing(self, other: JsonObject) -> None:
        """Set the items of other whose keys this object lacks."""
        for key, value in list(self._other(other).items()):
            if key not in self._items:
                self.set_nocheck(key, value)

    def items(self) -> Iterator[tuple[str, JsonValue]]:
        """Yield (key, value) pairs in insertion order."""
        yield from self._items.items()

    def copy(self) -> JsonObject:
        result = JsonObject()
        result._items = dict(self._items)
        return result

    def deep_copy(self) -> JsonObject:
        result = JsonObject()
        for key, value in self._items.items():
            result.set_nocheck(key, value.deep_copy())
        return result


class JsonArray(JsonValue):
    """A JSON array."""

    type = JsonType.ARRAY

    def __init__(self) -> None:
        self._items: list[JsonValue] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"JsonArray({self._items!r})"

    def _index(self, index: int, limit: int) -> int:
        if not isinstance(index, int) or index < 0 or index >= limit:
            raise IndexError(f"array index {index} out of range")
        return index

    def get(self, index: int) -> JsonValue:
        """Return the item at index; raises IndexError if out of range."""
        return self._items[self._index(index, len(self._items))]

    def set(self, index: int, value: JsonValue) -> None:
        """Replace the item at an existing index."""
        value = _check_member(self, value)
        self._items[self._index(index, len(self._items))] = value

    def append(self, value: JsonValue) -> None:
        self._items.append(_check_member(self, value))

    def insert(self, index: int, value: JsonValue) -> None:
        """Insert value before index; index may equal the length."""
        value = _check_member(self, value)
        self._items.insert(self._index(index, len(self._items) + 1), value)

    def remove(self, index: int) -> None:
        del self._items[self._index(index, len(self._items))]

    def clear(self) -> None:
        self._items.clear()

    def extend(self, other: JsonArray) -> None:
        """Append every item of other, sharing the items."""
        if not isinstance(other, JsonArray):
            raise TypeError("expected a JSON array")
        self._items.extend(list(other._items))

    def copy(self) -> JsonArray:
        result = JsonArray()
        result._items = list(self._items)
        return result

    def deep_copy(self) -> JsonArray:
        result = JsonArray()
        result._items = [item.deep_copy() for item in self._items]
        return result


def _to_bytes(value: object, check: bool) -> bytes:
    if value is None:
        raise TypeError("string value must not be None")
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    elif isinstance(value, str):
        try:
            raw = value.encode("utf-8")
        except UnicodeEncodeError as exc:
            if check:
                raise ValueError("string is not valid UTF-8") from exc
            raw = value.encode("utf-8", "surrogateescape")
    else:
        raise TypeError(f"string value must be str or bytes, not {type(value).__name__}")
    if check and not utf8_check_string(raw):
        raise ValueError("string is not valid UTF-8")
    return raw


class JsonString(JsonValue):
    """A JSON string holding raw bytes, which may include NUL bytes."""

    type = JsonType.STRING

    def __init__(self, value: bytes) -> None:
        self._value = value

    @property
    def value(self) -> bytes:
        return self._value

    def __len__(self) -> int:
        return len(self._value)

    def __repr__(self) -> str:
        return f"JsonString({self._value!r})"

    def set(self, value: str | bytes) -> None:
        """Replace the contents; they must be valid UTF-8."""
        self._value = _to_bytes(value, True)

    def set_nocheck(self, value: str | bytes) -> None:
        """Replace the contents without checking their encoding."""
        self._value = _to_bytes(value, False)

    def copy(self) -> JsonString:
        return JsonString(self._value)


def _check_int(value: object) -> int:
    if not isinstance(value, int):
        raise TypeError(f"integer value must be int, not {type(value).__name__}")
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"integer out of range: {value}")
    return int(value)


def _check_real(value: object) -> float:
    if not isinstance(value, (int, float)):
        raise TypeError(f"real value must be a number, not {type(value).__name__}")
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise ValueError("real value must be finite")
    return number


class JsonInteger(JsonValue):
    """A JSON integer in the signed 64-bit range."""

    type = JsonType.INTEGER

    def __init__(self, value: int) -> None:
        self._value = _check_int(value)

    @property
    def value(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"JsonInteger({self._value})"

    def set(self, value: int) -> None:
        self._value = _check_int(value)

    def copy(self) -> JsonInteger:
        return JsonInteger(self._value)


class JsonReal(JsonValue):
    """A finite JSON real number."""

    type = JsonType.REAL

    def __init__(self, value: float) -> None:
        self._value = _check_real(value)

    @property
    def value(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"JsonReal({self._value!r})"

    def set(self, value: float) -> None:
        self._value = _check_real(value)

    def copy(self) -> JsonReal:
        return JsonReal(self._value)


def json_string(value: str | bytes) -> JsonString:
    """Create a string; raises ValueError if it is not valid UTF-8."""
    return JsonString(_to_bytes(value, True))


def json_string_nocheck(value: str | bytes) -> JsonString:
    """Create a string without checking its encoding."""
    return JsonString(_to_bytes(value, False))


def json_integer(value: int) -> JsonInteger:
    return JsonInteger(value)


def json_real(value: float) -> JsonReal:
    """Create a real; raises ValueError for NaN or infinity."""
    return JsonReal(value)


def json_true() -> JsonValue:
    return _TRUE


def json_false() -> JsonValue:
    return _FALSE


def json_null() -> JsonValue:
    return _NULL


def json_boolean(value: object) -> JsonValue:
    return _TRUE if value else _FALSE


def json_sprintf(fmt: str | bytes, *args: object) -> JsonString:
    """Format with printf-style % formatting into a JSON string.

    Raises ValueError if the result is not valid UTF-8.
    """
    if isinstance(fmt, (bytes, bytearray)):
        data = bytes(fmt) % args
    else:
        try:
            data = (fmt % args).encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError("formatted string is not valid UTF-8") from exc
    if not utf8_check_string(data):
        raise ValueError("formatted string is not valid UTF-8")
    return JsonString(data)


def json_number_value(value: JsonValue | None) -> float:
    """Return an integer or real as a float; anything else gives 0.0."""
    if isinstance(value, JsonInteger):
        return float(value.value)
    if isinstance(value, JsonReal):
        return value.value
    return 0.0


def json_equal(first: JsonValue | None, second: JsonValue | None) -> bool:
    """Compare two values structurally; None is equal to nothing."""
    if first is None or second is None:
        return False
    if first.type is not second.type:
        return False
    if first is second:
        return True
    if isinstance(first, JsonObject) and isinstance(second, JsonObject):
        if len(first) != len(second):
            return False
        return all(
            json_equal(value, second.get(key)) for key, value in first.items()
        )
    if isinstance(first, JsonArray) and isinstance(second, JsonArray):
        if len(first) != len(second):
            return False
        return all(json_equal(a, b) for a, b in zip(first, second))
    if isinstance(first, (JsonString, JsonInteger, JsonReal)):
        return first.value == second.value  # type: ignore[attr-defined]
    return False


def json_copy(value: JsonValue | None) -> JsonValue | None:
    return None if value is None else value.copy()


def json_deep_copy(value: JsonValue | None) -> JsonValue | None:
    return None if value is None else value.deep_copy()