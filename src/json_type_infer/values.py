"""JsonValue: the closed sum type the inference engine consumes.

Every JSON value is one of eight frozen dataclasses. Numeric literals are
classified here, once, so the engine only ever dispatches on an already-typed
variant:

- integers in the signed 32-bit range  -> ``JsonInt``
- integers in the signed 64-bit range  -> ``JsonLong``
- anything with a fraction or exponent -> ``JsonFloat``

``to_json_value`` converts the plain Python structures produced by
``json.loads`` (or written by hand in tests) into this representation.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from json_type_infer.errors import DepthExceededError, InvalidInputError

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "JsonArray",
    "JsonBool",
    "JsonFloat",
    "JsonInt",
    "JsonLong",
    "JsonNull",
    "JsonObject",
    "JsonScalar",
    "JsonString",
    "JsonValue",
    "pointer_child",
    "to_json_value",
]

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

DEFAULT_MAX_DEPTH = 128


@dataclass(frozen=True, slots=True)
class JsonNull:
    """The JSON ``null`` literal."""


@dataclass(frozen=True, slots=True)
class JsonBool:
    value: bool


@dataclass(frozen=True, slots=True)
class JsonInt:
    """An integer literal that fits in a signed 32-bit integer."""

    value: int


@dataclass(frozen=True, slots=True)
class JsonLong:
    """An integer literal that needs a signed 64-bit integer."""

    value: int


@dataclass(frozen=True, slots=True)
class JsonFloat:
    value: float


@dataclass(frozen=True, slots=True)
class JsonString:
    value: str


@dataclass(frozen=True, slots=True)
class JsonArray:
    """An ordered JSON array."""

    items: tuple[JsonValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class JsonObject:
    """An ordered JSON object.

    Attributes:
        members: ``(key, value)`` pairs in document order. Keys are unique;
                 constructing an object with a repeated key raises ``ValueError``.
    """

    members: tuple[tuple[str, JsonValue], ...] = ()
    _index: dict[str, JsonValue] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        index: dict[str, JsonValue] = {}
        for key, value in self.members:
            if key in index:
                msg = f"duplicate key in JSON object: {key!r}"
                raise ValueError(msg)
            index[key] = value
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, JsonValue]) -> JsonObject:
        """Build an object from an already-converted mapping, keeping its order."""
        return cls(tuple(mapping.items()))

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __getitem__(self, key: str) -> JsonValue:
        return self._index[key]

    def keys(self) -> list[str]:
        return [key for key, _ in self.members]

    def items(self) -> tuple[tuple[str, JsonValue], ...]:
        return self.members


JsonScalar: TypeAlias = (
    JsonNull | JsonBool | JsonInt | JsonLong | JsonFloat | JsonString
)

JsonValue: TypeAlias = JsonScalar | JsonArray | JsonObject


def pointer_child(path: str, token: str | int) -> str:
    """Extend the JSON Pointer ``path`` (RFC 6901) by one key or array index.

    ``~`` and ``/`` inside a key are escaped as ``~0`` and ``~1``.

    Example::
        pointer_child("/a", "b/c")  # "/a/b~1c"
        pointer_child("", 0)        # "/0"
    """
    escaped = str(token).replace("~", "~0").replace("/", "~1")
    return f"{path}/{escaped}"


def to_json_value(
    value: Any,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    path: str = "",
) -> JsonValue:
    """Convert a plain Python JSON structure into a ``JsonValue`` tree.

    Args:
        value:     ``dict``/``list``/``tuple``/``str``/``int``/``float``/
                   ``bool``/``None``, nested arbitrarily. Existing ``JsonValue``
                   instances are returned unchanged.
        max_depth: Maximum container nesting accepted.
        path:      JSON Pointer of ``value``; used in error messages.

    Returns:
        The equivalent ``JsonValue``.

    Raises:
        TypeError:          A value (or dict key) of an unsupported type.
        InvalidInputError:  An integer outside the signed 64-bit range.
        DepthExceededError: Nesting deeper than ``max_depth``.
    """
    return _convert(value, max_depth, path, depth=0)


def _convert(value: Any, max_depth: int, path: str, depth: int) -> JsonValue:
    # bool MUST be checked before int: bool subclasses int
    if isinstance(value, bool):
        return JsonBool(value)

    if value is None:
        return JsonNull()

    if isinstance(value, int):
        return _classify_int(value, path)

    if isinstance(value, float):
        return JsonFloat(value)

    if isinstance(value, str):
        return JsonString(value)

    if isinstance(value, dict):
        if depth + 1 > max_depth:
            raise DepthExceededError(max_depth, path)
        members: list[tuple[str, JsonValue]] = []
        for key, item in value.items():
            if not isinstance(key, str):
                msg = f"JSON object keys must be str, got {type(key)!r} at {path!r}"
                raise TypeError(msg)
            child = pointer_child(path, key)
            members.append((key, _convert(item, max_depth, child, depth + 1)))
        return JsonObject(tuple(members))

    if isinstance(value, (list, tuple)):
        if depth + 1 > max_depth:
            raise DepthExceededError(max_depth, path)
        return JsonArray(
            tuple(
                _convert(item, max_depth, pointer_child(path, idx), depth + 1)
                for idx, item in enumerate(value)
            )
        )

    if isinstance(value, _JSON_VALUE_TYPES):
        return value

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def _classify_int(value: int, path: str) -> JsonInt | JsonLong:
    if INT32_MIN <= value <= INT32_MAX:
        return JsonInt(value)
    if INT64_MIN <= value <= INT64_MAX:
        return JsonLong(value)
    msg = f"integer literal at {path or '/'!r} does not fit in 64 bits: {value}"
    raise InvalidInputError(msg)


_JSON_VALUE_TYPES = (
    JsonNull,
    JsonBool,
    JsonInt,
    JsonLong,
    JsonFloat,
    JsonString,
    JsonArray,
    JsonObject,
)
