# topmark:header:start
#
#   project      : FbxWriter
#   file         : properties.py
#   file_relpath : src/fbxwriter/writer/properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed node property values.

FBX node properties are strongly typed: an ``int`` in Python may be written as
a 16, 32 or 64-bit integer, and a ``float`` as a single or double. Each class
here pins one FBX type and carries its one-character binary type code.

Values are frozen dataclasses; array payloads are stored as tuples so that
events can be compared and hashed.

Use `property_from_python` to map plain Python values to a sensible default
type, or `property_from_tagged` to build a value from a ``(type, value)`` pair
as found in JSON documents.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Final, Union

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

I16_MIN: Final[int] = -(2**15)
I16_MAX: Final[int] = 2**15 - 1
I32_MIN: Final[int] = -(2**31)
I32_MAX: Final[int] = 2**31 - 1
I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1


def _check_range(type_name: str, value: int, lo: int, hi: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{type_name} expects an int, got {type(value).__name__}")
    if not lo <= value <= hi:
        raise ValueError(f"{type_name} value out of range: {value}")


def _check_bool(type_name: str, value: object) -> None:
    if not isinstance(value, bool):
        raise TypeError(f"{type_name} expects a bool, got {type(value).__name__}")


def _as_float(type_name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{type_name} expects a float, got {type(value).__name__}")
    return float(value)


def _as_floats(type_name: str, values: Iterable[Any]) -> tuple[float, ...]:
    return tuple(_as_float(type_name, v) for v in values)


@dataclass(frozen=True, slots=True)
class Bool:
    """Single boolean (``C``)."""

    code: ClassVar[str] = "C"
    value: bool

    def __post_init__(self) -> None:
        _check_bool("Bool", self.value)


@dataclass(frozen=True, slots=True)
class I16:
    """Signed 16-bit integer (``Y``)."""

    code: ClassVar[str] = "Y"
    value: int

    def __post_init__(self) -> None:
        _check_range("I16", self.value, I16_MIN, I16_MAX)


@dataclass(frozen=True, slots=True)
class I32:
    """Signed 32-bit integer (``I``)."""

    code: ClassVar[str] = "I"
    value: int

    def __post_init__(self) -> None:
        _check_range("I32", self.value, I32_MIN, I32_MAX)


@dataclass(frozen=True, slots=True)
class I64:
    """Signed 64-bit integer (``L``)."""

    code: ClassVar[str] = "L"
    value: int

    def __post_init__(self) -> None:
        _check_range("I64", self.value, I64_MIN, I64_MAX)


@dataclass(frozen=True, slots=True)
class F32:
    """Single-precision float (``F``)."""

    code: ClassVar[str] = "F"
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _as_float("F32", self.value))


@dataclass(frozen=True, slots=True)
class F64:
    """Double-precision float (``D``)."""

    code: ClassVar[str] = "D"
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _as_float("F64", self.value))


@dataclass(frozen=True, slots=True)
class BoolArray:
    """Array of booleans (``b``)."""

    code: ClassVar[str] = "b"
    values: tuple[bool, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        for v in self.values:
            _check_bool("BoolArray", v)


@dataclass(frozen=True, slots=True)
class I32Array:
    """Array of signed 32-bit integers (``i``)."""

    code: ClassVar[str] = "i"
    values: tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        for v in self.values:
            _check_range("I32Array", v, I32_MIN, I32_MAX)


@dataclass(frozen=True, slots=True)
class I64Array:
    """Array of signed 64-bit integers (``l``)."""

    code: ClassVar[str] = "l"
    values: tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        for v in self.values:
            _check_range("I64Array", v, I64_MIN, I64_MAX)


@dataclass(frozen=True, slots=True)
class F32Array:
    """Array of single-precision floats (``f``)."""

    code: ClassVar[str] = "f"
    values: tuple[float, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _as_floats("F32Array", self.values))


@dataclass(frozen=True, slots=True)
class F64Array:
    """Array of double-precision floats (``d``)."""

    code: ClassVar[str] = "d"
    values: tuple[float, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _as_floats("F64Array", self.values))


@dataclass(frozen=True, slots=True)
class String:
    """UTF-8 string (``S``)."""

    code: ClassVar[str] = "S"
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"String expects a str, got {type(self.value).__name__}")


@dataclass(frozen=True, slots=True)
class Raw:
    """Raw bytes (``R``)."""

    code: ClassVar[str] = "R"
    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, (bytes, bytearray)):
            raise TypeError(f"Raw expects bytes, got {type(self.value).__name__}")
        object.__setattr__(self, "value", bytes(self.value))


PropertyValue = Union[
    Bool,
    I16,
    I32,
    I64,
    F32,
    F64,
    BoolArray,
    I32Array,
    I64Array,
    F32Array,
    F64Array,
    String,
    Raw,
]

ARRAY_TYPES: Final[tuple[type, ...]] = (BoolArray, I32Array, I64Array, F32Array, F64Array)
_ALL_TYPES: Final[tuple[type, ...]] = (
    Bool,
    I16,
    I32,
    I64,
    F32,
    F64,
    *ARRAY_TYPES,
    String,
    Raw,
)


def is_property_value(value: object) -> bool:
    """Return True if ``value`` is one of the typed property classes."""
    return isinstance(value, _ALL_TYPES)


def property_from_python(value: object) -> PropertyValue:
    """Map a plain Python value to a typed property value.

    ``bool`` becomes `Bool`, ``int`` becomes `I32` when it fits and `I64`
    otherwise, ``float`` becomes `F64`, ``str`` becomes `String`, and
    ``bytes``/``bytearray`` become `Raw`. Typed values pass through.

    Raises:
        TypeError: ``value`` has no default FBX type.
        ValueError: an ``int`` does not fit in 64 bits.
    """
    if is_property_value(value):
        return value  # type: ignore[return-value]
    if isinstance(value, bool):
        return Bool(value)
    if isinstance(value, int):
        if I32_MIN <= value <= I32_MAX:
            return I32(value)
        return I64(value)
    if isinstance(value, float):
        return F64(value)
    if isinstance(value, str):
        return String(value)
    if isinstance(value, (bytes, bytearray)):
        return Raw(bytes(value))
    raise TypeError(f"no FBX property type for {type(value).__name__}")


def _decode_raw(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return base64.b64decode(value, validate=True)
    raise TypeError(f"raw property expects base64 text, got {type(value).__name__}")


_TAGGED: Final[dict[str, Callable[[Any], PropertyValue]]] = {
    "bool": Bool,
    "i16": I16,
    "i32": I32,
    "i64": I64,
    "f32": F32,
    "f64": F64,
    "bool_array": BoolArray,
    "i32_array": I32Array,
    "i64_array": I64Array,
    "f32_array": F32Array,
    "f64_array": F64Array,
    "string": String,
    "raw": lambda v: Raw(_decode_raw(v)),
    "binary": lambda v: Raw(_decode_raw(v)),
}

PROPERTY_TAGS: Final[tuple[str, ...]] = tuple(_TAGGED)


def property_from_tagged(tag: str, value: Any) -> PropertyValue:
    """Build a typed property value from a type tag and a plain value.

    Args:
        tag (str): One of `PROPERTY_TAGS` (e.g. ``"i32"``, ``"f64_array"``).
        value (Any): The payload; base64 text for ``"raw"``.

    Returns:
        PropertyValue: The typed value.

    Raises:
        ValueError: ``tag`` is unknown or the payload is out of range.
        TypeError: the payload has the wrong shape for ``tag``.
    """
    factory = _TAGGED.get(tag.strip().lower())
    if factory is None:
        raise ValueError(f"unknown property type: {tag!r}")
    return factory(value)
