"""
Field value ADTs - the closed set of value kinds an event field may carry.

Each variant is a frozen dataclass with a ``kind`` discriminator, and
``FieldValue`` is their union. Rendering dispatches on the variant with a
single exhaustive ``match`` instead of one method per kind.

Type Safety:
    - All value types are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
    - __post_init__ validation keeps integer payloads plain ints inside their 64-bit range
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from logbridge.exhaustive import assert_never


I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class F64Value:
    """64-bit float field value."""

    value: float
    kind: Literal["f64"] = "f64"


@dataclass(frozen=True)
class I64Value:
    """Signed 64-bit integer field value."""

    value: int
    kind: Literal["i64"] = "i64"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"I64Value requires an int, got {type(self.value).__name__}")
        if not I64_MIN <= self.value <= I64_MAX:
            raise ValueError(f"I64Value out of range: {self.value}")


@dataclass(frozen=True)
class U64Value:
    """Unsigned 64-bit integer field value."""

    value: int
    kind: Literal["u64"] = "u64"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"U64Value requires an int, got {type(self.value).__name__}")
        if not 0 <= self.value <= U64_MAX:
            raise ValueError(f"U64Value out of range: {self.value}")


@dataclass(frozen=True)
class BoolValue:
    value: bool
    kind: Literal["bool"] = "bool"


@dataclass(frozen=True)
class StrValue:
    value: str
    kind: Literal["str"] = "str"


@dataclass(frozen=True)
class ErrorValue:
    """An exception attached to an event; rendered by its message only."""

    error: BaseException
    kind: Literal["error"] = "error"


@dataclass(frozen=True)
class DebugValue:
    """Opaque value rendered with ``repr``, internal structure included."""

    value: object
    kind: Literal["debug"] = "debug"


# Field Value Union
FieldValue = F64Value | I64Value | U64Value | BoolValue | StrValue | ErrorValue | DebugValue


def render_value(value: FieldValue) -> str:
    """Render a field value to the text embedded in a log message."""
    match value:
        case F64Value(value=v) | I64Value(value=v) | U64Value(value=v):
            return str(v)
        case BoolValue(value=flag):
            return str(flag)
        case StrValue(value=text):
            return text
        case ErrorValue(error=error):
            return str(error)
        case DebugValue(value=obj):
            return repr(obj)
        case _:
            assert_never(value)


def field_value(obj: object) -> FieldValue:
    """Classify an arbitrary Python object into the closed set of value kinds.

    ``bool`` is checked before ``int`` since it is an ``int`` subclass.
    Integers outside both 64-bit ranges fall back to ``DebugValue``.
    """
    match obj:
        case bool():
            return BoolValue(obj)
        case int() if I64_MIN <= obj <= I64_MAX:
            return I64Value(obj)
        case int() if 0 <= obj <= U64_MAX:
            return U64Value(obj)
        case float():
            return F64Value(obj)
        case str():
            return StrValue(obj)
        case BaseException():
            return ErrorValue(obj)
        case _:
            return DebugValue(obj)


__all__ = [
    "BoolValue",
    "DebugValue",
    "ErrorValue",
    "F64Value",
    "FieldValue",
    "I64Value",
    "I64_MAX",
    "I64_MIN",
    "StrValue",
    "U64Value",
    "U64_MAX",
    "field_value",
    "render_value",
]
