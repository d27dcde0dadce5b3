"""
Field visitors - turn one event's fields into the text of one log message.

Two strategies share the same contract and output format
(``" name: value"`` per retained field, in accumulation order):

    - ``BufferingVisitor`` collects rendered values keyed by name and joins
      them on ``render()``. Supports both dedup policies.
    - ``WriteThroughVisitor`` appends each segment to the message buffer as
      soon as the field arrives, with no per-field intermediate storage
      beyond the set of names already written. First-wins only.

A visitor is built per event and discarded afterwards; none of its state is
shared between events or threads.
"""

from __future__ import annotations

import io
from typing import Protocol

from logbridge.config import BridgeConfig, DedupPolicy
from logbridge.event import Field, Visit
from logbridge.exhaustive import assert_never
from logbridge.fields import (
    BoolValue,
    DebugValue,
    ErrorValue,
    F64Value,
    I64Value,
    StrValue,
    U64Value,
    render_value,
)


class FieldVisitor(Protocol):
    """A ``Visit`` implementation that can render what it accumulated."""

    def record(self, field: Field) -> None:
        ...

    def render(self) -> str:
        ...


class _KindRecorder:
    """Per-kind entry points, each wrapping its value and calling ``record``.

    Mixed into classes that satisfy ``Visit``; the ``self`` annotations make
    that requirement visible to the type checker.
    """

    def record_f64(self: Visit, name: str, value: float) -> None:
        self.record(Field(name, F64Value(value)))

    def record_i64(self: Visit, name: str, value: int) -> None:
        self.record(Field(name, I64Value(value)))

    def record_u64(self: Visit, name: str, value: int) -> None:
        self.record(Field(name, U64Value(value)))

    def record_bool(self: Visit, name: str, value: bool) -> None:
        self.record(Field(name, BoolValue(value)))

    def record_str(self: Visit, name: str, value: str) -> None:
        self.record(Field(name, StrValue(value)))

    def record_error(self: Visit, name: str, value: BaseException) -> None:
        self.record(Field(name, ErrorValue(value)))

    def record_debug(self: Visit, name: str, value: object) -> None:
        self.record(Field(name, DebugValue(value)))


class BufferingVisitor(_KindRecorder):
    """Collect-then-render visitor.

    With ``dedup="last"`` a repeated name overwrites the stored text but keeps
    its original position; with ``dedup="first"`` repeats are ignored.
    """

    def __init__(self, dedup: DedupPolicy = "last") -> None:
        self._dedup = dedup
        self._rendered: dict[str, str] = {}

    def record(self, field: Field) -> None:
        if self._dedup == "first" and field.name in self._rendered:
            return
        self._rendered[field.name] = render_value(field.value)

    def render(self) -> str:
        return "".join(f" {name}: {text}" for name, text in self._rendered.items())


class WriteThroughVisitor(_KindRecorder):
    """Direct-to-output visitor; the first value recorded under a name wins."""

    def __init__(self) -> None:
        self._out = io.StringIO()
        self._seen: set[str] = set()

    def record(self, field: Field) -> None:
        if field.name in self._seen:
            return
        self._seen.add(field.name)
        self._out.write(" ")
        self._out.write(field.name)
        self._out.write(": ")
        self._out.write(render_value(field.value))

    def render(self) -> str:
        return self._out.getvalue()


def make_visitor(config: BridgeConfig) -> BufferingVisitor | WriteThroughVisitor:
    """Build a fresh visitor for one event according to ``config``."""
    match config.strategy:
        case "buffering":
            return BufferingVisitor(dedup=config.dedup)
        case "write_through":
            return WriteThroughVisitor()
        case _ as unreachable:
            assert_never(unreachable)


__all__ = ["BufferingVisitor", "FieldVisitor", "WriteThroughVisitor", "make_visitor"]
