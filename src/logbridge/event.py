"""
Structured events - the input side of the bridge.

An ``Event`` is one leveled emission: ``Metadata`` (level, target, source
location) plus fields in emission order. Events are built and consumed
synchronously inside a single dispatch call; the bridge never stores them.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from logbridge.fields import FieldValue
from logbridge.levels import EventLevel


@dataclass(frozen=True)
class Metadata:
    """Static description of where and how an event was emitted.

    Attributes:
        level: Severity of the event.
        target: Logical origin, usually a dotted logger or module name.
        file: Source file path, when known.
        line: Source line number, when known. Never negative.
        module_path: Module that emitted the event, when known.
    """

    level: EventLevel
    target: str
    file: str | None = None
    line: int | None = None
    module_path: str | None = None

    def __post_init__(self) -> None:
        if self.line is not None and self.line < 0:
            raise ValueError(f"line must be non-negative, got {self.line}")


@dataclass(frozen=True)
class Field:
    name: str
    value: FieldValue


class Visit(Protocol):
    """Receives an event's fields, one call per field, in emission order."""

    def record(self, field: Field) -> None:
        ...


@dataclass(frozen=True)
class Event:
    """One structured log emission."""

    metadata: Metadata
    fields: tuple[Field, ...] = ()

    @classmethod
    def build(
        cls,
        level: EventLevel,
        target: str,
        fields: Iterable[tuple[str, FieldValue]] = (),
        *,
        file: str | None = None,
        line: int | None = None,
        module_path: str | None = None,
    ) -> Event:
        """Build an event from ``(name, value)`` pairs.

        Example:
            >>> Event.build(
            ...     EventLevel.INFO,
            ...     "svc.auth",
            ...     [("user_id", U64Value(42)), ("retries", I64Value(3))],
            ...     file="auth.rs",
            ...     line=88,
            ... )
        """
        return cls(
            metadata=Metadata(
                level=level,
                target=target,
                file=file,
                line=line,
                module_path=module_path,
            ),
            fields=tuple(Field(name, value) for name, value in fields),
        )

    @property
    def level(self) -> EventLevel:
        return self.metadata.level

    def record(self, visitor: Visit) -> None:
        """Deliver every field to ``visitor`` exactly once, in emission order."""
        for field in self.fields:
            visitor.record(field)


__all__ = ["Event", "Field", "Metadata", "Visit"]
