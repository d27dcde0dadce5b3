"""
Result type for the parsing edges of logbridge.

Level names and configuration mappings arrive from untrusted sources
(structlog method names, environment-derived dicts). Parsing them returns a
``Result`` instead of raising, so callers choose between a fallback and a
hard failure with an explicit ``match``.

Usage:
    >>> match parse_event_level("warning"):
    ...     case Success(level):
    ...         print(level)
    ...     case Failure(error):
    ...         print(error.name)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value of type T."""

    value: T

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error of type E."""

    error: E

    def unwrap_or(self, default: T) -> T:
        return default


Result = Success[T] | Failure[E]


__all__ = ["Failure", "Result", "Success"]
