"""The composed output unit handed to a logging sink."""

from __future__ import annotations

from dataclasses import dataclass

from logbridge.levels import SinkLevel


@dataclass(frozen=True)
class RenderedRecord:
    """One rendered log record.

    Attributes:
        message: Fields rendered as concatenated ``" name: value"`` segments.
        level: Sink-side severity.
        target: Event target, passed through unchanged.
        file: Source file, passed through unchanged.
        line: Source line, passed through unchanged.
        module_path: Emitting module, passed through unchanged.
    """

    message: str
    level: SinkLevel
    target: str
    file: str | None = None
    line: int | None = None
    module_path: str | None = None


__all__ = ["RenderedRecord"]
