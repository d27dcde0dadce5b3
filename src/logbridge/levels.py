"""
Severity levels on both sides of the bridge.

``EventLevel`` is the level carried by a structured event; ``SinkLevel`` is
the level understood by the logging sink. Both are five-valued and ordered by
verbosity (``ERROR`` least verbose, ``TRACE`` most). They are joined by a
fixed bijection; there is no lossy or many-to-one mapping between them.

Stdlib ``logging`` has no trace level, so ``TRACE`` (5) is registered at
import time and used as the numeric home of ``SinkLevel.TRACE``.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from logbridge.errors import UnknownLevel
from logbridge.exhaustive import assert_never
from logbridge.result import Failure, Result, Success


TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class EventLevel(IntEnum):
    """Level of a structured event."""

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


class SinkLevel(IntEnum):
    """Level of a record handed to the logging sink."""

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


def to_sink_level(level: EventLevel) -> SinkLevel:
    """Map an event level to its sink counterpart. Total over ``EventLevel``."""
    match level:
        case EventLevel.ERROR:
            return SinkLevel.ERROR
        case EventLevel.WARN:
            return SinkLevel.WARN
        case EventLevel.INFO:
            return SinkLevel.INFO
        case EventLevel.DEBUG:
            return SinkLevel.DEBUG
        case EventLevel.TRACE:
            return SinkLevel.TRACE
        case _:
            assert_never(level)


def to_event_level(level: SinkLevel) -> EventLevel:
    """Inverse of :func:`to_sink_level`."""
    match level:
        case SinkLevel.ERROR:
            return EventLevel.ERROR
        case SinkLevel.WARN:
            return EventLevel.WARN
        case SinkLevel.INFO:
            return EventLevel.INFO
        case SinkLevel.DEBUG:
            return EventLevel.DEBUG
        case SinkLevel.TRACE:
            return EventLevel.TRACE
        case _:
            assert_never(level)


def is_verbose(level: SinkLevel) -> bool:
    return level in (SinkLevel.DEBUG, SinkLevel.TRACE)


def to_logging_level(level: SinkLevel) -> int:
    """Return the stdlib ``logging`` level number for a sink level."""
    match level:
        case SinkLevel.ERROR:
            return logging.ERROR
        case SinkLevel.WARN:
            return logging.WARNING
        case SinkLevel.INFO:
            return logging.INFO
        case SinkLevel.DEBUG:
            return logging.DEBUG
        case SinkLevel.TRACE:
            return TRACE
        case _:
            assert_never(level)


_LEVEL_ALIASES: dict[str, EventLevel] = {
    "error": EventLevel.ERROR,
    "critical": EventLevel.ERROR,
    "fatal": EventLevel.ERROR,
    "exception": EventLevel.ERROR,
    "warn": EventLevel.WARN,
    "warning": EventLevel.WARN,
    "info": EventLevel.INFO,
    "debug": EventLevel.DEBUG,
    "trace": EventLevel.TRACE,
    "notset": EventLevel.TRACE,
}


def parse_event_level(name: str) -> Result[EventLevel, UnknownLevel]:
    """Parse a level name, accepting stdlib and structlog spellings.

    Args:
        name: Level name in any case, e.g. ``"INFO"``, ``"warning"``,
            ``"exception"``.

    Returns:
        Success with the matching ``EventLevel``, or Failure(UnknownLevel).
    """
    level = _LEVEL_ALIASES.get(name.strip().lower())
    if level is None:
        return Failure(UnknownLevel(name=name))
    return Success(level)


__all__ = [
    "TRACE",
    "EventLevel",
    "SinkLevel",
    "is_verbose",
    "parse_event_level",
    "to_event_level",
    "to_logging_level",
    "to_sink_level",
]
