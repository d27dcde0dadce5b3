"""
Logging sinks - where rendered records go.

The bridge depends only on the ``LogSink`` capability and receives it through
its constructor. Two implementations ship with the package:

    - ``LoggingSink`` hands records to stdlib ``logging``, keeping the
      event's file, line and module as the record's source location.
    - ``MemorySink`` keeps records in a list; used by tests and by embedders
      that render records themselves.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from logbridge.levels import SinkLevel, to_logging_level
from logbridge.record import RenderedRecord


class LogSink(Protocol):
    """Capability the bridge forwards records to."""

    def log(self, record: RenderedRecord) -> None:
        ...


class LoggingSink:
    """Sink that forwards records to stdlib ``logging``.

    The record's target names the logger, so dotted targets slot into the
    usual logger hierarchy and its handler/level configuration.
    """

    def __init__(self, default_logger_name: str = "logbridge") -> None:
        """Initialize the sink.

        Args:
            default_logger_name: Logger used when a record's target is empty.
        """
        self._default_logger_name = default_logger_name

    def log(self, record: RenderedRecord) -> None:
        logger = logging.getLogger(record.target or self._default_logger_name)
        levelno = to_logging_level(record.level)
        if not logger.isEnabledFor(levelno):
            return

        # No %-args: the message is already rendered and may contain '%'.
        log_record = logger.makeRecord(
            logger.name,
            levelno,
            record.file or "(unknown file)",
            record.line or 0,
            record.message,
            (),
            None,
            extra={"module_path": record.module_path},
        )
        logger.handle(log_record)


class MemorySink:
    """Thread-safe sink that records everything it receives.

    Attributes:
        records: Snapshot of the records received so far, in arrival order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[RenderedRecord] = []

    def log(self, record: RenderedRecord) -> None:
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> list[RenderedRecord]:
        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def assert_levels(self, expected: list[SinkLevel]) -> None:
        """Assert that received record levels match ``expected`` in order.

        Raises:
            AssertionError: If the recorded levels differ.
        """
        actual = [r.level for r in self.records]
        if actual != expected:
            raise AssertionError(
                f"Record levels mismatch.\nExpected: {expected}\nActual: {actual}"
            )


__all__ = ["LogSink", "LoggingSink", "MemorySink"]
