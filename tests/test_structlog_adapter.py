"""
Tests for the structlog processor integration.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest
import structlog

from logbridge import (
    BridgeConfig,
    EventBridge,
    ErrorValue,
    EventLevel,
    I64Value,
    MemorySink,
    SinkLevel,
    StrValue,
    StructlogBridge,
    bridge_layer,
)


class _NamedLogger:
    name = "svc.named"


class TestToEvent:
    """Tests for building events from event dicts."""

    def test_message_first_then_fields_in_order(self, memory_sink: MemorySink) -> None:
        """The event text becomes the first field, other keys follow in order."""
        processor = StructlogBridge(EventBridge(memory_sink))
        event = processor.to_event(
            None, "info", {"user_id": 42, "event": "login", "retries": 3}
        )
        assert [f.name for f in event.fields] == ["message", "user_id", "retries"]
        assert event.fields[0].value == StrValue("login")
        assert event.fields[1].value == I64Value(42)

    def test_metadata_keys_become_metadata(self, memory_sink: MemorySink) -> None:
        """Level, logger name and call site are not rendered as fields."""
        processor = StructlogBridge(EventBridge(memory_sink))
        event = processor.to_event(
            None,
            "info",
            {
                "event": "saved",
                "level": "warning",
                "logger": "svc.store",
                "pathname": "/src/store.py",
                "lineno": 12,
                "module": "store",
                "rows": 3,
            },
        )
        assert event.metadata.level is EventLevel.WARN
        assert event.metadata.target == "svc.store"
        assert event.metadata.file == "/src/store.py"
        assert event.metadata.line == 12
        assert event.metadata.module_path == "store"
        assert [f.name for f in event.fields] == ["message", "rows"]

    def test_method_name_when_no_level_key(self, memory_sink: MemorySink) -> None:
        """Without a level key the method name decides the level."""
        processor = StructlogBridge(EventBridge(memory_sink))
        assert processor.to_event(None, "debug", {"event": "x"}).level is EventLevel.DEBUG
        assert processor.to_event(None, "critical", {"event": "x"}).level is EventLevel.ERROR

    def test_unknown_level_falls_back_to_info(self, memory_sink: MemorySink) -> None:
        """Unrecognised method names are treated as INFO."""
        processor = StructlogBridge(EventBridge(memory_sink))
        assert processor.to_event(None, "audit", {"event": "x"}).level is EventLevel.INFO

    def test_target_resolution(self, memory_sink: MemorySink) -> None:
        """Target comes from the event dict, then the logger name, then the default."""
        processor = StructlogBridge(EventBridge(memory_sink), default_target="fallback")
        assert processor.to_event(_NamedLogger(), "info", {"logger": "a.b"}).metadata.target == "a.b"
        assert processor.to_event(_NamedLogger(), "info", {}).metadata.target == "svc.named"
        assert processor.to_event(object(), "info", {}).metadata.target == "fallback"

    def test_filename_when_no_pathname(self, memory_sink: MemorySink) -> None:
        """filename is used as the file when pathname is absent."""
        processor = StructlogBridge(EventBridge(memory_sink))
        event = processor.to_event(None, "info", {"filename": "store.py", "lineno": "12"})
        assert event.metadata.file == "store.py"
        assert event.metadata.line is None

    def test_does_not_mutate_event_dict(self, memory_sink: MemorySink) -> None:
        """Building the event leaves the event dict untouched."""
        event_dict: dict[str, Any] = {"event": "x", "level": "info", "n": 1}
        StructlogBridge(EventBridge(memory_sink)).to_event(None, "info", event_dict)
        assert event_dict == {"event": "x", "level": "info", "n": 1}

    def test_exc_info_resolves_to_error_field(self, memory_sink: MemorySink) -> None:
        """An exception instance or exc_info tuple becomes a trailing error field."""
        processor = StructlogBridge(EventBridge(memory_sink))
        cause = ConnectionError("reset by peer")
        for exc_info in (cause, (ConnectionError, cause, None)):
            event = processor.to_event(
                None, "error", {"event": "lost", "exc_info": exc_info, "peer": "db"}
            )
            assert [f.name for f in event.fields] == ["message", "peer", "error"]
            assert event.fields[-1].value == ErrorValue(cause)

    def test_exc_info_true_uses_handled_exception(self, memory_sink: MemorySink) -> None:
        """exc_info=True picks up the exception currently being handled."""
        processor = StructlogBridge(EventBridge(memory_sink))
        try:
            raise KeyError("session")
        except KeyError as exc:
            event = processor.to_event(None, "error", {"event": "lost", "exc_info": True})
            assert event.fields[-1].value == ErrorValue(exc)

    def test_empty_exc_info_adds_nothing(self, memory_sink: MemorySink) -> None:
        """A falsy exc_info, or True outside an except block, adds no field."""
        processor = StructlogBridge(EventBridge(memory_sink))
        for exc_info in (False, None, True, (None, None, None)):
            event = processor.to_event(None, "error", {"event": "lost", "exc_info": exc_info})
            assert [f.name for f in event.fields] == ["message"]


class TestProcessor:
    """Tests for the processor call itself."""

    def test_drops_event_after_forwarding(self, memory_sink: MemorySink) -> None:
        """With drop=True the event is forwarded, then DropEvent is raised."""
        processor = StructlogBridge(EventBridge(memory_sink))
        with pytest.raises(structlog.DropEvent):
            processor(None, "info", {"event": "hello"})
        assert memory_sink.records[0].message == " message: hello"

    def test_passes_event_dict_through(self, memory_sink: MemorySink) -> None:
        """With drop=False the event dict is returned unchanged."""
        processor = StructlogBridge(EventBridge(memory_sink), drop=False)
        event_dict = {"event": "hello"}
        assert processor(None, "info", event_dict) is event_dict
        assert len(memory_sink.records) == 1


class TestStructlogPipeline:
    """End-to-end tests through a configured structlog pipeline."""

    def test_bound_logger_to_record(self, memory_sink: MemorySink) -> None:
        """A structlog call produces one rendered record."""
        structlog.configure(
            processors=[
                structlog.processors.add_log_level,
                StructlogBridge(EventBridge(memory_sink)),
            ],
            logger_factory=structlog.ReturnLoggerFactory(),
        )
        log = structlog.get_logger().bind(logger="svc.auth")
        log.info("login", user_id=42, retries=3)

        (record,) = memory_sink.records
        assert record.message == " message: login user_id: 42 retries: 3"
        assert record.level is SinkLevel.INFO
        assert record.target == "svc.auth"

    def test_verbose_filtering(self, memory_sink: MemorySink) -> None:
        """filter_verbose drops structlog debug calls."""
        structlog.configure(
            processors=[
                structlog.processors.add_log_level,
                StructlogBridge(EventBridge(memory_sink, BridgeConfig(filter_verbose=True))),
            ],
            logger_factory=structlog.ReturnLoggerFactory(),
        )
        log = structlog.get_logger()
        log.debug("noisy", n=1)
        log.warning("careful", n=2)
        memory_sink.assert_levels([SinkLevel.WARN])

    def test_callsite_parameters(self, memory_sink: MemorySink) -> None:
        """CallsiteParameterAdder output becomes the record's source location."""
        structlog.configure(
            processors=[
                structlog.processors.add_log_level,
                structlog.processors.CallsiteParameterAdder(
                    {
                        structlog.processors.CallsiteParameter.PATHNAME,
                        structlog.processors.CallsiteParameter.LINENO,
                        structlog.processors.CallsiteParameter.MODULE,
                    }
                ),
                StructlogBridge(EventBridge(memory_sink)),
            ],
            logger_factory=structlog.ReturnLoggerFactory(),
        )
        structlog.get_logger().error("boom")

        (record,) = memory_sink.records
        assert record.file is not None and record.file.endswith("test_structlog_adapter.py")
        assert isinstance(record.line, int) and record.line > 0
        assert record.module_path == "test_structlog_adapter"
        assert record.message == " message: boom"

    def test_into_stdlib_logging(self, captured_logger) -> None:
        """structlog -> bridge -> stdlib logging, with the default sink."""
        _, handler = captured_logger
        structlog.configure(
            processors=[
                structlog.processors.add_log_level,
                StructlogBridge(bridge_layer()),
            ],
            logger_factory=structlog.ReturnLoggerFactory(),
        )
        structlog.get_logger().bind(logger="bridge.test").warning("disk", free_pct=3.5)

        (log_record,) = handler.records
        assert log_record.levelno == logging.WARNING
        assert log_record.getMessage() == " message: disk free_pct: 3.5"

    def test_exception_text_reaches_record(self, memory_sink: MemorySink) -> None:
        """log.exception() inside an except block carries the exception message."""
        structlog.configure(
            processors=[
                structlog.processors.add_log_level,
                StructlogBridge(EventBridge(memory_sink)),
            ],
            logger_factory=structlog.ReturnLoggerFactory(),
        )
        log = structlog.get_logger().bind(logger="svc.auth")
        try:
            raise TimeoutError("upstream did not answer")
        except TimeoutError:
            log.exception("login failed", attempt=2)

        (record,) = memory_sink.records
        assert record.level is SinkLevel.ERROR
        assert record.message == " message: login failed attempt: 2 error: upstream did not answer"
