"""
logbridge - forward structured events to a text logging sink.

A structured event (level, target, source location, typed fields) is
translated into one rendered record: the fields become a single
``" name: value"`` message, the level is mapped onto the sink's levels, and
the record is handed to an injected sink. Verbose events can be dropped up
front, and repeated field names collapse to a single segment.

Example:
    >>> from logbridge import (
    ...     BridgeConfig,
    ...     Event,
    ...     EventBridge,
    ...     EventLevel,
    ...     I64Value,
    ...     MemorySink,
    ...     U64Value,
    ... )
    >>>
    >>> sink = MemorySink()
    >>> bridge = EventBridge(sink, BridgeConfig())
    >>> bridge.on_event(
    ...     Event.build(
    ...         EventLevel.INFO,
    ...         "svc.auth",
    ...         [("user_id", U64Value(42)), ("retries", I64Value(3))],
    ...         file="auth.rs",
    ...         line=88,
    ...     )
    ... )
    >>> sink.records[0].message
    ' user_id: 42 retries: 3'
"""

from __future__ import annotations

from logbridge.bridge import (
    EventBridge,
    Forwarded,
    Suppressed,
    Translation,
    bridge_layer,
    translate_event,
)
from logbridge.config import BridgeConfig, DedupPolicy, VisitorStrategy, build_bridge_config
from logbridge.errors import BridgeError, InvalidConfig, UnknownLevel
from logbridge.event import Event, Field, Metadata, Visit
from logbridge.fields import (
    BoolValue,
    DebugValue,
    ErrorValue,
    F64Value,
    FieldValue,
    I64Value,
    StrValue,
    U64Value,
    field_value,
    render_value,
)
from logbridge.levels import (
    TRACE,
    EventLevel,
    SinkLevel,
    is_verbose,
    parse_event_level,
    to_event_level,
    to_logging_level,
    to_sink_level,
)
from logbridge.record import RenderedRecord
from logbridge.result import Failure, Result, Success
from logbridge.sinks import LoggingSink, LogSink, MemorySink
from logbridge.structlog_adapter import StructlogBridge
from logbridge.visitor import BufferingVisitor, FieldVisitor, WriteThroughVisitor, make_visitor


__all__ = [
    # Bridge
    "EventBridge",
    "Forwarded",
    "Suppressed",
    "Translation",
    "bridge_layer",
    "translate_event",
    # Configuration
    "BridgeConfig",
    "DedupPolicy",
    "VisitorStrategy",
    "build_bridge_config",
    # Errors
    "BridgeError",
    "InvalidConfig",
    "UnknownLevel",
    # Events
    "Event",
    "Field",
    "Metadata",
    "Visit",
    # Field values
    "BoolValue",
    "DebugValue",
    "ErrorValue",
    "F64Value",
    "FieldValue",
    "I64Value",
    "StrValue",
    "U64Value",
    "field_value",
    "render_value",
    # Levels
    "TRACE",
    "EventLevel",
    "SinkLevel",
    "is_verbose",
    "parse_event_level",
    "to_event_level",
    "to_logging_level",
    "to_sink_level",
    # Records and sinks
    "RenderedRecord",
    "LogSink",
    "LoggingSink",
    "MemorySink",
    # Result
    "Failure",
    "Result",
    "Success",
    # Integrations
    "StructlogBridge",
    # Visitors
    "BufferingVisitor",
    "FieldVisitor",
    "WriteThroughVisitor",
    "make_visitor",
]
