"""
Event bridge - structured events in, rendered records out.

The translation is split the way the rest of the package splits pure work
from side effects:

    - ``translate_event`` is pure. It maps the level, applies the verbosity
      filter, renders the fields and returns a ``Translation`` describing
      what should happen.
    - ``EventBridge.on_event`` performs it: one ``sink.log`` call for a
      ``Forwarded`` translation, nothing for a ``Suppressed`` one.

Dropping verbose events and collapsing repeated field names are policy,
not errors; neither is reported to the caller.

Example:
    >>> sink = MemorySink()
    >>> bridge = EventBridge(sink, BridgeConfig(filter_verbose=True))
    >>> bridge.on_event(Event.build(EventLevel.INFO, "svc", [("n", I64Value(1))]))
    >>> sink.records[0].message
    ' n: 1'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from logbridge.config import BridgeConfig
from logbridge.event import Event
from logbridge.exhaustive import assert_never
from logbridge.levels import SinkLevel, is_verbose, to_sink_level
from logbridge.record import RenderedRecord
from logbridge.sinks import LoggingSink, LogSink
from logbridge.visitor import make_visitor


_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Forwarded:
    """The event produced a record for the sink."""

    record: RenderedRecord
    kind: Literal["Forwarded"] = "Forwarded"


@dataclass(frozen=True)
class Suppressed:
    """The event was dropped by the verbosity filter before rendering."""

    level: SinkLevel
    kind: Literal["Suppressed"] = "Suppressed"


Translation = Forwarded | Suppressed


def translate_event(event: Event, config: BridgeConfig) -> Translation:
    """Translate one event into at most one record. Pure; never raises."""
    level = to_sink_level(event.metadata.level)
    if config.filter_verbose and is_verbose(level):
        return Suppressed(level=level)

    visitor = make_visitor(config)
    event.record(visitor)

    metadata = event.metadata
    return Forwarded(
        record=RenderedRecord(
            message=visitor.render(),
            level=level,
            target=metadata.target,
            file=metadata.file,
            line=metadata.line,
            module_path=metadata.module_path,
        )
    )


class EventBridge:
    """Consumer of structured events that forwards records to a sink.

    Holds only its sink and config, so one instance may be shared by every
    thread that dispatches events.
    """

    def __init__(self, sink: LogSink, config: BridgeConfig | None = None) -> None:
        """Initialize the bridge.

        Args:
            sink: Destination for rendered records.
            config: Translation policy; defaults to ``BridgeConfig()``.
        """
        self._sink = sink
        self._config = config if config is not None else BridgeConfig()

    @property
    def sink(self) -> LogSink:
        return self._sink

    @property
    def config(self) -> BridgeConfig:
        return self._config

    def on_event(self, event: Event, ctx: object | None = None) -> None:
        """Handle one dispatched event. ``ctx`` is the dispatcher's context, unused."""
        match translate_event(event, self._config):
            case Forwarded(record=record):
                self._sink.log(record)
            case Suppressed():
                pass
            case _ as unreachable:
                assert_never(unreachable)


def bridge_layer(
    sink: LogSink | None = None,
    config: BridgeConfig | None = None,
) -> EventBridge:
    """Build a bridge, wiring stdlib ``logging`` when no sink is given.

    Example:
        >>> bridge = bridge_layer(config=BridgeConfig(filter_verbose=True))
        >>> structlog.configure(processors=[StructlogBridge(bridge)])
    """
    resolved_sink: LogSink = sink if sink is not None else LoggingSink()
    resolved_config = config if config is not None else BridgeConfig()
    _logger.debug(
        "bridge layer: sink=%s filter_verbose=%s dedup=%s strategy=%s",
        type(resolved_sink).__name__,
        resolved_config.filter_verbose,
        resolved_config.dedup,
        resolved_config.strategy,
    )
    return EventBridge(resolved_sink, resolved_config)


__all__ = [
    "EventBridge",
    "Forwarded",
    "Suppressed",
    "Translation",
    "bridge_layer",
    "translate_event",
]
