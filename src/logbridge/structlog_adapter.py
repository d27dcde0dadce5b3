"""
structlog integration - feed structlog events through the bridge.

``StructlogBridge`` is a structlog processor. Place it last (or after the
processors whose output it should see) in the processor chain::

    bridge = bridge_layer(config=BridgeConfig(filter_verbose=True))
    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.PATHNAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.MODULE,
                }
            ),
            StructlogBridge(bridge),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

The ``event`` key becomes a field named ``message`` delivered first; the
remaining keys follow in dict order. Keys that describe the emission rather
than its content (level, logger name, call site) become event metadata. An
``exc_info`` entry (set by ``log.exception(...)``) is resolved to the
exception itself and delivered last as an ``error`` field.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.typing import EventDict, WrappedLogger

from logbridge.bridge import EventBridge
from logbridge.event import Event
from logbridge.fields import ErrorValue, FieldValue, field_value
from logbridge.levels import EventLevel, parse_event_level
from logbridge.result import Failure, Success


_logger = logging.getLogger(__name__)

MESSAGE_FIELD = "message"
ERROR_FIELD = "error"
METADATA_KEYS = frozenset(
    {"level", "logger", "pathname", "filename", "lineno", "module", "exc_info"}
)


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) and value else None


def _resolve_exception(exc_info: object) -> BaseException | None:
    """Resolve an ``exc_info`` value the way structlog's exception processors do.

    ``True`` means the exception currently being handled, an exception
    instance is used as-is, and a ``sys.exc_info()`` tuple supplies its
    second element.
    """
    match exc_info:
        case BaseException():
            return exc_info
        case (_, BaseException() as error, _):
            return error
        case True:
            return sys.exc_info()[1]
        case _:
            return None


class StructlogBridge:
    """structlog processor forwarding each event dict to an ``EventBridge``.

    Args:
        bridge: Bridge that receives the translated events.
        drop: Raise ``structlog.DropEvent`` after forwarding so no later
            processor or logger renders the event a second time.
        default_target: Target used when neither the event dict nor the
            wrapped logger carries a name.
    """

    def __init__(
        self,
        bridge: EventBridge,
        *,
        drop: bool = True,
        default_target: str = "structlog",
    ) -> None:
        self._bridge = bridge
        self._drop = drop
        self._default_target = default_target

    def __call__(
        self,
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        self._bridge.on_event(self.to_event(logger, method_name, event_dict))
        if self._drop:
            raise structlog.DropEvent
        return event_dict

    def to_event(
        self,
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> Event:
        """Build an ``Event`` from one structlog event dict. Does not mutate it."""
        raw_level = event_dict.get("level")
        level_name = raw_level if isinstance(raw_level, str) else method_name
        match parse_event_level(level_name):
            case Success(parsed):
                level = parsed
            case Failure(error):
                _logger.debug("unknown structlog level %r, using INFO", error.name)
                level = EventLevel.INFO

        target = (
            _optional_str(event_dict.get("logger"))
            or _optional_str(getattr(logger, "name", None))
            or self._default_target
        )
        lineno = event_dict.get("lineno")

        fields: list[tuple[str, FieldValue]] = []
        if "event" in event_dict:
            fields.append((MESSAGE_FIELD, field_value(event_dict["event"])))
        fields.extend(
            (key, field_value(value))
            for key, value in event_dict.items()
            if key != "event" and key not in METADATA_KEYS
        )
        exception = _resolve_exception(event_dict.get("exc_info"))
        if exception is not None:
            fields.append((ERROR_FIELD, ErrorValue(exception)))

        return Event.build(
            level,
            target,
            fields,
            file=_optional_str(event_dict.get("pathname"))
            or _optional_str(event_dict.get("filename")),
            line=lineno if isinstance(lineno, int) and lineno >= 0 else None,
            module_path=_optional_str(event_dict.get("module")),
        )


__all__ = ["ERROR_FIELD", "MESSAGE_FIELD", "METADATA_KEYS", "StructlogBridge"]
