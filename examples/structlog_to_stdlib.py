#!/usr/bin/env python3
"""
structlog to stdlib logging example.

Demonstrates:
- Wiring StructlogBridge into a structlog processor chain
- Dropping DEBUG/TRACE events before their fields are rendered
- Call-site metadata arriving as the LogRecord's pathname and line number
"""

from __future__ import annotations

import logging

import structlog

from logbridge import BridgeConfig, StructlogBridge, bridge_layer


def main() -> None:
    """Emit a few structlog events and print them through stdlib logging."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(levelname)-5s %(name)s %(filename)s:%(lineno)d |%(message)s",
    )

    bridge = bridge_layer(config=BridgeConfig(filter_verbose=True))
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
            StructlogBridge(bridge),
        ],
        logger_factory=structlog.ReturnLoggerFactory(),
    )

    log = structlog.get_logger().bind(logger="svc.auth")
    log.info("login", user_id=42, retries=3)
    log.debug("token refreshed", ttl=3600)  # dropped by filter_verbose
    log.warning("slow login", elapsed_ms=812.5, user_id=42)
    try:
        raise TimeoutError("upstream did not answer")
    except TimeoutError:
        log.exception("login failed", code=1, code_detail={"retryable": True})


if __name__ == "__main__":
    main()
