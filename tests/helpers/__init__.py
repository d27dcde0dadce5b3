# tests/helpers/__init__.py
"""Shared test utilities for the logbridge test suite.

Usage:
    >>> from tests.helpers import expect_success, make_event
    >>>
    >>> level = expect_success(parse_event_level("info"))
    >>> event = make_event(EventLevel.DEBUG, [("n", I64Value(1))])
"""

from __future__ import annotations

from tests.helpers.factories import (
    DEFAULT_FILE,
    DEFAULT_LINE,
    DEFAULT_TARGET,
    make_event,
    make_login_event,
)
from tests.helpers.result_utils import expect_failure, expect_success

__all__ = [
    "DEFAULT_FILE",
    "DEFAULT_LINE",
    "DEFAULT_TARGET",
    "expect_failure",
    "expect_success",
    "make_event",
    "make_login_event",
]
