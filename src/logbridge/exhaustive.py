"""Exhaustiveness helper for ``match`` over closed unions and enums."""

from __future__ import annotations

from typing import Never


def assert_never(value: Never) -> Never:
    """Type-safe exhaustiveness check for pattern matching.

    Use this in the default case of match statements to ensure
    all variants are handled. If a new variant is added but not
    handled, mypy will report an error.

    Example:
        >>> match value:
        ...     case F64Value(): ...
        ...     case I64Value(): ...
        ...     case _:
        ...         assert_never(value)  # mypy error if variants missing
    """
    raise AssertionError(f"Unhandled case: {value!r}")
