"""
Error ADTs for logbridge.

The translation core has no recoverable errors: level mapping and field
rendering are total over closed sets. These types cover only the parsing
edges, where untrusted names and mappings enter the package.

Type Safety:
    - All error types are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
    - ``BridgeError`` is the closed set of error variants
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import ValidationError


@dataclass(frozen=True)
class UnknownLevel:
    """A level name did not match any known severity.

    Attributes:
        name: The rejected level name, as received.
        kind: Discriminator for pattern matching. Always "UnknownLevel".
    """

    name: str
    kind: Literal["UnknownLevel"] = "UnknownLevel"


@dataclass(frozen=True)
class InvalidConfig:
    """Pydantic validation failed when building a bridge configuration."""

    error: ValidationError
    kind: Literal["InvalidConfig"] = "InvalidConfig"


BridgeError = UnknownLevel | InvalidConfig


__all__ = ["BridgeError", "InvalidConfig", "UnknownLevel"]
