"""
Bridge configuration.

``BridgeConfig`` collects the three policy choices of the translation:
whether verbose events are dropped up front, which occurrence of a repeated
field name survives, and whether fields are buffered or written straight
into the message.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from logbridge.errors import InvalidConfig
from logbridge.result import Failure, Result, Success


DedupPolicy = Literal["first", "last"]
VisitorStrategy = Literal["buffering", "write_through"]


class BridgeConfig(BaseModel):
    """Policy for turning events into records.

    Attributes
    ----------
    filter_verbose
        Drop DEBUG and TRACE events before any field is rendered.
    dedup
        ``"first"`` keeps the first value recorded under a name, ``"last"``
        keeps the last one (at the position of the first).
    strategy
        ``"buffering"`` collects rendered fields and joins them at the end;
        ``"write_through"`` appends each segment to the message as it arrives.

    Raises
    ------
    ValueError
        If ``write_through`` is combined with ``dedup="last"``.
    """

    filter_verbose: bool = Field(
        default=False, description="Drop DEBUG/TRACE events before rendering"
    )
    dedup: DedupPolicy = "last"
    strategy: VisitorStrategy = "buffering"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _validate(self) -> BridgeConfig:
        """A segment already written cannot be overwritten by a later value."""
        if self.strategy == "write_through" and self.dedup == "last":
            raise ValueError("`write_through` strategy only supports dedup='first'.")
        return self


def build_bridge_config(raw: Mapping[str, object]) -> Result[BridgeConfig, InvalidConfig]:
    """Validate an untrusted mapping into a ``BridgeConfig``."""
    try:
        return Success(BridgeConfig.model_validate(dict(raw)))
    except ValidationError as exc:
        return Failure(InvalidConfig(error=exc))


__all__ = ["BridgeConfig", "DedupPolicy", "VisitorStrategy", "build_bridge_config"]
