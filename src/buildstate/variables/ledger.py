"""Bonus and history ledger records.

Both ledgers are append-only and keyed by variable name. The store records
bonus entries as they come in; it never stacks or totals them.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


def _now() -> datetime:
    return datetime.now(timezone.utc)


class BonusEntry(BaseModel):
    """A modifier contribution to a variable, with its provenance."""

    model_config = ConfigDict(frozen=True)

    value: StrictInt | StrictFloat | None = Field(
        default=None, description="Bonus amount, if numeric"
    )
    type: str | None = Field(
        default=None, description="Bonus type (status, item, circumstance); None when untyped"
    )
    text: str = Field(default="", description="Free-text description of the bonus")
    source: str = Field(..., description="What granted the bonus")
    timestamp: datetime = Field(default_factory=_now)


class HistoryEntry(BaseModel):
    """A single value transition of a variable."""

    model_config = ConfigDict(frozen=True)

    to: Any = Field(..., description="Value after the change")
    from_: Any = Field(default=None, description="Value before the change")
    source: str = Field(..., description="What made the change")
    timestamp: datetime = Field(default_factory=_now)
