"""Normalized platform network events.

Every notification source converts its callbacks into these events.
Only the event handler is allowed to turn them into store mutations.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pynetmon.models.capabilities import NetworkCapabilities


class NetworkEventKind(StrEnum):
    AVAILABLE = "available"
    LOST = "lost"
    UNAVAILABLE = "unavailable"
    CAPABILITIES_CHANGED = "capabilitiesChanged"
    BLOCKED_STATUS_CHANGED = "blockedStatusChanged"


class NetworkEvent(BaseModel):
    """A single platform network callback."""

    model_config = ConfigDict(frozen=True)

    kind: NetworkEventKind
    network: str | None = Field(
        default=None,
        description="Platform network handle; None for 'unavailable'.",
    )
    capabilities: NetworkCapabilities | None = None
    blocked: bool | None = None
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("observed_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @model_validator(mode="after")
    def _require_payload(self) -> NetworkEvent:
        if self.kind == NetworkEventKind.CAPABILITIES_CHANGED and self.capabilities is None:
            raise ValueError("capabilitiesChanged event requires capabilities")
        if self.kind == NetworkEventKind.BLOCKED_STATUS_CHANGED and self.blocked is None:
            raise ValueError("blockedStatusChanged event requires blocked")
        return self
