"""Auth-related data models."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, field_validator


class TokenResponse(BaseModel):
    """Response from the Jet token endpoint."""
    id_token: str
    token_type: str
    expires_on: datetime

    @field_validator("expires_on", mode="before")
    @classmethod
    def _parse_expires_on(cls, value: object) -> object:
        # Jet sends up to 7 fractional digits, which fromisoformat truncates
        if isinstance(value, str):
            value = datetime.fromisoformat(value)
        if isinstance(value, datetime) and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class TokenStatus(BaseModel):
    """Current state of the cached token."""
    has_token: bool
    is_expired: bool
    token_type: str | None = None
    expires_at: datetime | None = None
    seconds_remaining: int | None = None
