"""Auth-related data models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Union

from pydantic import BaseModel, Field

# Ten years, in seconds.
MAX_TOKEN_TTL = 10 * 365 * 24 * 3600


class TokenResponse(BaseModel):
    """Response from the Boosty OAuth token endpoint."""
    access_token: str = Field(min_length=1)
    refresh_token: str = Field(min_length=1)
    expires_in: int = Field(ge=0, le=MAX_TOKEN_TTL)


class StaticCredentials(BaseModel):
    """Long-lived, caller-supplied bearer token."""
    mode: Literal["static"] = "static"
    access_token: str


class RefreshCredentials(BaseModel):
    """Rotating refresh token + device id, plus the access token derived from them."""
    mode: Literal["refresh"] = "refresh"
    refresh_token: str
    device_id: str
    access_token: str | None = None
    expires_at: datetime | None = None


# None means no credentials are configured.
CredentialMode = Union[StaticCredentials, RefreshCredentials, None]


class TokenStatus(BaseModel):
    """Current state of the configured credentials."""
    mode: str = "unset"
    has_token: bool
    is_expired: bool
    expires_at: datetime | None = None
    seconds_remaining: int | None = None
