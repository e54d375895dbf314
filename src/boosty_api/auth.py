"""Authentication for the Boosty API.

Holds static or refreshable credentials, refreshes short-lived access tokens
through the OAuth token endpoint, and serializes refreshes across concurrent
requests.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone

import httpx

from boosty_api.models.auth import (
    CredentialMode,
    RefreshCredentials,
    StaticCredentials,
    TokenResponse,
    TokenStatus,
)
from boosty_api.utils.errors import (
    EmptyAccessTokenError,
    EmptyDeviceIdError,
    EmptyRefreshTokenError,
    MissingCredentialsError,
    TokenParseError,
    TokenRefreshError,
    TokenTransportError,
)

logger = logging.getLogger(__name__)


# A cached token this close to expiry is treated as expired (server clock skew).
EXPIRY_BUFFER = timedelta(seconds=30)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CredentialStore:
    """The single active credential mode. Pure in-memory state, no locking."""

    def __init__(self) -> None:
        self.mode: CredentialMode = None

    def set_static(self, token: str) -> None:
        if not token:
            raise EmptyAccessTokenError()
        self.mode = StaticCredentials(access_token=token)

    def set_refreshable(self, refresh_token: str, device_id: str) -> None:
        if not refresh_token:
            raise EmptyRefreshTokenError()
        if not device_id:
            raise EmptyDeviceIdError()
        self.mode = RefreshCredentials(refresh_token=refresh_token, device_id=device_id)

    def clear_static(self) -> None:
        if isinstance(self.mode, StaticCredentials):
            self.mode = None

    def clear_refreshable(self) -> None:
        if isinstance(self.mode, RefreshCredentials):
            self.mode = None

    def has_refresh_capability(self) -> bool:
        return isinstance(self.mode, RefreshCredentials)

    def rotate(self, access_token: str, refresh_token: str, expires_at: datetime) -> None:
        """Replace the refresh pair after a successful token exchange."""
        if not isinstance(self.mode, RefreshCredentials):
            raise EmptyRefreshTokenError()
        self.mode = RefreshCredentials(
            refresh_token=refresh_token,
            device_id=self.mode.device_id,
            access_token=access_token,
            expires_at=expires_at,
        )

    def cached_token(self, now: datetime) -> str | None:
        """The cached access token if it is still usable at ``now``."""
        mode = self.mode
        if not isinstance(mode, RefreshCredentials):
            return None
        if not mode.access_token or not mode.expires_at:
            return None
        if now + EXPIRY_BUFFER < mode.expires_at:
            return mode.access_token
        return None


class TokenRefresher:
    """Exchanges a refresh token + device id for a new token pair."""

    def __init__(self, base_url: str, http: httpx.AsyncClient) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http

    async def refresh(self, refresh_token: str, device_id: str) -> TokenResponse:
        """Call ``POST {base_url}/oauth/token/``.

        Returns:
            The new access token, the rotated refresh token and the TTL in seconds.

        Raises:
            TokenRefreshError: The endpoint answered with a non-200 status.
            TokenParseError: The body is not a valid token response.
            TokenTransportError: The request never got a response.
        """
        try:
            response = await self._http.post(
                f"{self._base_url}/oauth/token/",
                data={
                    "device_id": device_id,
                    "device_os": "web",
                    "grant_type": "refresh_token",
                    "refresh_token": refresh_token,
                },
            )
        except httpx.HTTPError as e:
            raise TokenTransportError(f"Send refresh tokens request failed: {e}") from e

        if response.status_code != 200:
            raise TokenRefreshError(response.status_code, response.text)

        try:
            return TokenResponse.model_validate_json(response.content)
        except ValueError as e:
            raise TokenParseError(f"Parse refresh token response failed: {e}") from e


class AuthManager:
    """Decides the Authorization header for each request and refreshes tokens safely.

    All access to the credential store happens under one asyncio lock, and
    the lock stays held across the token exchange, so concurrent callers that
    see a stale token trigger a single refresh and then observe its result.
    """

    def __init__(
        self,
        base_url: str,
        http: httpx.AsyncClient | None = None,
        refresher: TokenRefresher | None = None,
    ) -> None:
        self._owns_http = refresher is None and http is None
        if refresher is None:
            http = http or httpx.AsyncClient(timeout=30.0)
            refresher = TokenRefresher(base_url, http)
        self._http = http
        self._refresher = refresher
        self._store = CredentialStore()
        self._lock = asyncio.Lock()

    # ── Credential configuration ─────────────────────────────────────

    async def set_static_token(self, token: str) -> None:
        """Use a static bearer token. Disables any refresh-token flow."""
        async with self._lock:
            self._store.set_static(token)

    async def set_refresh_credentials(self, refresh_token: str, device_id: str) -> None:
        """Use the refresh-token flow. Disables any static token."""
        async with self._lock:
            self._store.set_refreshable(refresh_token, device_id)

    async def set_mode(self, mode: CredentialMode) -> None:
        if isinstance(mode, StaticCredentials):
            await self.set_static_token(mode.access_token)
        elif isinstance(mode, RefreshCredentials):
            await self.set_refresh_credentials(mode.refresh_token, mode.device_id)

    async def clear_static_token(self) -> None:
        async with self._lock:
            self._store.clear_static()

    async def clear_refresh_credentials(self) -> None:
        async with self._lock:
            self._store.clear_refreshable()

    async def has_refresh_capability(self) -> bool:
        async with self._lock:
            return self._store.has_refresh_capability()

    async def current_refresh_token(self) -> str | None:
        """The latest (possibly rotated) refresh token, for callers that persist it."""
        async with self._lock:
            mode = self._store.mode
        return mode.refresh_token if isinstance(mode, RefreshCredentials) else None

    # ── Tokens ───────────────────────────────────────────────────────

    async def get_access_token(self) -> str:
        """Get a valid access token, refreshing if needed.

        Raises:
            MissingCredentialsError: No credentials are configured.
            AuthError: A needed refresh failed.
        """
        token = await self._current_token()
        if token is None:
            raise MissingCredentialsError()
        return token

    async def auth_headers(self) -> dict[str, str]:
        """Authorization header for the next request; empty when no credentials are set."""
        token = await self._current_token()
        if token is None:
            return {}
        return {"Authorization": f"Bearer {token}"}

    async def force_refresh(self) -> str:
        """Refresh the access token even if the cached one is still valid.

        Raises:
            EmptyRefreshTokenError: No refresh token + device id are configured.
            AuthError: The token exchange failed.
        """
        async with self._lock:
            if not self._store.has_refresh_capability():
                raise EmptyRefreshTokenError()
            return await self._refresh_locked()

    async def _current_token(self) -> str | None:
        async with self._lock:
            mode = self._store.mode
            if mode is None:
                return None
            if isinstance(mode, StaticCredentials):
                return mode.access_token

            # Re-checked under the lock: a racing caller may have refreshed already.
            cached = self._store.cached_token(_now())
            if cached is not None:
                return cached
            return await self._refresh_locked()

    async def _refresh_locked(self) -> str:
        """Run the token exchange and rotate the store. Caller must hold the lock."""
        mode = self._store.mode
        if not isinstance(mode, RefreshCredentials):
            raise EmptyRefreshTokenError()

        logger.info("Refreshing Boosty access token")
        token_data = await self._refresher.refresh(mode.refresh_token, mode.device_id)

        # Store is only written once the exchange has fully succeeded.
        expires_at = _now() + timedelta(seconds=token_data.expires_in)
        self._store.rotate(token_data.access_token, token_data.refresh_token, expires_at)
        logger.info(f"Access token refreshed, valid for {token_data.expires_in}s")
        return token_data.access_token

    async def get_status(self) -> TokenStatus:
        """Get the current credential status."""
        async with self._lock:
            mode = self._store.mode

        if mode is None:
            return TokenStatus(mode="unset", has_token=False, is_expired=True)
        if isinstance(mode, StaticCredentials):
            return TokenStatus(mode="static", has_token=True, is_expired=False)

        if not mode.access_token:
            return TokenStatus(mode="refresh", has_token=False, is_expired=True)

        now = _now()
        is_expired = mode.expires_at is None or now > mode.expires_at
        seconds_remaining = None
        if mode.expires_at and not is_expired:
            seconds_remaining = int((mode.expires_at - now).total_seconds())

        return TokenStatus(
            mode="refresh",
            has_token=True,
            is_expired=is_expired,
            expires_at=mode.expires_at,
            seconds_remaining=seconds_remaining,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client if this manager created it."""
        if self._owns_http and self._http is not None:
            await self._http.aclose()
