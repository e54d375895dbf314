"""Base API client for the Boosty API.

Handles URL building, default headers, auth header injection, status checks
and response parsing. Endpoint methods live in ``boosty_api.services``.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from boosty_api.auth import AuthManager
from boosty_api.config import Config
from boosty_api.utils.errors import (
    HttpStatusError,
    ResponseParseError,
    TransportError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/110.0.0.0 Safari/537.36"
    ),
    "Cache-Control": "no-cache",
    "DNT": "1",
}


def _format_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    path = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"path: {path}, error: {first['msg']}"


class BoostyClient:
    """Async HTTP client for the Boosty API with auth handling."""

    def __init__(
        self,
        config: Config,
        auth: AuthManager | None = None,
        http: httpx.AsyncClient | None = None,
        verbose: bool = False,
    ) -> None:
        self._config = config
        self._base_url = config.base_url
        self._verbose = verbose
        self._http = http or httpx.AsyncClient(timeout=config.settings.timeout)
        self._auth = auth or AuthManager(self._base_url, http=self._http)

    @classmethod
    async def from_config(cls, config: Config, verbose: bool = False) -> BoostyClient:
        """Create a client with the credentials described by ``config`` already applied."""
        client = cls(config, verbose=verbose)
        try:
            await client.auth.set_mode(config.initial_credentials())
        except Exception:
            await client.close()
            raise
        return client

    @property
    def auth(self) -> AuthManager:
        return self._auth

    @property
    def default_headers(self) -> dict[str, str]:
        """Headers sent with every request, before authentication is applied."""
        return dict(DEFAULT_HEADERS)

    # ── Credentials ──────────────────────────────────────────────────

    async def set_bearer_token(self, access_token: str) -> None:
        await self._auth.set_static_token(access_token)

    async def set_refresh_token_and_device_id(self, refresh_token: str, device_id: str) -> None:
        await self._auth.set_refresh_credentials(refresh_token, device_id)

    async def clear_access_token(self) -> None:
        await self._auth.clear_static_token()

    async def clear_refresh_and_device_id(self) -> None:
        await self._auth.clear_refresh_credentials()

    # ── Requests ─────────────────────────────────────────────────────

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        json: Any = None,
        files: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Make an authenticated API request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            path: Path under ``/v1/`` (e.g. "blog/name/post/").
            params: Query parameters; None values are dropped.
            data: Form body (x-www-form-urlencoded, or multipart fields with ``files``).
            json: JSON body.
            files: Multipart file parts.

        Returns:
            The httpx.Response, already checked for a 2xx status.

        Raises:
            UnauthorizedError: HTTP 401.
            HttpStatusError: Any other non-2xx status.
            TransportError: The request never got a response.
            AuthError: A token refresh needed for the header failed.
        """
        url = f"{self._base_url}/v1/{path.lstrip('/')}"
        headers = self._build_headers(await self._auth.auth_headers(), multipart=files is not None)
        if params:
            params = {k: _query_value(v) for k, v in params.items() if v is not None}

        if self._verbose:
            logger.info(f"{method} {url} params={params or {}}")

        try:
            response = await self._http.request(
                method,
                url,
                headers=headers,
                params=params or None,
                data=data,
                json=json,
                files=files,
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        if self._verbose:
            logger.info(f"Response: {response.status_code}")

        self._check_status(response, path)
        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Convenience method for GET requests."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Convenience method for POST requests."""
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> httpx.Response:
        """Convenience method for PUT requests."""
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        """Convenience method for DELETE requests."""
        return await self.request("DELETE", path, **kwargs)

    # ── Parsing ──────────────────────────────────────────────────────

    @staticmethod
    def parse(response: httpx.Response, model: type[M]) -> M:
        """Validate the whole response body as ``model``."""
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseParseError(
                f"Failed to parse response JSON: {_format_validation_error(e)}"
            ) from e

    @staticmethod
    def parse_data(response: httpx.Response, model: type[M]) -> list[M]:
        """Validate the ``data`` array of a list response as a list of ``model``."""
        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseParseError(f"Failed to parse response body as JSON: {e}") from e
        if not isinstance(payload, dict):
            raise ResponseParseError("Failed to parse response JSON: expected an object")

        try:
            return TypeAdapter(list[model]).validate_python(payload.get("data"))
        except ValidationError as e:
            raise ResponseParseError(
                f"Failed to parse response JSON: {_format_validation_error(e)}"
            ) from e

    @staticmethod
    def ensure_json(response: httpx.Response) -> Any:
        """Decode the body as JSON, for endpoints whose payload is otherwise ignored."""
        try:
            return response.json()
        except ValueError as e:
            raise ResponseParseError(f"Failed to parse response body as JSON: {e}") from e

    # ── Internals ────────────────────────────────────────────────────

    def _build_headers(self, auth_headers: dict[str, str], multipart: bool = False) -> dict[str, str]:
        """Build request headers with auth."""
        headers = self.default_headers
        headers.update(auth_headers)
        if multipart:
            # httpx sets the multipart boundary itself.
            headers.pop("Content-Type", None)
        return headers

    @staticmethod
    def _check_status(response: httpx.Response, endpoint: str) -> None:
        if response.status_code == 401:
            raise UnauthorizedError(endpoint)
        if not response.is_success:
            raise HttpStatusError(response.status_code, endpoint)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def __aenter__(self) -> BoostyClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


def _query_value(value: Any) -> Any:
    # The API expects lowercase booleans in query strings.
    if isinstance(value, bool):
        return "true" if value else "false"
    return value
