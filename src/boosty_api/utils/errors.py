"""Error types for the Boosty client and structured error output for the CLI."""

from __future__ import annotations

import json
import sys

from rich.console import Console

console = Console(stderr=True)


class BoostyError(Exception):
    """Base class for every error raised by this package."""


# ── Configuration ────────────────────────────────────────────────────

class ConfigurationError(BoostyError, ValueError):
    """Credentials were configured incorrectly. Never retried."""


class EmptyAccessTokenError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("Empty access token")


class EmptyRefreshTokenError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("Empty refresh token")


class EmptyDeviceIdError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("Empty device_id")


class MissingCredentialsError(ConfigurationError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Missing credentials: neither static access token nor refresh token + device_id set"
        )


# ── Transport ────────────────────────────────────────────────────────

class TransportError(BoostyError):
    """The request never produced an HTTP response (connection failure, timeout)."""


# ── Authentication ───────────────────────────────────────────────────

class AuthError(BoostyError):
    """Token refresh failed: new credentials are needed, or the token endpoint misbehaved."""


class TokenRefreshError(AuthError):
    """Token endpoint answered with a non-200 status."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"Token refresh failed (HTTP {status}): {body}")


class TokenParseError(AuthError):
    pass


class TokenTransportError(AuthError, TransportError):
    pass


# ── API calls ────────────────────────────────────────────────────────

class ApiError(BoostyError):
    """An API endpoint call failed."""


class UnauthorizedError(ApiError):
    def __init__(self, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(f"Unauthorized (401): invalid or missing token for '{endpoint}'")


class HttpStatusError(ApiError):
    def __init__(self, status: int, endpoint: str) -> None:
        self.status = status
        self.endpoint = endpoint
        super().__init__(f"Unexpected HTTP status {status} when calling endpoint '{endpoint}'")


class ResponseParseError(ApiError):
    pass


# ── CLI output ───────────────────────────────────────────────────────

# Actionable hints keyed by error substring
_ERROR_HINTS: list[tuple[str, str]] = [
    ("token refresh failed", "Refresh token was rejected — log in again and update BOOSTY_REFRESH_TOKEN"),
    ("401", "Access token rejected — run `boosty auth refresh` or set new credentials"),
    ("unauthorized", "Access token rejected — run `boosty auth refresh` or set new credentials"),
    ("missing credentials", "Set BOOSTY_ACCESS_TOKEN, or BOOSTY_REFRESH_TOKEN and BOOSTY_DEVICE_ID"),
    ("empty", "Set BOOSTY_ACCESS_TOKEN, or BOOSTY_REFRESH_TOKEN and BOOSTY_DEVICE_ID"),
    ("404", "The blog or post does not exist — verify the name and ID"),
    ("timeout", "Request timed out — try again or check network connectivity"),
    ("timed out", "Request timed out — try again or check network connectivity"),
    ("connection", "Connection error — check network connectivity"),
    ("parse", "Unexpected response shape — the API may have changed"),
]


def _get_hint(error_message: str) -> str | None:
    """Match an error message to an actionable hint."""
    lower = error_message.lower()
    for pattern, hint in _ERROR_HINTS:
        if pattern.lower() in lower:
            return hint
    return None


def _error_code(error: Exception) -> str:
    if isinstance(error, ConfigurationError):
        return "CONFIG_ERROR"
    if isinstance(error, AuthError):
        return "AUTH_ERROR"
    if isinstance(error, UnauthorizedError):
        return "UNAUTHORIZED"
    if isinstance(error, HttpStatusError):
        return "NOT_FOUND" if error.status == 404 else "HTTP_ERROR"
    if isinstance(error, ResponseParseError):
        return "PARSE_ERROR"

    message = str(error).lower()
    if "timeout" in message or "timed out" in message:
        return "TIMEOUT"
    if isinstance(error, TransportError) or "connection" in message:
        return "CONNECTION_ERROR"
    return "RUNTIME_ERROR"


def handle_error(error: Exception) -> None:
    """Handle an error with structured output to stdout and human-readable output to stderr.

    Outputs a JSON error object to stdout for scripts:
    {"error": true, "code": "AUTH_ERROR", "message": "...", "hint": "..."}

    Also prints a human-readable error to stderr.
    """
    message = str(error)
    hint = _get_hint(message)

    error_obj: dict[str, object] = {
        "error": True,
        "code": _error_code(error),
        "message": message,
    }
    if hint:
        error_obj["hint"] = hint

    json.dump(error_obj, sys.stdout)
    sys.stdout.write("\n")

    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
