"""Tests for utils/errors.py — hierarchy, error code classification and hint matching."""
import json

import pytest

from boosty_api.utils.errors import (
    AuthError,
    ConfigurationError,
    EmptyDeviceIdError,
    HttpStatusError,
    MissingCredentialsError,
    ResponseParseError,
    TokenRefreshError,
    TokenTransportError,
    TransportError,
    UnauthorizedError,
    _error_code,
    _get_hint,
    handle_error,
)


# ── Hierarchy ────────────────────────────────────────────────────────

def test_configuration_errors_are_value_errors():
    assert isinstance(EmptyDeviceIdError(), ValueError)
    assert isinstance(MissingCredentialsError(), ConfigurationError)


def test_token_transport_is_auth_and_transport():
    err = TokenTransportError("boom")
    assert isinstance(err, AuthError)
    assert isinstance(err, TransportError)


def test_token_refresh_error_message():
    err = TokenRefreshError(400, "invalid_grant")
    assert str(err) == "Token refresh failed (HTTP 400): invalid_grant"


# ── _error_code ──────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "error,code",
    [
        (MissingCredentialsError(), "CONFIG_ERROR"),
        (TokenRefreshError(401, ""), "AUTH_ERROR"),
        (UnauthorizedError("x"), "UNAUTHORIZED"),
        (HttpStatusError(404, "x"), "NOT_FOUND"),
        (HttpStatusError(500, "x"), "HTTP_ERROR"),
        (ResponseParseError("bad"), "PARSE_ERROR"),
        (TransportError("read timed out"), "TIMEOUT"),
        (TransportError("refused"), "CONNECTION_ERROR"),
        (RuntimeError("???"), "RUNTIME_ERROR"),
    ],
)
def test_error_code(error, code):
    assert _error_code(error) == code


# ── _get_hint ────────────────────────────────────────────────────────

def test_hint_refresh_failed_wins_over_401():
    assert "BOOSTY_REFRESH_TOKEN" in _get_hint(str(TokenRefreshError(401, "revoked")))


def test_hint_unauthorized():
    assert "auth refresh" in _get_hint(str(UnauthorizedError("blog/x/post/")))


def test_hint_missing_credentials():
    assert "BOOSTY_ACCESS_TOKEN" in _get_hint(str(MissingCredentialsError()))


def test_hint_none():
    assert _get_hint("something odd") is None


# ── handle_error ─────────────────────────────────────────────────────

def test_handle_error_json(capsys):
    handle_error(HttpStatusError(404, "blog/x/post/1"))
    out = capsys.readouterr().out
    data = json.loads(out)
    assert data["error"] is True
    assert data["code"] == "NOT_FOUND"
    assert "404" in data["message"]
    assert "hint" in data
