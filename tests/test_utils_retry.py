"""Tests for utils/retry.py — the one-shot refresh-and-retry wrapper."""
from unittest.mock import AsyncMock, MagicMock

import pytest

from boosty_api.utils.errors import EmptyRefreshTokenError, HttpStatusError, TokenRefreshError
from boosty_api.utils.retry import fetch_with_refresh


def _auth(can_refresh=True):
    auth = MagicMock()
    auth.has_refresh_capability = AsyncMock(return_value=can_refresh)
    auth.force_refresh = AsyncMock(return_value="fresh")
    return auth


def _is_unavailable(result):
    return not result["has_access"]


@pytest.mark.asyncio
async def test_available_result_returned_without_refresh():
    auth = _auth()
    fetch = AsyncMock(return_value={"has_access": True})

    result = await fetch_with_refresh(auth, fetch, _is_unavailable)
    assert result == {"has_access": True}
    fetch.assert_awaited_once()
    auth.force_refresh.assert_not_called()


@pytest.mark.asyncio
async def test_unavailable_refreshes_and_retries_once():
    auth = _auth()
    fetch = AsyncMock(side_effect=[{"has_access": False}, {"has_access": True}])

    result = await fetch_with_refresh(auth, fetch, _is_unavailable)
    assert result == {"has_access": True}
    assert fetch.await_count == 2
    auth.force_refresh.assert_awaited_once()


@pytest.mark.asyncio
async def test_still_unavailable_after_retry_is_returned():
    auth = _auth()
    fetch = AsyncMock(return_value={"has_access": False})

    result = await fetch_with_refresh(auth, fetch, _is_unavailable)
    assert result == {"has_access": False}
    assert fetch.await_count == 2
    auth.force_refresh.assert_awaited_once()


@pytest.mark.asyncio
async def test_no_refresh_capability_returns_first_result():
    auth = _auth(can_refresh=False)
    fetch = AsyncMock(return_value={"has_access": False})

    result = await fetch_with_refresh(auth, fetch, _is_unavailable)
    assert result == {"has_access": False}
    fetch.assert_awaited_once()
    auth.force_refresh.assert_not_called()


@pytest.mark.asyncio
async def test_refresh_failure_propagates():
    auth = _auth()
    auth.force_refresh.side_effect = TokenRefreshError(401, "revoked")
    fetch = AsyncMock(return_value={"has_access": False})

    with pytest.raises(TokenRefreshError):
        await fetch_with_refresh(auth, fetch, _is_unavailable)
    fetch.assert_awaited_once()


@pytest.mark.asyncio
async def test_fetch_error_is_not_retried():
    auth = _auth()
    fetch = AsyncMock(side_effect=HttpStatusError(500, "blog/x/post/1"))

    with pytest.raises(HttpStatusError):
        await fetch_with_refresh(auth, fetch, _is_unavailable)
    fetch.assert_awaited_once()
    auth.force_refresh.assert_not_called()


@pytest.mark.asyncio
async def test_credentials_cleared_before_refresh_returns_first_result():
    auth = _auth()
    auth.force_refresh.side_effect = EmptyRefreshTokenError()
    fetch = AsyncMock(return_value={"has_access": False})

    result = await fetch_with_refresh(auth, fetch, _is_unavailable)
    assert result == {"has_access": False}
    fetch.assert_awaited_once()
