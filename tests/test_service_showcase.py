"""Tests for services/showcase.py — showcase listing and status toggle."""
import pytest

from boosty_api.services.showcase import ShowcaseService

from conftest import json_response, post_payload


# ── ShowcaseService ──────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_get_showcase(mock_client):
    mock_client.get.return_value = json_response({
        "data": {"showcaseItems": [
            {"showcaseItemId": 1, "itemType": "post", "itemId": "p1", "post": post_payload("p1")},
        ]},
        "extra": {"isEnabled": True, "isLast": True},
    })
    showcase = await ShowcaseService(mock_client).get_showcase("blog", limit=5, only_visible=True)
    assert showcase.extra.is_enabled is True
    assert showcase.data.showcase_items[0].post.id == "p1"


@pytest.mark.asyncio
async def test_change_showcase_status(mock_client):
    mock_client.put.return_value = json_response({})
    await ShowcaseService(mock_client).change_showcase_status("blog", False)
    mock_client.put.assert_awaited_once_with(
        "blog/blog/showcase/status/", data={"is_enabled": "false"}
    )
