"""Shared fixtures for the boosty-api test suite."""
from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from boosty_api.client import BoostyClient
from boosty_api.config import Config, Settings

BASE_URL = "https://api.example.test"


@pytest.fixture
def fake_settings() -> Settings:
    return Settings(base_url=BASE_URL, timeout=5.0, page_size=20)


@pytest.fixture
def fake_config(fake_settings) -> Config:
    return Config(settings=fake_settings)


@pytest.fixture
def mock_client():
    """MagicMock standing in for BoostyClient, with real static parsers."""
    client = MagicMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.put = AsyncMock()
    client.delete = AsyncMock()
    client.close = AsyncMock()
    client.parse = BoostyClient.parse
    client.parse_data = BoostyClient.parse_data
    client.ensure_json = BoostyClient.ensure_json
    client.auth.has_refresh_capability = AsyncMock(return_value=False)
    client.auth.force_refresh = AsyncMock(return_value="fresh")
    return client


def json_response(payload, status_code: int = 200) -> httpx.Response:
    """Build a real httpx.Response carrying a JSON body."""
    return httpx.Response(status_code, json=payload)


def token_payload(access="a1", refresh="r2", expires_in=3600) -> dict:
    return {"access_token": access, "refresh_token": refresh, "expires_in": expires_in}


def post_payload(post_id="p1", has_access=True, with_data=True) -> dict:
    """Wire-format post, with one text block unless ``with_data`` is False."""
    return {
        "id": post_id,
        "int_id": 1,
        "title": "Hello",
        "hasAccess": has_access,
        "data": [{"type": "text", "content": "[\"hi\",\"unstyled\",[]]", "modificator": ""}] if with_data else [],
    }


def comment_payload(int_id, text="hi") -> dict:
    return {
        "id": f"c{int_id}",
        "intId": int_id,
        "author": {"id": 5, "name": "alice"},
        "data": [{"type": "text", "content": json.dumps([text, "unstyled", []])}],
    }
