"""CLI tests for the posts command group."""
import json
from unittest.mock import AsyncMock, MagicMock, patch

from typer.testing import CliRunner

from boosty_api.commands.posts_cmd import app
from boosty_api.models.post import Post
from boosty_api.utils.errors import HttpStatusError

runner = CliRunner()


def _patches(service):
    client = MagicMock()
    client.close = AsyncMock()
    client_cls = MagicMock()
    client_cls.from_config = AsyncMock(return_value=client)
    config = MagicMock()
    config.settings.page_size = 20
    return (
        patch("boosty_api.commands.posts_cmd.get_config", return_value=config),
        patch("boosty_api.commands.posts_cmd.BoostyClient", client_cls),
        patch("boosty_api.commands.posts_cmd.PostService", return_value=service),
    )


def _post(post_id="p1", title="Hello"):
    return Post.model_validate({
        "id": post_id,
        "title": title,
        "hasAccess": True,
        "data": [{"type": "image", "url": "https://img/1", "id": "i1"}],
    })


# ── get ──────────────────────────────────────────────────────────────

def test_get_post_json():
    service = MagicMock()
    service.get_post = AsyncMock(return_value=_post())
    p1, p2, p3 = _patches(service)
    with p1, p2, p3:
        result = runner.invoke(app, ["get", "blog", "p1", "--output", "json"])
    assert result.exit_code == 0
    service.get_post.assert_awaited_once_with("blog", "p1")
    assert '"available": true' in result.stdout


def test_get_post_content_csv():
    service = MagicMock()
    service.get_post = AsyncMock(return_value=_post())
    p1, p2, p3 = _patches(service)
    with p1, p2, p3:
        result = runner.invoke(app, ["get", "blog", "p1", "--content", "--output", "csv"])
    assert result.exit_code == 0
    assert "kind,value" in result.stdout
    assert "image,https://img/1" in result.stdout


def test_get_post_not_found():
    service = MagicMock()
    service.get_post = AsyncMock(side_effect=HttpStatusError(404, "blog/blog/post/nope"))
    p1, p2, p3 = _patches(service)
    with p1, p2, p3:
        result = runner.invoke(app, ["get", "blog", "nope", "--output", "json"])
    assert result.exit_code == 1
    assert '"NOT_FOUND"' in result.stdout


# ── list ─────────────────────────────────────────────────────────────

def test_list_posts_passes_limit_and_page_size():
    service = MagicMock()
    service.get_posts = AsyncMock(return_value=[_post("p1"), _post("p2", title="")])
    p1, p2, p3 = _patches(service)
    with p1, p2, p3:
        result = runner.invoke(app, ["list", "blog", "--limit", "2", "--page-size", "5", "--output", "csv"])
    assert result.exit_code == 0
    service.get_posts.assert_awaited_once_with("blog", limit=2, page_size=5)
    assert "untitled_p2" in result.stdout


def test_list_posts_default_page_size_from_config():
    service = MagicMock()
    service.get_posts = AsyncMock(return_value=[])
    p1, p2, p3 = _patches(service)
    with p1, p2, p3:
        result = runner.invoke(app, ["list", "blog", "--output", "json"])
    assert result.exit_code == 0
    service.get_posts.assert_awaited_once_with("blog", limit=None, page_size=20)
    out = result.stdout
    assert json.loads(out[out.index("["):]) == []
