"""Tests for Pydantic models — wire aliases, defaults and availability rules."""
import json

from boosty_api.models.comment import Comment, CommentBlock, CommentsResponse
from boosty_api.models.post import Post, PostsResponse
from boosty_api.models.target import Target


# ── Post ─────────────────────────────────────────────────────────────

def test_post_wire_names():
    post = Post.model_validate({
        "id": "p1",
        "int_id": 77,
        "hasAccess": True,
        "isPinned": True,
        "currencyPrices": {"RUB": 100, "USD": 1.5},
        "data": [{"type": "image", "url": "https://img/1", "id": "i1"}],
    })
    assert post.int_id == 77
    assert post.is_pinned is True
    assert post.currency_prices.rub == 100
    assert post.currency_prices.usd == 1.5
    assert post.not_available() is False


def test_post_not_available_rules():
    assert Post(id="p", has_access=False, data=[{"type": "text"}]).not_available() is True
    assert Post(id="p", has_access=True).not_available() is True


def test_post_safe_title():
    assert Post(id="p9", title="  ").safe_title() == "untitled_p9"
    assert Post(id="p9", title="Hi").safe_title() == "Hi"


def test_posts_response_any_not_available():
    response = PostsResponse.model_validate({
        "data": [
            {"id": "a", "hasAccess": True, "data": [{"type": "text"}]},
            {"id": "b", "hasAccess": False},
        ],
        "extra": {"offset": "123:456", "isLast": False},
    })
    assert response.any_not_available() is True
    assert response.extra.offset == "123:456"


def test_post_unknown_block_fields_kept():
    post = Post.model_validate({"id": "p", "data": [{"type": "poll", "question": "?"}]})
    assert post.data[0].model_extra["question"] == "?"


# ── Comment ──────────────────────────────────────────────────────────

def test_comment_camel_case_and_replies():
    comment = Comment.model_validate({
        "id": "c1",
        "intId": 5,
        "replyCount": 1,
        "replies": {"data": [{"id": "c2", "intId": 6}], "extra": {"isLast": True}},
    })
    assert comment.int_id == 5
    assert comment.replies.data[0].int_id == 6
    assert comment.not_available() is True


def test_comments_response_defaults():
    response = CommentsResponse.model_validate({"data": []})
    assert response.extra.is_first is False
    assert response.extra.is_last is False


def test_comment_block_payloads():
    assert CommentBlock.text("hi").to_payload() == {
        "type": "text",
        "content": json.dumps(["hi", "unstyled", []]),
    }
    assert CommentBlock.smile("heart").to_payload() == {"type": "smile", "name": "heart"}


# ── Target ───────────────────────────────────────────────────────────

def test_target_by_name_and_alias():
    assert Target(id=1, target_sum=5).target_sum == 5
    assert Target.model_validate({"id": 1, "bloggerUrl": "blog"}).blogger_url == "blog"
