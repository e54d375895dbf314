"""Comment data models and comment body blocks."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field

from boosty_api.media_content import ContentItem, extract_content
from boosty_api.models.common import ApiModel, MediaBlock, ReactionCounter, Reactions


class CommentsExtra(ApiModel):
    is_first: bool = False
    is_last: bool = False


class PostRef(ApiModel):
    id: str


class Author(ApiModel):
    id: int
    name: str = ""
    has_avatar: bool = False
    avatar_url: str = ""


class Replies(ApiModel):
    data: list[Comment] = Field(default_factory=list)
    extra: CommentsExtra = Field(default_factory=CommentsExtra)


class Comment(ApiModel):
    id: str
    int_id: int
    post: PostRef | None = None
    author: Author | None = None
    created_at: int | None = None
    updated_at: int | None = None
    is_deleted: bool = False
    is_blocked: bool = False
    is_updated: bool = False
    reply_count: int = 0
    replies: Replies | None = None
    data: list[MediaBlock] = Field(default_factory=list)
    reactions: Reactions = Field(default_factory=Reactions)
    reaction_counters: list[ReactionCounter] = Field(default_factory=list)
    parent_id: int | None = None
    reply_id: int | None = None
    reply_to_user: Author | None = None

    def not_available(self) -> bool:
        return not self.data

    def extract_content(self) -> list[ContentItem]:
        return extract_content(self.data)


class CommentsResponse(ApiModel):
    """One page of ``blog/{blog}/post/{id}/comment/``."""
    data: list[Comment] = Field(default_factory=list)
    extra: CommentsExtra = Field(default_factory=CommentsExtra)


class CommentBlock(BaseModel):
    """A block of a comment body being written (text, end-of-block marker or smile)."""
    type: str
    content: str | None = None
    modificator: str | None = None
    name: str | None = None

    @classmethod
    def text(cls, text: str) -> CommentBlock:
        # The editor stores text as a JSON triple: [text, style, entity ranges].
        return cls(type="text", content=json.dumps([text, "unstyled", []]), modificator="")

    @classmethod
    def text_end(cls) -> CommentBlock:
        return cls(type="text", content="", modificator="BLOCK_END")

    @classmethod
    def smile(cls, name: str) -> CommentBlock:
        return cls(type="smile", name=name)

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(exclude_none=True)
        if payload.get("modificator") == "":
            del payload["modificator"]
        return payload


Replies.model_rebuild()
