"""Post data models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from boosty_api.media_content import ContentItem, extract_content
from boosty_api.models.common import ApiModel, MediaBlock, Reactions, Tag, User


class ContentCounter(ApiModel):
    type: str
    count: int = 0
    size: int = 0


class ExtraFlag(ApiModel):
    is_last: bool = False


class Donators(ApiModel):
    extra: ExtraFlag = Field(default_factory=ExtraFlag)
    data: list[Any] = Field(default_factory=list)


class PostComments(ApiModel):
    """Inline comment preview embedded in a post (untyped)."""
    extra: ExtraFlag = Field(default_factory=ExtraFlag)
    data: list[Any] = Field(default_factory=list)


class Count(ApiModel):
    comments: int = 0
    likes: int = 0
    reactions: Reactions = Field(default_factory=Reactions)


class CurrencyPrices(ApiModel):
    rub: float = Field(default=0.0, alias="RUB")
    usd: float = Field(default=0.0, alias="USD")


class Post(ApiModel):
    """A single post as returned by ``blog/{blog}/post/{id}``."""
    id: str
    int_id: int | None = Field(default=None, alias="int_id")
    title: str = ""
    user: User | None = None
    has_access: bool = False
    data: list[MediaBlock] = Field(default_factory=list)
    teaser: list[MediaBlock] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    count: Count = Field(default_factory=Count)
    content_counters: list[ContentCounter] = Field(default_factory=list)
    donators: Donators = Field(default_factory=Donators)
    comments: PostComments = Field(default_factory=PostComments)
    currency_prices: CurrencyPrices = Field(default_factory=CurrencyPrices)
    price: int = 0
    donations: float = 0.0
    created_at: int | None = None
    updated_at: int | None = None
    publish_time: int | None = None
    sort_order: int | None = None
    signed_query: str = ""
    advertiser_info: Any = None
    is_pinned: bool = False
    is_blocked: bool = False
    is_deleted: bool = False
    is_published: bool = False
    is_liked: bool = False
    is_record: bool = False
    is_comments_denied: bool = False
    is_waiting_video: bool = False
    is_showcase_visible: bool = False
    show_views_counter: bool = False

    def not_available(self) -> bool:
        """True when the caller has no access or the server sent no content."""
        return not self.has_access or not self.data

    def safe_title(self) -> str:
        if not self.title.strip():
            return f"untitled_{self.id}"
        return self.title

    def extract_content(self) -> list[ContentItem]:
        return extract_content(self.data)


class PostsExtra(ApiModel):
    # Opaque cursor, sent back verbatim as ``offset`` on the next request.
    offset: str | None = None
    is_last: bool = False


class PostsResponse(ApiModel):
    """One page of ``blog/{blog}/post/``."""
    data: list[Post] = Field(default_factory=list)
    extra: PostsExtra = Field(default_factory=PostsExtra)

    def any_not_available(self) -> bool:
        return any(post.not_available() for post in self.data)
