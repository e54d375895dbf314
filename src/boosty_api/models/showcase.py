"""Blog showcase data models."""

from __future__ import annotations

from pydantic import Field

from boosty_api.models.common import ApiModel
from boosty_api.models.post import Post


class ShowcaseCounters(ApiModel):
    visible_total: int = 0
    visible_posts_count: int = 0
    visible_bundles_count: int = 0


class ShowcaseExtra(ApiModel):
    offset: int = 0
    blog_id: int | None = None
    counters: ShowcaseCounters = Field(default_factory=ShowcaseCounters)
    is_enabled: bool = False
    is_last: bool = False


class ShowcaseItem(ApiModel):
    showcase_item_id: int
    item_type: str  # "post" or "bundle"
    item_id: str
    is_visible: bool = False
    position: int = 0
    post: Post | None = None


class ShowcaseData(ApiModel):
    showcase_items: list[ShowcaseItem] = Field(default_factory=list)


class ShowcaseResponse(ApiModel):
    data: ShowcaseData = Field(default_factory=ShowcaseData)
    extra: ShowcaseExtra = Field(default_factory=ShowcaseExtra)
