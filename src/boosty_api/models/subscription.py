"""Subscription and subscription-level data models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from boosty_api.models.common import ApiModel


class PromoAccess(ApiModel):
    access_other_level_subscriber: bool = False
    new_subscriber: bool = False
    old_paid_subscriber: bool = False


class PromoCount(ApiModel):
    activation: int = 0
    max_activation: int | None = None


class Discount(ApiModel):
    price: int = 0
    percent: int = 0
    currency_prices: dict[str, float] = Field(default_factory=dict)


class Promo(ApiModel):
    id: int
    type: str
    description: str | None = None
    start_time: int | None = None
    end_time: int | None = None
    is_finished: bool = False
    access: PromoAccess = Field(default_factory=PromoAccess)
    count: PromoCount = Field(default_factory=PromoCount)
    discount: Discount = Field(default_factory=Discount)


class SubscriptionLevel(ApiModel):
    id: int
    name: str
    price: float = 0.0
    currency_prices: dict[str, float] = Field(default_factory=dict)
    is_limited: bool = False
    is_archived: bool = False
    is_hidden: bool = False
    deleted: bool = False
    created_at: int | None = None
    owner_id: int | None = None
    promos: list[Promo] = Field(default_factory=list)
    # Text/image description blocks, kept untyped.
    data: list[dict[str, Any]] = Field(default_factory=list)
    external_apps: dict[str, Any] = Field(default_factory=dict)


class SubscriptionLevelResponse(ApiModel):
    data: list[SubscriptionLevel] = Field(default_factory=list)


class BlogOwner(ApiModel):
    id: int
    name: str = ""
    has_avatar: bool = False
    avatar_url: str = ""


class BlogInfo(ApiModel):
    blog_url: str
    title: str = ""
    cover_url: str = ""
    has_adult_content: bool = False
    owner: BlogOwner | None = None
    flags: dict[str, bool] = Field(default_factory=dict)


class SubscriptionLevelInfo(ApiModel):
    id: int
    name: str = ""
    price: float = 0.0
    currency_prices: dict[str, float] = Field(default_factory=dict)
    is_limited: bool = False
    is_archived: bool = False
    is_hidden: bool = False
    deleted: bool = False
    owner_id: int | None = None
    created_at: int | None = None


class Subscription(ApiModel):
    id: int
    level_id: int
    name: str = ""
    parent_id: int | None = None
    price: int = 0
    custom_price: int = 0
    period: int = 1
    on_time: int | None = None
    off_time: int | None = None
    next_pay_time: int | None = None
    is_pause: bool = False
    is_suspended: bool = False
    is_archived: bool = False
    is_apple_payed: bool = False
    is_fee_paid: bool = False
    owner_id: int | None = None
    subscription_level: SubscriptionLevelInfo | None = None
    blog: BlogInfo | None = None
    recommended_promo: Promo | None = None


class SubscriptionsResponse(ApiModel):
    """Offset/limit page of the current user's subscriptions."""
    data: list[Subscription] = Field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0
