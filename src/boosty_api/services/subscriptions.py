"""Subscription and subscription-level service."""

from __future__ import annotations

from boosty_api.client import BoostyClient
from boosty_api.models.subscription import SubscriptionLevel, SubscriptionsResponse


class SubscriptionService:
    """Service for a blog's subscription levels and the current user's subscriptions."""

    def __init__(self, client: BoostyClient) -> None:
        self._client = client

    async def get_blog_subscription_levels(
        self,
        blog: str,
        show_free_level: bool | None = None,
    ) -> list[SubscriptionLevel]:
        """List a blog's subscription levels, optionally including the free one."""
        response = await self._client.get(
            f"blog/{blog}/subscription_level/",
            params={"show_free_level": show_free_level},
        )
        return self._client.parse_data(response, SubscriptionLevel)

    async def get_user_subscriptions(
        self,
        limit: int | None = None,
        with_follow: bool | None = None,
    ) -> SubscriptionsResponse:
        """Fetch the current user's subscriptions (requires credentials)."""
        response = await self._client.get(
            "user/subscriptions",
            params={"limit": limit, "with_follow": with_follow},
        )
        return self._client.parse(response, SubscriptionsResponse)
