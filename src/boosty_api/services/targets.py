"""Campaign target (goal) service."""

from __future__ import annotations

from boosty_api.client import BoostyClient
from boosty_api.models.target import Target, TargetResponse, TargetType


class TargetService:
    """Service for blog targets: list, create, update and delete."""

    def __init__(self, client: BoostyClient) -> None:
        self._client = client

    async def get_blog_targets(self, blog: str) -> TargetResponse:
        response = await self._client.get(f"target/{blog}/")
        return self._client.parse(response, TargetResponse)

    async def create_blog_target(
        self,
        blog_url: str,
        description: str,
        target_sum: float,
        target_type: TargetType = TargetType.MONEY,
    ) -> Target:
        """Create a money or subscribers goal for a blog."""
        response = await self._client.post(
            f"target/{target_type.value}",
            data={
                "blog_url": blog_url,
                "description": description,
                "target_sum": str(target_sum),
            },
        )
        return self._client.parse(response, Target)

    async def update_blog_target(
        self,
        target_id: int,
        description: str,
        target_sum: float,
    ) -> Target:
        response = await self._client.put(
            f"target/{target_id}",
            data={"description": description, "target_sum": str(target_sum)},
        )
        return self._client.parse(response, Target)

    async def delete_blog_target(self, target_id: int) -> None:
        response = await self._client.delete(f"target/{target_id}")
        self._client.ensure_json(response)
