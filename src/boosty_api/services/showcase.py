"""Blog showcase service."""

from __future__ import annotations

from boosty_api.client import BoostyClient
from boosty_api.models.showcase import ShowcaseResponse


class ShowcaseService:
    def __init__(self, client: BoostyClient) -> None:
        self._client = client

    async def get_showcase(
        self,
        blog: str,
        limit: int | None = None,
        only_visible: bool | None = None,
        offset: int | None = None,
    ) -> ShowcaseResponse:
        response = await self._client.get(
            f"blog/{blog}/showcase/",
            params={"offset": offset, "limit": limit, "only_visible": only_visible},
        )
        return self._client.parse(response, ShowcaseResponse)

    async def change_showcase_status(self, blog: str, status: bool) -> None:
        """Enable or disable the showcase of a blog."""
        await self._client.put(
            f"blog/{blog}/showcase/status/",
            data={"is_enabled": "true" if status else "false"},
        )
