"""Post fetching service."""

from __future__ import annotations

from boosty_api.client import BoostyClient
from boosty_api.models.post import Post, PostsResponse
from boosty_api.utils.pagination import Page, paginate_by_offset
from boosty_api.utils.retry import fetch_with_refresh

DEFAULT_PAGE_SIZE = 20


class PostService:
    """Service for reading blog posts.

    Posts that come back without access (or without content) while a refresh
    flow is configured are fetched once more after a forced token refresh.
    """

    def __init__(self, client: BoostyClient) -> None:
        self._client = client

    async def get_post(self, blog: str, post_id: str) -> Post:
        """Fetch a single post, retrying once after a token refresh if it is not available."""
        return await fetch_with_refresh(
            self._client.auth,
            lambda: self._fetch_post_once(blog, post_id),
            Post.not_available,
        )

    async def get_posts_page(
        self,
        blog: str,
        limit: int,
        offset: str | None = None,
    ) -> PostsResponse:
        """Fetch one page of posts, retrying once after a token refresh if any post is not available."""
        return await fetch_with_refresh(
            self._client.auth,
            lambda: self._fetch_posts_once(blog, limit, offset),
            PostsResponse.any_not_available,
        )

    async def get_posts(
        self,
        blog: str,
        limit: int | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[Post]:
        """Fetch up to ``limit`` posts (all of them when None), newest first.

        A failure on any page aborts the whole call.
        """
        async def fetch_page(offset: str | None, page_limit: int) -> Page[Post]:
            response = await self.get_posts_page(blog, page_limit, offset)
            return Page(
                items=response.data,
                is_last=response.extra.is_last,
                offset=response.extra.offset,
            )

        return await paginate_by_offset(fetch_page, limit, page_size)

    async def _fetch_post_once(self, blog: str, post_id: str) -> Post:
        response = await self._client.get(f"blog/{blog}/post/{post_id}")
        return self._client.parse(response, Post)

    async def _fetch_posts_once(self, blog: str, limit: int, offset: str | None) -> PostsResponse:
        response = await self._client.get(
            f"blog/{blog}/post/",
            params={"limit": limit, "offset": offset},
        )
        return self._client.parse(response, PostsResponse)
