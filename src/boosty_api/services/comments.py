"""Comment listing and posting service."""

from __future__ import annotations

import json
import logging

from boosty_api.client import BoostyClient
from boosty_api.models.comment import Comment, CommentBlock, CommentsResponse
from boosty_api.utils.pagination import Page, paginate_by_last_id

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


class CommentService:
    """Service for post comments."""

    def __init__(self, client: BoostyClient) -> None:
        self._client = client

    async def get_comments_page(
        self,
        blog: str,
        post_id: str,
        limit: int | None = None,
        reply_limit: int | None = None,
        order: str | None = None,
        offset: int | None = None,
    ) -> CommentsResponse:
        """Fetch one page of comments. ``offset`` is the int id of the last comment seen."""
        response = await self._client.get(
            f"blog/{blog}/post/{post_id}/comment/",
            params={
                "offset": offset,
                "limit": limit,
                "reply_limit": reply_limit,
                "order": order,
            },
        )
        return self._client.parse(response, CommentsResponse)

    async def get_all_comments(
        self,
        blog: str,
        post_id: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        reply_limit: int | None = None,
        order: str | None = None,
    ) -> list[Comment]:
        """Fetch every top-level comment of a post in server order."""
        async def fetch_page(offset: int | None) -> Page[Comment]:
            response = await self.get_comments_page(
                blog, post_id, page_size, reply_limit, order, offset
            )
            return Page(
                items=response.data,
                is_last=response.extra.is_last,
                is_first=response.extra.is_first,
            )

        comments = await paginate_by_last_id(fetch_page, lambda comment: comment.int_id)
        logger.info(f"Fetched {len(comments)} comments for {blog}/{post_id}")
        return comments

    async def create_comment(
        self,
        blog: str,
        post_id: str,
        blocks: list[CommentBlock],
        reply_id: int | None = None,
    ) -> Comment:
        """Post a comment (or a reply to comment ``reply_id``) built from ``blocks``."""
        form = {"data": json.dumps([block.to_payload() for block in blocks])}
        if reply_id is not None:
            form["reply_id"] = str(reply_id)

        response = await self._client.post(f"blog/{blog}/post/{post_id}/comment/", data=form)
        return self._client.parse(response, Comment)
