"""CLI commands for post comments."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.console import Console

from boosty_api.client import BoostyClient
from boosty_api.config import get_config
from boosty_api.media_content import TextItem
from boosty_api.models.comment import Comment
from boosty_api.services.comments import CommentService
from boosty_api.utils.errors import BoostyError, handle_error
from boosty_api.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="comments", help="Read post comments.")

COMMENT_COLUMNS = ["int_id", "author", "replies", "text"]


def _comment_row(comment: Comment) -> dict[str, object]:
    texts = [item.plain_text() for item in comment.extract_content() if isinstance(item, TextItem)]
    return {
        "int_id": comment.int_id,
        "author": comment.author.name if comment.author else "",
        "replies": comment.reply_count,
        "text": " ".join(t for t in texts if t),
    }


@app.command("list")
def list_comments(
    blog: Annotated[str, typer.Argument(help="Blog name (as in the blog URL)")],
    post_id: Annotated[str, typer.Argument(help="Post ID")],
    page_size: Annotated[int | None, typer.Option("--page-size", help="Comments per request (default: BOOSTY_PAGE_SIZE)")] = None,
    reply_limit: Annotated[int | None, typer.Option("--reply-limit", help="Replies embedded per comment")] = None,
    order: Annotated[str | None, typer.Option("--order", help="Sort order, e.g. top or bottom")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List every top-level comment of a post."""
    config = get_config()

    async def _run() -> list[Comment]:
        client = await BoostyClient.from_config(config, verbose=verbose)
        try:
            return await CommentService(client).get_all_comments(
                blog,
                post_id,
                page_size=page_size or config.settings.page_size,
                reply_limit=reply_limit,
                order=order,
            )
        finally:
            await client.close()

    try:
        comments = asyncio.run(_run())
        console.print(f"[dim]Found {len(comments)} comments[/dim]")
        print_output(
            [_comment_row(c) for c in comments],
            output,
            columns=COMMENT_COLUMNS,
            title=f"Comments ({blog}/{post_id})",
        )
    except BoostyError as e:
        handle_error(e)
        raise typer.Exit(1)
