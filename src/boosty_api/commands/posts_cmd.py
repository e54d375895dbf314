"""CLI commands for reading blog posts."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.console import Console

from boosty_api.client import BoostyClient
from boosty_api.config import get_config
from boosty_api.models.post import Post
from boosty_api.services.posts import PostService
from boosty_api.utils.errors import BoostyError, handle_error
from boosty_api.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="posts", help="Read blog posts.")

POST_COLUMNS = ["id", "title", "has_access", "available", "likes", "comments", "published"]


def _post_row(post: Post) -> dict[str, object]:
    return {
        "id": post.id,
        "title": post.safe_title(),
        "has_access": post.has_access,
        "available": not post.not_available(),
        "likes": post.count.likes,
        "comments": post.count.comments,
        "published": post.publish_time or "",
    }


def _content_rows(post: Post) -> list[dict[str, object]]:
    rows = []
    for item in post.extract_content():
        row = item.model_dump(mode="json")
        kind = row.pop("kind")
        rows.append({"kind": kind, "value": row.get("url") or row.get("content") or row.get("name") or ""})
    return rows


@app.command("get")
def get_post(
    blog: Annotated[str, typer.Argument(help="Blog name (as in the blog URL)")],
    post_id: Annotated[str, typer.Argument(help="Post ID")],
    content: Annotated[bool, typer.Option("--content", "-c", help="List extracted media content instead of the summary")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Fetch a single post."""

    async def _run() -> Post:
        client = await BoostyClient.from_config(get_config(), verbose=verbose)
        try:
            return await PostService(client).get_post(blog, post_id)
        finally:
            await client.close()

    try:
        post = asyncio.run(_run())
        if post.not_available():
            console.print("[yellow]Post is not available with the current credentials.[/yellow]")
        if content:
            print_output(_content_rows(post), output, columns=["kind", "value"], title=post.safe_title())
        else:
            print_output(_post_row(post), output, columns=POST_COLUMNS, title="Post")
    except BoostyError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("list")
def list_posts(
    blog: Annotated[str, typer.Argument(help="Blog name (as in the blog URL)")],
    limit: Annotated[int | None, typer.Option("--limit", "-l", help="Maximum number of posts (default: all)")] = None,
    page_size: Annotated[int | None, typer.Option("--page-size", help="Posts per request (default: BOOSTY_PAGE_SIZE)")] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List posts of a blog, newest first."""
    config = get_config()

    async def _run() -> list[Post]:
        client = await BoostyClient.from_config(config, verbose=verbose)
        try:
            return await PostService(client).get_posts(
                blog, limit=limit, page_size=page_size or config.settings.page_size
            )
        finally:
            await client.close()

    try:
        posts = asyncio.run(_run())
        console.print(f"[dim]Found {len(posts)} posts[/dim]")
        print_output([_post_row(p) for p in posts], output, columns=POST_COLUMNS, title=f"Posts ({blog})")
    except (BoostyError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)
