"""CLI commands for subscription levels and the user's subscriptions."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.console import Console

from boosty_api.client import BoostyClient
from boosty_api.config import get_config
from boosty_api.models.subscription import Subscription, SubscriptionLevel
from boosty_api.services.subscriptions import SubscriptionService
from boosty_api.utils.errors import BoostyError, handle_error
from boosty_api.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="subscriptions", help="Subscription levels and subscriptions.")


@app.command("levels")
def list_levels(
    blog: Annotated[str, typer.Argument(help="Blog name (as in the blog URL)")],
    show_free: Annotated[bool, typer.Option("--show-free/--no-show-free", help="Include the free level")] = True,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List the subscription levels of a blog."""

    async def _run() -> list[SubscriptionLevel]:
        client = await BoostyClient.from_config(get_config(), verbose=verbose)
        try:
            return await SubscriptionService(client).get_blog_subscription_levels(blog, show_free)
        finally:
            await client.close()

    try:
        levels = asyncio.run(_run())
        print_output(
            levels,
            output,
            columns=["id", "name", "price", "is_archived", "is_hidden"],
            title=f"Subscription levels ({blog})",
        )
    except BoostyError as e:
        handle_error(e)
        raise typer.Exit(1)


def _subscription_row(sub: Subscription) -> dict[str, object]:
    return {
        "id": sub.id,
        "blog": sub.blog.blog_url if sub.blog else "",
        "level": sub.name,
        "price": sub.price,
        "is_pause": sub.is_pause,
    }


@app.command("list")
def list_subscriptions(
    limit: Annotated[int | None, typer.Option("--limit", "-l", help="Maximum number of subscriptions")] = None,
    with_follow: Annotated[bool, typer.Option("--with-follow", help="Include free follows")] = False,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List the current user's subscriptions (requires credentials)."""

    async def _run() -> list[Subscription]:
        client = await BoostyClient.from_config(get_config(), verbose=verbose)
        try:
            response = await SubscriptionService(client).get_user_subscriptions(limit, with_follow)
            return response.data
        finally:
            await client.close()

    try:
        subs = asyncio.run(_run())
        console.print(f"[dim]Found {len(subs)} subscriptions[/dim]")
        print_output([_subscription_row(s) for s in subs], output, title="Subscriptions")
    except BoostyError as e:
        handle_error(e)
        raise typer.Exit(1)
