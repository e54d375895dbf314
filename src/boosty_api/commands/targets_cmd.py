"""CLI commands for blog targets (goals)."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.console import Console

from boosty_api.client import BoostyClient
from boosty_api.config import get_config
from boosty_api.models.target import Target
from boosty_api.services.targets import TargetService
from boosty_api.utils.errors import BoostyError, handle_error
from boosty_api.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="targets", help="Manage blog targets (goals).")

TARGET_COLUMNS = ["id", "type", "description", "current_sum", "target_sum", "priority"]


@app.command("list")
def list_targets(
    blog: Annotated[str, typer.Argument(help="Blog name (as in the blog URL)")],
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """List the targets of a blog."""

    async def _run() -> list[Target]:
        client = await BoostyClient.from_config(get_config(), verbose=verbose)
        try:
            return (await TargetService(client).get_blog_targets(blog)).data
        finally:
            await client.close()

    try:
        targets = asyncio.run(_run())
        print_output(targets, output, columns=TARGET_COLUMNS, title=f"Targets ({blog})")
    except BoostyError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("delete")
def delete_target(
    target_id: Annotated[int, typer.Argument(help="Target ID")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Delete a target."""
    if not yes:
        typer.confirm(f"Delete target {target_id}?", abort=True)

    async def _run() -> None:
        client = await BoostyClient.from_config(get_config(), verbose=verbose)
        try:
            await TargetService(client).delete_blog_target(target_id)
        finally:
            await client.close()

    try:
        asyncio.run(_run())
        console.print(f"[green]Target {target_id} deleted.[/green]")
    except BoostyError as e:
        handle_error(e)
        raise typer.Exit(1)
