"""CLI commands for credential management."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.console import Console

from boosty_api.client import BoostyClient
from boosty_api.config import get_config
from boosty_api.models.auth import TokenStatus
from boosty_api.utils.errors import BoostyError, handle_error
from boosty_api.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="auth", help="Inspect and refresh credentials.")


def _status_row(status: TokenStatus) -> dict[str, object]:
    return {
        "mode": status.mode,
        "has_token": status.has_token,
        "is_expired": status.is_expired,
        "expires_at": str(status.expires_at) if status.expires_at else "N/A",
        "seconds_remaining": status.seconds_remaining or 0,
    }


@app.command()
def status(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Show which credentials are configured."""

    async def _run() -> dict[str, object]:
        client = await BoostyClient.from_config(get_config())
        try:
            return _status_row(await client.auth.get_status())
        finally:
            await client.close()

    try:
        print_output(asyncio.run(_run()), output, title="Credential Status")
    except BoostyError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command()
def refresh(
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = OutputFormat.TABLE,
) -> None:
    """Force a token refresh using BOOSTY_REFRESH_TOKEN and BOOSTY_DEVICE_ID.

    The refresh token rotates on every refresh; the new one is printed so it
    can be saved before this process exits.
    """

    async def _run() -> dict[str, object]:
        client = await BoostyClient.from_config(get_config())
        try:
            console.print("Refreshing access token...", style="yellow")
            await client.auth.force_refresh()
            row = _status_row(await client.auth.get_status())
            row["refresh_token"] = await client.auth.current_refresh_token()
            return row
        finally:
            await client.close()

    try:
        result = asyncio.run(_run())
        result["status"] = "refreshed"
        print_output(result, output, title="Token Refreshed")
    except BoostyError as e:
        handle_error(e)
        raise typer.Exit(1)
