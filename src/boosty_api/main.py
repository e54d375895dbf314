"""Boosty CLI entry point.

Command-line access to the Boosty API: posts, comments, targets and
subscriptions, with static or refreshable credentials from the environment.
"""

from __future__ import annotations

import logging

import typer

from boosty_api.commands.auth_cmd import app as auth_app
from boosty_api.commands.comments_cmd import app as comments_app
from boosty_api.commands.posts_cmd import app as posts_app
from boosty_api.commands.subscriptions_cmd import app as subscriptions_app
from boosty_api.commands.targets_cmd import app as targets_app

app = typer.Typer(
    name="boosty",
    help="CLI tool for the Boosty content platform API.",
    no_args_is_help=True,
)

app.add_typer(auth_app, name="auth")
app.add_typer(posts_app, name="posts")
app.add_typer(comments_app, name="comments")
app.add_typer(targets_app, name="targets")
app.add_typer(subscriptions_app, name="subscriptions")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Boosty CLI: read posts and comments, manage targets."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


if __name__ == "__main__":
    app()
