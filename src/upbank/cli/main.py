"""Main CLI application for upbank.

This module provides the entry point for the upbank CLI, organizing commands
into one group per Up API resource plus a config group for the API token.
"""

import logging
from typing import Annotated

import typer

from upbank import __version__
from upbank.cli.commands import (
    accounts,
    categories,
    config,
    tags,
    transactions,
    webhooks,
)
from upbank.cli.output import print_error
from upbank.cli.state import CLIState
from upbank.config import get_settings
from upbank.logging import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="upbank",
    help="Up Bank CLI - Australian banking from your terminal",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"upbank {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose debug logging",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    """Global options for the upbank CLI.

    Get a personal access token from https://api.up.com.au/getting_started and
    store it once with:

      upbank config set --token <your-token>
    """
    setup_logging(cli_mode=True, verbose=verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    # Tests hand in their own state through CliRunner.invoke(obj=...)
    if ctx.obj is None:
        try:
            ctx.obj = CLIState.from_settings(get_settings(), verbose=verbose)
        except ValueError as e:
            print_error(f"Invalid settings: {e}")
            raise typer.Exit(1) from e

    logger.debug(f"Using config file: {ctx.obj.store.path}")


app.add_typer(config.app, name="config", help="Manage CLI configuration")
app.add_typer(accounts.app, name="accounts", help="Manage accounts")
app.add_typer(transactions.app, name="transactions", help="Manage transactions")
app.add_typer(categories.app, name="categories", help="Manage categories")
app.add_typer(tags.app, name="tags", help="Manage tags")
app.add_typer(webhooks.app, name="webhooks", help="Manage webhooks")


def main() -> None:
    """Entry point for the upbank CLI application."""
    app()


if __name__ == "__main__":
    main()
