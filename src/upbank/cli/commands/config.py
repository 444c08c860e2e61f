"""Configuration management commands for upbank.

This module provides CLI commands for storing, inspecting and clearing the Up
API token kept in the user configuration file.
"""

import logging
from typing import Annotated

import typer

from upbank.cli.output import print_error, print_success
from upbank.cli.state import get_state
from upbank.errors import ConfigError
from upbank.utils.user_config import API_TOKEN_KEY

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="config",
    help="Manage CLI configuration",
    no_args_is_help=True,
)

MASKED_TOKEN = "*" * 20


@app.command("set")
def set_config(
    ctx: typer.Context,
    token: Annotated[
        str | None,
        typer.Option("--token", help="Up personal access token"),
    ] = None,
) -> None:
    """Set configuration values.

    Example:
        upbank config set --token up:yeah:abc123
    """
    if not token:
        print_error("No token provided")
        raise typer.Exit(1)

    state = get_state(ctx)
    try:
        state.store.set(API_TOKEN_KEY, token)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    print_success("API token set")


@app.command("show")
def show_config(ctx: typer.Context) -> None:
    """Show current configuration.

    The token itself is never printed, only whether one is set.

    Example:
        upbank config show
    """
    state = get_state(ctx)
    try:
        api_token = state.store.get(API_TOKEN_KEY)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    typer.secho("\nUp Bank Configuration\n", bold=True)
    typer.echo(f"Config file:   {state.store.path}")
    if api_token:
        typer.echo("API Token:     " + typer.style(MASKED_TOKEN, fg=typer.colors.GREEN))
    else:
        typer.echo("API Token:     " + typer.style("not set", fg=typer.colors.RED))
    typer.echo("")


@app.command("clear")
def clear_config(
    ctx: typer.Context,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip the confirmation prompt"),
    ] = False,
) -> None:
    """Remove the stored API token.

    Example:
        upbank config clear --yes
    """
    if not yes:
        confirm = typer.confirm(
            "Are you sure you want to remove the stored API token?", default=False
        )
        if not confirm:
            typer.echo("Cancelled")
            raise typer.Exit(0)

    state = get_state(ctx)
    try:
        state.store.clear()
    except OSError as e:
        print_error(f"Failed to clear configuration: {e}")
        raise typer.Exit(1) from e

    print_success("Configuration cleared")


@app.command("path")
def show_config_path(ctx: typer.Context) -> None:
    """Show the path to the configuration file.

    Example:
        upbank config path
    """
    typer.echo(str(get_state(ctx).store.path))
