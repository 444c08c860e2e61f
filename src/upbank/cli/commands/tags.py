"""Tag commands for upbank."""

import typer

from upbank.cli.options import JsonOption
from upbank.cli.output import Column, handle_api_errors, print_json, print_table
from upbank.cli.state import require_auth

app = typer.Typer(
    name="tags",
    help="Manage tags",
    no_args_is_help=True,
)

# A tag's id is its label
TAG_COLUMNS = [Column("ID", lambda row: row.get("id"))]


@app.command("list")
def list_tags(ctx: typer.Context, json_output: JsonOption = False) -> None:
    """List tags."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        tags = client.list_tags()

    if json_output:
        print_json(tags)
        return

    print_table(tags, TAG_COLUMNS)
