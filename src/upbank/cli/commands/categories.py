"""Category commands for upbank."""

from typing import Annotated

import typer

from upbank.api.schemas import CategoryAttributes, or_na
from upbank.cli.options import JsonOption
from upbank.cli.output import (
    Column,
    handle_api_errors,
    print_details,
    print_error,
    print_json,
    print_table,
)
from upbank.cli.state import require_auth

app = typer.Typer(
    name="categories",
    help="Manage categories",
    no_args_is_help=True,
)

CATEGORY_COLUMNS = [
    Column("ID", lambda row: row.get("id")),
    Column("Name", lambda row: CategoryAttributes.from_resource(row).name, or_na),
]


@app.command("list")
def list_categories(ctx: typer.Context, json_output: JsonOption = False) -> None:
    """List categories."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        categories = client.list_categories()

    if json_output:
        print_json(categories)
        return

    print_table(categories, CATEGORY_COLUMNS)


@app.command("get")
def get_category(
    ctx: typer.Context,
    category_id: Annotated[str, typer.Argument(metavar="CATEGORY-ID")],
    json_output: JsonOption = False,
) -> None:
    """Get a specific category."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        category = client.get_category(category_id)

    if category is None:
        print_error("Category not found")
        raise typer.Exit(1)

    if json_output:
        print_json(category)
        return

    parent = ((category.get("relationships") or {}).get("parent") or {}).get("data")
    print_details(
        "Category Details",
        [
            ("Category ID", category.get("id", "")),
            ("Name", or_na(CategoryAttributes.from_resource(category).name)),
            ("Parent", or_na(parent.get("id") if isinstance(parent, dict) else None)),
        ],
    )
