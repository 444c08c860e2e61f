"""Transaction commands for upbank.

Lists and shows transactions, and manages the category and tags attached to a
transaction.
"""

import logging
from typing import Annotated, Any

import typer

from upbank.api.schemas import (
    TransactionAttributes,
    format_date,
    or_na,
    short_id,
)
from upbank.cli.options import (
    DEFAULT_PAGE_SIZE,
    JsonOption,
    LimitOption,
    page_params,
)
from upbank.cli.output import (
    Column,
    handle_api_errors,
    print_details,
    print_error,
    print_json,
    print_success,
    print_table,
)
from upbank.cli.state import require_auth

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="transactions",
    help="Manage transactions",
    no_args_is_help=True,
)


def _attributes(row: dict[str, Any]) -> TransactionAttributes:
    return TransactionAttributes.from_resource(row)


TRANSACTION_COLUMNS = [
    Column("ID", lambda row: row.get("id"), short_id),
    Column("Description", lambda row: _attributes(row).description, or_na),
    Column("Amount", lambda row: _attributes(row).amount_value),
    Column("Status", lambda row: _attributes(row).status, or_na),
    Column("Created", lambda row: _attributes(row).created_at, format_date),
]


@app.command("list")
def list_transactions(
    ctx: typer.Context,
    limit: LimitOption = DEFAULT_PAGE_SIZE,
    json_output: JsonOption = False,
) -> None:
    """List all transactions across all accounts, newest first."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        transactions = client.list_transactions(page_params(limit))

    if json_output:
        print_json(transactions)
        return

    print_table(transactions, TRANSACTION_COLUMNS)


@app.command("get")
def get_transaction(
    ctx: typer.Context,
    transaction_id: Annotated[str, typer.Argument(metavar="TRANSACTION-ID")],
    json_output: JsonOption = False,
) -> None:
    """Get a specific transaction."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        transaction = client.get_transaction(transaction_id)

    if transaction is None:
        print_error("Transaction not found")
        raise typer.Exit(1)

    if json_output:
        print_json(transaction)
        return

    attributes = _attributes(transaction)
    print_details(
        "Transaction Details",
        [
            ("Transaction ID", transaction.get("id", "")),
            ("Description", or_na(attributes.description)),
            ("Message", or_na(attributes.message)),
            ("Amount", attributes.amount_value),
            ("Status", or_na(attributes.status)),
            ("Created At", or_na(attributes.created_at)),
            ("Settled At", or_na(attributes.settled_at)),
        ],
    )


@app.command("categorize")
def categorize_transaction(
    ctx: typer.Context,
    transaction_id: Annotated[str, typer.Argument(metavar="TRANSACTION-ID")],
    category_id: Annotated[
        str | None,
        typer.Argument(
            metavar="[CATEGORY-ID]",
            help="Category to assign; omit to remove the current category",
        ),
    ] = None,
) -> None:
    """Set or remove the category of a transaction.

    Examples:
        upbank transactions categorize <transaction-id> restaurants-and-cafes
        upbank transactions categorize <transaction-id>
    """
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        client.categorize_transaction(transaction_id, category_id)

    if category_id:
        print_success(f"Transaction categorized as {category_id}")
    else:
        print_success("Transaction category removed")


@app.command("tag")
def tag_transaction(
    ctx: typer.Context,
    transaction_id: Annotated[str, typer.Argument(metavar="TRANSACTION-ID")],
    tags: Annotated[list[str], typer.Argument(metavar="TAG...", help="Tags to add")],
) -> None:
    """Add one or more tags to a transaction."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        client.add_tags_to_transaction(transaction_id, tags)

    print_success(f"Added {len(tags)} tag(s)")


@app.command("untag")
def untag_transaction(
    ctx: typer.Context,
    transaction_id: Annotated[str, typer.Argument(metavar="TRANSACTION-ID")],
    tags: Annotated[
        list[str], typer.Argument(metavar="TAG...", help="Tags to remove")
    ],
) -> None:
    """Remove one or more tags from a transaction."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        client.remove_tags_from_transaction(transaction_id, tags)

    print_success(f"Removed {len(tags)} tag(s)")
