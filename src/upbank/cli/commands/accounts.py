"""Account commands for upbank."""

import logging
from typing import Annotated, Any

import typer

from upbank.api.schemas import AccountAttributes, or_na
from upbank.cli.commands.transactions import TRANSACTION_COLUMNS
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
    print_table,
)
from upbank.cli.state import require_auth

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="accounts",
    help="Manage accounts",
    no_args_is_help=True,
)

AccountIdArgument = Annotated[str, typer.Argument(metavar="ACCOUNT-ID")]


def _attributes(row: dict[str, Any]) -> AccountAttributes:
    return AccountAttributes.from_resource(row)


ACCOUNT_COLUMNS = [
    Column("ID", lambda row: row.get("id")),
    Column("Name", lambda row: _attributes(row).display_name, or_na),
    Column("Type", lambda row: _attributes(row).account_type, or_na),
    Column("Balance", lambda row: _attributes(row).balance_value),
    Column("Currency", lambda row: _attributes(row).currency_code),
]


@app.command("list")
def list_accounts(ctx: typer.Context, json_output: JsonOption = False) -> None:
    """List accounts."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        accounts = client.list_accounts()

    if json_output:
        print_json(accounts)
        return

    print_table(accounts, ACCOUNT_COLUMNS)


@app.command("get")
def get_account(
    ctx: typer.Context,
    account_id: AccountIdArgument,
    json_output: JsonOption = False,
) -> None:
    """Get a specific account."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        account = client.get_account(account_id)

    if account is None:
        print_error("Account not found")
        raise typer.Exit(1)

    if json_output:
        print_json(account)
        return

    attributes = _attributes(account)
    print_details(
        "Account Details",
        [
            ("Account ID", account.get("id", "")),
            ("Name", or_na(attributes.display_name)),
            ("Type", or_na(attributes.account_type)),
            ("Balance", attributes.balance_value),
            ("Currency", attributes.currency_code),
            ("Created At", or_na(attributes.created_at)),
        ],
    )


@app.command("transactions")
def list_account_transactions(
    ctx: typer.Context,
    account_id: AccountIdArgument,
    limit: LimitOption = DEFAULT_PAGE_SIZE,
    json_output: JsonOption = False,
) -> None:
    """List transactions for an account."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        transactions = client.list_account_transactions(
            account_id, page_params(limit)
        )

    if json_output:
        print_json(transactions)
        return

    print_table(transactions, TRANSACTION_COLUMNS)
