"""Webhook commands for upbank.

Webhooks let Up push transaction events to a URL you control. The secret key
used to verify those events is only returned once, when the webhook is created.
"""

import logging
from typing import Annotated, Any

import typer

from upbank.api.schemas import (
    WebhookAttributes,
    WebhookDeliveryLogAttributes,
    format_date,
    or_na,
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
    name="webhooks",
    help="Manage webhooks",
    no_args_is_help=True,
)

WebhookIdArgument = Annotated[str, typer.Argument(metavar="WEBHOOK-ID")]


def _attributes(row: dict[str, Any]) -> WebhookAttributes:
    return WebhookAttributes.from_resource(row)


def _log_attributes(row: dict[str, Any]) -> WebhookDeliveryLogAttributes:
    return WebhookDeliveryLogAttributes.from_resource(row)


WEBHOOK_COLUMNS = [
    Column("ID", lambda row: row.get("id")),
    Column("URL", lambda row: _attributes(row).url, or_na),
    Column("Description", lambda row: _attributes(row).description, or_na),
]

WEBHOOK_LOG_COLUMNS = [
    Column("ID", lambda row: row.get("id")),
    Column("Status", lambda row: _log_attributes(row).delivery_status, or_na),
    Column("Response", lambda row: _log_attributes(row).response_status),
    Column("Created", lambda row: _log_attributes(row).created_at, format_date),
]


@app.command("list")
def list_webhooks(ctx: typer.Context, json_output: JsonOption = False) -> None:
    """List webhooks."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        webhooks = client.list_webhooks()

    if json_output:
        print_json(webhooks)
        return

    print_table(webhooks, WEBHOOK_COLUMNS)


@app.command("get")
def get_webhook(
    ctx: typer.Context,
    webhook_id: WebhookIdArgument,
    json_output: JsonOption = False,
) -> None:
    """Get a specific webhook."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        webhook = client.get_webhook(webhook_id)

    if webhook is None:
        print_error("Webhook not found")
        raise typer.Exit(1)

    if json_output:
        print_json(webhook)
        return

    attributes = _attributes(webhook)
    print_details(
        "Webhook Details",
        [
            ("Webhook ID", webhook.get("id", "")),
            ("URL", or_na(attributes.url)),
            ("Description", or_na(attributes.description)),
            ("Created At", or_na(attributes.created_at)),
        ],
    )


@app.command("create")
def create_webhook(
    ctx: typer.Context,
    url: Annotated[str, typer.Argument(help="URL that will receive webhook events")],
    description: Annotated[
        str, typer.Option("--description", help="Webhook description")
    ] = "",
    json_output: JsonOption = False,
) -> None:
    """Create a webhook.

    The secret key is shown only in this command's output; store it somewhere safe.

    Example:
        upbank webhooks create https://example.com/up --description "Budget sync"
    """
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        webhook = client.create_webhook(url, description)

    if json_output:
        print_json(webhook)
        return

    if webhook is None:
        print_success("Webhook created")
        return

    attributes = _attributes(webhook)
    print_success(f"Webhook created: {typer.style(webhook.get('id', ''), bold=True)}")
    typer.echo(f"URL:          {or_na(attributes.url)}")
    typer.echo(f"Secret Key:   {or_na(attributes.secret_key)}")


@app.command("delete")
def delete_webhook(ctx: typer.Context, webhook_id: WebhookIdArgument) -> None:
    """Delete a webhook."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        client.delete_webhook(webhook_id)

    print_success("Webhook deleted")


@app.command("ping")
def ping_webhook(ctx: typer.Context, webhook_id: WebhookIdArgument) -> None:
    """Send a PING event to a webhook."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        client.ping_webhook(webhook_id)

    print_success("Webhook pinged successfully")


@app.command("logs")
def list_webhook_logs(
    ctx: typer.Context,
    webhook_id: WebhookIdArgument,
    limit: LimitOption = DEFAULT_PAGE_SIZE,
    json_output: JsonOption = False,
) -> None:
    """List delivery logs for a webhook, newest first."""
    state = require_auth(ctx)
    with handle_api_errors(), state.client() as client:
        logs = client.list_webhook_logs(webhook_id, page_params(limit))

    if json_output:
        print_json(logs)
        return

    print_table(logs, WEBHOOK_LOG_COLUMNS)
