"""Up API client.

Turns (method, path, body, query parameters) into an authenticated request
against the Up API and turns the response into either the unwrapped ``data``
payload or an ``UpBankError``.

The token is read from the ``ConfigStore`` on every request and is never logged.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote

import httpx

from upbank.config import DEFAULT_REQUEST_TIMEOUT, UP_API_BASE_URL
from upbank.errors import (
    ApiError,
    AuthenticationError,
    ConnectivityError,
    ForbiddenError,
    NotFoundError,
    PreconditionError,
    RateLimitError,
)
from upbank.utils.user_config import ConfigStore

logger = logging.getLogger(__name__)

Resource = dict[str, Any]
QueryParams = Mapping[str, str | int]

_STATUS_ERRORS: dict[int, type[ApiError]] = {
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}


def _error_message(response: httpx.Response) -> str:
    """Best-effort message from an error response body.

    Tries ``errors[0].detail``, then ``message``, then the serialized body.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text

    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            detail = errors[0].get("detail")
            if detail:
                return str(detail)
        if body.get("message"):
            return str(body["message"])
    return json.dumps(body)


def error_from_response(response: httpx.Response) -> ApiError:
    """Map a non-2xx response to the matching ``ApiError`` subclass."""
    error_cls = _STATUS_ERRORS.get(response.status_code)
    if error_cls is not None:
        return error_cls()
    return ApiError(response.status_code, _error_message(response))


def _segment(resource_id: str) -> str:
    """Escape an id for use as a single path segment."""
    return quote(resource_id, safe="")


def _tag_identifiers(tags: Iterable[str]) -> list[dict[str, str]]:
    return [{"type": "tags", "id": tag} for tag in tags]


class UpClient:
    """HTTP client for the Up API."""

    def __init__(
        self,
        store: ConfigStore,
        base_url: str = UP_API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.store = store
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "UpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _request(
        self,
        method: str,
        endpoint: str,
        json: Any = None,
        params: QueryParams | None = None,
    ) -> dict[str, Any]:
        """Make an authenticated request and return the decoded JSON body.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            endpoint: API path relative to the base URL, e.g. "/accounts"
            json: JSON body for the request
            params: Query parameters, e.g. {"page[size]": 50}

        Returns:
            dict: The response envelope, or an empty dict for empty responses

        Raises:
            PreconditionError: If no API token is configured
            ApiError: If the API answers with a non-2xx status
            ConnectivityError: If no response is received
        """
        token = self.store.get_api_token()
        if not token:
            raise PreconditionError(
                "API token not configured. Run: upbank config set --token <token>"
            )

        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }
        if json is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(f"{method} {endpoint} params={dict(params or {})}")
        try:
            response = self.client.request(
                method,
                endpoint,
                json=json,
                params=dict(params) if params else None,
                headers=headers,
            )
        except httpx.TransportError as e:
            logger.debug(f"{method} {endpoint} failed: {type(e).__name__}: {e}")
            raise ConnectivityError() from e

        logger.debug(f"{method} {endpoint} -> {response.status_code}")
        if not response.is_success:
            raise error_from_response(response)

        if not response.content:
            return {}
        return response.json()

    def _list(self, endpoint: str, params: QueryParams | None = None) -> list[Resource]:
        body = self._request("GET", endpoint, params=params)
        return body.get("data") or []

    def _get(self, endpoint: str) -> Resource | None:
        body = self._request("GET", endpoint)
        return body.get("data") or None

    # Accounts
    def list_accounts(self, params: QueryParams | None = None) -> list[Resource]:
        return self._list("/accounts", params)

    def get_account(self, account_id: str) -> Resource | None:
        return self._get(f"/accounts/{_segment(account_id)}")

    def list_account_transactions(
        self, account_id: str, params: QueryParams | None = None
    ) -> list[Resource]:
        return self._list(f"/accounts/{_segment(account_id)}/transactions", params)

    # Transactions
    def list_transactions(self, params: QueryParams | None = None) -> list[Resource]:
        return self._list("/transactions", params)

    def get_transaction(self, transaction_id: str) -> Resource | None:
        return self._get(f"/transactions/{_segment(transaction_id)}")

    def categorize_transaction(
        self, transaction_id: str, category_id: str | None
    ) -> bool:
        """Set the category of a transaction; ``None`` removes the category."""
        data = {"type": "categories", "id": category_id} if category_id else None
        self._request(
            "PATCH",
            f"/transactions/{_segment(transaction_id)}/relationships/category",
            json={"data": data},
        )
        return True

    def add_tags_to_transaction(self, transaction_id: str, tags: Iterable[str]) -> bool:
        self._request(
            "POST",
            f"/transactions/{_segment(transaction_id)}/relationships/tags",
            json={"data": _tag_identifiers(tags)},
        )
        return True

    def remove_tags_from_transaction(
        self, transaction_id: str, tags: Iterable[str]
    ) -> bool:
        self._request(
            "DELETE",
            f"/transactions/{_segment(transaction_id)}/relationships/tags",
            json={"data": _tag_identifiers(tags)},
        )
        return True

    # Categories
    def list_categories(self, params: QueryParams | None = None) -> list[Resource]:
        return self._list("/categories", params)

    def get_category(self, category_id: str) -> Resource | None:
        return self._get(f"/categories/{_segment(category_id)}")

    # Tags
    def list_tags(self, params: QueryParams | None = None) -> list[Resource]:
        return self._list("/tags", params)

    # Webhooks
    def list_webhooks(self, params: QueryParams | None = None) -> list[Resource]:
        return self._list("/webhooks", params)

    def get_webhook(self, webhook_id: str) -> Resource | None:
        return self._get(f"/webhooks/{_segment(webhook_id)}")

    def create_webhook(self, url: str, description: str = "") -> Resource | None:
        """Register a webhook. The returned resource carries the ``secretKey``."""
        body = self._request(
            "POST",
            "/webhooks",
            json={"data": {"attributes": {"url": url, "description": description}}},
        )
        return body.get("data") or None

    def delete_webhook(self, webhook_id: str) -> bool:
        self._request("DELETE", f"/webhooks/{_segment(webhook_id)}")
        return True

    def ping_webhook(self, webhook_id: str) -> Resource | None:
        body = self._request("POST", f"/webhooks/{_segment(webhook_id)}/ping")
        return body.get("data") or None

    def list_webhook_logs(
        self, webhook_id: str, params: QueryParams | None = None
    ) -> list[Resource]:
        return self._list(f"/webhooks/{_segment(webhook_id)}/logs", params)
