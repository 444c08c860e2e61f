"""Shared pytest fixtures for upbank tests.

This module provides a fake Up API built on ``httpx.MockTransport`` that records
every request it receives, plus config store and CLI state fixtures wired to it.
"""

from collections.abc import Callable, Generator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
import pytest
from pytest_mock import MockerFixture
from typer.testing import CliRunner

from upbank.cli.state import CLIState
from upbank.config import UpBankSettings, clear_settings_cache
from upbank.utils.user_config import ConfigStore

TEST_TOKEN = "up:yeah:test-token-123"
API_PREFIX = "/api/v1"


@dataclass
class FakeUpApi:
    """In-memory stand-in for the Up API.

    Register responses with ``add`` (or failures with ``fail``) keyed by method
    and path relative to the API base URL. Every request received is kept in
    ``requests`` so tests can count calls and inspect headers and bodies.
    """

    routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = field(
        default_factory=dict
    )
    requests: list[httpx.Request] = field(default_factory=list)

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            if json is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=json)

        self.routes[(method, path)] = respond

    def fail(self, method: str, path: str, error: Exception) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise error

        self.routes[(method, path)] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(API_PREFIX)
        try:
            respond = self.routes[(request.method, path)]
        except KeyError:
            raise AssertionError(
                f"Unexpected request: {request.method} {path}"
            ) from None
        return respond(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture(autouse=True)
def isolated_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Point HOME at a temporary directory and reset cached settings.

    Keeps tests away from the real ~/.upbank/config.yaml.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("UPBANK_API_BASE_URL", "UPBANK_REQUEST_TIMEOUT", "UPBANK_CONFIG_PATH"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()

    yield home

    clear_settings_cache()


@pytest.fixture(autouse=True)
def mock_setup_logging(mocker: MockerFixture) -> Any:
    """Keep the root callback from installing handlers on the real root logger."""
    return mocker.patch("upbank.cli.main.setup_logging")


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / ".upbank" / "config.yaml"


@pytest.fixture
def store(config_path: Path) -> ConfigStore:
    """An empty config store (no token)."""
    return ConfigStore(config_path)


@pytest.fixture
def configured_store(store: ConfigStore) -> ConfigStore:
    """A config store holding TEST_TOKEN."""
    store.set("api_token", TEST_TOKEN)
    return store


@pytest.fixture
def up_api() -> FakeUpApi:
    return FakeUpApi()


@pytest.fixture
def settings(config_path: Path) -> UpBankSettings:
    return UpBankSettings(config_path=config_path)


@pytest.fixture
def cli_state(
    settings: UpBankSettings, configured_store: ConfigStore, up_api: FakeUpApi
) -> CLIState:
    """CLI state with a token configured and the fake Up API as transport."""
    return CLIState(
        settings=settings, store=configured_store, transport=up_api.transport
    )


@pytest.fixture
def unconfigured_state(
    settings: UpBankSettings, store: ConfigStore, up_api: FakeUpApi
) -> CLIState:
    """CLI state with no token configured."""
    return CLIState(settings=settings, store=store, transport=up_api.transport)


def account_resource(
    account_id: str = "abc",
    display_name: str = "Spending",
    account_type: str = "TRANSACTIONAL",
    value: str = "12.34",
    currency_code: str = "AUD",
) -> dict[str, Any]:
    return {
        "type": "accounts",
        "id": account_id,
        "attributes": {
            "displayName": display_name,
            "accountType": account_type,
            "ownershipType": "INDIVIDUAL",
            "balance": {
                "currencyCode": currency_code,
                "value": value,
                "valueInBaseUnits": 1234,
            },
            "createdAt": "2023-01-15T09:30:00+11:00",
        },
    }


def transaction_resource(
    transaction_id: str = "4b9a3f52-1d6e-4c4a-9c0b-6f2f1e2b7d11",
    description: str = "Coffee Shop",
    value: str = "-4.50",
    status: str = "SETTLED",
) -> dict[str, Any]:
    return {
        "type": "transactions",
        "id": transaction_id,
        "attributes": {
            "status": status,
            "rawText": "COFFEE SHOP MELBOURNE",
            "description": description,
            "message": None,
            "amount": {
                "currencyCode": "AUD",
                "value": value,
                "valueInBaseUnits": -450,
            },
            "settledAt": "2024-03-02T10:00:00+11:00",
            "createdAt": "2024-03-01T08:15:00+11:00",
        },
        "relationships": {"category": {"data": None}, "tags": {"data": []}},
    }


def webhook_resource(
    webhook_id: str = "wh-1",
    url: str = "https://example.com/up",
    description: str = "Budget sync",
    secret_key: str | None = None,
) -> dict[str, Any]:
    attributes: dict[str, Any] = {
        "url": url,
        "description": description,
        "createdAt": "2024-03-01T08:15:00+11:00",
    }
    if secret_key is not None:
        attributes["secretKey"] = secret_key
    return {"type": "webhooks", "id": webhook_id, "attributes": attributes}
