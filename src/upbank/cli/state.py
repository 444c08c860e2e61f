"""CLI state management.

Provides a typed, immutable state object holding the settings and the config
store. The root Typer callback creates it and stores it in ``ctx.obj``; every
command reads it from there instead of reaching for module-level globals.
"""

from dataclasses import dataclass

import httpx
import typer

from upbank.api.client import UpClient
from upbank.cli.output import print_error
from upbank.config import UpBankSettings
from upbank.errors import UpBankError
from upbank.utils.user_config import ConfigStore


@dataclass(frozen=True)
class CLIState:
    """Immutable state object for CLI-wide configuration.

    Attributes:
        settings: Application settings (base URL, timeout, config path).
        store: The user config store holding the API token.
        verbose: If True, debug logging was requested.
        transport: Optional httpx transport, used by tests to stand in for the Up API.
    """

    settings: UpBankSettings
    store: ConfigStore
    verbose: bool = False
    transport: httpx.BaseTransport | None = None

    @classmethod
    def from_settings(
        cls, settings: UpBankSettings, verbose: bool = False
    ) -> "CLIState":
        return cls(
            settings=settings,
            store=ConfigStore(settings.config_path),
            verbose=verbose,
        )

    def client(self) -> UpClient:
        """Create an Up API client bound to this state's token store."""
        return UpClient(
            self.store,
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout,
            transport=self.transport,
        )


def get_state(ctx: typer.Context) -> CLIState:
    """Return the CLIState stored by the root callback."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state not initialized; invoke through the upbank app")
    return state


def require_auth(ctx: typer.Context) -> CLIState:
    """Return the CLI state, exiting with status 1 if no API token is configured.

    Runs before any request is built, so an unconfigured CLI never touches the network.
    """
    state = get_state(ctx)
    try:
        configured = state.store.is_configured()
    except UpBankError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if not configured:
        print_error("API token not configured.")
        typer.echo("\nRun: upbank config set --token <your-token>", err=True)
        raise typer.Exit(1)
    return state
