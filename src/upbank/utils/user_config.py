"""User configuration management for upbank.

This module manages the user-level configuration stored in ~/.upbank/config.yaml.
The only value kept there is the Up personal access token.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from upbank.errors import ConfigError

logger = logging.getLogger(__name__)

API_TOKEN_KEY = "api_token"
RESET_HINT = "Run `upbank config clear` to reset it, then set your token again."


class UserConfig(BaseModel):
    """User-level configuration stored in ~/.upbank/config.yaml."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    api_token: str = Field(
        default="",
        description="Up personal access token sent as a bearer token",
    )


def get_user_config_path() -> Path:
    """Get path to user config file.

    Returns:
        Path: ~/.upbank/config.yaml
    """
    return Path.home() / ".upbank" / "config.yaml"


class ConfigStore:
    """File-backed store for the user configuration.

    The file is re-read on every access so each CLI invocation sees what is on
    disk. Missing files and missing keys fall back to the model defaults; a file
    that exists but cannot be parsed raises ``ConfigError``.

    There is no locking: two processes writing at the same time race and the
    last write wins.
    """

    def __init__(self, path: Path | None = None):
        self.path = path or get_user_config_path()

    def load(self) -> UserConfig:
        """Load configuration from disk.

        Returns:
            UserConfig: Stored configuration, or defaults if the file doesn't exist

        Raises:
            ConfigError: If the file exists but is unreadable or invalid
        """
        if not self.path.exists():
            logger.debug(f"User config file not found: {self.path}")
            return UserConfig()

        try:
            with open(self.path) as f:
                raw_data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Failed to read config file {self.path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Failed to read config file {self.path}: {e}\n{RESET_HINT}"
            ) from e

        if raw_data is None:
            return UserConfig()
        if not isinstance(raw_data, dict):
            raise ConfigError(
                f"Config file {self.path} is corrupt: expected a mapping, "
                f"got {type(raw_data).__name__}\n{RESET_HINT}"
            )

        try:
            return UserConfig.model_validate(raw_data)
        except ValidationError as e:
            raise ConfigError(
                f"Config file {self.path} is invalid: {e}\n{RESET_HINT}"
            ) from e

    def save(self, config: UserConfig) -> None:
        """Write configuration to disk with owner-only permissions.

        Raises:
            ConfigError: If unable to write the config file
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                yaml.safe_dump(
                    config.model_dump(), f, default_flow_style=False, sort_keys=False
                )
            self.path.chmod(0o600)
        except OSError as e:
            raise ConfigError(f"Failed to save config file {self.path}: {e}") from e

        logger.debug(f"Saved user config to {self.path}")

    def get(self, key: str, default: Any = None) -> Any:
        """Return a configuration value, or ``default`` for unknown keys."""
        if key not in UserConfig.model_fields:
            return default
        return getattr(self.load(), key)

    def set(self, key: str, value: Any) -> None:
        """Set a single configuration value and persist it.

        Raises:
            ConfigError: If the key is unknown or the value is invalid
        """
        if key not in UserConfig.model_fields:
            raise ConfigError(f"Unknown configuration key: {key}")

        config = self.load()
        try:
            setattr(config, key, value)
        except ValidationError as e:
            raise ConfigError(f"Invalid value for {key}: {e}") from e
        self.save(config)

    def get_all(self) -> dict[str, Any]:
        return self.load().model_dump()

    def clear(self) -> None:
        """Delete the configuration file so every key reverts to its default."""
        if self.path.exists():
            self.path.unlink()
            logger.debug(f"Deleted user config: {self.path}")

    def get_api_token(self) -> str:
        return self.load().api_token

    def is_configured(self) -> bool:
        """True iff a non-empty API token is stored."""
        token = self.get_api_token()
        return isinstance(token, str) and bool(token)
