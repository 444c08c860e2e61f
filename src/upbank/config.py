"""Application settings for upbank.

This module provides a Pydantic Settings-based configuration with environment
variable integration. The API token is not part of these settings: it lives in
the user config file managed by ``upbank.utils.user_config``.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from upbank.utils.user_config import get_user_config_path

UP_API_BASE_URL = "https://api.up.com.au/api/v1"
DEFAULT_REQUEST_TIMEOUT = 30.0


class UpBankSettings(BaseSettings):
    """Main application settings.

    Environment variables are loaded with the UPBANK_ prefix, for example
    UPBANK_REQUEST_TIMEOUT=10 or UPBANK_CONFIG_PATH=/tmp/upbank.yaml.
    """

    api_base_url: str = Field(
        default=UP_API_BASE_URL, description="Base URL of the Up API"
    )
    request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        description="HTTP timeout in seconds",
    )
    config_path: Path = Field(
        default_factory=get_user_config_path,
        description="Path to the user config file holding the API token",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="UPBANK_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL and drop any trailing slash."""
        if not v.startswith(("https://", "http://")):
            raise ValueError("API base URL must start with https:// or http://")
        return v.rstrip("/")


_settings: UpBankSettings | None = None


def get_settings() -> UpBankSettings:
    """Get the settings instance, loading it on first use.

    Raises:
        ValueError: If the environment holds invalid settings
    """
    global _settings

    if _settings is None:
        _settings = UpBankSettings()
    return _settings


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call reloads from the environment."""
    global _settings
    _settings = None
