"""Logging configuration management for upbank.

Console output always goes to stderr: stdout is reserved for command output,
which scripts parse when ``--json`` is used.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path


def _default_log_file_path() -> Path:
    return Path.home() / ".upbank" / "logs" / "upbank.log"


@dataclass
class LoggingConfig:
    """Configuration settings for application logging."""

    level: str = "WARNING"
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    cli_format_string: str = "%(levelname)s: %(message)s"
    log_to_file: bool = False
    log_file_path: Path = field(default_factory=_default_log_file_path)
    max_file_size_mb: int = 5
    backup_count: int = 3
    force_reconfigure: bool = False

    @classmethod
    def from_environment(cls) -> "LoggingConfig":
        """Create logging configuration from environment variables.

        Returns:
            LoggingConfig: Configuration loaded from environment
        """
        log_file_path = os.getenv("LOG_FILE_PATH")
        return cls(
            level=os.getenv("LOG_LEVEL", "WARNING").upper(),
            log_to_file=os.getenv("LOG_TO_FILE", "false").lower() == "true",
            log_file_path=(
                Path(log_file_path) if log_file_path else _default_log_file_path()
            ),
            max_file_size_mb=int(os.getenv("LOG_MAX_FILE_SIZE_MB", "5")),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "3")),
        )


def setup_logging(
    config: LoggingConfig | None = None,
    cli_mode: bool = False,
    verbose: bool = False,
) -> None:
    """Set up centralized logging configuration for the application.

    Args:
        config: Optional logging configuration. If None, loads from environment.
        cli_mode: If True, use simplified CLI-friendly formatting
        verbose: If True, enable DEBUG level logging (overrides config level)
    """
    if config is None:
        config = LoggingConfig.from_environment()

    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, config.level, logging.WARNING)

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    if cli_mode:
        console_handler.setFormatter(logging.Formatter(config.cli_format_string))
    else:
        console_handler.setFormatter(logging.Formatter(config.format_string))
    handlers.append(console_handler)

    if config.log_to_file:
        config.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        from logging.handlers import RotatingFileHandler

        file_handler = RotatingFileHandler(
            config.log_file_path,
            maxBytes=config.max_file_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(logging.Formatter(config.format_string))
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=config.force_reconfigure,
    )

    # Request lines are logged by upbank.api.client; keep the transport quiet
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
