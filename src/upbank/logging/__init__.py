"""Centralized logging configuration for upbank.

Standard usage:
    ```python
    import logging
    from upbank.logging import setup_logging

    # Configure once at application startup
    setup_logging(cli_mode=True)

    # Get loggers in each module
    logger = logging.getLogger(__name__)
    ```
"""

from .config import LoggingConfig, setup_logging

__all__ = ["LoggingConfig", "setup_logging"]
