"""upbank CLI package.

This package provides the command-line interface for the Up API: configuration,
accounts, transactions, categories, tags and webhooks.
"""

from .main import app, main

__all__ = ["app", "main"]
