"""upbank: Up Bank from your terminal.

This package provides a command-line client for the Up Bank REST API with support for:
- Accounts and their transactions
- Transactions, categories and tags
- Webhook management and delivery logs
- Table output for humans and JSON output for scripts

The only local state is the personal access token stored in ~/.upbank/config.yaml.
"""

__version__ = "1.0.0"
