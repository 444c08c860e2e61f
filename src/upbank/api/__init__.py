"""Up API access: the HTTP client and typed views over resource attributes."""

from .client import UpClient, error_from_response

__all__ = ["UpClient", "error_from_response"]
