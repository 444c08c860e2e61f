"""Error taxonomy for the upbank client.

Every failure the client knows how to describe is an ``UpBankError``. The CLI
catches these once, at the command boundary, and turns them into a failure
message and a non-zero exit status. Anything else propagates unchanged.
"""


class UpBankError(Exception):
    """Base class for all upbank errors."""


class ConfigError(UpBankError):
    """The user config file is unreadable, corrupt, or was given an unknown key."""


class PreconditionError(UpBankError):
    """A request was attempted without an API token configured."""


class ConnectivityError(UpBankError):
    """No response was received from the Up API (network, DNS, or timeout)."""

    def __init__(
        self,
        message: str = "No response from Up API. Check your internet connection.",
    ):
        super().__init__(message)


class ApiError(UpBankError):
    """The Up API answered with a non-2xx status code."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"API Error ({status_code}): {message}")


class AuthenticationError(ApiError):
    """401: the token is invalid, revoked or expired."""

    def __init__(self, message: str = "Authentication failed. Check your API token."):
        super().__init__(401, message)

    def __str__(self) -> str:
        return self.message


class ForbiddenError(ApiError):
    """403: the token is not allowed to access the resource."""

    def __init__(self, message: str = "Access forbidden."):
        super().__init__(403, message)

    def __str__(self) -> str:
        return self.message


class NotFoundError(ApiError):
    """404: the resource does not exist."""

    def __init__(self, message: str = "Resource not found."):
        super().__init__(404, message)

    def __str__(self) -> str:
        return self.message


class RateLimitError(ApiError):
    """429: too many requests. Never retried automatically."""

    def __init__(
        self, message: str = "Rate limit exceeded. Wait a moment and try again."
    ):
        super().__init__(429, message)

    def __str__(self) -> str:
        return self.message
