"""Storefront exception hierarchy.

The state container has no error conditions; everything here belongs to the
price comparison flow. Each subclass carries the message the HTTP boundary
reports to the caller, so routers never string-match.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application-layer errors in the storefront."""

    public_message = "Failed to compare prices"

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message or self.public_message)
        self.context: dict[str, Any] = context or {}


class InvalidPriceRequestError(ApplicationError):
    """Product name or base price missing. The delegate is never called."""

    public_message = "Product name and base price are required"


class ConfigurationError(ApplicationError):
    """Delegate credential absent. Fatal for the request only."""

    public_message = "API key not configured"


class PriceResponseParseError(ApplicationError):
    """Delegate output held no JSON object of the expected shape."""

    public_message = "Failed to parse response"


class PriceComparisonError(ApplicationError):
    """Any other failure while comparing prices."""


class ProviderError(PriceComparisonError):
    """Raised by a text-generation provider (network, auth, quota, timeout)."""

    def __init__(
        self,
        provider: str,
        message: str,
        *,
        retryable: bool = False,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, context={"provider": provider, "status_code": status_code})
        self.provider = provider
        self.retryable = retryable
        self.status_code = status_code

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.args[0]}{code}"
