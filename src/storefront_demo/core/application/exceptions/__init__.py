from storefront_demo.core.application.exceptions.storefront_exceptions import (
    ApplicationError,
    ConfigurationError,
    InvalidPriceRequestError,
    PriceComparisonError,
    PriceResponseParseError,
    ProviderError,
)

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "InvalidPriceRequestError",
    "PriceComparisonError",
    "PriceResponseParseError",
    "ProviderError",
]
