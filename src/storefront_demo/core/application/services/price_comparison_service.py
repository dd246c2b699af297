from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import structlog

from storefront_demo.core.application.exceptions.storefront_exceptions import (
    ApplicationError,
    InvalidPriceRequestError,
    PriceComparisonError,
    PriceResponseParseError,
)
from storefront_demo.core.application.ports.text_generation_port import TextGenerationPort
from storefront_demo.core.domain.pricing.value_objects.market_prices import MarketPrices
from storefront_demo.infrastructure.common.json_sanitizer_service import (
    JsonParsingError,
    JsonSanitizerService,
    SchemaValidationError,
)

logger = structlog.get_logger()

PROMPT_TEMPLATE = """Based on typical market prices for "{product_name}", provide estimated prices on these platforms:

Please respond in JSON format only, with no additional text:
{{
  "amazon": {{ "price": number, "discount": number }},
  "flipkart": {{ "price": number, "discount": number }},
  "blinkit": {{ "price": number, "discount": number }}
}}

Where price is in USD and discount is percentage. Prices should be realistic estimates for this product. If product is not typically available on a platform, use 0."""


@dataclass(frozen=True, slots=True)
class PriceComparisonResult:
    product_name: str
    base_price: float
    market_prices: MarketPrices

    def to_payload(self) -> dict[str, Any]:
        return {
            "productName": self.product_name,
            "basePrice": self.base_price,
            "marketPrices": self.market_prices.model_dump(),
        }


def build_prompt(product_name: str) -> str:
    return PROMPT_TEMPLATE.format(product_name=product_name)


def validate_request(product_name: Any, base_price: Any) -> tuple[str, float]:
    """Falsy values count as missing, so ``""`` and ``0`` are rejected too."""
    if not product_name or not base_price:
        raise InvalidPriceRequestError()
    if not isinstance(product_name, str):
        raise InvalidPriceRequestError()
    if isinstance(base_price, bool) or not isinstance(base_price, (int, float)):
        raise InvalidPriceRequestError()
    if isinstance(base_price, float) and not math.isfinite(base_price):
        raise InvalidPriceRequestError()
    return product_name, base_price


@dataclass(frozen=True, slots=True)
class PriceComparisonService:
    """Asks the delegate for marketplace estimates and validates what comes back.

    No caching and no retry beyond the delegate's own policy: one call per
    comparison. Only ``ApplicationError`` subclasses leave this service.
    """

    delegate: TextGenerationPort

    async def compare(self, product_name: Any, base_price: Any) -> PriceComparisonResult:
        name, price = validate_request(product_name, base_price)
        try:
            text = await self.delegate.generate_text(build_prompt(name))
        except ApplicationError:
            raise
        except Exception as exc:
            raise PriceComparisonError(str(exc), context={"product_name": name}) from exc
        return PriceComparisonResult(name, price, self._parse(text, name))

    @staticmethod
    def _parse(text: str, product_name: str) -> MarketPrices:
        try:
            return JsonSanitizerService.extract_and_validate_json(text, MarketPrices)
        except (JsonParsingError, SchemaValidationError) as exc:
            logger.warning(
                "Unusable price comparison output",
                error_type=type(exc).__name__,
                error_details=str(exc),
                product_name=product_name,
            )
            raise PriceResponseParseError(context={"product_name": product_name}) from exc
