from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

import structlog

from storefront_demo.core.application.ports.price_comparison_client_port import (
    PriceComparisonClientPort,
)
from storefront_demo.core.application.services.price_fetch_registry import PriceFetchRegistry
from storefront_demo.core.domain.catalog.entities.product import Product
from storefront_demo.core.domain.pricing.value_objects.market_prices import MarketPrices

logger = structlog.get_logger()

PRICE_ERROR_MESSAGE = "Unable to fetch price comparison at this time"


@dataclass
class ProductDetailView:
    product: Product
    market_prices: MarketPrices | None = None
    loading: bool = False
    error: str | None = None


class ProductDetailService:
    """View model for the product page: one price fetch per opened view.

    A failed fetch only sets ``error``; the rest of the view is unaffected.
    """

    def __init__(
        self,
        client: PriceComparisonClientPort,
        registry: PriceFetchRegistry | None = None,
    ) -> None:
        self.client = client
        self.registry = registry or PriceFetchRegistry()
        self._views: dict[str, ProductDetailView] = {}

    def open(self, token: str, product: Product) -> asyncio.Task[Any]:
        view = ProductDetailView(product=product, loading=True)
        self._views[token] = view
        return self.registry.start(token, self._fetch(token, view))

    def view(self, token: str) -> ProductDetailView | None:
        return self._views.get(token)

    def close(self, token: str) -> None:
        self.registry.release(token)
        self._views.pop(token, None)

    async def _fetch(self, token: str, view: ProductDetailView) -> None:
        prices: MarketPrices | None = None
        error: str | None = None
        try:
            prices = await self.client.compare(view.product.name, view.product.price)
        except Exception as exc:
            logger.warning(
                "Price comparison fetch failed",
                error_type=type(exc).__name__,
                error_details=str(exc),
                product_id=view.product.id,
            )
            error = PRICE_ERROR_MESSAGE

        if self._views.get(token) is not view:
            logger.debug("Discarding stale price comparison", product_id=view.product.id)
            return
        view.market_prices = prices
        view.error = error
        view.loading = False
