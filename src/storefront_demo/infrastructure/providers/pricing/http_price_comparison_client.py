from __future__ import annotations

import httpx

from storefront_demo.core.application.ports.price_comparison_client_port import (
    PriceComparisonClientPort,
)
from storefront_demo.core.domain.pricing.value_objects.market_prices import MarketPrices


class HttpPriceComparisonClient(PriceComparisonClientPort):
    """Calls ``POST /api/compare-prices`` and returns the ``marketPrices`` block."""

    def __init__(self, url: str, http_client: httpx.AsyncClient | None = None, timeout: float = 30.0) -> None:
        self.url = url
        self._http = http_client
        self._timeout = timeout

    async def compare(self, product_name: str, base_price: float) -> MarketPrices:
        payload = {"productName": product_name, "basePrice": base_price}
        if self._http is not None:
            response = await self._http.post(self.url, json=payload)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(self.url, json=payload)
        response.raise_for_status()
        return MarketPrices.model_validate(response.json()["marketPrices"])
