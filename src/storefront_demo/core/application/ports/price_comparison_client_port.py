from abc import ABC, abstractmethod

from storefront_demo.core.domain.pricing.value_objects.market_prices import MarketPrices


class PriceComparisonClientPort(ABC):
    """Caller side of the price comparison endpoint."""

    @abstractmethod
    async def compare(self, product_name: str, base_price: float) -> MarketPrices:
        """Return market prices or raise on any failure."""
