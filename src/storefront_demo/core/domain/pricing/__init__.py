from storefront_demo.core.domain.pricing.value_objects.market_prices import (
    MarketPrices,
    PlatformPrice,
)
from storefront_demo.core.domain.pricing.value_objects.platform_name import PlatformName

__all__ = ["MarketPrices", "PlatformName", "PlatformPrice"]
