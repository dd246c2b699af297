"""Validated shape of a cross-marketplace price estimate."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from storefront_demo.core.domain.pricing.value_objects.platform_name import PlatformName


class PlatformPrice(BaseModel):
    """Estimated price on one platform. ``price == 0`` means not sold there."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    price: float
    discount: float = 0.0

    @field_validator("price", "discount", mode="before")
    @classmethod
    def _require_number(cls, value: Any) -> Any:
        # bool is an int subclass; "12.5" would be coerced in lax mode
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("must be a JSON number")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value

    @property
    def available(self) -> bool:
        return self.price > 0


class MarketPrices(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    amazon: PlatformPrice
    flipkart: PlatformPrice
    blinkit: PlatformPrice

    def for_platform(self, platform: PlatformName) -> PlatformPrice:
        return getattr(self, platform.value)

    def available_platforms(self) -> list[PlatformName]:
        return [p for p in PlatformName if self.for_platform(p).available]
