from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Category:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Product:
    """Read-only catalog entry. ``price <= original_price`` is assumed, not enforced."""

    id: str
    name: str
    price: float
    original_price: float
    category: str
    rating: float
    reviews: int
    stock: int
    description: str
    specs: tuple[str, ...] = ()
    image: str = ""
    instagram_reels: tuple[str, ...] = field(default_factory=tuple)

    @property
    def discount_percent(self) -> int:
        if self.original_price <= 0:
            return 0
        # Half-up, so 0.5% shows as 1%.
        return math.floor((self.original_price - self.price) / self.original_price * 100 + 0.5)

    def matches(self, category: str, query: str) -> bool:
        in_category = category == ALL_CATEGORIES or self.category == category
        return in_category and query.lower() in self.name.lower()


ALL_CATEGORIES = "all"
