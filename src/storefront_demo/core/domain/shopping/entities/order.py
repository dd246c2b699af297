from __future__ import annotations

from dataclasses import dataclass

from storefront_demo.core.domain.shopping.entities.cart_item import CartItem
from storefront_demo.core.domain.shopping.value_objects.order_status import OrderStatus


@dataclass(frozen=True, slots=True)
class Order:
    """Snapshot of a checked-out cart. Uniqueness of ``id`` is up to the caller."""

    id: str
    items: tuple[CartItem, ...]
    total: float
    status: OrderStatus
    date: str

    @property
    def item_count(self) -> int:
        return len(self.items)
