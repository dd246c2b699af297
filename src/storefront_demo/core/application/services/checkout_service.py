from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime

from storefront_demo.core.application.services.store_state_service import StoreStateService
from storefront_demo.core.domain.shopping.entities.order import Order
from storefront_demo.core.domain.shopping.value_objects.order_status import OrderStatus

TAX_RATE = 0.1
SHIPPING_COST = 10.0
ORDER_ID_PREFIX = "ORDER_"

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True, slots=True)
class CheckoutSummary:
    subtotal: float
    tax: float
    shipping: float
    total: float


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def generate_order_id(epoch_ms: int | None = None) -> str:
    millis = epoch_ms if epoch_ms is not None else time.time_ns() // 1_000_000
    return f"{ORDER_ID_PREFIX}{to_base36(millis).upper()}"


def format_order_date(moment: datetime) -> str:
    """``Oct 19, 2026`` style, without a zero-padded day."""
    return f"{moment:%b} {moment.day}, {moment.year}"


class CheckoutService:
    """Derives totals from the cart and turns it into an order."""

    def __init__(
        self,
        store: StoreStateService,
        tax_rate: float = TAX_RATE,
        shipping_cost: float = SHIPPING_COST,
    ) -> None:
        self.store = store
        self.tax_rate = tax_rate
        self.shipping_cost = shipping_cost

    def summary(self) -> CheckoutSummary:
        subtotal = sum(item.line_total for item in self.store.cart)
        tax = subtotal * self.tax_rate
        return CheckoutSummary(
            subtotal=subtotal,
            tax=tax,
            shipping=self.shipping_cost,
            total=subtotal + tax + self.shipping_cost,
        )

    def checkout(self, now: datetime | None = None) -> Order | None:
        """Place an order for the current cart and empty it. Empty cart: no-op."""
        items = self.store.cart
        if not items:
            return None
        moment = now or datetime.now()
        order = Order(
            id=generate_order_id(int(moment.timestamp() * 1000)),
            items=items,
            total=self.summary().total,
            status=OrderStatus.PENDING,
            date=format_order_date(moment),
        )
        self.store.add_order(order)
        self.store.clear_cart()
        return order
