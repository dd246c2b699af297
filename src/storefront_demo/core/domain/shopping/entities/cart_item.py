from __future__ import annotations

from dataclasses import dataclass, replace

from storefront_demo.core.domain.catalog.entities.product import Product

MIN_QUANTITY = 1


@dataclass(frozen=True, slots=True)
class CartItem:
    id: str
    name: str
    price: float
    quantity: int
    image: str = ""

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def with_quantity(self, quantity: int) -> CartItem:
        return replace(self, quantity=max(MIN_QUANTITY, quantity))

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> CartItem:
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            quantity=quantity,
            image=product.image,
        )
