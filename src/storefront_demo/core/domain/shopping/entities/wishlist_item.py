from __future__ import annotations

from dataclasses import dataclass

from storefront_demo.core.domain.catalog.entities.product import Product


@dataclass(frozen=True, slots=True)
class WishlistItem:
    id: str
    name: str
    price: float
    image: str
    rating: float
    reviews: int
    stock: int

    @classmethod
    def from_product(cls, product: Product) -> WishlistItem:
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            image=product.image,
            rating=product.rating,
            reviews=product.reviews,
            stock=product.stock,
        )
