from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront_demo.core.application.services.checkout_service import CheckoutSummary
from storefront_demo.core.domain.catalog.entities.product import Category, Product
from storefront_demo.core.domain.shopping.entities.cart_item import CartItem
from storefront_demo.core.domain.shopping.entities.order import Order
from storefront_demo.core.domain.shopping.entities.wishlist_item import WishlistItem


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CategoryDTO(CamelModel):
    id: str
    name: str

    @classmethod
    def from_domain(cls, category: Category) -> CategoryDTO:
        return cls(id=category.id, name=category.name)


class ProductDTO(CamelModel):
    id: str
    name: str
    price: float
    original_price: float
    discount_percent: int
    category: str
    rating: float
    reviews: int
    stock: int
    description: str
    specs: list[str]
    image: str
    instagram_reels: list[str]

    @classmethod
    def from_domain(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            original_price=product.original_price,
            discount_percent=product.discount_percent,
            category=product.category,
            rating=product.rating,
            reviews=product.reviews,
            stock=product.stock,
            description=product.description,
            specs=list(product.specs),
            image=product.image,
            instagram_reels=list(product.instagram_reels),
        )


class CartItemDTO(CamelModel):
    id: str
    name: str
    price: float
    quantity: int
    image: str

    @classmethod
    def from_domain(cls, item: CartItem) -> CartItemDTO:
        return cls(id=item.id, name=item.name, price=item.price, quantity=item.quantity, image=item.image)


class CheckoutSummaryDTO(CamelModel):
    subtotal: float
    tax: float
    shipping: float
    total: float

    @classmethod
    def from_domain(cls, summary: CheckoutSummary) -> CheckoutSummaryDTO:
        return cls(subtotal=summary.subtotal, tax=summary.tax, shipping=summary.shipping, total=summary.total)


class CartDTO(CamelModel):
    items: list[CartItemDTO]
    count: int
    summary: CheckoutSummaryDTO


class WishlistItemDTO(CamelModel):
    id: str
    name: str
    price: float
    image: str
    rating: float
    reviews: int
    stock: int

    @classmethod
    def from_domain(cls, item: WishlistItem) -> WishlistItemDTO:
        return cls(
            id=item.id,
            name=item.name,
            price=item.price,
            image=item.image,
            rating=item.rating,
            reviews=item.reviews,
            stock=item.stock,
        )


class OrderDTO(CamelModel):
    id: str
    items: list[CartItemDTO]
    total: float
    status: str
    date: str

    @classmethod
    def from_domain(cls, order: Order) -> OrderDTO:
        return cls(
            id=order.id,
            items=[CartItemDTO.from_domain(i) for i in order.items],
            total=order.total,
            status=order.status.value,
            date=order.date,
        )


class AddCartItemRequest(CamelModel):
    product_id: str
    quantity: int = 1


class UpdateCartQuantityRequest(CamelModel):
    quantity: int


class AddWishlistItemRequest(CamelModel):
    product_id: str


class WishlistToggleDTO(CamelModel):
    product_id: str
    in_wishlist: bool = Field(..., description="Membership after the operation")
