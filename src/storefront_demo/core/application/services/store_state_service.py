"""In-memory store for cart, wishlist and order history.

One instance per application, injected wherever it is needed. Mutations are
synchronous and never fail: unknown ids are ignored and quantities are
clamped to ``MIN_QUANTITY``.
"""

from __future__ import annotations

from storefront_demo.core.domain.shopping.entities.cart_item import MIN_QUANTITY, CartItem
from storefront_demo.core.domain.shopping.entities.order import Order
from storefront_demo.core.domain.shopping.entities.wishlist_item import WishlistItem


class StoreStateService:
    def __init__(self) -> None:
        self._cart: list[CartItem] = []
        self._wishlist: list[WishlistItem] = []
        self._orders: list[Order] = []

    @property
    def cart(self) -> tuple[CartItem, ...]:
        return tuple(self._cart)

    @property
    def wishlist(self) -> tuple[WishlistItem, ...]:
        return tuple(self._wishlist)

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    @property
    def cart_count(self) -> int:
        return len(self._cart)

    def add_to_cart(self, item: CartItem) -> None:
        added = max(MIN_QUANTITY, item.quantity)
        index = self._cart_index(item.id)
        if index is None:
            self._cart.append(item.with_quantity(added))
            return
        existing = self._cart[index]
        self._cart[index] = existing.with_quantity(existing.quantity + added)

    def remove_from_cart(self, product_id: str) -> None:
        self._cart = [i for i in self._cart if i.id != product_id]

    def update_cart_quantity(self, product_id: str, quantity: int) -> None:
        index = self._cart_index(product_id)
        if index is not None:
            self._cart[index] = self._cart[index].with_quantity(quantity)

    def clear_cart(self) -> None:
        self._cart = []

    def add_to_wishlist(self, item: WishlistItem) -> None:
        if not self.is_in_wishlist(item.id):
            self._wishlist.append(item)

    def remove_from_wishlist(self, product_id: str) -> None:
        self._wishlist = [i for i in self._wishlist if i.id != product_id]

    def is_in_wishlist(self, product_id: str) -> bool:
        return any(i.id == product_id for i in self._wishlist)

    def toggle_wishlist(self, item: WishlistItem) -> bool:
        """Add *item* if absent, remove it otherwise. Returns the new membership."""
        if self.is_in_wishlist(item.id):
            self.remove_from_wishlist(item.id)
            return False
        self.add_to_wishlist(item)
        return True

    def move_wishlist_item_to_cart(self, product_id: str) -> bool:
        """Put one unit of a wishlisted product in the cart; the wishlist keeps it."""
        item = next((i for i in self._wishlist if i.id == product_id), None)
        if item is None:
            return False
        self.add_to_cart(CartItem(id=item.id, name=item.name, price=item.price, quantity=1, image=item.image))
        return True

    def add_order(self, order: Order) -> None:
        self._orders.append(order)

    def _cart_index(self, product_id: str) -> int | None:
        for index, item in enumerate(self._cart):
            if item.id == product_id:
                return index
        return None
