from storefront_demo.core.domain.shopping.entities.cart_item import MIN_QUANTITY, CartItem
from storefront_demo.core.domain.shopping.entities.order import Order
from storefront_demo.core.domain.shopping.entities.wishlist_item import WishlistItem
from storefront_demo.core.domain.shopping.value_objects.order_status import OrderStatus

__all__ = ["MIN_QUANTITY", "CartItem", "Order", "OrderStatus", "WishlistItem"]
