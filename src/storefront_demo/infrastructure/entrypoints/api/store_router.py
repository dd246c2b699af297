"""Cart, wishlist, order history and checkout routes over the shared store."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from storefront_demo.core.application.ports.catalog_port import CatalogPort
from storefront_demo.core.application.services.checkout_service import CheckoutService
from storefront_demo.core.application.services.store_state_service import StoreStateService
from storefront_demo.core.domain.shopping.entities.cart_item import CartItem
from storefront_demo.core.domain.shopping.entities.wishlist_item import WishlistItem
from storefront_demo.infrastructure.entrypoints.api.catalog_router import not_found
from storefront_demo.infrastructure.entrypoints.api.dependencies import (
    get_catalog,
    get_checkout,
    get_store,
)
from storefront_demo.infrastructure.entrypoints.api.dtos.storefront_dtos import (
    AddCartItemRequest,
    AddWishlistItemRequest,
    CartDTO,
    CartItemDTO,
    CheckoutSummaryDTO,
    OrderDTO,
    UpdateCartQuantityRequest,
    WishlistItemDTO,
    WishlistToggleDTO,
)
from storefront_demo.infrastructure.observability.logger_factory_service import get_logger
from storefront_demo.infrastructure.observability.metrics_service import ORDERS_PLACED_TOTAL

logger = get_logger(__name__)
router = APIRouter()


def _cart_view(checkout: CheckoutService) -> CartDTO:
    return CartDTO(
        items=[CartItemDTO.from_domain(i) for i in checkout.store.cart],
        count=checkout.store.cart_count,
        summary=CheckoutSummaryDTO.from_domain(checkout.summary()),
    )


# Cart


@router.get("/cart", response_model=CartDTO)
def get_cart(checkout: CheckoutService = Depends(get_checkout)):
    return _cart_view(checkout)


@router.post("/cart/items", response_model=CartDTO, responses={404: {}})
def add_cart_item(
    payload: AddCartItemRequest,
    catalog: CatalogPort = Depends(get_catalog),
    checkout: CheckoutService = Depends(get_checkout),
):
    product = catalog.get_product(payload.product_id)
    if product is None:
        return not_found()
    checkout.store.add_to_cart(CartItem.from_product(product, payload.quantity))
    return _cart_view(checkout)


@router.patch("/cart/items/{product_id}", response_model=CartDTO)
def update_cart_item(
    product_id: str,
    payload: UpdateCartQuantityRequest,
    checkout: CheckoutService = Depends(get_checkout),
):
    checkout.store.update_cart_quantity(product_id, payload.quantity)
    return _cart_view(checkout)


@router.delete("/cart/items/{product_id}", response_model=CartDTO)
def remove_cart_item(product_id: str, checkout: CheckoutService = Depends(get_checkout)):
    checkout.store.remove_from_cart(product_id)
    return _cart_view(checkout)


@router.delete("/cart", response_model=CartDTO)
def clear_cart(checkout: CheckoutService = Depends(get_checkout)):
    checkout.store.clear_cart()
    return _cart_view(checkout)


# Wishlist


@router.get("/wishlist", response_model=list[WishlistItemDTO])
def get_wishlist(store: StoreStateService = Depends(get_store)):
    return [WishlistItemDTO.from_domain(i) for i in store.wishlist]


@router.post("/wishlist/items", response_model=WishlistToggleDTO, responses={404: {}})
def add_wishlist_item(
    payload: AddWishlistItemRequest,
    catalog: CatalogPort = Depends(get_catalog),
    store: StoreStateService = Depends(get_store),
):
    product = catalog.get_product(payload.product_id)
    if product is None:
        return not_found()
    store.add_to_wishlist(WishlistItem.from_product(product))
    return WishlistToggleDTO(product_id=product.id, in_wishlist=True)


@router.post("/wishlist/items/{product_id}/toggle", response_model=WishlistToggleDTO, responses={404: {}})
def toggle_wishlist_item(
    product_id: str,
    catalog: CatalogPort = Depends(get_catalog),
    store: StoreStateService = Depends(get_store),
):
    product = catalog.get_product(product_id)
    if product is None:
        return not_found()
    in_wishlist = store.toggle_wishlist(WishlistItem.from_product(product))
    return WishlistToggleDTO(product_id=product.id, in_wishlist=in_wishlist)


@router.delete("/wishlist/items/{product_id}", response_model=WishlistToggleDTO)
def remove_wishlist_item(product_id: str, store: StoreStateService = Depends(get_store)):
    store.remove_from_wishlist(product_id)
    return WishlistToggleDTO(product_id=product_id, in_wishlist=False)


@router.post("/wishlist/items/{product_id}/move-to-cart", response_model=CartDTO, responses={404: {}})
def move_wishlist_item_to_cart(product_id: str, checkout: CheckoutService = Depends(get_checkout)):
    if not checkout.store.move_wishlist_item_to_cart(product_id):
        return not_found("Product not in wishlist")
    return _cart_view(checkout)


# Orders


@router.get("/orders", response_model=list[OrderDTO])
def list_orders(store: StoreStateService = Depends(get_store)):
    return [OrderDTO.from_domain(o) for o in store.orders]


@router.post(
    "/checkout",
    response_model=OrderDTO,
    status_code=status.HTTP_201_CREATED,
    responses={409: {}},
)
def checkout_cart(checkout: CheckoutService = Depends(get_checkout)):
    order = checkout.checkout()
    if order is None:
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"error": "Cart is empty"})
    ORDERS_PLACED_TOTAL.inc()
    logger.info("Order placed", order_id=order.id, items=order.item_count, total=order.total)
    return OrderDTO.from_domain(order)
