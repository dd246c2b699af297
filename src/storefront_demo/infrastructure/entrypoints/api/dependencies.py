from fastapi import Request

from storefront_demo.core.application.ports.catalog_port import CatalogPort
from storefront_demo.core.application.services.checkout_service import CheckoutService
from storefront_demo.core.application.services.price_comparison_service import (
    PriceComparisonService,
)
from storefront_demo.core.application.services.store_state_service import StoreStateService
from storefront_demo.infrastructure.resolution.container import (
    StorefrontContainer,
    build_price_comparison_service,
)


def get_container(request: Request) -> StorefrontContainer:
    return request.app.state.container


def get_catalog(request: Request) -> CatalogPort:
    return get_container(request).catalog


def get_store(request: Request) -> StoreStateService:
    return get_container(request).store


def get_checkout(request: Request) -> CheckoutService:
    return get_container(request).checkout


def get_price_comparison_service() -> PriceComparisonService:
    """Built per request so credential changes apply without a restart."""
    return build_price_comparison_service()
