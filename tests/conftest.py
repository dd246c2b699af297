from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from storefront_demo.core.application.ports.text_generation_port import TextGenerationPort
from storefront_demo.core.application.services.checkout_service import CheckoutService
from storefront_demo.core.application.services.price_comparison_service import (
    PriceComparisonService,
)
from storefront_demo.core.application.services.store_state_service import StoreStateService
from storefront_demo.core.domain.catalog.entities.product import Product
from storefront_demo.core.domain.shopping.entities.cart_item import CartItem
from storefront_demo.core.domain.shopping.entities.wishlist_item import WishlistItem
from storefront_demo.infrastructure.configuration.main_settings import Settings
from storefront_demo.infrastructure.entrypoints.api.app_factory import create_app
from storefront_demo.infrastructure.entrypoints.api.dependencies import (
    get_price_comparison_service,
)
from storefront_demo.infrastructure.repositories.json_catalog_repository import (
    JsonCatalogRepository,
)

VALID_MODEL_OUTPUT = """Here are the estimates you asked for:
{
  "amazon": { "price": 189.99, "discount": 24 },
  "flipkart": { "price": 179.5, "discount": 28 },
  "blinkit": { "price": 0, "discount": 0 }
}
Let me know if you need anything else."""


@pytest.fixture
def store():
    return StoreStateService()


@pytest.fixture
def checkout(store):
    return CheckoutService(store)


@pytest.fixture
def catalog():
    return JsonCatalogRepository()


@pytest.fixture
def product():
    return Product(
        id="p-1",
        name="Wireless Noise-Cancelling Headphones",
        price=199.99,
        original_price=249.99,
        category="electronics",
        rating=4.7,
        reviews=1284,
        stock=42,
        description="Over-ear headphones.",
        specs=("Bluetooth 5.3",),
        image="https://example.com/headphones.jpg",
    )


@pytest.fixture
def make_cart_item():
    def _make(id="p-1", price=10.0, quantity=1, name=None):
        return CartItem(id=id, name=name or f"Item {id}", price=price, quantity=quantity, image="")

    return _make


@pytest.fixture
def make_wishlist_item():
    def _make(id="p-1", name=None, price=10.0):
        return WishlistItem(
            id=id, name=name or f"Item {id}", price=price, image="", rating=4.0, reviews=3, stock=5
        )

    return _make


@pytest.fixture
def mock_delegate():
    delegate = MagicMock(spec=TextGenerationPort)
    delegate.generate_text = AsyncMock(return_value=VALID_MODEL_OUTPUT)
    return delegate


@pytest.fixture
def settings():
    return Settings(app_name="TestStorefront", env="test", gemini_api_key="mock_gemini_key")


@pytest.fixture
def app(settings, mock_delegate):
    application = create_app(settings)
    application.dependency_overrides[get_price_comparison_service] = lambda: PriceComparisonService(
        delegate=mock_delegate
    )
    return application


@pytest.fixture
def client(app):
    return TestClient(app)
