from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from storefront_demo.core.application.exceptions.storefront_exceptions import (
    ConfigurationError,
    ProviderError,
)
from storefront_demo.core.application.services.price_comparison_service import (
    PriceComparisonService,
)
from storefront_demo.core.application.services.product_detail_service import ProductDetailService
from storefront_demo.infrastructure.configuration.app_settings import AppSettings
from storefront_demo.infrastructure.configuration.llm_settings import LlmSettings
from storefront_demo.infrastructure.entrypoints.api.dependencies import (
    get_price_comparison_service,
)
from storefront_demo.infrastructure.providers.llms.gemini.clients.gemini_client_factory import (
    GeminiClientFactory,
)
from storefront_demo.infrastructure.providers.llms.gemini.clients.gemini_config import (
    GeminiConfig,
)
from storefront_demo.infrastructure.providers.llms.gemini.gemini_provider_impl import (
    GeminiProvider,
)
from storefront_demo.infrastructure.providers.pricing.http_price_comparison_client import (
    HttpPriceComparisonClient,
)
from storefront_demo.infrastructure.resolution.container import (
    build_price_comparison_service,
    build_product_detail_service,
)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.headers["x-correlation-id"]


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "req-123"})

    assert response.headers["x-correlation-id"] == "req-123"


def test_catalog_routes(client):
    categories = client.get("/api/categories").json()
    assert {"id": "all", "name": "All"} in categories

    products = client.get("/api/products", params={"category": "sports", "q": "run"}).json()
    assert [p["id"] for p in products] == ["8"]
    assert products[0]["originalPrice"] == 140.0
    assert products[0]["discountPercent"] == 15

    assert client.get("/api/products/1").json()["instagramReels"]
    missing = client.get("/api/products/does-not-exist")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Product not found"}


def test_cart_flow_and_checkout(client):
    client.post("/api/cart/items", json={"productId": "1", "quantity": 2})
    cart = client.post("/api/cart/items", json={"productId": "1", "quantity": 1}).json()
    assert cart["count"] == 1
    assert cart["items"][0]["quantity"] == 3

    cart = client.patch("/api/cart/items/1", json={"quantity": 0}).json()
    assert cart["items"][0]["quantity"] == 1

    client.post("/api/cart/items", json={"productId": "3"})
    cart = client.get("/api/cart").json()
    expected_subtotal = 199.99 + 59.99
    assert cart["summary"]["subtotal"] == pytest.approx(expected_subtotal)
    assert cart["summary"]["total"] == pytest.approx(expected_subtotal * 1.1 + 10)

    response = client.post("/api/checkout")
    assert response.status_code == 201
    order = response.json()
    assert order["status"] == "pending"
    assert order["id"].startswith("ORDER_")
    assert [i["id"] for i in order["items"]] == ["1", "3"]

    assert client.get("/api/cart").json()["items"] == []
    assert [o["id"] for o in client.get("/api/orders").json()] == [order["id"]]


def test_checkout_of_empty_cart_is_rejected(client):
    response = client.post("/api/checkout")

    assert response.status_code == 409
    assert response.json() == {"error": "Cart is empty"}
    assert client.get("/api/orders").json() == []


def test_cart_removal_is_idempotent(client):
    client.post("/api/cart/items", json={"productId": "2"})

    assert client.delete("/api/cart/items/2").json()["count"] == 0
    assert client.delete("/api/cart/items/2").status_code == 200
    assert client.delete("/api/cart").json()["items"] == []


def test_adding_unknown_product_to_cart_returns_404(client):
    response = client.post("/api/cart/items", json={"productId": "nope"})

    assert response.status_code == 404


def test_wishlist_flow(client):
    client.post("/api/wishlist/items", json={"productId": "4"})
    client.post("/api/wishlist/items", json={"productId": "4"})
    wishlist = client.get("/api/wishlist").json()
    assert [w["id"] for w in wishlist] == ["4"]

    cart = client.post("/api/wishlist/items/4/move-to-cart").json()
    assert cart["items"][0]["quantity"] == 1

    assert client.post("/api/wishlist/items/4/toggle").json()["inWishlist"] is False
    assert client.post("/api/wishlist/items/4/toggle").json()["inWishlist"] is True
    client.delete("/api/wishlist/items/4")
    assert client.get("/api/wishlist").json() == []
    assert client.post("/api/wishlist/items/4/move-to-cart").status_code == 404


def test_compare_prices_success(client, mock_delegate):
    response = client.post("/api/compare-prices", json={"productName": "Smart Fitness Watch", "basePrice": 149})

    assert response.status_code == 200
    body = response.json()
    assert body["productName"] == "Smart Fitness Watch"
    assert body["basePrice"] == 149
    assert set(body["marketPrices"]) == {"amazon", "flipkart", "blinkit"}
    assert body["marketPrices"]["blinkit"]["price"] == 0
    mock_delegate.generate_text.assert_awaited_once()


@pytest.mark.parametrize(
    "payload",
    [{}, {"productName": "Watch"}, {"basePrice": 10}, {"productName": "", "basePrice": 10}, [1, 2]],
)
def test_compare_prices_missing_fields(client, mock_delegate, payload):
    response = client.post("/api/compare-prices", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Product name and base price are required"}
    mock_delegate.generate_text.assert_not_awaited()


def test_compare_prices_unparseable_output(client, mock_delegate):
    mock_delegate.generate_text.return_value = "I am not able to help with that."

    response = client.post("/api/compare-prices", json={"productName": "Watch", "basePrice": 10})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to parse response"}


def test_compare_prices_delegate_failure(client, mock_delegate):
    mock_delegate.generate_text.side_effect = ProviderError("gemini", "deadline exceeded")

    response = client.post("/api/compare-prices", json={"productName": "Watch", "basePrice": 10})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to compare prices"}


def test_compare_prices_configuration_error(client, mock_delegate):
    mock_delegate.generate_text.side_effect = ConfigurationError()

    response = client.post("/api/compare-prices", json={"productName": "Watch", "basePrice": 10})

    assert response.status_code == 500
    assert response.json() == {"error": "API key not configured"}


def test_compare_prices_invalid_json_body(client):
    response = client.post(
        "/api/compare-prices", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to compare prices"}


@pytest.mark.parametrize("price", [b"NaN", b"Infinity", b"-Infinity"])
def test_compare_prices_rejects_non_finite_base_price(client, mock_delegate, price):
    body = b'{"productName": "Watch", "basePrice": ' + price + b"}"

    response = client.post("/api/compare-prices", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": "Product name and base price are required"}
    mock_delegate.generate_text.assert_not_awaited()


def test_compare_prices_non_finite_model_price_is_a_parse_error(client, mock_delegate):
    mock_delegate.generate_text.return_value = (
        '{"amazon": {"price": NaN, "discount": 0}, "flipkart": {"price": 10}, "blinkit": {"price": 0}}'
    )

    response = client.post("/api/compare-prices", json={"productName": "Watch", "basePrice": 10})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to parse response"}


@pytest.fixture
def genai_client(mock_delegate):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=MagicMock(text=mock_delegate.generate_text.return_value)
    )
    return client


@pytest.fixture
def gemini_app(app, genai_client):
    factory = MagicMock(spec=GeminiClientFactory)
    factory.create.return_value = genai_client
    provider = GeminiProvider(config=GeminiConfig(api_key="test-key"), client_factory=factory)
    app.dependency_overrides[get_price_comparison_service] = lambda: PriceComparisonService(delegate=provider)
    return app


def test_compare_prices_through_gemini_provider(gemini_app, client, genai_client):
    payload = {"productName": "Smart Fitness Watch", "basePrice": 149}
    response = client.post("/api/compare-prices", json=payload)

    assert response.status_code == 200
    assert response.json()["marketPrices"]["amazon"] == {"price": 189.99, "discount": 24}
    genai_client.aio.models.generate_content.assert_awaited_once()


def test_compare_prices_gemini_empty_text_is_a_parse_error(gemini_app, client, genai_client):
    genai_client.aio.models.generate_content.return_value = MagicMock(text="")

    response = client.post("/api/compare-prices", json={"productName": "Watch", "basePrice": 10})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to parse response"}


def test_compare_prices_gemini_api_error_is_a_generic_failure(gemini_app, client, genai_client):
    genai_client.aio.models.generate_content.side_effect = RuntimeError("503 UNAVAILABLE")

    response = client.post("/api/compare-prices", json={"productName": "Watch", "basePrice": 10})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to compare prices"}
    assert genai_client.aio.models.generate_content.await_count == 1


def test_compare_prices_without_api_key_uses_real_wiring(app, client):
    service = build_price_comparison_service(LlmSettings(_env_file=None, gemini_api_key=None))
    app.dependency_overrides[get_price_comparison_service] = lambda: service

    response = client.post("/api/compare-prices", json={"productName": "Watch", "basePrice": 10})
    assert response.status_code == 500
    assert response.json() == {"error": "API key not configured"}

    missing = client.post("/api/compare-prices", json={"productName": "Watch"})
    assert missing.status_code == 400


def test_metrics_endpoint_exposes_counters(client):
    client.post("/api/compare-prices", json={})

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "storefront_price_comparisons_total" in response.text



@pytest.mark.asyncio
async def test_product_detail_view_fetches_through_the_api(app, catalog):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://storefront.test") as http:
        service = ProductDetailService(
            HttpPriceComparisonClient("http://storefront.test/api/compare-prices", http_client=http)
        )
        await service.open("view-2", catalog.get_product("2"))

    view = service.view("view-2")
    assert view.error is None
    assert view.market_prices.amazon.price == 189.99


def test_product_detail_service_wiring():
    settings = AppSettings(_env_file=None, price_comparison_url="http://shop.test/api/compare-prices")

    service = build_product_detail_service(settings)

    assert isinstance(service.client, HttpPriceComparisonClient)
    assert service.client.url == "http://shop.test/api/compare-prices"
