import pytest
from pydantic import ValidationError

from storefront_demo.core.domain.catalog.entities.product import Product
from storefront_demo.core.domain.pricing.value_objects.market_prices import MarketPrices
from storefront_demo.core.domain.pricing.value_objects.platform_name import PlatformName
from storefront_demo.core.domain.shopping.entities.cart_item import CartItem
from storefront_demo.core.domain.shopping.entities.wishlist_item import WishlistItem
from storefront_demo.core.domain.shopping.value_objects.order_status import OrderStatus


def _product(**overrides):
    fields = dict(
        id="1",
        name="Yoga Mat Pro",
        price=40.0,
        original_price=50.0,
        category="sports",
        rating=4.4,
        reviews=10,
        stock=3,
        description="Mat",
    )
    fields.update(overrides)
    return Product(**fields)


def test_discount_percent_is_rounded():
    assert _product().discount_percent == 20
    assert _product(price=39.99, original_price=54.99).discount_percent == 27
    assert _product(price=45.0, original_price=45.0).discount_percent == 0
    assert _product(original_price=0).discount_percent == 0
    # Exactly half a percent rounds up.
    assert _product(price=199, original_price=200).discount_percent == 1
    assert _product(price=197, original_price=200).discount_percent == 2


def test_product_matches_category_and_case_insensitive_name():
    product = _product()

    assert product.matches("all", "")
    assert product.matches("sports", "yoga")
    assert product.matches("all", "MAT")
    assert not product.matches("home", "")
    assert not product.matches("sports", "shoes")


def test_items_built_from_product(product):
    cart_item = CartItem.from_product(product, quantity=3)
    wishlist_item = WishlistItem.from_product(product)

    assert (cart_item.id, cart_item.price, cart_item.quantity) == (product.id, product.price, 3)
    assert cart_item.line_total == pytest.approx(product.price * 3)
    assert wishlist_item.rating == product.rating
    assert wishlist_item.stock == product.stock


def test_order_status_is_closed_enumeration():
    assert [s.value for s in OrderStatus] == ["pending", "shipped", "delivered"]
    assert OrderStatus.PENDING.label == "Pending"


def test_market_prices_accepts_integers_and_ignores_extra_keys():
    prices = MarketPrices.model_validate(
        {
            "amazon": {"price": 10, "discount": 5},
            "flipkart": {"price": 12.5, "discount": 0, "currency": "USD"},
            "blinkit": {"price": 0},
            "note": "estimates",
        }
    )

    assert prices.for_platform(PlatformName.FLIPKART).price == 12.5
    assert prices.blinkit.discount == 0
    assert PlatformName.BLINKIT.display_name == "Blinkit"


@pytest.mark.parametrize("bad", ["10", None, True, [10], float("nan"), float("-inf")])
def test_market_prices_rejects_non_numeric_price(bad):
    with pytest.raises(ValidationError):
        MarketPrices.model_validate(
            {
                "amazon": {"price": bad, "discount": 5},
                "flipkart": {"price": 12, "discount": 0},
                "blinkit": {"price": 0, "discount": 0},
            }
        )


def test_market_prices_requires_every_platform():
    with pytest.raises(ValidationError):
        MarketPrices.model_validate({"amazon": {"price": 1}, "flipkart": {"price": 2}})
