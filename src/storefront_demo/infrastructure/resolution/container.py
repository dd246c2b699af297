"""Composition root: wires settings, adapters and services together."""

from __future__ import annotations

from dataclasses import dataclass

from storefront_demo.core.application.ports.catalog_port import CatalogPort
from storefront_demo.core.application.services.checkout_service import CheckoutService
from storefront_demo.core.application.services.price_comparison_service import (
    PriceComparisonService,
)
from storefront_demo.core.application.services.product_detail_service import (
    ProductDetailService,
)
from storefront_demo.core.application.services.store_state_service import StoreStateService
from storefront_demo.infrastructure.common.retry.retry_policy import RetryPolicy
from storefront_demo.infrastructure.configuration.app_settings import AppSettings
from storefront_demo.infrastructure.configuration.llm_settings import LlmSettings
from storefront_demo.infrastructure.configuration.main_settings import Settings
from storefront_demo.infrastructure.providers.llms.gemini.clients.gemini_config import (
    GeminiConfig,
)
from storefront_demo.infrastructure.providers.llms.gemini.gemini_provider_impl import (
    GeminiProvider,
)
from storefront_demo.infrastructure.providers.pricing.http_price_comparison_client import (
    HttpPriceComparisonClient,
)
from storefront_demo.infrastructure.repositories.json_catalog_repository import (
    JsonCatalogRepository,
)


@dataclass
class StorefrontContainer:
    settings: Settings
    catalog: CatalogPort
    store: StoreStateService
    checkout: CheckoutService


def build_container(settings: Settings) -> StorefrontContainer:
    """One store per application instance; it lives as long as the app."""
    store = StoreStateService()
    return StorefrontContainer(
        settings=settings,
        catalog=JsonCatalogRepository(settings.catalog_path),
        store=store,
        checkout=CheckoutService(store),
    )


def build_price_comparison_service(settings: LlmSettings | None = None) -> PriceComparisonService:
    """Read LLM settings fresh so a missing key is reported per request."""
    llm_settings = settings or LlmSettings()
    provider = GeminiProvider(
        config=GeminiConfig.from_settings(llm_settings),
        retry=RetryPolicy(max_attempts=llm_settings.llm_max_attempts),
    )
    return PriceComparisonService(delegate=provider)


def build_product_detail_service(settings: AppSettings) -> ProductDetailService:
    return ProductDetailService(client=HttpPriceComparisonClient(settings.price_comparison_url))
