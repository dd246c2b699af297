from storefront_demo.core.application.ports.catalog_port import CatalogPort
from storefront_demo.core.application.ports.price_comparison_client_port import (
    PriceComparisonClientPort,
)
from storefront_demo.core.application.ports.text_generation_port import TextGenerationPort

__all__ = ["CatalogPort", "PriceComparisonClientPort", "TextGenerationPort"]
