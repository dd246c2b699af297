from storefront_demo.core.domain.catalog.entities.product import (
    ALL_CATEGORIES,
    Category,
    Product,
)

__all__ = ["ALL_CATEGORIES", "Category", "Product"]
