from abc import ABC, abstractmethod

from storefront_demo.core.domain.catalog.entities.product import Category, Product


class CatalogPort(ABC):
    """Read-only access to the static product catalog."""

    @abstractmethod
    def list_categories(self) -> list[Category]: ...

    @abstractmethod
    def list_products(self, category: str = "all", query: str = "") -> list[Product]: ...

    @abstractmethod
    def get_product(self, product_id: str) -> Product | None: ...
