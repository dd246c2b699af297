from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

import structlog

from storefront_demo.core.application.ports.catalog_port import CatalogPort
from storefront_demo.core.domain.catalog.entities.product import (
    ALL_CATEGORIES,
    Category,
    Product,
)

logger = structlog.get_logger()


def _product_from_dict(data: dict[str, Any]) -> Product:
    return Product(
        id=str(data["id"]),
        name=data["name"],
        price=float(data["price"]),
        original_price=float(data.get("originalPrice", data["price"])),
        category=data["category"],
        rating=float(data.get("rating", 0)),
        reviews=int(data.get("reviews", 0)),
        stock=int(data.get("stock", 0)),
        description=data.get("description", ""),
        specs=tuple(data.get("specs", [])),
        image=data.get("image", ""),
        instagram_reels=tuple(data.get("instagramReels", [])),
    )


class JsonCatalogRepository(CatalogPort):
    """Static catalog read from a JSON document on first use and never mutated.

    Without a path the catalog bundled in ``storefront_demo/data`` is used.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._categories: list[Category] | None = None
        self._products: list[Product] | None = None

    def list_categories(self) -> list[Category]:
        self._ensure_loaded()
        return list(self._categories)

    def list_products(self, category: str = ALL_CATEGORIES, query: str = "") -> list[Product]:
        self._ensure_loaded()
        return [p for p in self._products if p.matches(category or ALL_CATEGORIES, query or "")]

    def get_product(self, product_id: str) -> Product | None:
        self._ensure_loaded()
        return next((p for p in self._products if p.id == product_id), None)

    def _ensure_loaded(self) -> None:
        if self._products is not None:
            return
        raw = self._read_document()
        self._categories = [Category(id=c["id"], name=c["name"]) for c in raw.get("categories", [])]
        self._products = [_product_from_dict(p) for p in raw.get("products", [])]
        logger.info(
            "Catalog loaded",
            products=len(self._products),
            categories=len(self._categories),
            source=str(self._path or "bundled"),
        )

    def _read_document(self) -> dict[str, Any]:
        if self._path is not None:
            return json.loads(self._path.read_text(encoding="utf-8"))
        bundled = resources.files("storefront_demo.data").joinpath("products.json")
        return json.loads(bundled.read_text(encoding="utf-8"))
