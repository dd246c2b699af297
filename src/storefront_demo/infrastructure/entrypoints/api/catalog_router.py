from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from storefront_demo.core.application.ports.catalog_port import CatalogPort
from storefront_demo.core.domain.catalog.entities.product import ALL_CATEGORIES
from storefront_demo.infrastructure.entrypoints.api.dependencies import get_catalog
from storefront_demo.infrastructure.entrypoints.api.dtos.storefront_dtos import (
    CategoryDTO,
    ProductDTO,
)

router = APIRouter()

PRODUCT_NOT_FOUND = "Product not found"


def not_found(message: str = PRODUCT_NOT_FOUND) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": message})


@router.get("/categories", response_model=list[CategoryDTO])
def list_categories(catalog: CatalogPort = Depends(get_catalog)):
    return [CategoryDTO.from_domain(c) for c in catalog.list_categories()]


@router.get("/products", response_model=list[ProductDTO])
def list_products(
    category: str = ALL_CATEGORIES,
    q: str = "",
    catalog: CatalogPort = Depends(get_catalog),
):
    return [ProductDTO.from_domain(p) for p in catalog.list_products(category, q)]


@router.get("/products/{product_id}", response_model=ProductDTO, responses={404: {}})
def get_product(product_id: str, catalog: CatalogPort = Depends(get_catalog)):
    product = catalog.get_product(product_id)
    if product is None:
        return not_found()
    return ProductDTO.from_domain(product)
