# =============================================================================
# app/routers/products.py - Product Read Endpoints
# =============================================================================
# Public storefront endpoints: listing with search, featured products and
# product detail. A missing product redirects to the listing page.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Query
from fastapi.responses import RedirectResponse

from app.dependencies import CatalogDep
from core.models.product import Product, ProductList
from core.models.results import NotFound

router = APIRouter()

# Where the browser goes when a product ID doesn't exist
PRODUCTS_ROUTE = "/products"


@router.get("", response_model=ProductList)
def list_products(
    catalog: CatalogDep,
    search: Annotated[str, Query(max_length=200, description="Match name or company")] = "",
):
    """
    List products, newest first.

    With `search`, only products whose name or company contains the term
    (case-insensitive) are returned.
    """
    products = catalog.fetch_all_products(search=search)
    return ProductList(products=products, total=len(products), search=search)


@router.get("/featured", response_model=list[Product])
def list_featured_products(catalog: CatalogDep):
    """List products flagged as featured."""
    return catalog.fetch_featured_products()


@router.get(
    "/{product_id}",
    response_model=Product,
    responses={303: {"description": "Product not found; redirect to the listing"}},
)
def get_product(
    product_id: Annotated[str, Path(description="Product ID")],
    catalog: CatalogDep,
):
    """
    Get a single product.

    Unknown IDs redirect to the product listing instead of returning 404.
    """
    result = catalog.fetch_single_product(product_id)

    if isinstance(result, NotFound):
        return RedirectResponse(url=PRODUCTS_ROUTE, status_code=303)

    return result.value
