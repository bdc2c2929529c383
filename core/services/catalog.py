# =============================================================================
# core/services/catalog.py - Product Read Pipelines
# =============================================================================
# Read-only entry points used by the storefront pages. Each is a single call
# into ProductService; the single-product lookup returns Found / NotFound
# instead of raising so the HTTP layer can redirect.
# =============================================================================

import logging

from core.models.product import Product
from core.models.results import Found, NotFound, ProductLookup
from core.services.product_service import ProductService

logger = logging.getLogger(__name__)


class CatalogService:
    """Storefront read operations."""

    def __init__(self, products: ProductService):
        self.products = products

    def fetch_featured_products(self) -> list[Product]:
        return self.products.list_featured()

    def fetch_all_products(self, search: str = "") -> list[Product]:
        return self.products.list_all(search=search)

    def fetch_single_product(self, product_id: str) -> ProductLookup:
        """
        Look up one product.

        Returns:
            Found with the product, or NotFound if the ID matches nothing
        """
        product = self.products.get_product(product_id)
        if product is None:
            logger.info(f"Product not found: {product_id}")
            return NotFound(product_id)
        return Found(product)
