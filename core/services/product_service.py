# =============================================================================
# core/services/product_service.py - Product Persistence
# =============================================================================
# Thin query wrappers over the Product table. No business rules live here:
# validation happens before create_product() is called, and "not found" is
# reported as None so the caller decides what the user sees.
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from supabase import Client

from app.exceptions import PersistenceError
from core.models.product import Product
from core.validation import ProductFields
from lib.supabase_client import error_message, is_missing_row

logger = logging.getLogger(__name__)

TABLE_NAME = "Product"


def contains_pattern(term: str) -> str:
    """
    Build a quoted PostgREST ILIKE value matching `term` anywhere.

    LIKE wildcards in the term are escaped so "50%" matches literally, then
    the value is double-quoted so commas and parentheses survive the or=
    filter syntax. PostgREST reads "*" as "%" and has no escape for it, so
    "*" becomes the single-character wildcard "_"; callers re-check such
    rows with matches_term().
    """
    like = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    like = like.replace("*", "_")
    quoted = like.replace("\\", "\\\\").replace('"', '\\"')
    return f'"%{quoted}%"'


def matches_term(product: Product, term: str) -> bool:
    """Case-insensitive substring match on name or company."""
    needle = term.casefold()
    return needle in product.name.casefold() or needle in product.company.casefold()


class ProductService:
    """
    Service for product reads and writes.

    Args:
        client: Supabase client
    """

    def __init__(self, client: Client):
        self.client = client

    def _rows_to_products(self, rows: list[dict[str, Any]] | None) -> list[Product]:
        return [Product.model_validate(row) for row in rows or []]

    def list_featured(self) -> list[Product]:
        """
        List all featured products.

        Raises:
            PersistenceError: If the query fails
        """
        try:
            response = (
                self.client.table(TABLE_NAME)
                .select("*")
                .eq("featured", True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to list featured products: {e}")
            raise PersistenceError(error_message(e), operation="list_featured")

        return self._rows_to_products(response.data)

    def list_all(self, search: str = "") -> list[Product]:
        """
        List products whose name or company contains `search`.

        Matching is case-insensitive. An empty search returns every product.
        Results are newest first.

        Args:
            search: Substring to look for in name or company

        Returns:
            Matching products ordered by createdAt descending

        Raises:
            PersistenceError: If the query fails
        """
        term = (search or "").strip()
        query = self.client.table(TABLE_NAME).select("*")

        if term:
            pattern = contains_pattern(term)
            query = query.or_(f"name.ilike.{pattern},company.ilike.{pattern}")

        try:
            response = query.order("createdAt", desc=True).execute()
        except Exception as e:
            logger.error(f"Failed to list products (search={term!r}): {e}")
            raise PersistenceError(error_message(e), operation="list_all")

        products = self._rows_to_products(response.data)
        if "*" in term:
            products = [p for p in products if matches_term(p, term)]
        logger.debug(f"Listed {len(products)} products for search={term!r}")
        return products

    def get_product(self, product_id: str) -> Product | None:
        """
        Fetch a product by ID.

        Args:
            product_id: The product ID

        Returns:
            The product, or None if no row has this ID

        Raises:
            PersistenceError: If the query fails for another reason
        """
        try:
            response = (
                self.client.table(TABLE_NAME)
                .select("*")
                .eq("id", product_id)
                .single()
                .execute()
            )
        except Exception as e:
            if is_missing_row(e):
                return None
            logger.error(f"Failed to fetch product {product_id}: {e}")
            raise PersistenceError(error_message(e), operation="get_product")

        if not response.data:
            return None
        return Product.model_validate(response.data)

    def create_product(
        self,
        fields: ProductFields,
        owner_id: str,
        image_url: str,
    ) -> Product:
        """
        Insert a single product row.

        Args:
            fields: Validated product attributes
            owner_id: ID of the authenticated creator
            image_url: Public URL of the uploaded image

        Returns:
            The inserted product

        Raises:
            PersistenceError: If the insert is rejected
        """
        data = {
            "id": str(uuid4()),
            "name": fields.name,
            "company": fields.company,
            "price": fields.price,
            "description": fields.description,
            "featured": fields.featured,
            "image": image_url,
            "clerkId": owner_id,
            "updatedAt": datetime.now(timezone.utc).isoformat(),
        }

        try:
            response = (
                self.client.table(TABLE_NAME)
                .insert(data)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to create product {fields.name!r}: {e}")
            raise PersistenceError(error_message(e), operation="create_product")

        if not response.data:
            raise PersistenceError("Insert returned no data", operation="create_product")

        product = Product.model_validate(response.data[0])
        logger.info(f"Created product: {product.id} for user: {owner_id}")
        return product
