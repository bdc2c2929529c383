# =============================================================================
# tests/test_catalog.py - Read Pipeline and Navigation Tests
# =============================================================================

from unittest.mock import MagicMock

import pytest

from app.auth.models import AuthUser
from core.models.product import Product
from core.models.results import Found, NotFound
from core.navigation import ADMIN_LINK, PUBLIC_LINKS, build_nav_links, is_admin
from core.services.catalog import CatalogService
from core.services.product_service import ProductService


@pytest.fixture
def products():
    return MagicMock(spec=ProductService)


@pytest.fixture
def catalog(products):
    return CatalogService(products)


class TestCatalogService:

    def test_fetch_single_product_found(self, catalog, products, product_row):
        product = Product.model_validate(product_row)
        products.get_product.return_value = product

        result = catalog.fetch_single_product(product.id)

        assert result == Found(product)

    def test_fetch_single_product_missing(self, catalog, products):
        products.get_product.return_value = None

        result = catalog.fetch_single_product("missing-id")

        assert result == NotFound("missing-id")

    def test_fetch_all_passes_search(self, catalog, products):
        products.list_all.return_value = []

        assert catalog.fetch_all_products(search="lamp") == []
        products.list_all.assert_called_once_with(search="lamp")

    def test_fetch_all_defaults_to_empty_search(self, catalog, products):
        catalog.fetch_all_products()

        products.list_all.assert_called_once_with(search="")

    def test_fetch_featured(self, catalog, products, product_row):
        products.list_featured.return_value = [Product.model_validate(product_row)]

        assert len(catalog.fetch_featured_products()) == 1


class TestNavigation:

    def test_anonymous_gets_public_links(self):
        links = build_nav_links(None, "user_admin")

        assert links == list(PUBLIC_LINKS)
        assert ADMIN_LINK not in links

    def test_regular_user_gets_public_links(self):
        links = build_nav_links(AuthUser(id="user_123"), "user_admin")

        assert ADMIN_LINK not in links

    def test_admin_gets_dashboard(self):
        links = build_nav_links(AuthUser(id="user_admin"), "user_admin")

        assert links[-1] == ADMIN_LINK
        assert links[-1].href == "/admin/sales"

    def test_unset_admin_id_means_no_admin(self):
        assert is_admin(AuthUser(id=""), "") is False
        assert is_admin(AuthUser(id="user_123"), "") is False
