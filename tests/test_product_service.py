# =============================================================================
# tests/test_product_service.py - Product Persistence Tests
# =============================================================================
# Tests use mocked Supabase responses to avoid database calls. They check
# which query is sent and how rows and errors come back.
# =============================================================================

import pytest
from postgrest.exceptions import APIError

from app.exceptions import PersistenceError
from core.services.product_service import ProductService, contains_pattern
from core.validation import ProductFields, validate_fields
from tests.conftest import make_query


@pytest.fixture
def service(supabase_client):
    return ProductService(supabase_client)


class TestContainsPattern:
    """Tests for the ILIKE value builder."""

    def test_plain_term(self):
        assert contains_pattern("lamp") == '"%lamp%"'

    def test_like_wildcards_are_escaped(self):
        assert contains_pattern("50%_off") == '"%50\\\\%\\\\_off%"'

    def test_quotes_are_escaped(self):
        assert contains_pattern('say "hi"') == '"%say \\"hi\\"%"'

    def test_asterisk_becomes_single_char_wildcard(self):
        assert contains_pattern("a*b") == '"%a_b%"'


class TestListFeatured:

    def test_filters_on_featured(self, service, supabase_client, product_row):
        query = make_query(data=[product_row])
        supabase_client.table.return_value = query

        products = service.list_featured()

        supabase_client.table.assert_called_once_with("Product")
        query.eq.assert_called_once_with("featured", True)
        assert [p.id for p in products] == [product_row["id"]]
        assert products[0].featured is True

    def test_failure_raises_persistence_error(self, service, supabase_client):
        supabase_client.table.return_value = make_query(error=Exception("connection refused"))

        with pytest.raises(PersistenceError) as exc_info:
            service.list_featured()

        assert exc_info.value.message == "connection refused"


class TestListAll:

    def test_empty_search_lists_everything_newest_first(self, service, supabase_client, product_row):
        query = make_query(data=[product_row])
        supabase_client.table.return_value = query

        products = service.list_all("")

        query.or_.assert_not_called()
        query.order.assert_called_once_with("createdAt", desc=True)
        assert len(products) == 1

    def test_whitespace_search_is_empty(self, service, supabase_client):
        query = make_query(data=[])
        supabase_client.table.return_value = query

        service.list_all("   ")

        query.or_.assert_not_called()

    def test_search_matches_name_or_company(self, service, supabase_client):
        query = make_query(data=[])
        supabase_client.table.return_value = query

        service.list_all("Lamp")

        query.or_.assert_called_once_with('name.ilike."%Lamp%",company.ilike."%Lamp%"')
        query.order.assert_called_once_with("createdAt", desc=True)

    def test_asterisk_matches_literally(self, service, supabase_client, product_row):
        literal = {**product_row, "id": "a", "name": "A*B Lamp", "company": "Acme"}
        one_char = {**product_row, "id": "b", "name": "AxB Lamp", "company": "Acme"}
        query = make_query(data=[literal, one_char])
        supabase_client.table.return_value = query

        products = service.list_all("a*b")

        query.or_.assert_called_once_with('name.ilike."%a_b%",company.ilike."%a_b%"')
        assert [p.id for p in products] == ["a"]

    def test_preserves_database_order(self, service, supabase_client, product_row):
        newer = {**product_row, "id": "b", "createdAt": "2024-07-01T00:00:00+00:00"}
        older = {**product_row, "id": "a", "createdAt": "2024-01-01T00:00:00+00:00"}
        supabase_client.table.return_value = make_query(data=[newer, older])

        products = service.list_all("acme")

        assert [p.id for p in products] == ["b", "a"]

    def test_no_rows(self, service, supabase_client):
        supabase_client.table.return_value = make_query(data=None)

        assert service.list_all() == []


class TestGetProduct:

    def test_found(self, service, supabase_client, product_row):
        query = make_query(data=product_row)
        supabase_client.table.return_value = query

        product = service.get_product(product_row["id"])

        query.eq.assert_called_once_with("id", product_row["id"])
        assert product.name == "Desk Lamp"
        assert product.clerk_id == "user_123"

    def test_no_rows_is_none(self, service, supabase_client):
        error = APIError({"message": "JSON object requested, multiple (or no) rows returned", "code": "PGRST116"})
        supabase_client.table.return_value = make_query(error=error)

        assert service.get_product("550e8400-e29b-41d4-a716-000000000000") is None

    def test_malformed_id_is_none(self, service, supabase_client):
        error = APIError({"message": 'invalid input syntax for type uuid: "nope"', "code": "22P02"})
        supabase_client.table.return_value = make_query(error=error)

        assert service.get_product("nope") is None

    def test_other_errors_raise(self, service, supabase_client):
        error = APIError({"message": "permission denied for table Product", "code": "42501"})
        supabase_client.table.return_value = make_query(error=error)

        with pytest.raises(PersistenceError) as exc_info:
            service.get_product("550e8400-e29b-41d4-a716-446655440000")

        assert exc_info.value.message == "permission denied for table Product"


class TestCreateProduct:

    @pytest.fixture
    def fields(self, valid_form):
        return validate_fields(ProductFields, valid_form)

    def test_inserts_one_row(self, service, supabase_client, product_row, fields):
        query = make_query(data=[product_row])
        supabase_client.table.return_value = query

        product = service.create_product(fields, owner_id="user_123", image_url=product_row["image"])

        inserted = query.insert.call_args.args[0]
        assert inserted["name"] == "Desk Lamp"
        assert inserted["price"] == 1999
        assert inserted["featured"] is True
        assert inserted["clerkId"] == "user_123"
        assert inserted["image"] == product_row["image"]
        assert inserted["id"]
        assert "updatedAt" in inserted
        assert "createdAt" not in inserted
        assert product.id == product_row["id"]

    def test_constraint_violation(self, service, supabase_client, fields):
        error = APIError({"message": 'null value in column "clerkId" violates not-null constraint', "code": "23502"})
        supabase_client.table.return_value = make_query(error=error)

        with pytest.raises(PersistenceError) as exc_info:
            service.create_product(fields, owner_id="", image_url="https://x/y.jpg")

        assert "violates not-null constraint" in exc_info.value.message

    def test_empty_insert_response(self, service, supabase_client, fields):
        supabase_client.table.return_value = make_query(data=[])

        with pytest.raises(PersistenceError):
            service.create_product(fields, owner_id="user_123", image_url="https://x/y.jpg")
