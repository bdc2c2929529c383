# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Storefront API:
# - test_parsing.py / test_validation.py: Form value parsing and field rules
# - test_storage_service.py / test_product_service.py: Supabase adapters (mocked)
# - test_create_product.py / test_catalog.py: Create and read pipelines
# - test_auth.py: Token verification
# - test_routes.py: HTTP endpoints through TestClient
#
# Run tests with: pytest
# =============================================================================
