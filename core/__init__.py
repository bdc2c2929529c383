# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the storefront's business logic:
# - models/: Product schemas and pipeline result types
# - parsing.py: Typed parsing of raw form values
# - validation.py: Product and image schemas, validate_fields()
# - services/: Storage, persistence, read and create pipelines
# - navigation.py: Links menu, including the admin-only entry
#
# Code in this package doesn't build HTTP responses or read settings.
# It receives clients and configuration values from app/dependencies.py.
# =============================================================================
