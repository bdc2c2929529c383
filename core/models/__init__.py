# =============================================================================
# core/models/ - Data Models
# =============================================================================
# This package contains the storefront's data contracts:
# - product.py: Product row, listing response, uploaded ImageFile
# - results.py: Values returned by the pipelines in core/services
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Product Models
# -----------------------------------------------------------------------------
from .product import (
    ImageFile,
    Product,
    ProductList,
)

# -----------------------------------------------------------------------------
# Pipeline Results
# -----------------------------------------------------------------------------
from .results import (
    ActionMessage,
    Created,
    CreateProductResult,
    Found,
    NotFound,
    ProductLookup,
    Unauthenticated,
)

__all__ = [
    # Product
    "ImageFile",
    "Product",
    "ProductList",
    # Results
    "ActionMessage",
    "Created",
    "CreateProductResult",
    "Found",
    "NotFound",
    "ProductLookup",
    "Unauthenticated",
]
