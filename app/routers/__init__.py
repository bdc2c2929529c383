# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - products.py: Product listing, featured products, product detail
# - admin_products.py: Admin product creation form
# - navigation.py: Site menu links
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import products
from . import admin_products
from . import navigation

__all__ = [
    "health",
    "products",
    "admin_products",
    "navigation",
]
