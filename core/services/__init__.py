# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .product_service import ProductService
from .storage_service import StorageService
from .catalog import CatalogService
from .create_product import CreateProductPipeline, PipelineStage

__all__ = [
    "ProductService",
    "StorageService",
    "CatalogService",
    "CreateProductPipeline",
    "PipelineStage",
]
