# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# This is the one place where Settings are turned into configured services;
# route handlers receive ready-to-use services through Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends
from supabase import Client

from app.config import Settings, get_settings
from core.services.catalog import CatalogService
from core.services.create_product import CreateProductPipeline
from core.services.product_service import ProductService
from core.services.storage_service import StorageService
from lib.supabase_client import SupabaseClient


def get_supabase_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> Client:
    """Return the shared Supabase client."""
    return SupabaseClient.get_client(settings)


def get_product_service(
    client: Annotated[Client, Depends(get_supabase_client)],
) -> ProductService:
    return ProductService(client)


def get_storage_service(
    client: Annotated[Client, Depends(get_supabase_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> StorageService:
    return StorageService(
        client,
        bucket=settings.STORAGE_BUCKET,
        cache_control=settings.IMAGE_CACHE_CONTROL,
    )


def get_catalog_service(
    products: Annotated[ProductService, Depends(get_product_service)],
) -> CatalogService:
    return CatalogService(products)


def get_create_product_pipeline(
    products: Annotated[ProductService, Depends(get_product_service)],
    storage: Annotated[StorageService, Depends(get_storage_service)],
) -> CreateProductPipeline:
    return CreateProductPipeline(products, storage)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
CatalogDep = Annotated[CatalogService, Depends(get_catalog_service)]
CreateProductDep = Annotated[CreateProductPipeline, Depends(get_create_product_pipeline)]
