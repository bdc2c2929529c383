# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Storefront API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import get_settings
from app.exceptions import StorefrontException, storefront_exception_handler
from app.routers import health, products, admin_products, navigation
from app.auth import routes as auth_routes
from lib.supabase_client import SupabaseClient

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: Log configuration that matters when debugging deployments
    - Shutdown: Drop the shared Supabase client
    """
    logger.info(f"Starting Storefront API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"Image bucket: {settings.STORAGE_BUCKET}")
    if not settings.ADMIN_USER_ID:
        logger.warning("ADMIN_USER_ID is not set; no user will see the dashboard link")

    yield

    logger.info("Shutting down Storefront API")
    SupabaseClient.reset()


# Create FastAPI application
app = FastAPI(
    title="Storefront API",
    description="""
## Storefront API

Product catalog for the store: browse, search and view products, and let
signed-in users add new ones with an image.

### Creating a product

```bash
curl -X POST http://localhost:8000/api/v1/admin/products \\
  -H "Authorization: Bearer $TOKEN" \\
  -F name="Desk Lamp" -F company="Acme" -F price=1999 \\
  -F description="A sturdy adjustable desk lamp with a warm light for late reading" \\
  -F featured=on -F image=@lamp.jpg
```

On success the response is a redirect to `/admin/products`. On failure it is
`{"message": "..."}` listing every problem.
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Verify access tokens",
        },
        {
            "name": "Products",
            "description": "Browse, search and view products",
        },
        {
            "name": "Admin",
            "description": "Create products",
        },
        {
            "name": "Navigation",
            "description": "Site menu links",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(StorefrontException)
async def handle_storefront_exception(request: Request, exc: StorefrontException):
    """Handle custom storefront exceptions."""
    logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
    return await storefront_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    auth_routes.router,
    prefix="/api/v1/auth",
    tags=["Auth"]
)

app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

app.include_router(
    products.router,
    prefix="/api/v1/products",
    tags=["Products"]
)

app.include_router(
    admin_products.router,
    prefix="/api/v1/admin",
    tags=["Admin"]
)

app.include_router(
    navigation.router,
    prefix="/api/v1",
    tags=["Navigation"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Storefront API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
