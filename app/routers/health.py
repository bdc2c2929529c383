# =============================================================================
# app/routers/health.py - Probes for the Storefront Deployment
# =============================================================================
# /health        process is up, with version and environment
# /health/ready  Product table and image bucket both answer
# /health/live   bare process probe, touches nothing external
# =============================================================================

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from supabase import Client

from app import __version__
from app.dependencies import SettingsDep, get_supabase_client
from core.services.product_service import TABLE_NAME

router = APIRouter()

HEALTHY = "healthy"

# Provider errors can be long; the probe only needs the start
ERROR_SNIPPET_LENGTH = 50


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str
    version: str


class DependencyChecks(BaseModel):
    """Outcome per backing service: "healthy" or "unhealthy: <reason>"."""
    database: str = "unknown"
    storage: str = "unknown"

    @property
    def all_healthy(self) -> bool:
        return self.database == HEALTHY and self.storage == HEALTHY


class ReadinessResponse(BaseModel):
    status: str
    checks: DependencyChecks
    timestamp: str


class LivenessResponse(BaseModel):
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _unhealthy(error: Exception) -> str:
    return f"unhealthy: {str(error)[:ERROR_SNIPPET_LENGTH]}"


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep):
    """Report the running version and environment."""
    return HealthResponse(
        status=HEALTHY,
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=__version__,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check(
    settings: SettingsDep,
    client: Annotated[Client, Depends(get_supabase_client)],
):
    """
    Probe the two services product pages depend on.

    Reads one id from the Product table and looks up the image bucket.
    Status is "ready" when both answer, "degraded" otherwise; the response
    is always 200 so the body carries the detail.
    """
    checks = DependencyChecks()

    try:
        client.table(TABLE_NAME).select("id").limit(1).execute()
        checks.database = HEALTHY
    except Exception as e:
        checks.database = _unhealthy(e)

    try:
        client.storage.get_bucket(settings.STORAGE_BUCKET)
        checks.storage = HEALTHY
    except Exception as e:
        checks.storage = _unhealthy(e)

    return ReadinessResponse(
        status="ready" if checks.all_healthy else "degraded",
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    return LivenessResponse(status="alive", timestamp=_now())
