"""Health check endpoints for probes and monitoring."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from catalog_admin import __version__
from catalog_admin.config import settings
from catalog_admin.infra.database import verify_db_connection
from catalog_admin.infra.logging import get_logger
from catalog_admin.schemas.common import HealthResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Basic health check.

    Returns 200 if the service is running. Does not touch the database.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={},
    )


@router.get("/health/ready", response_model=HealthResponse)
async def health_ready() -> JSONResponse:
    """Readiness check.

    Verifies the database answers a trivial query. Returns 503 when it
    does not, so the instance is taken out of rotation.
    """
    checks = {"database": await verify_db_connection()}
    all_healthy = all(checks.values())
    if not all_healthy:
        logger.warning("Readiness check failed", checks=checks)

    body = HealthResponse(
        status="healthy" if all_healthy else "degraded",
        version=__version__,
        environment=settings.environment,
        checks=checks,
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(),
    )


@router.get("/health/live", response_model=HealthResponse)
async def health_live() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={"alive": True},
    )
