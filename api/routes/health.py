"""
Health check endpoints.

Provides endpoints for monitoring and load balancer health checks.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_resource_service
from core.config import settings
from services.resource_service import ResourceService


router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """
    Basic health check.

    Returns 200 if the service is running.
    Used by load balancers and orchestration systems.
    """
    return {
        "status": "healthy",
        "service": settings.service_name,
    }


@router.get("/ready")
async def readiness_check(
    service: ResourceService = Depends(get_resource_service),
) -> dict:
    """
    Readiness check.

    Returns 200 once the store is wired up, with its current size.
    """
    return {
        "status": "ready",
        "storage_backend": settings.storage_backend,
        "records": service.store.count(),
    }
