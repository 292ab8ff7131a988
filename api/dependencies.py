"""
FastAPI dependencies for dependency injection.

Provides the per-application service instances to route handlers.
Instances are created in the app lifespan and kept on app.state, so
every app (and every test client) owns its own store.
"""

from typing import Callable

from fastapi import Request

from core.access_log import BaseAccessLogger
from services.resource_service import ResourceService


def get_resource_service(request: Request) -> ResourceService:
    """
    Dependency that provides the resource service.

    Usage:
        @router.get("/teas")
        async def list_records(
            service: ResourceService = Depends(get_resource_service)
        ):
            ...
    """
    service = getattr(request.app.state, "resource_service", None)
    if service is None:
        raise RuntimeError("Resource service not initialized")
    return service


def get_access_logger(request: Request) -> BaseAccessLogger:
    """
    Dependency that provides the access logger.
    """
    access_logger = getattr(request.app.state, "access_logger", None)
    if access_logger is None:
        raise RuntimeError("Access logger not initialized")
    return access_logger


def access_operation(name: str) -> Callable[[Request], None]:
    """
    Tag a request with the resource operation it performs.

    The access log middleware reads the tag (and the raw record_id path
    parameter, if any) when it builds the request's AccessEvent.
    """

    def _tag(request: Request) -> None:
        request.state.operation = name
        request.state.record_id = request.path_params.get("record_id")

    return _tag
