"""
FastAPI application entry point.

Sets up the application with:
- Lifespan management (startup/shutdown)
- Route registration
- Access log middleware
- Error handling
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.middleware import access_log_middleware
from api.routes import health_router, records_router
from core.access_log import AccessOutcome, BaseAccessLogger, StructlogAccessLogger
from core.config import settings
from core.errors import InvalidInputError, NotFoundError
from core.logging import configure_logging, get_logger
from core.storage import BaseResourceStore, create_resource_store
from services.resource_service import ResourceService


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Startup: build the store (unless one was injected), the resource
    service and the access logger, and keep them on app.state.
    Shutdown: drop them. Records are not persisted.
    """
    configure_logging()

    logger.info(
        "Starting resource service...",
        storage_backend=settings.storage_backend,
    )

    store = app.state.store
    if store is None:
        store = create_resource_store(settings)
        app.state.store = store

    app.state.resource_service = ResourceService(
        store,
        allow_missing_price=settings.allow_missing_price,
    )

    if app.state.access_logger is None:
        app.state.access_logger = StructlogAccessLogger()

    logger.info(
        "Server is running",
        host=settings.server_host,
        port=settings.server_port,
        resource_prefix=settings.resource_prefix,
    )

    yield

    logger.info(
        "Shutting down resource service...",
        records=store.count(),
    )
    app.state.resource_service = None

    logger.info("Resource service stopped")


def create_app(
    store: Optional[BaseResourceStore] = None,
    access_logger: Optional[BaseAccessLogger] = None,
) -> FastAPI:
    """
    Application factory.

    Creates and configures the FastAPI application. Each app owns its
    own store; pass one in to share or pre-seed it.
    """
    app = FastAPI(
        title="Resource Service",
        description="In-memory CRUD service for named, priced records.",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.store = store
    app.state.access_logger = access_logger
    app.state.resource_service = None

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(access_log_middleware)

    # Register routes
    app.include_router(health_router)
    app.include_router(records_router, prefix=settings.resource_prefix)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        request.state.outcome = AccessOutcome.NOT_FOUND
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message},
        )

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        request.state.outcome = AccessOutcome.INVALID_INPUT
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "field": exc.field},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        request.state.outcome = AccessOutcome.INVALID_INPUT
        return JSONResponse(
            status_code=400,
            content={
                "detail": "Invalid request body",
                "errors": [
                    {"loc": list(error.get("loc", ())), "msg": error.get("msg")}
                    for error in exc.errors()
                ],
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "message": str(exc) if settings.debug else "An error occurred",
            },
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.server:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.debug,
    )
