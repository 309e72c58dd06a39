"""
CyberLab Network Scenario Platform API - FastAPI Application

Main entry point for the FastAPI application.
"""

import time
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from cyberlab.api import router as api_router
from cyberlab.core.config import Settings, get_settings
from cyberlab.core.validation import first_error_message
from cyberlab.db.seed import seed_all
from cyberlab.db.store import DataStore
from cyberlab.workers.deployment_lifecycle import DeploymentLifecycle

_start_time = time.time()


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors as {"error": ...}."""
    # Starlette raises a bare "Not Found" when no route matches
    if exc.status_code == 404 and exc.detail == "Not Found":
        content = {
            "error": "Not Found",
            "message": "The requested resource was not found",
        }
    else:
        content = {"error": exc.detail}

    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report the first request validation error as a 400."""
    return JSONResponse(
        status_code=400,
        content={"error": first_error_message(exc.errors())},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    settings: Settings = request.app.state.settings
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": str(exc) if settings.debug else "Something went wrong!",
        },
    )


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Access log line per request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
    )
    return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its own store and lifecycle engine."""
    settings = settings or get_settings()

    store = DataStore()
    lifecycle = DeploymentLifecycle(
        store.deployments,
        start_delay=settings.deployment_start_delay,
        ready_delay=settings.deployment_ready_delay,
        cancel_on_delete=settings.cancel_transitions_on_delete,
    )
    if settings.seed_data:
        seed_all(store, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        logger.info(f"Starting {settings.app_name}...")
        lifecycle.start()
        logger.info(f"{settings.app_name} started on port {settings.port}")

        yield

        # Shutdown
        logger.info(f"Shutting down {settings.app_name}...")
        lifecycle.shutdown()
        logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Network scenario configuration and simulated deployment API",
        lifespan=lifespan,
        docs_url="/swagger" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.lifecycle = lifecycle

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(api_router)

    @app.get("/health", tags=["System"])
    async def health() -> dict:
        """Liveness check."""
        return {
            "status": "OK",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": time.time() - _start_time,
        }

    @app.get("/", tags=["System"])
    async def root() -> dict:
        """API banner."""
        return {
            "message": settings.app_name,
            "version": settings.app_version,
        }

    return app


# Create FastAPI application
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "cyberlab.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
