"""
FastAPI application entry point.
Configures middleware, routers, and lifecycle events.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from barcode_studio.core.config import get_settings
from barcode_studio.core.logging import configure_logging, get_logger
from barcode_studio.modules.barcodes.router import router as barcodes_router
from barcode_studio.modules.zpl.router import router as zpl_router
from barcode_studio.renderers.datamatrix import DataMatrixRenderer

# Configure logging before anything else
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup configuration and renderer availability."""
    settings = get_settings()
    logger.info(
        "starting_application",
        environment=settings.environment,
        version=settings.version,
        datamatrix_available=DataMatrixRenderer.is_available(),
    )

    yield

    logger.info("application_shutdown_complete")


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with all middleware,
    routers, and settings applied.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ==========================================================================
    # Middleware Configuration
    # ==========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Data URIs in JSON responses compress well
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # ==========================================================================
    # Router Registration
    # ==========================================================================

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, object]:
        checks = {
            "qr": "ok",
            "datamatrix": "ok" if DataMatrixRenderer.is_available() else "unavailable",
        }
        overall = "healthy" if all(v == "ok" for v in checks.values()) else "degraded"
        return {"status": overall, "version": settings.version, "checks": checks}

    app.include_router(
        barcodes_router,
        prefix=f"{settings.api_v1_prefix}/barcodes",
        tags=["Barcodes"],
    )
    app.include_router(
        zpl_router,
        prefix=f"{settings.api_v1_prefix}/zpl",
        tags=["ZPL"],
    )

    return app


app = create_application()
