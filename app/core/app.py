"""
FastAPI Application Factory
Creates and configures the FastAPI app instance
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from app.api.endpoints import manifest, catalog, meta, configure, health, preflight
from app.api.error_handlers import register_error_handlers
from app.core.config import settings
import logging

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown"""
    logger.info("Starting IMDb Top Picks Addon")
    logger.info(f"Base URL: {settings.BASE_URL}")

    yield

    logger.info("Shutting down IMDb Top Picks Addon")


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""

    app = FastAPI(
        title="IMDb Top Picks Stremio Addon",
        description="Personalized IMDb Top Picks catalogs for Stremio",
        version="2.0.0",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # Stremio clients fetch from any origin
    @app.middleware("http")
    async def allow_any_origin(request: Request, call_next):
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    register_error_handlers(app)

    # Include routers; the catch-all routes must come last
    app.include_router(health.router)
    app.include_router(manifest.router)
    app.include_router(catalog.router)
    app.include_router(meta.router)
    app.include_router(configure.router)
    app.include_router(preflight.router)

    return app
