"""
CVSift - Main FastAPI Application
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import create_api_router
from app.core.config import get_settings
from app.infrastructure.providers import reset_all_providers
from app.infrastructure.providers.database_provider import get_database_manager


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure structlog for console output on a TTY and JSON elsewhere."""
    if log_format == "auto":
        use_console = sys.stdout.isatty()
    else:
        use_console = log_format == "console"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer() if use_console else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper(), logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    settings = get_settings()
    logger.info("Starting CVSift API", version=app.version, environment=settings.ENVIRONMENT)

    try:
        logger.info("Initializing database connection")
        db_manager = await get_database_manager()
        db_health = await db_manager.health_check()
        logger.info("Database initialized", status=db_health["status"])
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        if settings.is_production():
            sys.exit(1)

    yield

    logger.info("Shutting down CVSift API")
    try:
        await reset_all_providers()
        logger.info("Service cleanup completed")
    except Exception as e:
        logger.error("Cleanup error", error=str(e))


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    app = FastAPI(
        title="CVSift API",
        description="CV filtering, job matching and Employment Equity compliance for recruiters",
        version=settings.APP_VERSION,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        openapi_url="/openapi.json" if not settings.is_production() else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router())

    @app.get("/health")
    async def health_check():
        """Basic health check endpoint"""
        return {
            "status": "healthy",
            "version": app.version,
            "environment": settings.ENVIRONMENT,
        }

    @app.get("/health/database")
    async def database_health_check():
        """Database-specific health check endpoint"""
        try:
            db_manager = await get_database_manager()
            return await db_manager.health_check()
        except Exception as e:
            return {
                "status": "unhealthy",
                "error": str(e),
                "timestamp": datetime.utcnow().isoformat() + "Z",
            }

    @app.get("/")
    async def root():
        """API root endpoint"""
        return {
            "message": "CVSift API",
            "version": app.version,
            "docs_url": "/docs" if not settings.is_production() else None,
        }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT in ("local", "development"),
        log_config=None,  # Use our structured logging
    )
