"""
Board Champions Profile Service - Main FastAPI Application
"""

import sys
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import create_api_router
from app.api.schemas.base import ErrorResponse, ValidationErrorDetail
from app.core.config import get_settings
from app.core.logging import configure_logging
from app.infrastructure.providers.auth_provider import reset_token_verifier
from app.infrastructure.providers.database_provider import (
    get_database_manager,
    reset_database_manager,
)
from app.infrastructure.providers.repository_provider import reset_repositories

configure_logging(get_settings())

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    settings = get_settings()
    logger.info("Starting Board Champions Profile Service", version=app.version, environment=settings.ENVIRONMENT)

    try:
        db_manager = await get_database_manager()
        db_health = await db_manager.health_check()
        logger.info("Database initialized", status=db_health["status"])
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        if settings.is_production():
            sys.exit(1)

    yield

    logger.info("Shutting down Board Champions Profile Service")
    await reset_repositories()
    await reset_token_verifier()
    await reset_database_manager()


def _error_response(status_code: int, message: str, details=None, headers=None) -> JSONResponse:
    body = ErrorResponse(error=message, status=status_code, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error in the shared error envelope."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = [
            ValidationErrorDetail(
                field=".".join(str(part) for part in error.get("loc", ()) if part != "body"),
                message=error.get("msg", "Invalid value"),
            )
            for error in exc.errors()
        ]
        logger.info("request_validation_failed", path=request.url.path, error_count=len(details))
        return _error_response(400, "Validation failed", details=details)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            exception_type=type(exc).__name__,
            error=str(exc),
        )
        return _error_response(500, "Internal server error")


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Candidate profiles with viewer-aware redaction and completion scoring",
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

    register_exception_handlers(app)
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
            }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_config=None,  # Use our structured logging
    )
