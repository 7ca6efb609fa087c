"""
API Package

Central package for all API endpoints.
Provides versioned API routes with proper namespace management.

Note: Routers are imported lazily to avoid circular import issues with application services.
"""

from fastapi import APIRouter


def create_api_router() -> APIRouter:
    """
    Create and configure the main API router with all v1 routes.

    Uses lazy imports to avoid circular dependencies between:
    - Application layer services
    - API dependencies
    - API routers
    """
    from app.api.v1.candidates import router as candidates_router
    from app.api.v1.search_profiles import router as search_profiles_router

    api_router = APIRouter()

    api_router.include_router(
        search_profiles_router,
        prefix="/api/v1",
    )

    api_router.include_router(
        candidates_router,
        prefix="/api/v1",
    )

    return api_router


__all__ = ["create_api_router"]
