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
    - API schemas
    - API dependencies
    - API routers
    """
    from app.api.v1.accounts import router as accounts_router
    from app.api.v1.activity_logs import router as activity_logs_router
    from app.api.v1.custom_fields import router as custom_fields_router
    from app.api.v1.cvs import router as cvs_router
    from app.api.v1.eea import router as eea_router
    from app.api.v1.job_specs import router as job_specs_router
    from app.api.v1.matching import router as matching_router
    from app.api.v1.teams import router as teams_router

    api_router = APIRouter()

    for router in (
        accounts_router,
        cvs_router,
        job_specs_router,
        matching_router,
        teams_router,
        custom_fields_router,
        activity_logs_router,
        eea_router,
    ):
        api_router.include_router(router, prefix="/api/v1")

    return api_router


# Router will be created lazily when needed
# Do NOT create api_router here to avoid circular imports
api_router = None  # type: ignore  # Will be set in main.py

__all__ = ["api_router", "create_api_router"]
