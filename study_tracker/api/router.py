"""API router factory with core endpoints."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from study_tracker.middleware.auth import APIKeyMiddleware
from study_tracker.utils.db import db_manager

logger = logging.getLogger(__name__)


def create_api_router() -> APIRouter:
    """Create router with all JSON endpoints under /api.

    Returns:
        APIRouter with health checks and resource routers.
    """
    from study_tracker.api.goals import router as goals_router
    from study_tracker.api.profiles import router as profiles_router
    from study_tracker.api.sessions import router as sessions_router
    from study_tracker.api.stats import router as stats_router
    from study_tracker.api.subjects import router as subjects_router
    from study_tracker.api.textbooks import router as textbooks_router

    router = APIRouter(prefix=APIKeyMiddleware.PROTECTED_PREFIX)

    @router.get("/health", tags=["Health"], status_code=status.HTTP_200_OK)
    async def health_check() -> dict:
        """Basic application health."""
        return {"status": "healthy", "service": "study-tracker"}

    @router.get(
        "/health/db",
        tags=["Health"],
        status_code=status.HTTP_200_OK,
        response_model=None,
    )
    async def health_check_db() -> JSONResponse:
        """Deep health check including database connectivity."""
        try:
            await db_manager.verify_connection()
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content={"status": "healthy", "database": "connected"},
            )
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "database": "disconnected"},
            )

    router.include_router(profiles_router)
    router.include_router(subjects_router)
    router.include_router(sessions_router)
    router.include_router(goals_router)
    router.include_router(textbooks_router)
    router.include_router(stats_router)

    return router
