"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from study_tracker.api import create_api_router
from study_tracker.config import get_settings
from study_tracker.middleware.auth import APIKeyMiddleware
from study_tracker.utils.db import close_db, init_db
from study_tracker.utils.exception_handlers import register_exception_handlers

router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Study Tracker API", "version": get_settings().API_VERSION}


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect to the database on startup and release it on shutdown."""
    await init_db()
    yield
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.API_TITLE,
        description="Study session tracking: records, weekly goals and statistics",
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(APIKeyMiddleware)
    register_exception_handlers(app)

    app.include_router(router)
    app.include_router(create_api_router())

    return app
