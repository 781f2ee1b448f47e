"""API endpoints package."""

from study_tracker.api.router import create_api_router

__all__ = ["create_api_router"]
