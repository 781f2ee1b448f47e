"""Middleware components for the application."""

from study_tracker.middleware.auth import APIKeyMiddleware

__all__ = ["APIKeyMiddleware"]
