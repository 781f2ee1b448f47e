"""Authentication middleware for API key validation."""

import hmac
import logging
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from study_tracker.config import get_settings

logger = logging.getLogger(__name__)


class APIKeyMiddleware(BaseHTTPMiddleware):
    """Validate the X-API-KEY header on /api routes.

    Only active when API_KEY is configured; otherwise every request passes.
    Health endpoints stay public so probes work without credentials.
    """

    PROTECTED_PREFIX: str = "/api"
    PUBLIC_PATHS: frozenset[str] = frozenset({"/api/health", "/api/health/db"})

    @classmethod
    def is_protected_path(cls, path: str) -> bool:
        """Check if path requires authentication."""
        return path.startswith(cls.PROTECTED_PREFIX) and path not in cls.PUBLIC_PATHS

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and validate API key if required."""
        settings = get_settings()
        if not settings.api_key_required or not self.is_protected_path(
            request.url.path
        ):
            return await call_next(request)

        api_key = request.headers.get("X-API-KEY", "")
        if not api_key or not hmac.compare_digest(api_key, settings.API_KEY):
            logger.warning(
                "Unauthorized request",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "has_key": bool(api_key),
                },
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={
                    "error": "Unauthorized",
                    "message": "Invalid or missing API key",
                },
            )

        return await call_next(request)
