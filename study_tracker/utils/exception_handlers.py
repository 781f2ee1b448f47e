"""Map application exceptions to JSON error responses."""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from study_tracker.exceptions import (
    DatabaseConnectionError,
    DuplicateRecordError,
    InvalidFilterError,
    ModelError,
    RecordNotFoundError,
    RelatedRecordNotFoundError,
)

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "데이터를 불러오는데 실패했습니다."
SAVE_FAILED_MESSAGE = "저장에 실패했습니다."

READ_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


@dataclass(frozen=True, slots=True)
class ErrorMapping:
    """How one exception type is logged and rendered.

    Attributes:
        status_code: HTTP status of the response.
        error_name: Value of the ``error`` key.
        log_level: Logger method used to record the failure.
        expose: Whether ``str(exc)`` is safe to show. When False the client
            gets the generic load/save failure message instead.
        fields: Exception attributes copied into the payload.
    """

    status_code: int
    error_name: str
    log_level: str = "warning"
    expose: bool = True
    fields: tuple[str, ...] = ()

    def payload(self, request: Request, exc: Exception) -> dict[str, Any]:
        content: dict[str, Any] = {
            "error": self.error_name,
            "message": str(exc) if self.expose else failure_message(request),
        }
        for name in self.fields:
            content[name] = getattr(exc, name, None)
        return content


ERROR_MAPPINGS: dict[type[Exception], ErrorMapping] = {
    RecordNotFoundError: ErrorMapping(
        status.HTTP_404_NOT_FOUND, "Not Found", fields=("model_name", "record_id")
    ),
    RelatedRecordNotFoundError: ErrorMapping(
        status.HTTP_400_BAD_REQUEST, "Bad Request", fields=("field", "record_id")
    ),
    DuplicateRecordError: ErrorMapping(
        status.HTTP_409_CONFLICT, "Conflict", fields=("model_name",)
    ),
    InvalidFilterError: ErrorMapping(status.HTTP_400_BAD_REQUEST, "Bad Request"),
    DatabaseConnectionError: ErrorMapping(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Service Unavailable",
        log_level="error",
        expose=False,
    ),
    ModelError: ErrorMapping(
        status.HTTP_400_BAD_REQUEST, "Bad Request", log_level="error"
    ),
}


def failure_message(request: Request) -> str:
    """Generic user-facing message for a backend failure."""
    if request.method in READ_METHODS:
        return LOAD_FAILED_MESSAGE
    return SAVE_FAILED_MESSAGE


def _handler_for(
    mapping: ErrorMapping,
) -> Callable[[Request, Exception], Awaitable[JSONResponse]]:
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        getattr(logger, mapping.log_level)(
            f"{type(exc).__name__}: {exc}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=mapping.status_code, content=mapping.payload(request, exc)
        )

    return handler


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Validation errors without the non-serializable ``ctx`` objects."""
    return [
        {
            "loc": list(err.get("loc", ())),
            "msg": err.get("msg"),
            "type": err.get("type"),
        }
        for err in exc.errors()
    ]


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"Validation error: {exc}", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "message": "Invalid request data",
            "details": jsonable_errors(exc),
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error", "message": failure_message(request)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install every handler on ``app``."""
    for exc_type, mapping in ERROR_MAPPINGS.items():
        app.add_exception_handler(exc_type, _handler_for(mapping))
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
