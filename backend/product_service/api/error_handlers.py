"""Error Handlers: boundary handlers converting failures into ErrorResponse bodies.

Invariants:
    - ProductServiceError → its http_status with its message
    - RequestValidationError (bad JSON, wrong types, malformed UUID, bad page params)
      → 400 with a "Validation failed: [...]" message
    - HTTPException (unknown route, wrong method) → its status, same envelope
    - Exception (catch-all) → 500 with the raw failure message, never a stack trace

Design Decisions:
    - Four-layer handler: domain (ProductServiceError), validation (pydantic),
      routing (HTTPException), catch-all (Exception)
    - Routes raise RequestValidationFailed / ResourceNotFoundError after matching
      validation results and service outcomes; the status lives on the error type
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_service.core.errors import (
    ProductServiceError, format_validation_message,
)
from product_service.schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "query", "path", "header")


def build_error_response(
    request: Request,
    status_code: int,
    message: str,
    timestamp: datetime | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render the {path, message, statusCode, timestamp} envelope."""
    body = ErrorResponse(
        path=request.url.path,
        message=message,
        status_code=status_code,
        timestamp=timestamp or datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ProductServiceError)
    async def product_service_error_handler(
        request: Request, exc: ProductServiceError,
    ):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"ProductServiceError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return build_error_response(
            request, exc.http_status, exc.message, exc.context.timestamp,
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return build_error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            format_validation_message(describe_validation_errors(exc)),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return build_error_response(
            request, exc.status_code, str(exc.detail),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return build_error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) or type(exc).__name__,
        )


def describe_validation_errors(exc: RequestValidationError) -> list[str]:
    """'field: message' per pydantic error, without the body/query/path prefix."""
    described = []
    for e in exc.errors():
        loc = [str(part) for part in e.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(loc)
        described.append(f"{field}: {e['msg']}" if field else e["msg"])
    return described
