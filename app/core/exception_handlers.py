"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to JSON error bodies {"error", "message", "details", "request_id"};
request_id is the value the request-ID middleware put on the response header,
so a client report can be matched to log lines.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import FlowQueryException

logger = logging.getLogger(__name__)

# Domain error_code -> HTTP status; unknown codes are client errors (400)
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "VALIDATION_ERROR": 400,
    "INVALID_FILTER": 400,
    "INVALID_SORT": 400,
}


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _error_response(
    request: Request, status_code: int, content: dict[str, Any]
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={**content, "request_id": _request_id(request)},
    )


def _flowquery_exception_handler(
    request: Request, exc: FlowQueryException
) -> JSONResponse:
    """Return exc.to_dict() with the status mapped from its error_code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    logger.debug(
        "%s %s rejected: %s %s",
        request.method,
        request.url.path,
        exc.error_code,
        exc.message,
    )
    return _error_response(request, status, exc.to_dict())


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Pydantic error list without the raw input/ctx objects (not always JSON-safe)."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 for query/body values FastAPI could not validate."""
    return _error_response(
        request,
        422,
        {
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_errors(exc),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (unknown route, wrong method)."""
    return _error_response(
        request,
        exc.status_code,
        {"error": "HTTP_ERROR", "message": exc.detail, "details": {}},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    detail: Any = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(
        request,
        500,
        {"error": "INTERNAL_ERROR", "message": detail, "details": {}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: FlowQueryException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(FlowQueryException, _flowquery_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
