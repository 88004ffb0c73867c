"""
API error types and their conversion to the JSON response envelope.

Routes raise; the handlers registered here turn every failure into
``{"success": false, "error": "...", "issues": {...}}`` with the matching
status code. Nothing is retried.
"""

from typing import Any, Dict, Iterable, List, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from eatkwik.config import settings

logger = structlog.get_logger()

FieldErrors = Dict[str, List[str]]

_LOCATION_ROOTS = ("body", "query", "path")


class AppError(Exception):
    """Base class for errors carrying an HTTP status"""

    status_code = 400

    def __init__(self, message: str, issues: Optional[FieldErrors] = None):
        super().__init__(message)
        self.message = message
        self.issues = issues


class InvalidIdentifierError(AppError):
    """Path identifier is not a well-formed document id"""

    status_code = 400


class ValidationFailedError(AppError):
    """Domain validation failed after the request schema passed"""

    status_code = 400


class NotFoundError(AppError):
    """Requested document does not exist"""

    status_code = 404


def error_response(status_code: int, message: str, issues: Optional[Any] = None) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "error": message}
    if issues:
        content["issues"] = issues
    return JSONResponse(status_code=status_code, content=content)


def field_errors(errors: Iterable[Dict[str, Any]]) -> FieldErrors:
    """Flatten pydantic error entries into ``{"items.0.quantity": [messages]}``"""
    issues: FieldErrors = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATION_ROOTS:
            loc = loc[1:]
        key = ".".join(loc) or "body"
        issues.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return issues


def register_exception_handlers(app: FastAPI) -> None:
    """Attach envelope-producing handlers to the application"""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        logger.warning(
            "Request rejected",
            path=request.url.path,
            status_code=exc.status_code,
            error=exc.message,
        )
        return error_response(exc.status_code, exc.message, exc.issues)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        issues = field_errors(exc.errors())
        logger.warning("Invalid input data", path=request.url.path, fields=sorted(issues))
        return error_response(400, "Invalid input data", issues)

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        message = str(exc.orig) if exc.orig is not None else str(exc)
        logger.warning("Persistence validation failed", path=request.url.path, error=message)
        return error_response(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception", path=request.url.path)
        message = f"Server error: {exc}" if settings.api_debug else "Server error"
        return error_response(500, message)
