"""Error taxonomy and the JSON response envelope.

Every response leaving the API has the shape::

    {"success": bool, "message": str?, "data": ...?, "errors": [{field, message}]?}

Services raise the ``ApiError`` subclasses below; ``install_error_handlers``
turns them (and framework / store failures) into enveloped responses.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

FieldError = Dict[str, str]


class ApiError(Exception):
    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[FieldError]] = None):
        self.message = message or self.default_message
        self.errors = errors or []
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 400
    default_message = "Validation failed"

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls(message, errors=[{"field": field, "message": message}])


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Not authorized, no token provided"


class Forbidden(ApiError):
    status_code = 403
    default_message = "Not authorized to perform this action"


class NotFound(ApiError):
    status_code = 404
    default_message = "Resource not found"


class ServerError(ApiError):
    status_code = 500
    default_message = "Server error"


# ─────────────────────────────────────────────
# ENVELOPE
# ─────────────────────────────────────────────


def envelope(
    success: bool,
    *,
    message: Optional[str] = None,
    data: Any = None,
    errors: Optional[List[FieldError]] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if errors:
        body["errors"] = errors
    return body


def ok(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    return envelope(True, message=message, data=data)


def _strip_loc(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) or "body"


def field_errors(exc: PydanticValidationError | RequestValidationError) -> List[FieldError]:
    return [{"field": _strip_loc(e.get("loc", ())), "message": e.get("msg", "Invalid value")} for e in exc.errors()]


def from_pydantic(exc: PydanticValidationError) -> ValidationError:
    return ValidationError("Validation failed", errors=field_errors(exc))


# ─────────────────────────────────────────────
# HANDLERS
# ─────────────────────────────────────────────


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error("server error", extra={"path": request.url.path, "error": exc.message})
        return JSONResponse(
            status_code=exc.status_code,
            content=envelope(False, message=exc.message, errors=exc.errors),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=envelope(False, message="Validation failed", errors=field_errors(exc)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exc_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=envelope(False, message=str(exc.detail)),
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("store failure", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content=envelope(False, message="Server error"))

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception):
        logger.exception("unhandled exception", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content=envelope(False, message="Server error"))
