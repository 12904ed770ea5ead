"""Error envelopes and response headers shared by every route.

Status code mapping:
- ``InvalidInputError`` → 400
- ``RequestValidationError`` (malformed body or path) → 400
- ``InvalidStateError`` → 409
- ``NotFoundError`` → 404
- ``PersistenceError`` → 500
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from blogapi.repositories.base import PersistenceError
from blogapi.services.errors import BlogError

logger = logging.getLogger(__name__)


def _error_body(code: str, message: str) -> dict:
    return {"ok": False, "error": code, "message": message}


async def _handle_blog_error(request: Request, exc: BlogError) -> JSONResponse:
    logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(_error_body(exc.code, exc.message), status_code=exc.status_code)


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    parts = [f"{'.'.join(str(loc) for loc in err.get('loc', ()))}: {err.get('msg', 'invalid')}" for err in errors]
    message = "; ".join(parts) or "Invalid request"
    logger.info("%s %s rejected (invalid_input): %s", request.method, request.url.path, message)
    return JSONResponse(_error_body("invalid_input", message), status_code=400)


async def _handle_persistence_error(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("Persistence failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(_error_body("persistence_error", "Internal server error"), status_code=500)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers for a JSON-only API."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Content-Security-Policy", "default-src 'none'; frame-ancestors 'none'")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _handle_request_validation)  # type: ignore[arg-type]
    app.add_exception_handler(BlogError, _handle_blog_error)  # type: ignore[arg-type]
    app.add_exception_handler(PersistenceError, _handle_persistence_error)  # type: ignore[arg-type]
