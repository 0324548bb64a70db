"""Global exception handlers: domain failures become JSON envelopes.

    - InvalidError            -> 400
    - RequestValidationError  -> 400 (malformed body / path / query)
    - NotFoundError           -> 404
    - anything else           -> 500, message never leaks internals
"""
from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mediagraph.common.logging import get_logger
from mediagraph.domain.errors import InvalidError, NotFoundError

logger = get_logger(__name__)

VALIDATION_ERROR = "validation_error"
NOT_FOUND_ERROR = "not_found"
INTERNAL_ERROR = "internal_error"


def _envelope(status: HTTPStatus, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": error, "message": message})


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(InvalidError)
    async def invalid_handler(request: Request, exc: InvalidError):
        logger.error("%s on %s: %s", VALIDATION_ERROR, request.url.path, exc)
        return _envelope(HTTPStatus.BAD_REQUEST, VALIDATION_ERROR, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("Malformed request on %s: %s", request.url.path, exc.errors())
        parts = []
        for err in exc.errors():
            loc = ".".join(str(x) for x in err.get("loc", ()) if x != "body")
            parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
        return _envelope(HTTPStatus.BAD_REQUEST, VALIDATION_ERROR, "; ".join(parts))

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.error("%s on %s: %s", NOT_FOUND_ERROR, request.url.path, exc)
        return _envelope(HTTPStatus.NOT_FOUND, NOT_FOUND_ERROR, str(exc))

    @app.exception_handler(Exception)
    async def unexpected_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
        return _envelope(HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_ERROR, "An unexpected error occurred")
