"""Translate raised errors into ``{"status": "error", "message": ...}`` responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from letter_stats.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    DiscoveryDepthError,
    InvalidPathError,
    InvalidRepositoryError,
    LetterStatsError,
    NotFoundError,
    RateLimitError,
    TransportError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[LetterStatsError], int] = {
    InvalidRepositoryError: 422,
    InvalidPathError: 422,
    DiscoveryDepthError: 422,
    NotFoundError: 404,
    AuthenticationError: 401,
    AccessDeniedError: 403,
    RateLimitError: 429,
    TransportError: 502,
}


def status_for(exc: LetterStatsError) -> int:
    """Most specific mapped status along the exception's MRO; 500 if none."""
    for cls in type(exc).__mro__:
        if cls in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[cls]
    return 500


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


async def _domain_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, LetterStatsError)
    code = status_for(exc)
    logger.warning("%s %s -> %d %s: %s", request.method, request.url.path, code, type(exc).__name__, exc)
    return _envelope(code, str(exc))


async def _invalid_request(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    problems = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    ]
    return _envelope(422, "; ".join(problems))


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _envelope(500, "An unexpected error occurred. Please try again later.")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LetterStatsError, _domain_error)
    app.add_exception_handler(RequestValidationError, _invalid_request)
    app.add_exception_handler(Exception, _unexpected_error)
