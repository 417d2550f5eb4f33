# findmeme/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from findmeme.common.logging import get_logger
from findmeme.domain.errors import (
    Conflict, FindMemeError, Forbidden, InvalidCredentials, NotFound,
    Unauthorized, UpstreamFailure, ValidationError,
)

logger = get_logger(__name__)

STATUS_BY_ERROR = {
    ValidationError: HTTPStatus.BAD_REQUEST,
    InvalidCredentials: HTTPStatus.UNAUTHORIZED,
    Unauthorized: HTTPStatus.UNAUTHORIZED,
    Forbidden: HTTPStatus.FORBIDDEN,
    NotFound: HTTPStatus.NOT_FOUND,
    Conflict: HTTPStatus.CONFLICT,
    UpstreamFailure: HTTPStatus.BAD_GATEWAY,
}


def status_for(exc: FindMemeError) -> HTTPStatus:
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return HTTPStatus.INTERNAL_SERVER_ERROR


async def _domain_error(request: Request, exc: FindMemeError) -> JSONResponse:
    status = status_for(exc)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status, content={"error": exc.message}, headers=headers)


def _describe_invalid(exc: RequestValidationError) -> str:
    # field path and reason only; never the submitted value
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path", "header"))
    reason = first.get("msg", "invalid value")
    return f"{field}: {reason}" if field else reason


async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content={"error": _describe_invalid(exc)})


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    # store and programming errors; details stay in the log
    logger.exception("%s %s crashed", request.method, request.url.path)
    return JSONResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, content={"error": "Server error"})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FindMemeError, _domain_error)
    app.add_exception_handler(RequestValidationError, _invalid_request)
    app.add_exception_handler(Exception, _unhandled_error)
