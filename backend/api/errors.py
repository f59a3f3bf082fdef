"""
Exception handlers.

Maps the shared exception hierarchy onto HTTP responses. Client errors
carry their code and message; anything server-side is logged and
rendered as a generic 500 without internal detail.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import AltairisError
from .models.errors import ErrorResponse, ValidationErrorResponse, SERVER_ERROR

logger = logging.getLogger(__name__)


async def handle_app_error(request: Request, exc: AltairisError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s %s",
            request.method,
            request.url.path,
            exc.code,
            exc.details,
        )
        return JSONResponse(status_code=exc.status_code, content=SERVER_ERROR.model_dump())

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    body = ErrorResponse(**exc.to_dict())
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=SERVER_ERROR.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AltairisError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
