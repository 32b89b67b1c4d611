"""
Exception handlers.

Every BmsHubError subclass carries its own status code, so one handler
covers all domain errors. Anything else becomes a generic 500 with the
details kept in the log.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import BmsHubError

from .models.errors import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the API's exception handlers on ``app``."""

    @app.exception_handler(BmsHubError)
    async def bms_hub_error_handler(request: Request, exc: BmsHubError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.info(
                "%s %s rejected (%d %s)",
                request.method,
                request.url.path,
                exc.status_code,
                exc.code,
            )
        body = ErrorResponse(message=exc.message, error=exc.code, details=exc.details)
        return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(body))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
            for err in exc.errors()
        ]
        message = "Invalid request"
        if errors:
            first = errors[0]
            message = f"{'.'.join(str(part) for part in first['loc'])}: {first['msg']}"
        body = ValidationErrorResponse(message=message, errors=errors)
        return JSONResponse(status_code=400, content=jsonable_encoder(body))

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        body = ErrorResponse(message="Server error", error="INTERNAL_ERROR")
        return JSONResponse(status_code=500, content=jsonable_encoder(body))
