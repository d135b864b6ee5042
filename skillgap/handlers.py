"""Exception handlers producing the {success: false, message} error envelope."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from skillgap.schemas.envelope import ErrorResponse

logger = logging.getLogger(__name__)


def error_body(message: str, **extra: Any) -> dict[str, Any]:
    """Build an error envelope, with any extra keys after message."""
    return {**ErrorResponse(message=message).model_dump(by_alias=True), **extra}


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap HTTPException details in the error envelope.

    A dict detail must carry "message"; its other keys (e.g. validRoles,
    field) are copied into the body. Unmatched routes report their path.
    """
    if isinstance(exc.detail, dict):
        extra = {key: value for key, value in exc.detail.items() if key != "message"}
        body = error_body(str(exc.detail.get("message", "Error occurred")), **extra)
    elif exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        body = error_body("Route not found", path=request.url.path)
    else:
        body = error_body(str(exc.detail))

    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(body),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Report request schema errors as a failed-validation envelope."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder(error_body("Validation failed", errors=errors)),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for errors no router translated."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal Server Error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on an app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
