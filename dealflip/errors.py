"""Exception types and the JSON error envelope returned by the API."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AIGatewayError(Exception):
    """The LLM provider call failed or returned nothing usable."""


class MalformedProviderResponse(AIGatewayError):
    """The provider replied, but not with the JSON shape that was asked for."""


def format_validation_error(exc: RequestValidationError) -> str:
    """Render pydantic errors as one readable line.

    Example: ``Validation error: Field required at "title"``
    """
    parts = []
    for error in exc.errors():
        # Drop the leading "body"/"path"/"query" segment
        loc = [str(p) for p in error.get("loc", ())][1:]
        message = error.get("msg", "Invalid value")
        if loc:
            parts.append(f'{message} at "{".".join(loc)}"')
        else:
            parts.append(message)
    return "Validation error: " + "; ".join(parts)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": format_validation_error(exc)})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
