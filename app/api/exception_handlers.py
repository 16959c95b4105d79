"""Exception handlers for the FastAPI application."""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from app.api.quiz import INVALID_PAYLOAD_ERROR
from app.core.logging import get_logger

logger = get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register app-wide exception handlers."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request-shape errors as 400 instead of FastAPI's default 422."""
    errors = jsonable_encoder(exc.errors(), custom_encoder={Exception: str})
    logger.warning(
        f"Invalid request to {request.method} {request.url.path}: {len(errors)} error(s)"
    )
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"error": INVALID_PAYLOAD_ERROR, "details": errors},
    )
