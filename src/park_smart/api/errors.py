"""Exception handlers mapping domain and validation errors to JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..state.booking import ParkingError
from .schemas import MessageResponse

logger = logging.getLogger(__name__)


def message_response(status: int, message: str, errors: list[dict] | None = None) -> JSONResponse:
    """Build a ``{"message": ...}`` JSON error response."""
    body = MessageResponse(message=message, errors=errors)
    return JSONResponse(status_code=status, content=body.model_dump(exclude_none=True))


async def parking_error_handler(request: Request, exc: ParkingError) -> JSONResponse:
    """Not-found and conflict errors raised by the spot store."""
    return message_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are a 400, not FastAPI's default 422."""
    errors = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.debug(f"Rejected request to {request.url.path}: {errors}")
    return message_response(400, "Invalid request body.", errors)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(ParkingError, parking_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
