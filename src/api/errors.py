"""Map the exception hierarchy of src/core/exceptions.py onto HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse
from src.core.exceptions import GameError, GameNotFoundError, InvalidRequestError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers for the FastAPI app."""

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(
        request: Request, exc: InvalidRequestError
    ) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Malformed body (missing name, negative size, ...) counts as invalid input as well
        message = "; ".join(
            f"{'.'.join(str(loc) for loc in error.get('loc', []))}: {error.get('msg', 'invalid value')}"
            for error in exc.errors()
        )
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return _error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(GameNotFoundError)
    async def not_found_handler(
        request: Request, exc: GameNotFoundError
    ) -> JSONResponse:
        logger.info("Not found %s %s: %s", request.method, request.url.path, exc)
        return _error_response(status.HTTP_404_NOT_FOUND, str(exc))

    # PersistenceError and anything else the core raises
    @app.exception_handler(GameError)
    async def game_error_handler(request: Request, exc: GameError) -> JSONResponse:
        logger.error("Failed %s %s: %s", request.method, request.url.path, exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
