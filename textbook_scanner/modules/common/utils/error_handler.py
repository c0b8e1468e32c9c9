"""Utility functions for mapping domain exceptions to HTTP responses."""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ....infrastructure.logging import get_logger
from ..constants import EXCEPTION_MAPPING
from ..exceptions import DomainError, ValidationError

logger = get_logger(__name__)


def map_exception(error: DomainError) -> HTTPException:
    """Map a domain exception to a corresponding HTTP exception."""
    for exception_class, mapper in EXCEPTION_MAPPING.items():
        if isinstance(error, exception_class):
            return mapper(str(error))

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"An unexpected error occurred: {str(error)}"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers for domain and request validation errors."""

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
        """Convert domain exceptions to ``{"code", "detail"}`` responses."""
        http_exception = map_exception(exc)
        logger.debug(
            "Domain error on %s: %s",
            request.url.path,
            exc.code,
            extra={"error_code": exc.code, "status_code": http_exception.status_code},
        )
        return JSONResponse(
            status_code=http_exception.status_code,
            content={"code": exc.code, "detail": http_exception.detail},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Classify malformed request bodies as VALIDATION errors."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            content={"code": ValidationError.code, "detail": jsonable_encoder(exc.errors())},
        )
