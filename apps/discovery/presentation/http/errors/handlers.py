"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from discovery.application.common.exceptions import (
    ApplicationError,
    CatalogUnavailableError,
    InvalidArgumentError,
    InvalidInteractionTypeError,
)
from discovery.domain.exceptions import BusinessNotFoundError, DomainError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(CatalogUnavailableError)
    async def catalog_unavailable_handler(request: Request, exc: CatalogUnavailableError):
        logger.warning(
            "Catalog unavailable",
            extra={"path": request.url.path, "reason": exc.reason},
        )
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "CATALOG_UNAVAILABLE"},
        )

    @app.exception_handler(BusinessNotFoundError)
    async def business_not_found_handler(request: Request, exc: BusinessNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "BUSINESS_NOT_FOUND"},
        )

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_ARGUMENT"},
        )

    @app.exception_handler(InvalidInteractionTypeError)
    async def invalid_interaction_type_handler(
        request: Request, exc: InvalidInteractionTypeError
    ):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_INTERACTION_TYPE"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
