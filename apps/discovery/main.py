"""Discovery API - FastAPI application entry point.

분산 트레이싱 통합:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (Supabase 카탈로그 호출)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from discovery.infrastructure.observability import (
    instrument_fastapi,
    instrument_httpx,
    setup_tracing,
    shutdown_tracing,
)
from discovery.presentation.http.controllers import (
    categories_router,
    discovery_router,
    health_router,
)
from discovery.presentation.http.errors import register_exception_handlers
from discovery.setup.config import get_settings
from discovery.setup.database import dispose_engine
from discovery.setup.dependencies import close_catalog_clients
from discovery.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    logger.info(
        "Starting discovery service",
        extra={"service": settings.service_name, "catalog_backend": settings.catalog_backend},
    )

    # OpenTelemetry 설정
    if setup_tracing(settings):
        instrument_httpx(settings)

    yield

    logger.info("Shutting down discovery service", extra={"service": settings.service_name})
    await close_catalog_clients()
    if settings.catalog_backend == "postgres":
        await dispose_engine()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    setup_logging(settings)

    app = FastAPI(
        title="Discovery API",
        description="Nearby business discovery for local marketplaces",
        version=settings.service_version,
        docs_url="/api/v1/discovery/docs",
        openapi_url="/api/v1/discovery/openapi.json",
        redoc_url="/api/v1/discovery/redoc",
        lifespan=lifespan,
    )

    # CORS 미들웨어 추가
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app, settings)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(discovery_router, prefix="/api/v1")
    app.include_router(categories_router, prefix="/api/v1")

    register_exception_handlers(app)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "discovery.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
