"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, AsyncIterator
from zoneinfo import ZoneInfo

from fastapi import Depends

from discovery.application.discovery import (
    BusinessCatalog,
    DiscoveryFacade,
    DiscoveryPolicy,
    OperatingHoursEvaluator,
)
from discovery.infrastructure.integrations.supabase import SupabaseBusinessCatalog
from discovery.infrastructure.persistence_memory import DEFAULT_SEED_PATH, InMemoryBusinessCatalog
from discovery.infrastructure.persistence_postgres import SqlaBusinessCatalog
from discovery.setup.config import Settings, get_settings
from discovery.setup.database import get_session_factory

logger = logging.getLogger(__name__)

_supabase_catalog: SupabaseBusinessCatalog | None = None


@lru_cache
def get_memory_catalog() -> InMemoryBusinessCatalog:
    """시드 파일 기반 메모리 카탈로그 싱글톤을 반환합니다."""
    settings = get_settings()
    return InMemoryBusinessCatalog.from_json_file(settings.seed_path or DEFAULT_SEED_PATH)


def get_supabase_catalog() -> SupabaseBusinessCatalog:
    """Supabase 카탈로그 싱글톤을 반환합니다."""
    global _supabase_catalog  # noqa: PLW0603
    if _supabase_catalog is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_key:
            logger.warning("DISCOVERY_SUPABASE_URL/KEY not set, Supabase requests will fail")
        _supabase_catalog = SupabaseBusinessCatalog(
            base_url=settings.supabase_url,
            api_key=settings.supabase_key,
            timeout=settings.supabase_timeout,
            page_size=settings.catalog_page_size,
        )
        logger.info("Supabase catalog client created")
    return _supabase_catalog


async def close_catalog_clients() -> None:
    """애플리케이션 종료 시 외부 클라이언트를 정리합니다."""
    global _supabase_catalog  # noqa: PLW0603
    if _supabase_catalog is not None:
        await _supabase_catalog.close()
        _supabase_catalog = None


async def get_business_catalog(
    settings: Annotated[Settings, Depends(get_settings)],
) -> AsyncIterator[BusinessCatalog]:
    """설정된 백엔드의 카탈로그를 주입합니다. postgres는 요청마다 세션을 엽니다."""
    if settings.catalog_backend == "postgres":
        async with get_session_factory()() as session:
            yield SqlaBusinessCatalog(session, page_size=settings.catalog_page_size)
    elif settings.catalog_backend == "supabase":
        yield get_supabase_catalog()
    else:
        yield get_memory_catalog()


@lru_cache
def get_evaluator() -> OperatingHoursEvaluator:
    """설정 시간대의 영업 시간 판정기를 반환합니다."""
    return OperatingHoursEvaluator(ZoneInfo(get_settings().timezone))


def get_discovery_policy(
    settings: Annotated[Settings, Depends(get_settings)],
) -> DiscoveryPolicy:
    """Settings에서 검색 정책을 생성합니다."""
    return DiscoveryPolicy(
        default_radius_km=settings.default_radius_km,
        max_radius_km=settings.max_radius_km,
        max_limit=settings.max_limit,
        featured_radius_km=settings.featured_radius_km,
        recommendation_radius_km=settings.recommendation_radius_km,
        recommendation_min_rating=settings.recommendation_min_rating,
        catalog_timeout_seconds=settings.catalog_timeout_seconds,
    )


def get_discovery_facade(
    catalog: Annotated[BusinessCatalog, Depends(get_business_catalog)],
    evaluator: Annotated[OperatingHoursEvaluator, Depends(get_evaluator)],
    policy: Annotated[DiscoveryPolicy, Depends(get_discovery_policy)],
) -> DiscoveryFacade:
    """DiscoveryFacade를 주입합니다."""
    return DiscoveryFacade(catalog, evaluator, policy)
