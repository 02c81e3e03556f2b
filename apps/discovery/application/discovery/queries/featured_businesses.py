"""Featured Businesses Query."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Callable

from discovery.application.discovery.dto import FilterOptions
from discovery.application.discovery.policy import DiscoveryPolicy
from discovery.application.discovery.services import (
    BusinessFilterPipeline,
    NamedPredicate,
    call_catalog,
)
from discovery.application.discovery.services.validation import validate_limit
from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import LocationReading

if TYPE_CHECKING:
    from discovery.application.discovery.ports import BusinessCatalog

logger = logging.getLogger(__name__)

DEFAULT_FEATURED_LIMIT = 10

FEATURED_AND_ACTIVE = NamedPredicate("featured", lambda r: r.is_featured and r.is_active)


class FeaturedBusinessesQuery:
    """추천(featured) 비즈니스 조회 Query.

    is_featured 이고 active 인 비즈니스를 평점 내림차순으로 정렬합니다.
    동점은 카탈로그 순서를 유지합니다 (안정 정렬).
    """

    def __init__(
        self,
        catalog: "BusinessCatalog",
        pipeline: BusinessFilterPipeline,
        policy: DiscoveryPolicy,
        clock: Callable[[], datetime],
    ) -> None:
        self._catalog = catalog
        self._pipeline = pipeline
        self._policy = policy
        self._clock = clock

    async def execute(
        self,
        center: LocationReading | None = None,
        limit: int = DEFAULT_FEATURED_LIMIT,
    ) -> list[BusinessRecord]:
        validate_limit(limit, self._policy)
        radius = self._policy.featured_radius_km

        candidates = await call_catalog(
            self._catalog.fetch_candidates(center, radius if center else None),
            self._policy.catalog_timeout_seconds,
            "featured_businesses",
        )
        featured = self._pipeline.apply(
            candidates,
            center,
            FilterOptions(radius_km=radius, limit=limit),
            self._clock(),
            extra=[FEATURED_AND_ACTIVE],
        )
        ranked = sorted(featured, key=lambda r: r.avg_rating, reverse=True)[:limit]

        logger.info(
            "Featured businesses resolved",
            extra={"candidates": len(candidates), "returned": len(ranked)},
        )
        return ranked
