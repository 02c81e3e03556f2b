"""Recommended Businesses Query."""

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
from discovery.application.discovery.services.business_filter import distance_from
from discovery.application.discovery.services.validation import validate_limit
from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import LocationReading

if TYPE_CHECKING:
    from discovery.application.discovery.ports import BusinessCatalog

logger = logging.getLogger(__name__)

DEFAULT_RECOMMENDATION_LIMIT = 5

ACTIVE_ONLY = NamedPredicate("active", lambda r: r.is_active)


class RecommendedBusinessesQuery:
    """평점 기반 추천 Query.

    반경 내 active 비즈니스 중 최소 평점 이상을 평점 내림차순,
    거리 오름차순으로 정렬합니다. 사용자별 개인화는 하지 않습니다.
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
        user_id: str,
        center: LocationReading,
        limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    ) -> list[BusinessRecord]:
        validate_limit(limit, self._policy)
        radius = self._policy.recommendation_radius_km

        candidates = await call_catalog(
            self._catalog.fetch_candidates(center, radius),
            self._policy.catalog_timeout_seconds,
            "recommended_businesses",
        )
        eligible = self._pipeline.apply(
            candidates,
            center,
            FilterOptions(
                radius_km=radius,
                min_rating=self._policy.recommendation_min_rating,
                limit=limit,
            ),
            self._clock(),
            extra=[ACTIVE_ONLY],
        )
        ranked = sorted(eligible, key=lambda r: (-r.avg_rating, distance_from(center, r)))

        logger.info(
            "Recommendations resolved",
            extra={
                "user_id": user_id,
                "eligible": len(eligible),
                "returned": min(limit, len(ranked)),
            },
        )
        return ranked[:limit]
