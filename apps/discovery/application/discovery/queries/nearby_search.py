"""Nearby Search Query.

주변 비즈니스를 조회하는 Query(지휘자)입니다.
Port를 통해 카탈로그와 통신하고, Service에 순수 로직을 위임합니다.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Callable

from discovery.application.discovery.dto import FilterOptions, PaginatedResult
from discovery.application.discovery.policy import DiscoveryPolicy
from discovery.application.discovery.services import (
    BusinessFilterPipeline,
    call_catalog,
    paginate,
)
from discovery.application.discovery.services.validation import (
    validate_limit,
    validate_min_rating,
    validate_radius,
)
from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import LocationReading

if TYPE_CHECKING:
    from discovery.application.discovery.ports import BusinessCatalog

logger = logging.getLogger(__name__)


class NearbySearchQuery:
    """주변 비즈니스 조회 Query.

    Workflow:
        1. 입력 검증 (즉시 실패)
        2. 후보 조회 (Port)
        3. 필터 파이프라인 (Service)
        4. 페이지네이션 (Service)
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
        self, center: LocationReading, options: FilterOptions
    ) -> PaginatedResult[BusinessRecord]:
        """주변 비즈니스를 조회합니다.

        Args:
            center: 검색 중심 좌표
            options: 필터 옵션

        Returns:
            페이지네이션된 BusinessRecord 목록 (카탈로그 순서 유지)
        """
        validate_radius(options.radius_km, self._policy)
        validate_limit(options.limit, self._policy)
        validate_min_rating(options.min_rating)

        logger.info(
            "Nearby search started",
            extra={
                "lat": center.latitude,
                "lon": center.longitude,
                "radius_km": options.radius_km,
                "interaction_type": options.interaction_type,
                "category": options.category,
            },
        )

        candidates = await call_catalog(
            self._catalog.fetch_candidates(center, options.radius_km),
            self._policy.catalog_timeout_seconds,
            "nearby_search",
        )
        filtered = self._pipeline.apply(candidates, center, options, self._clock())
        result = paginate(filtered, options.limit, options.offset)

        logger.info(
            "Nearby search completed",
            extra={"candidates": len(candidates), "total": result.total, "page": result.page},
        )
        return result
