"""Discovery Facade.

화면 계층 호출자를 위한 단일 진입점입니다.
각 연산은 카탈로그 스냅샷 조회 -> 필터 -> (페이지네이션) 으로 구성되며
공유 가변 상태가 없습니다.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable

from discovery.application.discovery.dto import FilterOptions, PaginatedResult, TextSearchOptions
from discovery.application.discovery.policy import DiscoveryPolicy
from discovery.application.discovery.queries import (
    FeaturedBusinessesQuery,
    GetBusinessDetailQuery,
    NearbySearchQuery,
    RecommendedBusinessesQuery,
    TextSearchQuery,
)
from discovery.application.discovery.queries.featured_businesses import DEFAULT_FEATURED_LIMIT
from discovery.application.discovery.queries.recommended_businesses import (
    DEFAULT_RECOMMENDATION_LIMIT,
)
from discovery.application.discovery.services import (
    BusinessFilterPipeline,
    CategoryCatalogService,
    OperatingHoursEvaluator,
)
from discovery.domain.entities import BusinessCategory, BusinessRecord
from discovery.domain.enums import InteractionType
from discovery.domain.value_objects import LocationReading

if TYPE_CHECKING:
    from discovery.application.discovery.ports import BusinessCatalog


class DiscoveryFacade:
    """Nearby Business Discovery Facade."""

    def __init__(
        self,
        catalog: "BusinessCatalog",
        evaluator: OperatingHoursEvaluator,
        policy: DiscoveryPolicy | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize.

        Args:
            catalog: 비즈니스 카탈로그 Port
            evaluator: 영업 시간 판정기
            policy: 검색 한도 정책
            clock: 현재 시각 공급자 (기본: evaluator 시간대의 현재 시각)
        """
        policy = policy or DiscoveryPolicy()
        clock = clock or evaluator.now
        pipeline = BusinessFilterPipeline(evaluator)

        self._nearby = NearbySearchQuery(catalog, pipeline, policy, clock)
        self._text = TextSearchQuery(catalog, pipeline, policy, clock)
        self._featured = FeaturedBusinessesQuery(catalog, pipeline, policy, clock)
        self._recommended = RecommendedBusinessesQuery(catalog, pipeline, policy, clock)
        self._detail = GetBusinessDetailQuery(catalog, policy)

    async def nearby_search(
        self,
        center: LocationReading,
        options: FilterOptions | None = None,
    ) -> PaginatedResult[BusinessRecord]:
        return await self._nearby.execute(center, options or FilterOptions())

    async def text_search(
        self,
        query: str,
        center: LocationReading | None = None,
        options: TextSearchOptions | None = None,
    ) -> list[BusinessRecord]:
        return await self._text.execute(query, center, options)

    async def featured_businesses(
        self,
        center: LocationReading | None = None,
        limit: int = DEFAULT_FEATURED_LIMIT,
    ) -> list[BusinessRecord]:
        return await self._featured.execute(center, limit)

    async def recommended_businesses(
        self,
        user_id: str,
        center: LocationReading,
        limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    ) -> list[BusinessRecord]:
        return await self._recommended.execute(user_id, center, limit)

    async def get_business(self, business_id: str) -> BusinessRecord:
        return await self._detail.execute(business_id)

    @staticmethod
    def list_categories(
        interaction_type: InteractionType | None = None,
    ) -> list[BusinessCategory]:
        return CategoryCatalogService.list_categories(interaction_type)
