"""Text Search Query.

이름/설명/전문 카테고리 대상의 대소문자 무시 부분 문자열 검색.
관련도 정렬 없이 카탈로그 순서대로 앞에서부터 limit개를 반환합니다.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Callable

from discovery.application.common.exceptions import InvalidArgumentError
from discovery.application.discovery.dto import TextSearchOptions
from discovery.application.discovery.policy import DiscoveryPolicy
from discovery.application.discovery.services import (
    BusinessFilterPipeline,
    NamedPredicate,
    call_catalog,
)
from discovery.application.discovery.services.validation import validate_limit, validate_radius
from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import LocationReading

if TYPE_CHECKING:
    from discovery.application.discovery.ports import BusinessCatalog

logger = logging.getLogger(__name__)

MAX_QUERY_LENGTH = 100


def matches_text(record: BusinessRecord, needle: str) -> bool:
    """needle 은 이미 소문자로 변환된 값이어야 합니다."""
    if needle in record.name.lower():
        return True
    if needle in (record.description or "").lower():
        return True
    return any(needle in keyword.lower() for keyword in record.specialized_categories)


class TextSearchQuery:
    """텍스트 검색 Query."""

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
        query: str,
        center: LocationReading | None = None,
        options: TextSearchOptions | None = None,
    ) -> list[BusinessRecord]:
        """텍스트로 비즈니스를 검색합니다.

        Args:
            query: 검색어 (공백만 있으면 InvalidArgumentError)
            center: 검색 중심. 주어진 경우에만 반경 필터 적용
            options: 검색 옵션

        Returns:
            최대 options.limit 개의 BusinessRecord
        """
        options = options or TextSearchOptions()
        needle = query.strip().lower()
        if not needle:
            raise InvalidArgumentError("query", "must not be blank")
        if len(needle) > MAX_QUERY_LENGTH:
            raise InvalidArgumentError("query", f"must be at most {MAX_QUERY_LENGTH} characters")
        validate_limit(options.limit, self._policy)
        if center is not None:
            validate_radius(options.radius_km, self._policy)

        logger.info(
            "Text search started",
            extra={"query": needle, "has_center": center is not None},
        )

        candidates = await call_catalog(
            self._catalog.fetch_candidates(center, options.radius_km if center else None),
            self._policy.catalog_timeout_seconds,
            "text_search",
        )
        matched = self._pipeline.apply(
            candidates,
            center,
            options.as_filter_options(),
            self._clock(),
            extra=[NamedPredicate("text", lambda r: matches_text(r, needle))],
        )
        results = matched[: options.limit]

        logger.info(
            "Text search completed",
            extra={"query": needle, "matched": len(matched), "returned": len(results)},
        )
        return results
