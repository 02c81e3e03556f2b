"""Filter Options DTO."""

from __future__ import annotations

from dataclasses import dataclass

from discovery.domain.enums import InteractionType

DEFAULT_RADIUS_KM = 5.0
DEFAULT_NEARBY_LIMIT = 20
DEFAULT_SEARCH_LIMIT = 10


@dataclass(frozen=True)
class FilterOptions:
    """주변 검색 필터 옵션 (요청마다 생성)."""

    radius_km: float = DEFAULT_RADIUS_KM
    interaction_type: InteractionType | None = None
    category: str | None = None
    is_open_now: bool = False
    min_rating: float = 0.0
    supports_delivery: bool | None = None
    limit: int = DEFAULT_NEARBY_LIMIT
    offset: int = 0


@dataclass(frozen=True)
class TextSearchOptions:
    """텍스트 검색 옵션. 반경은 center가 주어질 때만 적용됩니다."""

    radius_km: float = DEFAULT_RADIUS_KM
    interaction_type: InteractionType | None = None
    category: str | None = None
    limit: int = DEFAULT_SEARCH_LIMIT

    def as_filter_options(self) -> FilterOptions:
        return FilterOptions(
            radius_km=self.radius_km,
            interaction_type=self.interaction_type,
            category=self.category,
            limit=self.limit,
        )
