"""Discovery Policy."""

from __future__ import annotations

from dataclasses import dataclass

from discovery.application.discovery.dto.filter_options import DEFAULT_RADIUS_KM


@dataclass(frozen=True)
class DiscoveryPolicy:
    """검색 한도 및 기본 반경 정책. Settings에서 생성합니다."""

    default_radius_km: float = DEFAULT_RADIUS_KM
    max_radius_km: float = 50.0
    max_limit: int = 100
    featured_radius_km: float = 20.0
    recommendation_radius_km: float = 10.0
    recommendation_min_rating: float = 4.0
    catalog_timeout_seconds: float = 5.0
