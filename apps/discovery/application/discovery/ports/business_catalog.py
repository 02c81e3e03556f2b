"""Business Catalog Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import LocationReading


class BusinessCatalog(ABC):
    """비즈니스 카탈로그 조회 포트.

    Infrastructure Layer에서 구현합니다. 구현체는 드라이버/네트워크 오류를
    CatalogUnavailableError로 변환해야 합니다.
    """

    @abstractmethod
    async def fetch_candidates(
        self,
        center: LocationReading | None,
        radius_km: float | None,
    ) -> Sequence[BusinessRecord]:
        """주어진 지역의 후보 비즈니스를 조회합니다.

        반경 필터링의 정확성은 Discovery 모듈이 보장하므로 구현체는
        더 넓은 후보 집합(또는 전체 스냅샷)을 반환해도 됩니다.

        Args:
            center: 검색 중심 (None이면 지역 제한 없음)
            radius_km: 반경 (km), center가 None이면 무시

        Returns:
            BusinessRecord 목록 (카탈로그 순서 유지)
        """
        ...

    @abstractmethod
    async def find_by_id(self, business_id: str) -> BusinessRecord | None:
        """ID로 비즈니스를 조회합니다.

        Returns:
            BusinessRecord 또는 None (미발견 시)
        """
        ...
