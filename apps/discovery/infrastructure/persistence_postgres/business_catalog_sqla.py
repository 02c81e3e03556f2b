"""SQLAlchemy Business Catalog Implementation."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from sqlalchemy import Select, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from discovery.application.common.exceptions import CatalogUnavailableError
from discovery.application.discovery.ports import BusinessCatalog
from discovery.application.discovery.services import bounding_box
from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import LocationReading
from discovery.infrastructure.mappers import map_businesses, try_map_business
from discovery.infrastructure.persistence_postgres.models import BusinessCategoryRow, BusinessRow

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 500


class SqlaBusinessCatalog(BusinessCatalog):
    """SQLAlchemy 기반 비즈니스 카탈로그.

    BusinessCatalog Port를 구현합니다.
    위경도 bounding box로 인덱스를 타고, Haversine 표현식으로 반경을 자른 뒤
    거리순으로 정렬합니다. 후보는 page_size 단위로 끝까지 읽습니다.
    """

    def __init__(
        self,
        session: AsyncSession,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
            page_size: 한 번의 쿼리로 가져올 행 수
        """
        self._session = session
        self._page_size = page_size

    async def fetch_candidates(
        self,
        center: LocationReading | None,
        radius_km: float | None,
    ) -> Sequence[BusinessRecord]:
        """주어진 지역의 후보를 모두 조회합니다."""
        query = select(BusinessRow, BusinessCategoryRow).outerjoin(
            BusinessCategoryRow, BusinessRow.category_id == BusinessCategoryRow.id
        )
        if center is not None and radius_km is not None:
            distance_expr = self._haversine_expr(center.latitude, center.longitude)
            box = bounding_box(center.latitude, center.longitude, radius_km)
            query = query.where(
                BusinessRow.latitude.between(box.min_lat, box.max_lat),
                distance_expr <= radius_km,
            )
            if not box.covers_all_longitudes:
                query = query.where(
                    or_(*(BusinessRow.longitude.between(w, e) for w, e in box.lon_ranges))
                )
            query = query.order_by(distance_expr.asc(), BusinessRow.id)
        else:
            query = query.order_by(BusinessRow.id)

        records: list[BusinessRecord] = []
        offset = 0
        while True:
            rows = await self._fetch_page(query, offset)
            records.extend(map_businesses(self._to_row_dict(b, c) for b, c in rows))
            if len(rows) < self._page_size:
                break
            offset += self._page_size

        logger.debug(
            "Catalog candidates fetched",
            extra={"candidates": len(records), "pages": offset // self._page_size + 1},
        )
        return records

    async def _fetch_page(self, query: Select, offset: int) -> list[Any]:
        try:
            result = await self._session.execute(query.limit(self._page_size).offset(offset))
            return list(result.all())
        except SQLAlchemyError as e:
            logger.error(
                "Business catalog query failed", extra={"offset": offset, "error": str(e)}
            )
            raise CatalogUnavailableError("Business catalog query failed") from e

    async def find_by_id(self, business_id: str) -> BusinessRecord | None:
        """ID로 비즈니스를 조회합니다."""
        query = (
            select(BusinessRow, BusinessCategoryRow)
            .outerjoin(BusinessCategoryRow, BusinessRow.category_id == BusinessCategoryRow.id)
            .where(BusinessRow.id == business_id)
        )
        try:
            result = await self._session.execute(query)
            row = result.first()
        except SQLAlchemyError as e:
            logger.error(
                "Business lookup failed",
                extra={"business_id": business_id, "error": str(e)},
            )
            raise CatalogUnavailableError("Business catalog query failed") from e

        if row is None:
            return None
        business, category = row
        return try_map_business(self._to_row_dict(business, category))

    @staticmethod
    def _to_row_dict(
        business: BusinessRow, category: BusinessCategoryRow | None
    ) -> dict[str, Any]:
        """ORM 모델을 매퍼 입력 형식으로 변환합니다."""
        return {
            "id": business.id,
            "owner_id": business.owner_id,
            "business_name": business.business_name,
            "description": business.description,
            "latitude": business.latitude,
            "longitude": business.longitude,
            "address": business.address,
            "contact_info": business.contact_info,
            "operating_hours": business.operating_hours,
            "category": (
                {
                    "id": category.id,
                    "name": category.name,
                    "description": category.description,
                    "icon_url": category.icon_url,
                    "interaction_type": category.interaction_type,
                    "is_active": category.is_active,
                    "display_order": category.display_order,
                }
                if category is not None
                else business.category_id
            ),
            "interaction_type": business.interaction_type,
            "specialized_categories": business.specialized_categories,
            "supports_delivery": business.supports_delivery,
            "is_approved": business.is_approved,
            "status": business.status,
            "is_featured": business.is_featured,
            "avg_rating": business.avg_rating,
            "total_reviews": business.total_reviews,
            "created_at": business.created_at,
            "updated_at": business.updated_at,
        }

    @staticmethod
    def _haversine_expr(latitude: float, longitude: float):
        """구면 코사인 거리 표현식 (km)."""
        cosine = func.cos(func.radians(latitude)) * func.cos(
            func.radians(BusinessRow.latitude)
        ) * func.cos(func.radians(BusinessRow.longitude) - func.radians(longitude)) + func.sin(
            func.radians(latitude)
        ) * func.sin(func.radians(BusinessRow.latitude))
        clamped = func.least(1.0, func.greatest(-1.0, cosine))
        return (6371.0 * func.acos(clamped)).label("distance_km")
