"""Supabase PostgREST 비즈니스 카탈로그.

Supabase REST API의 HTTP 구현체.
- 조회: GET /rest/v1/businesses?select=*,category:business_categories(*)
- 인증: apikey 헤더 + Authorization: Bearer {key}
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Sequence

import httpx

from discovery.application.common.exceptions import CatalogUnavailableError
from discovery.application.discovery.ports import BusinessCatalog
from discovery.application.discovery.services import bounding_box
from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import LocationReading
from discovery.infrastructure.mappers import map_businesses, try_map_business

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_PAGE_SIZE = 500
SELECT_WITH_CATEGORY = "*,category:business_categories(*)"


class SupabaseBusinessCatalog(BusinessCatalog):
    """Supabase HTTP 카탈로그."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        page_size: int = DEFAULT_PAGE_SIZE,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/") + "/rest/v1"
        self._api_key = api_key
        self._timeout = timeout
        self._page_size = page_size
        self._client = client
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        headers={
                            "apikey": self._api_key,
                            "Authorization": f"Bearer {self._api_key}",
                            "Accept": "application/json",
                        },
                        timeout=self._timeout,
                    )
        return self._client

    async def fetch_candidates(
        self,
        center: LocationReading | None,
        radius_km: float | None,
    ) -> Sequence[BusinessRecord]:
        """후보 비즈니스를 모두 조회합니다. center가 있으면 bounding box로 좁힙니다.

        PostgREST 한 응답의 행 수가 제한되므로 page_size 단위로 끝까지 읽습니다.
        """
        params: list[tuple[str, str]] = [
            ("select", SELECT_WITH_CATEGORY),
            ("order", "id.asc"),
        ]
        if center is not None and radius_km is not None:
            params += self._geo_filters(center, radius_km)

        records: list[BusinessRecord] = []
        offset = 0
        while True:
            page = params + [("limit", str(self._page_size)), ("offset", str(offset))]
            rows = await self._get("/businesses", page)
            records.extend(map_businesses(rows))
            if len(rows) < self._page_size:
                break
            offset += self._page_size
        return records

    @staticmethod
    def _geo_filters(center: LocationReading, radius_km: float) -> list[tuple[str, str]]:
        box = bounding_box(center.latitude, center.longitude, radius_km)
        filters = [("latitude", f"gte.{box.min_lat}"), ("latitude", f"lte.{box.max_lat}")]
        if box.covers_all_longitudes:
            return filters
        if len(box.lon_ranges) == 1:
            west, east = box.lon_ranges[0]
            return filters + [("longitude", f"gte.{west}"), ("longitude", f"lte.{east}")]
        ranges = ",".join(
            f"and(longitude.gte.{west},longitude.lte.{east})" for west, east in box.lon_ranges
        )
        return filters + [("or", f"({ranges})")]

    async def find_by_id(self, business_id: str) -> BusinessRecord | None:
        rows = await self._get(
            "/businesses",
            [("select", SELECT_WITH_CATEGORY), ("id", f"eq.{business_id}"), ("limit", "1")],
        )
        if not rows:
            return None
        return try_map_business(rows[0])

    async def _get(self, path: str, params: list[tuple[str, str]]) -> list[Any]:
        client = await self._get_client()
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Supabase HTTP error",
                extra={"status_code": e.response.status_code, "path": path},
            )
            raise CatalogUnavailableError("Supabase catalog unavailable") from e
        except httpx.TimeoutException as e:
            logger.error("Supabase timeout", extra={"path": path})
            raise CatalogUnavailableError("Supabase catalog timed out") from e
        except httpx.HTTPError as e:
            logger.error("Supabase request failed", extra={"path": path, "error": str(e)})
            raise CatalogUnavailableError("Supabase catalog unavailable") from e
        except ValueError as e:
            logger.error("Supabase returned invalid JSON", extra={"path": path})
            raise CatalogUnavailableError("Supabase catalog returned invalid payload") from e

        if not isinstance(data, list):
            raise CatalogUnavailableError("Supabase catalog returned invalid payload")
        return data

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
