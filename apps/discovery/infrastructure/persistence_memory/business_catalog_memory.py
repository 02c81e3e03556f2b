"""In-Memory Business Catalog.

JSON 시드 데이터 기반 카탈로그. 개발 환경과 테스트에서 사용합니다.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Sequence

from discovery.application.common.exceptions import CatalogUnavailableError
from discovery.application.discovery.ports import BusinessCatalog
from discovery.domain.entities import BusinessRecord
from discovery.domain.value_objects import LocationReading
from discovery.infrastructure.mappers import map_businesses

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).with_name("seed_businesses.json")


class InMemoryBusinessCatalog(BusinessCatalog):
    """메모리 카탈로그.

    반경 필터링은 Discovery 모듈이 수행하므로 항상 전체 스냅샷을 반환합니다.
    """

    def __init__(self, records: Iterable[BusinessRecord] = ()) -> None:
        self._records: list[BusinessRecord] = list(records)

    @classmethod
    def from_rows(cls, rows: Iterable[Any]) -> "InMemoryBusinessCatalog":
        return cls(map_businesses(rows))

    @classmethod
    def from_json_file(cls, path: Path | str = DEFAULT_SEED_PATH) -> "InMemoryBusinessCatalog":
        """JSON 시드 파일에서 카탈로그를 로드합니다.

        Raises:
            CatalogUnavailableError: 파일을 읽거나 해석할 수 없는 경우
        """
        try:
            rows = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load seed catalog", extra={"path": str(path), "error": str(e)})
            raise CatalogUnavailableError(f"Seed catalog unreadable: {path}") from e

        if isinstance(rows, dict):
            rows = rows.get("businesses", [])
        catalog = cls.from_rows(rows)
        logger.info(
            "Seed catalog loaded",
            extra={"path": str(path), "businesses": len(catalog._records)},
        )
        return catalog

    async def fetch_candidates(
        self,
        center: LocationReading | None,
        radius_km: float | None,
    ) -> Sequence[BusinessRecord]:
        return list(self._records)

    async def find_by_id(self, business_id: str) -> BusinessRecord | None:
        return next((r for r in self._records if r.id == business_id), None)
