"""Get Business Detail Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from discovery.application.discovery.policy import DiscoveryPolicy
from discovery.application.discovery.services import call_catalog
from discovery.domain.entities import BusinessRecord
from discovery.domain.exceptions import BusinessNotFoundError

if TYPE_CHECKING:
    from discovery.application.discovery.ports import BusinessCatalog

logger = logging.getLogger(__name__)


class GetBusinessDetailQuery:
    """비즈니스 상세 조회 Query."""

    def __init__(self, catalog: "BusinessCatalog", policy: DiscoveryPolicy) -> None:
        self._catalog = catalog
        self._policy = policy

    async def execute(self, business_id: str) -> BusinessRecord:
        """ID로 비즈니스를 조회합니다.

        Raises:
            BusinessNotFoundError: 미발견 시
        """
        record = await call_catalog(
            self._catalog.find_by_id(business_id),
            self._policy.catalog_timeout_seconds,
            "get_business",
        )
        if record is None:
            logger.info("Business not found", extra={"business_id": business_id})
            raise BusinessNotFoundError(business_id)
        return record
