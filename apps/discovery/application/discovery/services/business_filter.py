"""Business Filter Pipeline.

후보 비즈니스에 조건자(predicate)들을 AND로 적용합니다.
Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable

from discovery.application.discovery.dto import FilterOptions
from discovery.application.discovery.services.distance import distance_km
from discovery.application.discovery.services.operating_hours import OperatingHoursEvaluator
from discovery.domain.entities import BusinessRecord
from discovery.domain.enums import InteractionType
from discovery.domain.exceptions import MalformedRecordError
from discovery.domain.value_objects import LocationReading

logger = logging.getLogger(__name__)

Predicate = Callable[[BusinessRecord], bool]


@dataclass(frozen=True)
class NamedPredicate:
    name: str
    test: Predicate


def ensure_well_formed(record: BusinessRecord) -> None:
    """Discovery에 필요한 필드가 모두 있는지 검사합니다.

    Raises:
        MalformedRecordError: 필수 필드 누락 또는 값 오류
    """
    if not record.id:
        raise MalformedRecordError(record.id, "missing id")
    if not record.name:
        raise MalformedRecordError(record.id, "missing name")
    if record.location is None:
        raise MalformedRecordError(record.id, "missing location")
    if record.operating_hours is None:
        raise MalformedRecordError(record.id, "missing operating_hours")
    if record.category is None:
        raise MalformedRecordError(record.id, "missing category")
    if record.interaction_type is None:
        raise MalformedRecordError(record.id, "missing interaction_type")
    rating = record.avg_rating
    if not isinstance(rating, (int, float)) or not math.isfinite(rating) or not 0 <= rating <= 5:
        raise MalformedRecordError(record.id, f"invalid avg_rating {rating!r}")


def distance_from(center: LocationReading, record: BusinessRecord) -> float:
    location = record.location
    if location is None:
        raise MalformedRecordError(record.id, "missing location")
    return distance_km(center.latitude, center.longitude, location.latitude, location.longitude)


def matches_category(record: BusinessRecord, category: str) -> bool:
    if category in record.specialized_categories:
        return True
    return record.category is not None and record.category.id == category


def matches_delivery(record: BusinessRecord, supports_delivery: bool | None) -> bool:
    """배송 조건은 ORDER 유형에만 적용합니다. 그 외 유형은 통과."""
    if supports_delivery is None or record.interaction_type != InteractionType.ORDER:
        return True
    return record.supports_delivery == supports_delivery


class BusinessFilterPipeline:
    """비즈니스 필터 파이프라인.

    적용 순서:
        1. 반경 (center가 있을 때만)
        2. interaction_type
        3. category (specialized_categories 또는 category.id)
        4. min_rating
        5. 영업 중 여부
        6. 배송 지원 (ORDER 유형만)

    모든 조건은 교환 가능한 AND이며, 입력 순서를 유지합니다.
    """

    def __init__(self, evaluator: OperatingHoursEvaluator) -> None:
        self._evaluator = evaluator

    def build_predicates(
        self,
        center: LocationReading | None,
        options: FilterOptions,
        now: datetime,
    ) -> list[NamedPredicate]:
        """활성화된 조건자 목록을 반환합니다."""
        predicates: list[NamedPredicate] = []

        if center is not None:
            radius = options.radius_km
            predicates.append(
                NamedPredicate("radius", lambda r: distance_from(center, r) <= radius)
            )
        if options.interaction_type is not None:
            wanted = options.interaction_type
            predicates.append(
                NamedPredicate("interaction_type", lambda r: r.interaction_type == wanted)
            )
        if options.category:
            category = options.category
            predicates.append(NamedPredicate("category", lambda r: matches_category(r, category)))
        if options.min_rating > 0:
            floor = options.min_rating
            predicates.append(NamedPredicate("min_rating", lambda r: r.avg_rating >= floor))
        if options.is_open_now:
            predicates.append(
                NamedPredicate(
                    "open_now", lambda r: self._evaluator.is_open(r.operating_hours, now)
                )
            )
        if options.supports_delivery is not None:
            delivery = options.supports_delivery
            predicates.append(
                NamedPredicate("delivery", lambda r: matches_delivery(r, delivery))
            )
        return predicates

    def apply(
        self,
        candidates: Iterable[BusinessRecord],
        center: LocationReading | None,
        options: FilterOptions,
        now: datetime,
        extra: Iterable[NamedPredicate] = (),
    ) -> list[BusinessRecord]:
        """후보 목록에 필터를 적용합니다.

        형식이 잘못된 레코드는 경고 로그 후 제외하며 쿼리를 실패시키지 않습니다.
        """
        predicates = self.build_predicates(center, options, now) + list(extra)
        kept: list[BusinessRecord] = []
        malformed = 0

        for record in candidates:
            try:
                ensure_well_formed(record)
                if all(p.test(record) for p in predicates):
                    kept.append(record)
            except MalformedRecordError as e:
                malformed += 1
                logger.warning(
                    "Malformed business record skipped",
                    extra={"business_id": e.record_id, "reason": e.reason},
                )

        logger.debug(
            "Business filter applied",
            extra={
                "predicates": [p.name for p in predicates],
                "kept": len(kept),
                "malformed": malformed,
            },
        )
        return kept
