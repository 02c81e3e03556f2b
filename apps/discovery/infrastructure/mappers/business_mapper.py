"""Business Row Mapper.

카탈로그 원본 행(dict)을 BusinessRecord 엔티티로 변환합니다.
Discovery 필수 필드가 누락된 행도 엔티티로 만들어 필터 파이프라인이
판단하도록 두고, 구조 자체를 해석할 수 없는 행만 MalformedRecordError로 거부합니다.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable, Mapping

from discovery.application.discovery.services import CategoryCatalogService
from discovery.domain.entities import Address, BusinessCategory, BusinessRecord, ContactInfo
from discovery.domain.enums import BusinessStatus, InteractionType
from discovery.domain.exceptions import MalformedRecordError
from discovery.domain.value_objects import LocationReading, OperatingHours

logger = logging.getLogger(__name__)

LEGACY_STATUSES: dict[str, BusinessStatus] = {
    "pending_approval": BusinessStatus.PENDING,
    "inactive": BusinessStatus.SUSPENDED,
    "rejected": BusinessStatus.SUSPENDED,
}


def map_business(row: Mapping[str, Any]) -> BusinessRecord:
    """원본 행을 BusinessRecord로 변환합니다.

    Raises:
        MalformedRecordError: 행을 해석할 수 없는 경우
    """
    if not isinstance(row, Mapping):
        raise MalformedRecordError(None, f"expected mapping, got {type(row).__name__}")

    business_id = row.get("id")
    if business_id is None or business_id == "":
        raise MalformedRecordError(None, "missing id")
    business_id = str(business_id)

    try:
        category = _map_category(row.get("category"))
        interaction_type = _parse_interaction_type(row.get("interaction_type"))
        if interaction_type is None and category is not None:
            interaction_type = category.interaction_type

        return BusinessRecord(
            id=business_id,
            owner_id=_optional_str(row.get("owner_id")),
            name=_text(row.get("business_name") or row.get("name"), "business_name"),
            description=_text(row.get("description"), "description"),
            location=_map_location(row),
            address=_map_address(row.get("address")),
            contact_info=_map_contact(row),
            operating_hours=_map_hours(row.get("operating_hours")),
            category=category,
            interaction_type=interaction_type,
            specialized_categories=_map_keywords(row.get("specialized_categories")),
            supports_delivery=bool(row.get("supports_delivery", False)),
            is_approved=bool(row.get("is_approved", False)),
            status=_parse_status(row.get("status")),
            is_featured=bool(row.get("is_featured", False)),
            avg_rating=_optional_float(row.get("avg_rating", 0.0)),
            total_reviews=int(row.get("total_reviews") or 0),
            created_at=_parse_datetime(row.get("created_at")),
            updated_at=_parse_datetime(row.get("updated_at")),
        )
    except (TypeError, ValueError, KeyError) as e:
        raise MalformedRecordError(business_id, str(e)) from e


def map_businesses(rows: Iterable[Any]) -> list[BusinessRecord]:
    """행 목록을 변환합니다. 해석할 수 없는 행은 경고 후 건너뜁니다."""
    records = (try_map_business(row) for row in rows)
    return [record for record in records if record is not None]


def try_map_business(row: Any) -> BusinessRecord | None:
    """단건 조회용. 해석할 수 없는 행은 경고 후 None을 반환합니다."""
    try:
        return map_business(row)
    except MalformedRecordError as e:
        logger.warning(
            "Malformed catalog row skipped",
            extra={"business_id": e.record_id, "reason": e.reason},
        )
        return None


def _map_category(raw: Any) -> BusinessCategory | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return CategoryCatalogService.get(raw)
    if not isinstance(raw, Mapping):
        raise ValueError(f"invalid category {raw!r}")
    known = CategoryCatalogService.get(str(raw.get("id", "")))
    interaction_type = _parse_interaction_type(raw.get("interaction_type"))
    if interaction_type is None:
        if known is None:
            return None
        interaction_type = known.interaction_type
    return BusinessCategory(
        id=str(raw["id"]),
        name=_text(raw.get("name"), "category name")
        or (known.name if known else str(raw["id"])),
        interaction_type=interaction_type,
        description=_text(raw.get("description"), "category description"),
        icon=_text(raw.get("icon") or raw.get("icon_url"), "icon"),
        is_active=bool(raw.get("is_active", True)),
        display_order=int(raw.get("display_order") or 0),
    )


def _map_location(row: Mapping[str, Any]) -> LocationReading | None:
    raw = row.get("location")
    if isinstance(raw, Mapping):
        lat, lon, label = raw.get("latitude"), raw.get("longitude"), raw.get("label")
    else:
        lat, lon, label = row.get("latitude"), row.get("longitude"), None
    if lat is None or lon is None:
        return None
    return LocationReading(latitude=float(lat), longitude=float(lon), label=_optional_text(label))


def _map_address(raw: Any) -> Address | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return Address(full_address=raw)
    if not isinstance(raw, Mapping):
        raise ValueError(f"invalid address {raw!r}")
    return Address(
        full_address=_text(raw.get("full_address"), "full_address"),
        street=_optional_text(raw.get("street")),
        city=_optional_text(raw.get("city")),
        state=_optional_text(raw.get("state")),
        zip_code=_optional_str(raw.get("zip_code")),
        landmark=_optional_text(raw.get("landmark")),
    )


def _map_contact(row: Mapping[str, Any]) -> ContactInfo:
    raw = row.get("contact_info")
    if isinstance(raw, Mapping):
        return ContactInfo(
            person=_optional_str(raw.get("person")),
            phone=_optional_str(raw.get("phone")),
            email=_optional_str(raw.get("email")),
            whatsapp=_optional_str(raw.get("whatsapp")),
            website=_optional_str(raw.get("website")),
        )
    return ContactInfo(
        person=_optional_str(row.get("contact_person")),
        phone=_optional_str(row.get("contact_phone")),
        email=_optional_str(row.get("contact_email")),
        whatsapp=_optional_str(row.get("whatsapp_number")),
        website=_optional_str(row.get("website_url")),
    )


def _map_hours(raw: Any) -> OperatingHours | None:
    if not raw:
        return None
    return OperatingHours.from_mapping(raw)


def _parse_interaction_type(raw: Any) -> InteractionType | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, InteractionType):
        return raw
    return InteractionType.parse(str(raw))


def _parse_status(raw: Any) -> BusinessStatus:
    if raw is None:
        return BusinessStatus.PENDING
    value = str(raw).strip().lower()
    return LEGACY_STATUSES.get(value) or BusinessStatus(value)


def _parse_datetime(raw: Any) -> datetime | None:
    if raw is None or isinstance(raw, datetime):
        return raw
    return datetime.fromisoformat(str(raw).replace("Z", "+00:00"))


def _optional_float(raw: Any) -> float | None:
    if raw is None:
        return None
    return float(raw)


def _optional_str(raw: Any) -> str | None:
    return None if raw is None else str(raw)


def _text(raw: Any, name: str) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise ValueError(f"invalid {name} {raw!r}, expected string")
    return raw


def _optional_text(raw: Any) -> str | None:
    if raw is not None and not isinstance(raw, str):
        raise ValueError(f"expected string, got {type(raw).__name__}")
    return raw


def _map_keywords(raw: Any) -> frozenset[str]:
    if not raw:
        return frozenset()
    if isinstance(raw, str) or not isinstance(raw, (list, tuple, set, frozenset)):
        raise ValueError(f"invalid specialized_categories {raw!r}, expected list")
    if any(not isinstance(keyword, str) for keyword in raw):
        raise ValueError("specialized_categories entries must be strings")
    return frozenset(raw)
