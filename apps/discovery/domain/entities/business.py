"""BusinessRecord Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from discovery.domain.entities.business_category import BusinessCategory
from discovery.domain.enums import BusinessStatus, InteractionType
from discovery.domain.value_objects import LocationReading, OperatingHours


@dataclass(frozen=True)
class Address:
    full_address: str
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    landmark: str | None = None


@dataclass(frozen=True)
class ContactInfo:
    person: str | None = None
    phone: str | None = None
    email: str | None = None
    whatsapp: str | None = None
    website: str | None = None


@dataclass(frozen=True)
class BusinessRecord:
    """카탈로그의 비즈니스 엔티티.

    Discovery 모듈은 읽기만 합니다. 카탈로그 행이 손상된 경우
    location / operating_hours / category / interaction_type / avg_rating 이
    비어 있을 수 있으며, 필터 파이프라인이 이를 걸러냅니다.
    """

    id: str
    name: str
    owner_id: str | None = None
    description: str = ""
    location: LocationReading | None = None
    address: Address | None = None
    contact_info: ContactInfo = field(default_factory=ContactInfo)
    operating_hours: OperatingHours | None = None
    category: BusinessCategory | None = None
    interaction_type: InteractionType | None = None
    specialized_categories: frozenset[str] = frozenset()
    supports_delivery: bool = False
    is_approved: bool = False
    status: BusinessStatus = BusinessStatus.PENDING
    is_featured: bool = False
    avg_rating: float | None = 0.0
    total_reviews: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status == BusinessStatus.ACTIVE
