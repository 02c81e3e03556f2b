"""Business HTTP Schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class CategoryEntry(BaseModel):
    """카테고리 응답 스키마."""

    id: str
    name: str
    interaction_type: str
    description: str
    icon: str
    display_order: int

    model_config = {"from_attributes": True}


class AddressSchema(BaseModel):
    full_address: str
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    landmark: str | None = None

    model_config = {"from_attributes": True}


class ContactInfoSchema(BaseModel):
    person: str | None = None
    phone: str | None = None
    email: str | None = None
    whatsapp: str | None = None
    website: str | None = None

    model_config = {"from_attributes": True}


class BusinessEntry(BaseModel):
    """비즈니스 목록 응답 스키마.

    distance_km/distance_text 는 검색 중심이 있을 때만 채워집니다.
    """

    id: str
    name: str
    description: str
    category_id: str | None
    category_name: str | None
    interaction_type: str | None
    latitude: float | None
    longitude: float | None
    address: str | None
    phone: str | None
    supports_delivery: bool
    is_featured: bool
    is_open: bool
    avg_rating: float | None
    total_reviews: int
    distance_km: float | None = None
    distance_text: str | None = None


class PaginatedBusinesses(BaseModel):
    """페이지네이션된 비즈니스 목록."""

    data: list[BusinessEntry]
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class BusinessDetail(BaseModel):
    """비즈니스 상세 응답 스키마."""

    id: str
    owner_id: str | None
    name: str
    description: str
    category: CategoryEntry | None
    interaction_type: str | None
    specialized_categories: list[str]
    latitude: float | None
    longitude: float | None
    address: AddressSchema | None
    contact_info: ContactInfoSchema
    operating_hours: dict[str, dict] | None
    supports_delivery: bool
    status: str
    is_featured: bool
    is_open: bool
    avg_rating: float | None
    total_reviews: int
    created_at: datetime | None
    updated_at: datetime | None
