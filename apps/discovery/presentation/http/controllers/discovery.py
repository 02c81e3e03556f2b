"""Business Discovery Controller."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from discovery.application.common.exceptions import (
    InvalidArgumentError,
    InvalidInteractionTypeError,
)
from discovery.application.discovery import (
    DiscoveryFacade,
    DiscoveryPolicy,
    FilterOptions,
    OperatingHoursEvaluator,
    TextSearchOptions,
)
from discovery.application.discovery.dto.filter_options import (
    DEFAULT_NEARBY_LIMIT,
    DEFAULT_SEARCH_LIMIT,
)
from discovery.application.discovery.queries.featured_businesses import DEFAULT_FEATURED_LIMIT
from discovery.application.discovery.queries.recommended_businesses import (
    DEFAULT_RECOMMENDATION_LIMIT,
)
from discovery.application.discovery.services import distance_km, format_distance
from discovery.domain.entities import BusinessCategory, BusinessRecord
from discovery.domain.enums import InteractionType
from discovery.domain.value_objects import LocationReading
from discovery.presentation.http.schemas import (
    AddressSchema,
    BusinessDetail,
    BusinessEntry,
    CategoryEntry,
    ContactInfoSchema,
    PaginatedBusinesses,
)
from discovery.setup.dependencies import (
    get_discovery_facade,
    get_discovery_policy,
    get_evaluator,
)

router = APIRouter(prefix="/businesses", tags=["businesses"])

Facade = Annotated[DiscoveryFacade, Depends(get_discovery_facade)]
Evaluator = Annotated[OperatingHoursEvaluator, Depends(get_evaluator)]
Policy = Annotated[DiscoveryPolicy, Depends(get_discovery_policy)]


@router.get("/nearby", response_model=PaginatedBusinesses, summary="Find nearby businesses")
async def nearby(
    facade: Facade,
    evaluator: Evaluator,
    policy: Policy,
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    radius_km: float | None = Query(None, gt=0, description="미지정 시 기본 반경"),
    interaction_type: str | None = Query(None, description="order | book | consult"),
    category: str | None = Query(None, description="카테고리 ID"),
    open_now: bool = Query(False),
    min_rating: float = Query(0.0, ge=0, le=5),
    supports_delivery: bool | None = Query(None),
    limit: int = Query(DEFAULT_NEARBY_LIMIT, ge=1),
    offset: int = Query(0),
) -> PaginatedBusinesses:
    """주변 비즈니스를 조회합니다."""
    center = LocationReading(latitude=lat, longitude=lon)
    options = FilterOptions(
        radius_km=policy.default_radius_km if radius_km is None else radius_km,
        interaction_type=parse_interaction_type(interaction_type),
        category=category or None,
        is_open_now=open_now,
        min_rating=min_rating,
        supports_delivery=supports_delivery,
        limit=limit,
        offset=offset,
    )

    result = await facade.nearby_search(center, options)

    now = evaluator.now()
    return PaginatedBusinesses(
        data=[to_entry(r, center, evaluator, now) for r in result.data],
        page=result.page,
        limit=result.limit,
        total=result.total,
        total_pages=result.total_pages,
        has_next=result.has_next,
        has_prev=result.has_prev,
    )


@router.get("/search", response_model=list[BusinessEntry], summary="Search businesses by text")
async def search(
    facade: Facade,
    evaluator: Evaluator,
    policy: Policy,
    q: str = Query(..., min_length=1, max_length=100, description="검색어"),
    lat: float | None = Query(None, ge=-90, le=90),
    lon: float | None = Query(None, ge=-180, le=180),
    radius_km: float | None = Query(None, gt=0, description="미지정 시 기본 반경"),
    interaction_type: str | None = Query(None),
    category: str | None = Query(None),
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=1),
) -> list[BusinessEntry]:
    """이름/설명/전문 분야로 비즈니스를 검색합니다."""
    center = _optional_center(lat, lon)
    options = TextSearchOptions(
        radius_km=policy.default_radius_km if radius_km is None else radius_km,
        interaction_type=parse_interaction_type(interaction_type),
        category=category or None,
        limit=limit,
    )

    records = await facade.text_search(q, center, options)

    now = evaluator.now()
    return [to_entry(r, center, evaluator, now) for r in records]


@router.get("/featured", response_model=list[BusinessEntry], summary="Featured businesses")
async def featured(
    facade: Facade,
    evaluator: Evaluator,
    lat: float | None = Query(None, ge=-90, le=90),
    lon: float | None = Query(None, ge=-180, le=180),
    limit: int = Query(DEFAULT_FEATURED_LIMIT, ge=1),
) -> list[BusinessEntry]:
    """추천(featured) 비즈니스를 평점 순으로 조회합니다."""
    center = _optional_center(lat, lon)
    records = await facade.featured_businesses(center, limit)

    now = evaluator.now()
    return [to_entry(r, center, evaluator, now) for r in records]


@router.get(
    "/recommended", response_model=list[BusinessEntry], summary="Recommended businesses"
)
async def recommended(
    facade: Facade,
    evaluator: Evaluator,
    user_id: str = Query(..., min_length=1),
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    limit: int = Query(DEFAULT_RECOMMENDATION_LIMIT, ge=1),
) -> list[BusinessEntry]:
    """사용자 주변의 고평점 비즈니스를 추천합니다."""
    center = LocationReading(latitude=lat, longitude=lon)
    records = await facade.recommended_businesses(user_id, center, limit)

    now = evaluator.now()
    return [to_entry(r, center, evaluator, now) for r in records]


@router.get("/{business_id}", response_model=BusinessDetail, summary="Get business detail")
async def business_detail(
    business_id: str,
    facade: Facade,
    evaluator: Evaluator,
) -> BusinessDetail:
    """비즈니스 상세 정보를 조회합니다."""
    record = await facade.get_business(business_id)

    hours = record.operating_hours
    return BusinessDetail(
        id=record.id,
        owner_id=record.owner_id,
        name=record.name,
        description=record.description,
        category=to_category_entry(record.category) if record.category else None,
        interaction_type=record.interaction_type.value if record.interaction_type else None,
        specialized_categories=sorted(record.specialized_categories),
        latitude=record.location.latitude if record.location else None,
        longitude=record.location.longitude if record.location else None,
        address=AddressSchema.model_validate(record.address) if record.address else None,
        contact_info=ContactInfoSchema.model_validate(record.contact_info),
        operating_hours=(
            {day: asdict(schedule) for day, schedule in hours.days.items()} if hours else None
        ),
        supports_delivery=record.supports_delivery,
        status=record.status.value,
        is_featured=record.is_featured,
        is_open=evaluator.is_open(hours, evaluator.now()),
        avg_rating=record.avg_rating,
        total_reviews=record.total_reviews,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def parse_interaction_type(raw: str | None) -> InteractionType | None:
    """interaction_type 파라미터를 파싱합니다. 레거시 값(type_a/b/c)도 허용합니다."""
    if raw is None or not raw.strip():
        return None
    try:
        return InteractionType.parse(raw)
    except ValueError:
        raise InvalidInteractionTypeError(
            value=raw, allowed=[t.value for t in InteractionType]
        ) from None


def to_entry(
    record: BusinessRecord,
    center: LocationReading | None,
    evaluator: OperatingHoursEvaluator,
    now: datetime,
) -> BusinessEntry:
    distance = None
    if center is not None and record.location is not None:
        distance = round(
            distance_km(
                center.latitude,
                center.longitude,
                record.location.latitude,
                record.location.longitude,
            ),
            3,
        )
    return BusinessEntry(
        id=record.id,
        name=record.name,
        description=record.description,
        category_id=record.category.id if record.category else None,
        category_name=record.category.name if record.category else None,
        interaction_type=record.interaction_type.value if record.interaction_type else None,
        latitude=record.location.latitude if record.location else None,
        longitude=record.location.longitude if record.location else None,
        address=record.address.full_address if record.address else None,
        phone=record.contact_info.phone,
        supports_delivery=record.supports_delivery,
        is_featured=record.is_featured,
        is_open=evaluator.is_open(record.operating_hours, now),
        avg_rating=record.avg_rating,
        total_reviews=record.total_reviews,
        distance_km=distance,
        distance_text=format_distance(distance),
    )


def to_category_entry(category: BusinessCategory) -> CategoryEntry:
    return CategoryEntry(
        id=category.id,
        name=category.name,
        interaction_type=category.interaction_type.value,
        description=category.description,
        icon=category.icon,
        display_order=category.display_order,
    )


def _optional_center(lat: float | None, lon: float | None) -> LocationReading | None:
    if lat is None and lon is None:
        return None
    if lat is None or lon is None:
        raise InvalidArgumentError("lat/lon", "must be provided together")
    return LocationReading(latitude=lat, longitude=lon)
