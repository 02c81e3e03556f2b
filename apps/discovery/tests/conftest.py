"""Test fixtures for discovery tests."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable
from unittest.mock import AsyncMock

import pytest

from discovery.application.discovery import DiscoveryPolicy, OperatingHoursEvaluator
from discovery.application.discovery.services import CategoryCatalogService
from discovery.domain.entities import BusinessRecord
from discovery.domain.enums import BusinessStatus, InteractionType
from discovery.domain.value_objects import LocationReading
from discovery.infrastructure.persistence_memory import InMemoryBusinessCatalog
from discovery.tests.factories import KOLKATA, MUMBAI, monday_at, weekday_hours


@pytest.fixture
def evaluator() -> OperatingHoursEvaluator:
    return OperatingHoursEvaluator(KOLKATA)


@pytest.fixture
def policy() -> DiscoveryPolicy:
    return DiscoveryPolicy(catalog_timeout_seconds=0.5)


@pytest.fixture
def fixed_now() -> datetime:
    """월요일 10:00 (Asia/Kolkata)."""
    return monday_at("10:00")


@pytest.fixture
def center() -> LocationReading:
    return MUMBAI


@pytest.fixture
def make_business() -> Callable[..., BusinessRecord]:
    """BusinessRecord 팩토리. 기본값은 뭄바이 중심의 영업 중인 ORDER 비즈니스."""

    def _make(business_id: str = "biz_1", **overrides: Any) -> BusinessRecord:
        category = CategoryCatalogService.get(overrides.pop("category_id", "grocery_store"))
        fields: dict[str, Any] = {
            "id": business_id,
            "name": f"Business {business_id}",
            "description": "Neighbourhood shop",
            "location": LocationReading(latitude=19.0790, longitude=72.8800),
            "operating_hours": weekday_hours(),
            "category": category,
            "interaction_type": category.interaction_type if category else InteractionType.ORDER,
            "status": BusinessStatus.ACTIVE,
            "is_approved": True,
            "avg_rating": 4.0,
        }
        fields.update(overrides)
        return BusinessRecord(**fields)

    return _make


@pytest.fixture
def mock_catalog() -> AsyncMock:
    """BusinessCatalog mock."""
    catalog = AsyncMock()
    catalog.fetch_candidates = AsyncMock(return_value=[])
    catalog.find_by_id = AsyncMock(return_value=None)
    return catalog


@pytest.fixture
def seed_catalog() -> InMemoryBusinessCatalog:
    """번들 시드 데이터 카탈로그."""
    return InMemoryBusinessCatalog.from_json_file()
