"""HTTP Controllers 단위 테스트."""

from __future__ import annotations

from datetime import datetime
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from discovery.application.common.exceptions import (
    CatalogUnavailableError,
    InvalidInteractionTypeError,
)
from discovery.application.discovery import (
    DiscoveryFacade,
    DiscoveryPolicy,
    OperatingHoursEvaluator,
)
from discovery.domain.enums import InteractionType
from discovery.infrastructure.persistence_memory import InMemoryBusinessCatalog
from discovery.main import app
from discovery.presentation.http.controllers.discovery import parse_interaction_type
from discovery.setup.dependencies import get_discovery_facade, get_discovery_policy

MUMBAI_QUERY = "lat=19.0760&lon=72.8777"


@pytest.fixture
def client(
    seed_catalog: InMemoryBusinessCatalog,
    evaluator: OperatingHoursEvaluator,
    fixed_now: datetime,
) -> Iterator[TestClient]:
    """시드 카탈로그와 고정 시각을 사용하는 TestClient."""
    facade = DiscoveryFacade(seed_catalog, evaluator, DiscoveryPolicy(), clock=lambda: fixed_now)
    app.dependency_overrides[get_discovery_facade] = lambda: facade
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestParseInteractionType:
    """parse_interaction_type 테스트."""

    def test_empty_returns_none(self) -> None:
        assert parse_interaction_type(None) is None
        assert parse_interaction_type("  ") is None

    def test_wire_and_legacy_values(self) -> None:
        assert parse_interaction_type("ORDER") is InteractionType.ORDER
        assert parse_interaction_type("type_b") is InteractionType.BOOK

    def test_invalid_value_raises_error(self) -> None:
        with pytest.raises(InvalidInteractionTypeError) as exc_info:
            parse_interaction_type("deliver")
        assert "Invalid interaction_type" in exc_info.value.message


class TestHealthController:
    """Health Controller 테스트."""

    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "discovery-api"

    def test_ping(self, client: TestClient) -> None:
        response = client.get("/ping")
        assert response.status_code == 200
        assert response.json() == "pong"


class TestNearbyController:
    """/businesses/nearby 테스트."""

    def test_returns_paginated_entries(self, client: TestClient) -> None:
        response = client.get(f"/api/v1/businesses/nearby?{MUMBAI_QUERY}&limit=3")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 8
        assert data["page"] == 1
        assert data["has_next"] is True
        assert [e["id"] for e in data["data"]] == ["business_1", "business_2", "business_3"]
        first = data["data"][0]
        assert first["distance_km"] < 1
        assert first["distance_text"].endswith("m")
        assert first["category_id"] == "grocery_store"
        assert first["interaction_type"] == "order"

    def test_filters(self, client: TestClient) -> None:
        response = client.get(
            f"/api/v1/businesses/nearby?{MUMBAI_QUERY}"
            "&interaction_type=order&supports_delivery=true&open_now=true"
        )

        assert response.status_code == 200
        assert [e["id"] for e in response.json()["data"]] == ["business_1", "business_2"]

    def test_default_radius_comes_from_policy(self, client: TestClient) -> None:
        app.dependency_overrides[get_discovery_policy] = lambda: DiscoveryPolicy(
            default_radius_km=0.45
        )

        response = client.get(f"/api/v1/businesses/nearby?{MUMBAI_QUERY}")

        assert response.status_code == 200
        assert [e["id"] for e in response.json()["data"]] == ["business_1"]

    def test_explicit_radius_overrides_default(self, client: TestClient) -> None:
        app.dependency_overrides[get_discovery_policy] = lambda: DiscoveryPolicy(
            default_radius_km=0.45
        )

        response = client.get(f"/api/v1/businesses/nearby?{MUMBAI_QUERY}&radius_km=5")

        assert response.json()["total"] == 8

    def test_missing_lat(self, client: TestClient) -> None:
        response = client.get("/api/v1/businesses/nearby?lon=72.8777")
        assert response.status_code == 422

    def test_invalid_lat(self, client: TestClient) -> None:
        response = client.get("/api/v1/businesses/nearby?lat=100&lon=72.8777")
        assert response.status_code == 422

    def test_radius_above_policy_limit(self, client: TestClient) -> None:
        response = client.get(f"/api/v1/businesses/nearby?{MUMBAI_QUERY}&radius_km=500")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ARGUMENT"

    def test_invalid_interaction_type(self, client: TestClient) -> None:
        response = client.get(f"/api/v1/businesses/nearby?{MUMBAI_QUERY}&interaction_type=x")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INTERACTION_TYPE"

    def test_catalog_unavailable(self, evaluator: OperatingHoursEvaluator) -> None:
        catalog = AsyncMock()
        catalog.fetch_candidates = AsyncMock(side_effect=CatalogUnavailableError("db down"))
        app.dependency_overrides[get_discovery_facade] = lambda: DiscoveryFacade(
            catalog, evaluator
        )
        try:
            response = TestClient(app).get(f"/api/v1/businesses/nearby?{MUMBAI_QUERY}")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 503
        assert response.json() == {"detail": "db down", "code": "CATALOG_UNAVAILABLE"}


class TestSearchController:
    """/businesses/search 테스트."""

    def test_search_without_location(self, client: TestClient) -> None:
        response = client.get("/api/v1/businesses/search?q=books")

        assert response.status_code == 200
        entries = response.json()
        assert [e["id"] for e in entries] == ["business_9"]
        assert entries[0]["distance_km"] is None

    def test_search_with_location(self, client: TestClient) -> None:
        response = client.get(f"/api/v1/businesses/search?q=bakery&{MUMBAI_QUERY}")

        assert response.status_code == 200
        entries = response.json()
        assert [e["id"] for e in entries] == ["business_3"]
        assert entries[0]["distance_km"] is not None

    def test_search_empty_query(self, client: TestClient) -> None:
        response = client.get("/api/v1/businesses/search?q=")
        assert response.status_code == 422

    def test_search_blank_query(self, client: TestClient) -> None:
        response = client.get("/api/v1/businesses/search?q=%20%20")
        assert response.status_code == 400

    def test_search_partial_location(self, client: TestClient) -> None:
        response = client.get("/api/v1/businesses/search?q=bakery&lat=19.0")
        assert response.status_code == 400


class TestFeaturedAndRecommendedControllers:
    def test_featured(self, client: TestClient) -> None:
        response = client.get("/api/v1/businesses/featured?limit=3")

        assert response.status_code == 200
        assert [e["avg_rating"] for e in response.json()] == [4.9, 4.8, 4.7]

    def test_recommended(self, client: TestClient) -> None:
        response = client.get(f"/api/v1/businesses/recommended?user_id=u1&{MUMBAI_QUERY}")

        assert response.status_code == 200
        assert [e["id"] for e in response.json()][:2] == ["business_6", "business_2"]

    def test_recommended_requires_user(self, client: TestClient) -> None:
        response = client.get(f"/api/v1/businesses/recommended?{MUMBAI_QUERY}")
        assert response.status_code == 422


class TestBusinessDetailController:
    def test_detail(self, client: TestClient) -> None:
        response = client.get("/api/v1/businesses/business_5")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Quick Plumber Center"
        assert data["category"]["id"] == "plumber"
        assert data["operating_hours"]["monday"]["breaks"] == [
            {"start_time": "13:00", "end_time": "14:00"}
        ]
        assert data["status"] == "active"

    def test_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/businesses/missing")

        assert response.status_code == 404
        assert response.json() == {"detail": "Business not found", "code": "BUSINESS_NOT_FOUND"}


class TestCategoryController:
    def test_list_categories(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 19
        assert data[0]["id"] == "grocery_store"

    def test_filter_by_legacy_type(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories?interaction_type=type_c")

        assert response.status_code == 200
        assert {c["interaction_type"] for c in response.json()} == {"consult"}
