"""Tests for config, logging and dependency wiring."""

from __future__ import annotations

import json
import logging
import os
from typing import Iterator
from unittest.mock import patch

import pytest

from discovery.infrastructure.integrations.supabase import SupabaseBusinessCatalog
from discovery.infrastructure.observability import setup_tracing, shutdown_tracing
from discovery.infrastructure.persistence_memory import InMemoryBusinessCatalog
from discovery.setup import dependencies
from discovery.setup.config import Settings, get_settings
from discovery.setup.logging import ECSJsonFormatter, mask_labels, setup_logging


@pytest.fixture(autouse=True)
def clear_caches() -> Iterator[None]:
    """Clear cached singletons around each test."""
    get_settings.cache_clear()
    dependencies.get_memory_catalog.cache_clear()
    yield
    get_settings.cache_clear()
    dependencies.get_memory_catalog.cache_clear()


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.timezone == "Asia/Kolkata"
        assert settings.catalog_backend == "memory"
        assert settings.max_radius_km == 50.0

    def test_env_prefix(self) -> None:
        env = {
            "DISCOVERY_CATALOG_BACKEND": "supabase",
            "DISCOVERY_CATALOG_TIMEOUT_SECONDS": "2.5",
            "DISCOVERY_TIMEZONE": "UTC",
        }
        with patch.dict(os.environ, env, clear=False):
            settings = get_settings()

        assert settings.catalog_backend == "supabase"
        assert settings.catalog_timeout_seconds == 2.5
        assert settings.timezone == "UTC"

    def test_rejects_unknown_backend(self) -> None:
        with patch.dict(os.environ, {"DISCOVERY_CATALOG_BACKEND": "mongo"}, clear=False):
            with pytest.raises(ValueError):
                Settings()


class TestSetupLogging:
    """setup_logging() tests."""

    @pytest.fixture(autouse=True)
    def reset_logging(self) -> Iterator[None]:
        yield
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(logging.WARNING)

    def test_configures_root_logger(self) -> None:
        setup_logging(Settings(log_level="DEBUG"))

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_json_format_uses_ecs_formatter(self) -> None:
        setup_logging(Settings(log_format="json"))

        assert isinstance(logging.getLogger().handlers[0].formatter, ECSJsonFormatter)

    def test_silences_external_loggers(self) -> None:
        setup_logging(Settings())

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


class TestECSJsonFormatter:
    def test_formats_extra_as_labels(self) -> None:
        formatter = ECSJsonFormatter("discovery-api", "1.0.0", "test")
        record = logging.getLogger("test").makeRecord(
            "test",
            logging.WARNING,
            "",
            0,
            "Malformed business record skipped",
            (),
            None,
            extra={"business_id": "b1", "user_id": "user-42"},
        )

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Malformed business record skipped"
        assert payload["log.level"] == "warning"
        assert payload["service.name"] == "discovery-api"
        assert payload["labels"]["business_id"] == "b1"
        assert payload["labels"]["user_id"] == "***"
        assert "trace.id" not in payload

    def test_mask_labels(self) -> None:
        masked = mask_labels({"Authorization": "Bearer abc", "apikey": None, "path": "/businesses"})
        assert masked == {"Authorization": "***", "apikey": None, "path": "/businesses"}


@pytest.mark.asyncio
class TestDependencies:
    async def test_policy_from_settings(self) -> None:
        policy = dependencies.get_discovery_policy(
            Settings(max_limit=25, featured_radius_km=8, default_radius_km=3)
        )
        assert policy.max_limit == 25
        assert policy.featured_radius_km == 8
        assert policy.default_radius_km == 3

    async def test_memory_backend(self) -> None:
        catalogs = [c async for c in dependencies.get_business_catalog(Settings())]

        assert isinstance(catalogs[0], InMemoryBusinessCatalog)
        assert len(await catalogs[0].fetch_candidates(None, None)) == 9

    async def test_supabase_backend(self) -> None:
        settings = Settings(
            catalog_backend="supabase",
            supabase_url="https://project.supabase.co",
            supabase_key="key",
        )
        with patch.object(dependencies, "get_settings", return_value=settings):
            catalogs = [c async for c in dependencies.get_business_catalog(settings)]

        assert isinstance(catalogs[0], SupabaseBusinessCatalog)
        await dependencies.close_catalog_clients()


class TestTracing:
    def test_disabled_by_default(self) -> None:
        assert setup_tracing(Settings()) is False
        shutdown_tracing()
