"""OpenTelemetry Distributed Tracing Configuration for Discovery API.

분산 트레이싱 설정:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (Supabase 카탈로그 호출)

Architecture:
  Discovery API (OTel SDK) -> OTLP/HTTP (4318) -> Jaeger Collector
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from discovery.setup.config import Settings

logger = logging.getLogger(__name__)

# Lazy initialization
_tracer_provider: TracerProvider | None = None


def setup_tracing(settings: Settings) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Returns:
        bool: 설정 여부
    """
    global _tracer_provider  # noqa: PLW0603

    if not settings.otel_enabled:
        logger.info("OpenTelemetry tracing disabled")
        return False
    if _tracer_provider is not None:
        return True

    resource = Resource.create(
        {
            "service.name": settings.service_name,
            "service.version": settings.service_version,
            "deployment.environment": settings.environment,
        }
    )
    _tracer_provider = TracerProvider(
        resource=resource,
        sampler=TraceIdRatioBased(settings.otel_sampling_rate),
    )
    exporter = OTLPSpanExporter(
        endpoint=f"{settings.otel_exporter_otlp_endpoint.rstrip('/')}/v1/traces",
    )
    _tracer_provider.add_span_processor(
        BatchSpanProcessor(
            exporter,
            max_queue_size=2048,
            max_export_batch_size=512,
            schedule_delay_millis=1000,
        )
    )
    trace.set_tracer_provider(_tracer_provider)

    logger.info(
        "OpenTelemetry tracing configured",
        extra={
            "service": settings.service_name,
            "endpoint": settings.otel_exporter_otlp_endpoint,
            "sampling_rate": settings.otel_sampling_rate,
        },
    )
    return True


def instrument_fastapi(app: FastAPI, settings: Settings) -> None:
    """FastAPI 자동 계측."""
    if not settings.otel_enabled:
        return
    FastAPIInstrumentor.instrument_app(
        app,
        excluded_urls="health,ping",
        tracer_provider=_tracer_provider,
    )
    logger.info("FastAPI instrumentation enabled")


def instrument_httpx(settings: Settings) -> None:
    """HTTPX 자동 계측 (Supabase 호출)."""
    if not settings.otel_enabled:
        return
    HTTPXClientInstrumentor().instrument(tracer_provider=_tracer_provider)
    logger.info("HTTPX instrumentation enabled")


def shutdown_tracing() -> None:
    """대기 중인 span을 내보내고 TracerProvider를 종료합니다."""
    global _tracer_provider  # noqa: PLW0603

    if _tracer_provider is None:
        return
    _tracer_provider.shutdown()
    _tracer_provider = None
    logger.info("OpenTelemetry tracing shutdown")
