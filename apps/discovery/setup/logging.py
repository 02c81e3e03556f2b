"""
Logging Configuration

text: 로컬 개발용 한 줄 포맷
json: 수집기용 ECS 포맷. extra 필드는 labels 아래에 평탄하게 기록됩니다.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Mapping

from opentelemetry import trace

from discovery.setup.config import Settings

ECS_VERSION = "8.11.0"
TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# 카탈로그 인증 헤더와 추천 요청의 사용자 식별자
MASKED_LABELS = frozenset({"apikey", "api_key", "authorization", "user_id"})
MASK = "***"

NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "sqlalchemy.engine", "asyncio")

_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def mask_labels(labels: Mapping[str, Any]) -> dict[str, Any]:
    """MASKED_LABELS에 해당하는 값을 가립니다."""
    return {
        key: MASK if key.lower() in MASKED_LABELS and value is not None else value
        for key, value in labels.items()
    }


class ECSJsonFormatter(logging.Formatter):
    """ECS 필드명으로 한 줄 JSON을 출력하는 포매터."""

    def __init__(self, service_name: str, service_version: str, environment: str) -> None:
        super().__init__()
        self._service = {
            "service.name": service_name,
            "service.version": service_version,
            "service.environment": environment,
        }

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, timezone.utc)
        payload: dict[str, Any] = {
            "@timestamp": created.isoformat(timespec="milliseconds"),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "message": record.getMessage(),
            "ecs.version": ECS_VERSION,
            **self._service,
        }

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            payload["trace.id"] = format(span_context.trace_id, "032x")
            payload["span.id"] = format(span_context.span_id, "016x")

        if record.exc_info:
            payload["error.stack_trace"] = self.formatException(record.exc_info)

        labels = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}
        if labels:
            payload["labels"] = mask_labels(labels)

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(settings: Settings) -> None:
    """루트 로거를 설정합니다. 기존 핸들러는 교체됩니다."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "json":
        handler.setFormatter(
            ECSJsonFormatter(settings.service_name, settings.service_version, settings.environment)
        )
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
