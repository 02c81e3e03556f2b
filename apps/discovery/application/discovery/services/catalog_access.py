"""Catalog Access Helper.

카탈로그 호출에 타임아웃을 적용합니다. 내부 재시도는 하지 않습니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, TypeVar

from discovery.application.common.exceptions import CatalogUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_catalog(awaitable: Awaitable[T], timeout: float, operation: str) -> T:
    """카탈로그 호출을 timeout 초 안에 완료시킵니다.

    Raises:
        CatalogUnavailableError: 타임아웃 (어댑터가 변환한 실패는 그대로 전파)
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.error(
            "Catalog call timed out",
            extra={"operation": operation, "timeout_s": timeout},
        )
        raise CatalogUnavailableError(f"Business catalog timed out during {operation}") from e
