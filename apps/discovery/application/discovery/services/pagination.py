"""Pagination Wrapper."""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from discovery.application.common.exceptions import InvalidArgumentError
from discovery.application.discovery.dto import PaginatedResult

T = TypeVar("T")


def paginate(items: Sequence[T], limit: int, offset: int = 0) -> PaginatedResult[T]:
    """결과를 페이지 단위로 자릅니다.

    limit <= 0 이면 InvalidArgumentError. 음수 offset 은 실패 대신 0으로 보정합니다.
    """
    if limit <= 0:
        raise InvalidArgumentError("limit", "must be greater than 0")
    offset = max(offset, 0)

    total = len(items)
    return PaginatedResult(
        data=list(items[offset : offset + limit]),
        page=offset // limit + 1,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
        has_next=offset + limit < total,
        has_prev=offset > 0,
    )
